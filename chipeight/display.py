"""RGB frame buffer fed from the CHIP-8 display and drawn as text."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

_SOURCE_WIDTH = 64
_SOURCE_HEIGHT = 32
_CLEAR_SCREEN = "\x1b[2J\x1b[H"


class Display:
    """An RGB pixel buffer of ``width * height * 3`` bytes."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * 3)

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels[:] = bytes(len(self.pixels))

    def update_from_chip8(self, chip8_display: Sequence[Sequence[bool]]) -> None:
        """Copy a 64x32 monochrome display into the buffer as white on black."""
        for y, row in enumerate(chip8_display[:_SOURCE_HEIGHT]):
            for x, lit in enumerate(row[:_SOURCE_WIDTH]):
                index = (y * _SOURCE_WIDTH + x) * 3
                if index + 3 > len(self.pixels):
                    raise IndexError("display buffer too small for CHIP-8 frame")
                colour = 255 if lit else 0
                self.pixels[index:index + 3] = bytes((colour, colour, colour))

    def render_ascii(self) -> str:
        """Return the 64x32 frame as text, one line per row."""
        lines = []
        for y in range(_SOURCE_HEIGHT):
            start = y * _SOURCE_WIDTH * 3
            reds = self.pixels[start:start + _SOURCE_WIDTH * 3:3]
            if len(reds) < _SOURCE_WIDTH:
                raise IndexError("display buffer too small for CHIP-8 frame")
            lines.append("".join("█" if red else " " for red in reds))
        return "\n".join(lines) + "\n"

    def print_ascii(self, stream: TextIO | None = None) -> None:
        """Clear the terminal and write the frame to ``stream``."""
        out = stream if stream is not None else sys.stdout
        out.write(_CLEAR_SCREEN + "\n")
        out.write(self.render_ascii())