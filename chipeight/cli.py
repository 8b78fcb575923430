"""Command line runner for the emulator."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import TextIO

from chipeight.cpu import Cpu
from chipeight.display import Display
from chipeight.input import Input
from chipeight.sound import Sound

DEFAULT_CYCLES = 10000
DEFAULT_DELAY = 0.002


def run(
    rom_path: str | Path,
    max_cycles: int = DEFAULT_CYCLES,
    delay: float = DEFAULT_DELAY,
    stream: TextIO | None = None,
) -> int:
    """Load a ROM and run it for ``max_cycles`` cycles; return the count run.

    Raises OSError if the ROM cannot be read.
    """
    out = stream if stream is not None else sys.stdout
    rom_data = Path(rom_path).read_bytes()

    chip8 = Cpu()
    display = Display(64, 32)
    keys = Input()
    sound = Sound(out)

    chip8.reset()
    chip8.load_rom(rom_data)

    out.write(f"CHIP-8 emulator loaded ROM: {rom_path}\n")
    out.write("Running emulation...\n")

    cycles = 0
    while True:
        chip8.cycle()
        cycles += 1

        if cycles % 10 == 0:
            display.update_from_chip8(chip8.display)

        sound.update(chip8.sound_timer)

        for key in range(16):
            chip8.set_key(key, keys.is_key_pressed(key))

        time.sleep(delay)

        if cycles % 500 == 0:
            display.print_ascii(out)
            out.write(f"Cycles: {cycles}\n")

        if cycles >= max_cycles:
            break

    out.write(f"Emulation finished after {cycles} cycles\n")
    display.print_ascii(out)
    return cycles


def main(argv: list[str] | None = None) -> int:
    """Entry point: ``chipeight <rom_file>``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: chipeight <rom_file>")
        return 1
    try:
        run(args[0])
    except OSError as exc:
        print(f"Error reading ROM: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())