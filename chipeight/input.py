"""Sixteen-key hexadecimal keypad state."""

from __future__ import annotations

import sys
from typing import TextIO

_KEY_COUNT = 16
_HEX_KEYS = {ch: int(ch, 16) for ch in "0123456789abcdefABCDEF"}


class Input:
    """Holds which of the sixteen keys are pressed."""

    def __init__(self) -> None:
        self._keypad = [False] * _KEY_COUNT

    def is_key_pressed(self, key: int) -> bool:
        """Return whether ``key`` is pressed; keys outside 0..15 never are."""
        return 0 <= key < _KEY_COUNT and self._keypad[key]

    def set_key(self, key: int, pressed: bool) -> None:
        """Set a key's state; keys outside 0..15 are ignored."""
        if 0 <= key < _KEY_COUNT:
            self._keypad[key] = pressed

    def wait_for_key(
        self, stdin: TextIO | None = None, stdout: TextIO | None = None
    ) -> int | None:
        """Prompt, read one character and press the hex key it names.

        Returns the key, or ``None`` at end of input or for a non-hex character.
        """
        out = stdout if stdout is not None else sys.stdout
        source = stdin if stdin is not None else sys.stdin
        out.write("Press a key (0-9, a-f): ")
        out.flush()
        char = source.read(1)
        key = _HEX_KEYS.get(char)
        if key is not None:
            self.set_key(key, True)
        return key

    def keypad_state(self) -> tuple[bool, ...]:
        """Return the state of all sixteen keys."""
        return tuple(self._keypad)