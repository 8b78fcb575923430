"""A small CHIP-8 interpreter with a text-mode display, keypad, beeper and command-line runner."""

__version__ = "0.1.0"