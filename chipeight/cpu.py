"""CHIP-8 processor: memory, registers, timers, display buffer and keypad."""

from __future__ import annotations

import random

MEMORY_SIZE = 4096
REGISTER_COUNT = 16
STACK_SIZE = 16
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
KEY_COUNT = 16
PROGRAM_START = 0x200
FONT_START = 0x50

FONT_SET = bytes(
    [
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    ]
)


def _blank_display() -> list[list[bool]]:
    return [[False] * DISPLAY_WIDTH for _ in range(DISPLAY_HEIGHT)]


class Cpu:
    """A CHIP-8 interpreter core.

    The state is exposed as plain attributes: ``memory``, ``v``, ``i``, ``pc``,
    ``stack``, ``sp``, ``delay_timer``, ``sound_timer``, ``display`` and ``keypad``.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.memory = bytearray(MEMORY_SIZE)
        self.v = bytearray(REGISTER_COUNT)
        self.i = 0
        self.pc = PROGRAM_START
        self.stack = [0] * STACK_SIZE
        self.sp = 0
        self.delay_timer = 0
        self.sound_timer = 0
        self.display = _blank_display()
        self.keypad = [False] * KEY_COUNT
        self.rng = rng if rng is not None else random.Random()

    def reset(self) -> None:
        """Clear all state and load the built-in font."""
        self.memory = bytearray(MEMORY_SIZE)
        self.memory[FONT_START:FONT_START + len(FONT_SET)] = FONT_SET
        self.v = bytearray(REGISTER_COUNT)
        self.i = 0
        self.pc = PROGRAM_START
        self.sp = 0
        self.delay_timer = 0
        self.sound_timer = 0
        self.display = _blank_display()
        self.keypad = [False] * KEY_COUNT

    def load_rom(self, rom: bytes) -> None:
        """Copy a program into memory at 0x200, dropping what does not fit."""
        data = bytes(rom)[: MEMORY_SIZE - PROGRAM_START]
        self.memory[PROGRAM_START:PROGRAM_START + len(data)] = data

    def fetch(self) -> int:
        """Return the 16-bit instruction at the program counter."""
        return self.memory[self.pc] << 8 | self.memory[self.pc + 1]

    def execute(self, instruction: int) -> None:
        """Decode and run one instruction; unknown opcodes are ignored."""
        op = (instruction >> 12) & 0xF
        x = (instruction >> 8) & 0xF
        y = (instruction >> 4) & 0xF
        n = instruction & 0xF
        nn = instruction & 0xFF
        nnn = instruction & 0xFFF

        match (op, x, y, n):
            case (0x0, 0x0, 0xE, 0x0):
                self.display = _blank_display()
            case (0x0, 0x0, 0xE, 0xE):
                self._ret()
            case (0x1, _, _, _):
                self.pc = nnn
            case (0x2, _, _, _):
                self._call(nnn)
            case (0x3, _, _, _):
                self._skip_if(self.v[x] == nn)
            case (0x4, _, _, _):
                self._skip_if(self.v[x] != nn)
            case (0x5, _, _, 0x0):
                self._skip_if(self.v[x] == self.v[y])
            case (0x6, _, _, _):
                self.v[x] = nn
            case (0x7, _, _, _):
                self.v[x] = (self.v[x] + nn) & 0xFF
            case (0x8, _, _, 0x0):
                self.v[x] = self.v[y]
            case (0x8, _, _, 0x1):
                self.v[x] |= self.v[y]
            case (0x8, _, _, 0x2):
                self.v[x] &= self.v[y]
            case (0x8, _, _, 0x3):
                self.v[x] ^= self.v[y]
            case (0x8, _, _, 0x4):
                total = self.v[x] + self.v[y]
                self.v[x] = total & 0xFF
                self.v[0xF] = 1 if total > 0xFF else 0
            case (0x8, _, _, 0x5):
                self._subtract(x, self.v[x], self.v[y])
            case (0x8, _, _, 0x6):
                value = self.v[x]
                self.v[0xF] = value & 0x1
                self.v[x] = value >> 1
            case (0x8, _, _, 0x7):
                self._subtract(x, self.v[y], self.v[x])
            case (0x8, _, _, 0xE):
                value = self.v[x]
                self.v[0xF] = (value & 0x80) >> 7
                self.v[x] = (value << 1) & 0xFF
            case (0x9, _, _, 0x0):
                self._skip_if(self.v[x] != self.v[y])
            case (0xA, _, _, _):
                self.i = nnn
            case (0xB, _, _, _):
                self.pc = nnn + self.v[0]
            case (0xC, _, _, _):
                self.v[x] = self.rng.randrange(256) & nn
            case (0xD, _, _, _):
                self._draw(x, y, n)
            case (0xE, _, 0x9, 0xE):
                self._skip_if(self.keypad[self.v[x]])
            case (0xE, _, 0xA, 0x1):
                self._skip_if(not self.keypad[self.v[x]])
            case (0xF, _, 0x0, 0x7):
                self.v[x] = self.delay_timer
            case (0xF, _, 0x0, 0xA):
                self._wait_key(x)
            case (0xF, _, 0x1, 0x5):
                self.delay_timer = self.v[x]
            case (0xF, _, 0x1, 0x8):
                self.sound_timer = self.v[x]
            case (0xF, _, 0x1, 0xE):
                self.i += self.v[x]
            case (0xF, _, 0x2, 0x9):
                self.i = FONT_START + self.v[x] * 5
            case (0xF, _, 0x3, 0x3):
                self._store_bcd(self.v[x])
            case (0xF, _, 0x5, 0x5):
                self.memory[self.i:self.i + x + 1] = self.v[: x + 1]
                if self.i + x >= MEMORY_SIZE:
                    raise IndexError("register store past end of memory")
            case (0xF, _, 0x6, 0x5):
                if self.i + x >= MEMORY_SIZE:
                    raise IndexError("register load past end of memory")
                self.v[: x + 1] = self.memory[self.i:self.i + x + 1]
            case _:
                pass

    def cycle(self) -> None:
        """Fetch and execute one instruction, then tick both timers."""
        instruction = self.fetch()
        self.pc += 2
        self.execute(instruction)
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1

    def set_key(self, key: int, pressed: bool) -> None:
        """Set a keypad key; keys outside 0..15 are ignored."""
        if 0 <= key < KEY_COUNT:
            self.keypad[key] = pressed

    def _skip_if(self, condition: bool) -> None:
        if condition:
            self.pc += 2

    def _ret(self) -> None:
        if self.sp == 0:
            raise IndexError("return with empty call stack")
        self.sp -= 1
        self.pc = self.stack[self.sp]

    def _call(self, addr: int) -> None:
        if self.sp >= STACK_SIZE:
            raise IndexError("call stack overflow")
        self.stack[self.sp] = self.pc
        self.sp += 1
        self.pc = addr

    def _subtract(self, target: int, minuend: int, subtrahend: int) -> None:
        self.v[target] = (minuend - subtrahend) & 0xFF
        self.v[0xF] = 0 if subtrahend > minuend else 1

    def _draw(self, x: int, y: int, height: int) -> None:
        x_pos = self.v[x] % DISPLAY_WIDTH
        y_pos = self.v[y] % DISPLAY_HEIGHT
        self.v[0xF] = 0
        for row in range(height):
            if y_pos + row >= DISPLAY_HEIGHT:
                break
            sprite_byte = self.memory[self.i + row]
            line = self.display[y_pos + row]
            for col in range(8):
                if x_pos + col >= DISPLAY_WIDTH:
                    break
                if (sprite_byte >> (7 - col)) & 1:
                    if line[x_pos + col]:
                        self.v[0xF] = 1
                    line[x_pos + col] = not line[x_pos + col]

    def _wait_key(self, x: int) -> None:
        pressed = next((key for key, down in enumerate(self.keypad) if down), None)
        if pressed is not None:
            self.v[x] = pressed
            return
        if self.pc < 2:
            raise IndexError("program counter underflow")
        self.pc -= 2

    def _store_bcd(self, value: int) -> None:
        if self.i + 2 >= MEMORY_SIZE:
            raise IndexError("BCD store past end of memory")
        self.memory[self.i] = value // 100
        self.memory[self.i + 1] = (value // 10) % 10
        self.memory[self.i + 2] = value % 10