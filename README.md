# chipeight

A small CHIP-8 interpreter. It loads a ROM, runs a fixed number of cycles
and draws the 64×32 screen in the terminal with block characters.

## Installing

```
pip install .
```

## Running a ROM

```
chipeight path/to/game.ch8
```

The command runs 10,000 cycles, sleeping 2 ms after each one. Every 500
cycles it clears the terminal, draws the screen and prints the cycle count.
When the run ends it prints the final frame. A terminal bell is written each
time the sound timer goes from zero to non-zero.

If no ROM path is given, it prints a usage line and exits with status 1. If
the ROM cannot be read, it prints the error and exits with status 1.

## Using it from Python

```python
from pathlib import Path

from chipeight.cpu import Cpu
from chipeight.display import Display

cpu = Cpu()
cpu.reset()
cpu.load_rom(Path("game.ch8").read_bytes())

for _ in range(1000):
    cpu.cycle()

screen = Display(64, 32)
screen.update_from_chip8(cpu.display)
print(screen.render_ascii())
```

### `chipeight.cpu.Cpu`

- `Cpu(rng=None)` creates a processor; pass a `random.Random` to make the
  `CXNN` instruction repeatable.
- `reset()` clears memory, registers, timers, screen and keypad, and loads
  the hex-digit font at `0x50`.
- `load_rom(rom)` copies a program to `0x200`; bytes past the end of the
  4 KiB memory are dropped.
- `fetch()` returns the 16-bit opcode at the program counter.
- `execute(instruction)` runs one opcode. Unknown opcodes are ignored.
- `cycle()` fetches, advances the program counter, executes, then counts
  both timers down by one.
- `set_key(key, pressed)` sets one of the sixteen keys; other keys are
  ignored.

The state is held in plain attributes: `memory`, `v`, `i`, `pc`, `stack`,
`sp`, `delay_timer`, `sound_timer`, `display` (32 rows of 64 booleans) and
`keypad`. A call with a full stack, a return with an empty one, and register
or BCD stores and loads that run past the end of memory raise `IndexError`.

### Other modules

- `chipeight.display.Display(width, height)` holds an RGB buffer in
  `pixels`. `update_from_chip8(frame)` copies a CPU frame into it as white on
  black, `clear()` blacks it out, `render_ascii()` returns the frame as text
  and `print_ascii(stream=None)` clears the terminal and writes the frame.
- `chipeight.input.Input` holds keypad state: `is_key_pressed(key)`,
  `set_key(key, pressed)`, `keypad_state()`, and `wait_for_key(stdin=None,
  stdout=None)`, which prompts, reads one character and presses the hex key
  it names, returning the key or `None`.
- `chipeight.sound.Sound(stream=None)` tracks a tone: `update(sound_timer)`
  starts it while the timer is non-zero and stops it otherwise; `start()`
  rings the bell only when the tone was silent; `is_playing` reports the
  state.
- `chipeight.cli.run(rom_path, max_cycles=10000, delay=0.002, stream=None)`
  runs the same loop as the command and returns the number of cycles run.

## What it does not do

- The command never reads the keyboard: during a run every key stays
  released, so ROMs that wait for input (`FX0A`) stall.
- There is no graphics window and no real audio; the screen is text and the
  tone is a terminal bell.
- Timers tick once per instruction rather than at 60 Hz, and a run always
  stops after a fixed number of cycles.

## Tests

```
pip install .[test]
pytest
```