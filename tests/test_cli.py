import io
from unittest.mock import patch

from chipeight.cli import main, run

LOOP_ROM = b"\x12\x00"
DRAW_ROM = b"\xA0\x50\x60\x00\xD0\x05\x12\x06"


def test_run_counts_cycles(tmp_path):
    rom = tmp_path / "loop.ch8"
    rom.write_bytes(LOOP_ROM)
    out = io.StringIO()
    assert run(rom, max_cycles=20, delay=0, stream=out) == 20
    text = out.getvalue()
    assert f"CHIP-8 emulator loaded ROM: {rom}" in text
    assert "Emulation finished after 20 cycles" in text


def test_run_draws_sprite(tmp_path):
    rom = tmp_path / "draw.ch8"
    rom.write_bytes(DRAW_ROM)
    out = io.StringIO()
    assert run(rom, max_cycles=500, delay=0, stream=out) == 500
    text = out.getvalue()
    assert "Cycles: 500" in text
    assert "█" in text


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_missing_rom(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ch8")]) == 1
    assert "Error reading ROM" in capsys.readouterr().out


@patch("time.sleep")
def test_main_runs_full_program(sleep, tmp_path, capsys):
    rom = tmp_path / "loop.ch8"
    rom.write_bytes(LOOP_ROM)
    assert main([str(rom)]) == 0
    assert "Emulation finished after 10000 cycles" in capsys.readouterr().out
    assert sleep.call_count == 10000