import io

import pytest

from chipeight.display import Display


def _frame(points=()):
    frame = [[False] * 64 for _ in range(32)]
    for x, y in points:
        frame[y][x] = True
    return frame


def test_buffer_size():
    display = Display(64, 32)
    assert len(display.pixels) == 64 * 32 * 3
    assert not any(display.pixels)


def test_update_sets_white_pixel():
    display = Display(64, 32)
    display.update_from_chip8(_frame([(3, 2)]))
    index = (2 * 64 + 3) * 3
    assert display.pixels[index:index + 3] == bytes([255, 255, 255])
    assert sum(1 for p in display.pixels if p) == 3


def test_update_then_clear():
    display = Display(64, 32)
    display.update_from_chip8(_frame([(0, 0), (63, 31)]))
    display.clear()
    assert not any(display.pixels)
    assert len(display.pixels) == 64 * 32 * 3


def test_render_ascii_shape_and_content():
    display = Display(64, 32)
    display.update_from_chip8(_frame([(3, 2), (63, 31)]))
    lines = display.render_ascii().splitlines()
    assert len(lines) == 32
    assert all(len(line) == 64 for line in lines)
    assert lines[2][3] == "█"
    assert lines[31][63] == "█"
    assert lines[0].strip() == ""


def test_print_ascii_writes_clear_sequence_then_frame():
    display = Display(64, 32)
    display.update_from_chip8(_frame([(0, 0)]))
    out = io.StringIO()
    display.print_ascii(out)
    text = out.getvalue()
    assert text.startswith("\x1b[2J\x1b[H")
    assert text.endswith(display.render_ascii())


def test_small_buffer_rejects_frame():
    display = Display(8, 8)
    with pytest.raises(IndexError):
        display.update_from_chip8(_frame())