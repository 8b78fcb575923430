import io

from chipeight.sound import Sound


def test_update_starts_and_rings_once():
    out = io.StringIO()
    sound = Sound(out)
    sound.update(5)
    sound.update(4)
    assert sound.is_playing
    assert out.getvalue() == "\a"


def test_update_zero_stops():
    out = io.StringIO()
    sound = Sound(out)
    sound.update(3)
    sound.update(0)
    assert not sound.is_playing


def test_restart_rings_again():
    out = io.StringIO()
    sound = Sound(out)
    sound.start()
    sound.stop()
    sound.start()
    assert out.getvalue() == "\a\a"
    assert sound.is_playing


def test_initially_silent():
    out = io.StringIO()
    sound = Sound(out)
    sound.update(0)
    assert not sound.is_playing
    assert out.getvalue() == ""