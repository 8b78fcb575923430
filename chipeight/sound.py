"""Beeper driven by the sound timer."""

from __future__ import annotations

import sys
from typing import TextIO


class Sound:
    """Rings the terminal bell once each time the sound timer becomes active."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._playing = False

    @property
    def is_playing(self) -> bool:
        return self._playing

    def start(self) -> None:
        """Begin the tone, ringing the bell if it was silent."""
        if not self._playing:
            self._playing = True
            (self._stream if self._stream is not None else sys.stdout).write("\a")

    def stop(self) -> None:
        """Silence the tone."""
        self._playing = False

    def update(self, sound_timer: int) -> None:
        """Play while the timer is non-zero, stop otherwise."""
        if sound_timer > 0:
            self.start()
        else:
            self.stop()