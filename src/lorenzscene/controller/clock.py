"""
Frame Clocks
============
Tick sources for the Frame Driver.

The application uses QtFrameClock (see qt_clock.py). ManualClock fires only
when asked, so many frames can be simulated without Qt or a window.
"""
from __future__ import annotations

from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


class FrameClock(Protocol):
    def start(self, callback: TickCallback) -> None: ...
    def stop(self) -> None: ...


class ManualClock:
    def __init__(self) -> None:
        self._callback: Optional[TickCallback] = None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback

    def stop(self) -> None:
        self._callback = None

    @property
    def is_active(self) -> bool:
        return self._callback is not None

    def advance(self, frames: int = 1) -> None:
        """Fire the callback `frames` times in a row."""
        if self._callback is None:
            raise RuntimeError("Clock has not been started.")
        for _ in range(frames):
            self._callback()
