"""
Qt Frame Clock
==============
Fires the Frame Driver on a QTimer inside the Qt event loop (the display
refresh of the application).
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer

from lorenzscene import config
from lorenzscene.controller.clock import TickCallback


class QtFrameClock:
    def __init__(self, interval_ms: int = config.FRAME_INTERVAL_MS, parent: Optional[QObject] = None) -> None:
        self.timer = QTimer(parent)
        self.timer.setInterval(interval_ms)
        self._callback: Optional[TickCallback] = None

    def start(self, callback: TickCallback) -> None:
        if self._callback is not None:
            self.timer.timeout.disconnect(self._callback)
        self._callback = callback
        self.timer.timeout.connect(callback)
        self.timer.start()

    def stop(self) -> None:
        self.timer.stop()

    @property
    def is_active(self) -> bool:
        return self.timer.isActive()
