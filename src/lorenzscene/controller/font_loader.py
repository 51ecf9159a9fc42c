"""
Background Font Loading (Threading)
===================================
This module contains the QThread subclass that loads the label font.

Why is this file needed?
------------------------
1. Responsiveness: Parsing the font happens off the GUI thread, so the axes
   and the attractor are animating before the labels exist.
2. Signals: The result is delivered to the GUI thread through Qt Signals,
   where the Scene Composer builds the label meshes.

Classes:
    FontLoaderWorker: Loads a TrueType font and emits the handle.
"""
import logging

from PySide6.QtCore import QThread, Signal

from lorenzscene.view.text import TextFont

logger = logging.getLogger(__name__)


class FontLoaderWorker(QThread):
    loaded = Signal(object)  # TextFont
    failed = Signal(str)

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path

    def run(self) -> None:
        try:
            logger.info(f"Loading font from: {self.path}")
            font = TextFont.from_file(self.path)
            self.loaded.emit(font)
        except Exception as e:
            logger.error(f"Error in FontLoaderWorker: {e}")
            self.failed.emit(str(e))
