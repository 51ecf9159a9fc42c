"""
Main Application Window
=======================
The primary GUI container that holds the 3D view and wires the frame loop.

Why is this file needed?
------------------------
1. Layout: It hosts the 3D view as the central widget.
2. Routing: It connects the view, the Frame Driver, the Scene Composer and
   the background font loader.
"""
from typing import Optional

from PySide6.QtWidgets import QMainWindow
from PySide6.QtCore import Slot
from PySide6.QtGui import QAction, QCloseEvent

import logging

from lorenzscene import config
from lorenzscene.controller.qt_clock import QtFrameClock
from lorenzscene.controller.font_loader import FontLoaderWorker
from lorenzscene.controller.frame_driver import FrameDriver
from lorenzscene.model.state import SimulationContext
from lorenzscene.view.scene import SceneComposer
from lorenzscene.view.text import TextFont
from lorenzscene.view.widgets.plot_3d import LorenzView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, context: SimulationContext, font_path: str = config.FONT_PATH) -> None:
        super().__init__()
        self.context: SimulationContext = context

        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(*config.WINDOW_SIZE)

        # --- CENTRAL 3D VIEW ---
        self.visualizer = LorenzView()
        self.setCentralWidget(self.visualizer)

        # --- SCENE & FRAME LOOP ---
        self.composer = SceneComposer(self.visualizer)
        self.clock = QtFrameClock(parent=self)
        self.driver = FrameDriver(
            context=self.context,
            renderer=self.visualizer,
            controls=self.visualizer.controls,
            clock=self.clock,
        )

        # --- FONT (ASYNC) ---
        self.font_worker: Optional[FontLoaderWorker] = FontLoaderWorker(font_path)
        self.font_worker.loaded.connect(self._on_font_loaded)
        self.font_worker.failed.connect(self._on_font_failed)
        self.font_worker.finished.connect(self._on_font_worker_finished)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- SIGNAL CONNECTIONS ---
        self.visualizer.resized.connect(self.driver.handle_resize)

    def start(self) -> None:
        """Builds the static scene, requests the font and starts animating."""
        self.composer.compose()
        if self.font_worker is not None:
            self.font_worker.start()
        self.driver.start()

    def _create_actions(self) -> None:
        self.act_exit = QAction("Ukončit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&Soubor")
        file_menu.addAction(self.act_exit)

    # --- SLOTS (GUI thread) ---
    @Slot(object)
    def _on_font_loaded(self, font: TextFont) -> None:
        self.composer.on_font_loaded(font)
        self.visualizer.render()

    @Slot(str)
    def _on_font_failed(self, message: str) -> None:
        self.composer.on_font_failed(message)

    @Slot()
    def _on_font_worker_finished(self) -> None:
        self.font_worker.deleteLater()
        self.font_worker = None

    def closeEvent(self, event: QCloseEvent) -> None:
        self.clock.stop()
        if self.font_worker is not None:
            self.font_worker.wait()
        self.visualizer.close()
        logger.info(f"Closing after {self.context.frame_count} frames.")
        event.accept()
