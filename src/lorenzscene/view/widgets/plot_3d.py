"""
3D Visualization Widget (PyVista Wrapper)
"""

from __future__ import annotations

from typing import Optional

import logging
import numpy as np
import numpy.typing as npt

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtCore import Signal
from PySide6.QtGui import QCloseEvent, QResizeEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from lorenzscene import config
from lorenzscene.view.scene import ItemKind, SceneItem
from lorenzscene.view.widgets.orbit import OrbitControls
from lorenzscene.view.widgets.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)


class LorenzView(QWidget):
    """
    Hosts the VTK render window. Receives static scene items once and a new
    attractor polyline every frame.
    """
    resized = Signal(int, int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._init_plotter()

        self.controls = OrbitControls(self.plotter)
        self._vtk_utils = VtkUtils()

        # --- Actors state ---
        self._curve_actor: Optional[pv.Actor] = None

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def add_static(self, item: SceneItem) -> None:
        """Adds a mesh that stays in the scene for the lifetime of the window."""
        if item.kind is ItemKind.LINE:
            self.plotter.add_mesh(
                item.mesh,
                color=item.color,
                line_width=1,
                lighting=False,
                pickable=False,
                reset_camera=False,
                show_scalar_bar=False,
            )
        else:
            self.plotter.add_mesh(
                item.mesh,
                color=item.color,
                lighting=False,
                pickable=False,
                reset_camera=False,
                show_scalar_bar=False,
            )

    def update_curve(self, points: npt.NDArray[np.float64]) -> None:
        """
        Replaces the attractor polyline with one built from the given points.
        """
        if len(points) == 0:
            return

        curve = self._vtk_utils.polyline_to_polydata(points)

        if self._curve_actor is None:
            self._curve_actor = self.plotter.add_mesh(
                curve,
                color=config.CURVE_COLOR,
                line_width=config.CURVE_WIDTH,
                lighting=False,
                pickable=False,
                reset_camera=False,
                show_scalar_bar=False,
            )
        else:
            # The previous PolyData is released together with its last reference
            self._curve_actor.mapper.SetInputData(curve)

    def render(self) -> None:
        self.plotter.render()

    def resize_viewport(self, width: int, height: int) -> None:
        """
        Re-project the camera for the new widget size.

        The embedded interactor has already sized the render window in device
        pixels (widget size times the screen pixel ratio) and must stay the
        only place that sets it.
        """
        self.plotter.camera.Modified()
        self.plotter.render()
        logger.debug(f"Viewport resized to {width}x{height}.")

    # ------------------------------------------------------------------------------
    # Internal: Setup
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(config.BACKGROUND_COLOR)

        cam = self.plotter.camera
        cam.position = config.CAMERA_POSITION
        cam.focal_point = (0.0, 0.0, 0.0)
        cam.up = config.CAMERA_VIEW_UP
        cam.view_angle = config.CAMERA_VIEW_ANGLE
        cam.clipping_range = config.CAMERA_CLIPPING_RANGE

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        size = event.size()
        self.resized.emit(size.width(), size.height())

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
