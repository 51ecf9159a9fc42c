"""
Frame Driver
============
Advances the simulation once per display frame and hands the trail to the
renderer.

Why is this file needed?
------------------------
1. Time-Stepping: It owns the per-frame loop (integrate, record, redraw).
2. Decoupling: The clock, renderer and camera controls are injected, so the
   loop can be driven deterministically in tests without a display.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from lorenzscene import config

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

    from lorenzscene.controller.clock import FrameClock
    from lorenzscene.model.state import SimulationContext

logger = logging.getLogger(__name__)


class SceneRenderer(Protocol):
    def update_curve(self, points: npt.NDArray[np.float64]) -> None: ...
    def render(self) -> None: ...
    def resize_viewport(self, width: int, height: int) -> None: ...


class CameraControls(Protocol):
    def update(self) -> None: ...


class DriverState(Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"


class FrameDriver:
    def __init__(
        self,
        context: SimulationContext,
        renderer: SceneRenderer,
        controls: CameraControls,
        clock: FrameClock,
        diagnostic_interval: int = config.DIAGNOSTIC_INTERVAL,
    ) -> None:
        self.context = context
        self.renderer = renderer
        self.controls = controls
        self.clock = clock
        self.diagnostic_interval = diagnostic_interval
        self.state: DriverState = DriverState.INITIALIZING

    def start(self) -> None:
        """Begin ticking. Subsequent calls are ignored."""
        if self.state is DriverState.RUNNING:
            return
        self.state = DriverState.RUNNING
        logger.info("Frame loop started.")
        self.clock.start(self.tick)

    def tick(self) -> None:
        ctx = self.context
        state = ctx.advance()
        ctx.trajectory.push(state)

        # frame_count is the number of points accumulated so far, including evicted ones
        if ctx.frame_count % self.diagnostic_interval == 0:
            logger.info(
                f"Frame {ctx.frame_count}: position=({state.x:.4f}, {state.y:.4f}, {state.z:.4f}), "
                f"points={len(ctx.trajectory)}"
            )

        self.renderer.update_curve(ctx.trajectory.as_array())
        self.controls.update()
        self.renderer.render()

    def handle_resize(self, width: int, height: int) -> None:
        """Viewport change. Only the camera and output surface are affected."""
        if width <= 0 or height <= 0:
            return
        self.renderer.resize_viewport(width, height)
