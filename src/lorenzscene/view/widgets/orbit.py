"""
Orbit Controls
Damped orbiting of the camera around its focal point.

VTK's trackball camera style rotates the camera while the mouse is dragged.
This module adds inertia: after the drag ends the camera keeps rotating with
the last angular velocity, decaying by the damping factor every frame.
"""
from __future__ import annotations

import math
from typing import Optional, Tuple, TYPE_CHECKING

from lorenzscene import config

if TYPE_CHECKING:
    import pyvista as pv

# Angular speed (degrees per frame) below which coasting stops
_MIN_SPEED = 1e-3


def _wrap_degrees(angle: float) -> float:
    """Map an angle difference to (-180, 180]."""
    wrapped = (angle + 180.0) % 360.0 - 180.0
    return 180.0 if wrapped == -180.0 else wrapped


def orbit_angles(
    position: Tuple[float, float, float],
    focal_point: Tuple[float, float, float],
) -> Tuple[float, float]:
    """
    Azimuth and elevation (degrees) of the camera around the focal point, Y up.

    Azimuth is measured from +Z towards +X, matching the sense of
    vtkCamera.Azimuth() for a Y-up view.
    """
    dx = position[0] - focal_point[0]
    dy = position[1] - focal_point[1]
    dz = position[2] - focal_point[2]
    azimuth = math.degrees(math.atan2(dx, dz))
    elevation = math.degrees(math.atan2(dy, math.hypot(dx, dz)))
    return azimuth, elevation


class DampedOrbit:
    """
    Tracks angular velocity while the user drags and decays it afterwards.
    """

    def __init__(self, damping: float = config.ORBIT_DAMPING) -> None:
        if not 0.0 < damping <= 1.0:
            raise ValueError(f"Damping must be in (0, 1], got {damping}.")
        self.damping = damping
        self.velocity: Tuple[float, float] = (0.0, 0.0)
        self._last: Optional[Tuple[float, float]] = None

    def track(self, azimuth: float, elevation: float) -> None:
        """Record the camera angles during a drag."""
        if self._last is not None:
            self.velocity = (
                _wrap_degrees(azimuth - self._last[0]),
                elevation - self._last[1],
            )
        self._last = (azimuth, elevation)

    def release(self) -> None:
        """End of a drag. The velocity is kept for coasting."""
        self._last = None

    def coast(self) -> Optional[Tuple[float, float]]:
        """
        The rotation to apply this frame, or None when at rest.
        """
        d_az, d_el = self.velocity
        if math.hypot(d_az, d_el) < _MIN_SPEED:
            self.velocity = (0.0, 0.0)
            return None

        keep = 1.0 - self.damping
        self.velocity = (d_az * keep, d_el * keep)
        return d_az, d_el

    def stop(self) -> None:
        self.velocity = (0.0, 0.0)
        self._last = None


class OrbitControls:
    """
    Connects a DampedOrbit to a PyVista plotter.

    update() must be called once per frame.
    """

    def __init__(self, plotter: pv.Plotter, damping: float = config.ORBIT_DAMPING) -> None:
        self.plotter = plotter
        self.orbit = DampedOrbit(damping)
        self._interacting: bool = False

        self.plotter.enable_trackball_style()
        iren = self.plotter.iren
        iren.add_observer("StartInteractionEvent", lambda *_: self._on_start())
        iren.add_observer("EndInteractionEvent", lambda *_: self._on_end())

    def _on_start(self) -> None:
        self._interacting = True
        self.orbit.stop()

    def _on_end(self) -> None:
        self._interacting = False
        self.orbit.release()

    def update(self) -> None:
        cam = self.plotter.camera

        if self._interacting:
            self.orbit.track(*orbit_angles(cam.position, cam.focal_point))
            return

        delta = self.orbit.coast()
        if delta is None:
            return

        d_az, d_el = delta
        cam.Azimuth(d_az)
        cam.Elevation(d_el)
        cam.OrthogonalizeViewUp()
