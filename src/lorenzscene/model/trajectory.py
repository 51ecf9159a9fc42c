"""
Trajectory Buffer
=================
A sliding window over the most recent points of the attractor.

The buffer stores display-scaled copies of the integrator output. Once the
capacity is reached every push evicts the oldest point, so the rendered trail
has a constant length.
"""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, Tuple

import numpy as np

from lorenzscene import config

if TYPE_CHECKING:
    import numpy.typing as npt

    from lorenzscene.model.lorenz import LorenzState

Point3D = Tuple[float, float, float]


class TrajectoryBuffer:
    def __init__(
        self,
        capacity: int = config.TRAIL_CAPACITY,
        scale: float = config.DISPLAY_SCALE,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}.")

        self.capacity: int = capacity
        self.scale: float = scale
        self._points: Deque[Point3D] = deque()

    def push(self, state: LorenzState) -> None:
        """
        Append a scaled copy of the state; drop the oldest point when over capacity.
        """
        self._points.append(state.scaled(self.scale))
        if len(self._points) > self.capacity:
            self._points.popleft()

    def as_array(self) -> npt.NDArray[np.float64]:
        """(N, 3) array of the points in insertion order."""
        if not self._points:
            return np.empty((0, 3), dtype=np.float64)
        return np.array(self._points, dtype=np.float64)

    @property
    def first(self) -> Point3D:
        return self._points[0]

    @property
    def last(self) -> Point3D:
        return self._points[-1]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point3D]:
        return iter(self._points)
