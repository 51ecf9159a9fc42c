"""
Pytest configuration and shared fixtures for the Lorenz scene tests.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add the package to Python path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from lorenzscene.controller.clock import ManualClock
from lorenzscene.model.state import SimulationContext
from lorenzscene.model.trajectory import TrajectoryBuffer


class RecordingRenderer:
    """Stands in for the 3D view; remembers what the frame loop handed it."""

    def __init__(self, calls=None):
        self.calls = calls if calls is not None else []
        self.curves = []
        self.render_count = 0
        self.resizes = []

    def update_curve(self, points):
        self.calls.append("update_curve")
        self.curves.append(np.array(points, copy=True))

    def render(self):
        self.calls.append("render")
        self.render_count += 1

    def resize_viewport(self, width, height):
        self.calls.append("resize_viewport")
        self.resizes.append((width, height))


class RecordingControls:
    def __init__(self, calls=None):
        self.calls = calls if calls is not None else []
        self.update_count = 0

    def update(self):
        self.calls.append("controls_update")
        self.update_count += 1


class RecordingSink:
    def __init__(self):
        self.items = []

    def add_static(self, item):
        self.items.append(item)

    @property
    def names(self):
        return [item.name for item in self.items]


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def renderer(call_log):
    return RecordingRenderer(call_log)


@pytest.fixture
def controls(call_log):
    return RecordingControls(call_log)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def context():
    """Simulation context with the default parameters and trail."""
    return SimulationContext()


@pytest.fixture
def small_context():
    """Simulation context with a short trail so capacity is reached quickly."""
    return SimulationContext(trajectory=TrajectoryBuffer(capacity=50))
