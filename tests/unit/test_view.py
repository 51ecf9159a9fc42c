"""
Unit tests for the renderer side of the 3D view.

The methods are called on a stand-in object holding a mocked plotter, so no
window or render context is needed.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import numpy as np
import pytest

from lorenzscene.view.widgets.plot_3d import LorenzView
from lorenzscene.view.widgets.vtk_utils import VtkUtils


@pytest.fixture
def view():
    return SimpleNamespace(plotter=MagicMock(), _vtk_utils=VtkUtils(), _curve_actor=None)


class TestResizeViewport:
    """Test cases for viewport changes reaching the render window."""

    def test_render_window_size_left_to_interactor(self, view):
        """Test the logical widget size never overwrites the device pixel size."""
        LorenzView.resize_viewport(view, 800, 600)

        view.plotter.ren_win.SetSize.assert_not_called()
        view.plotter.iren.SetSize.assert_not_called()

    def test_camera_reprojected_and_rendered(self, view):
        LorenzView.resize_viewport(view, 800, 600)

        view.plotter.camera.Modified.assert_called_once()
        view.plotter.render.assert_called_once()


class TestUpdateCurve:
    """Test cases for the per-frame polyline."""

    def test_empty_trail_not_drawn(self, view):
        LorenzView.update_curve(view, np.empty((0, 3)))

        view.plotter.add_mesh.assert_not_called()
        assert view._curve_actor is None

    def test_actor_created_once_then_reused(self, view):
        """Test later frames swap the mapper input instead of adding actors."""
        points = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])

        LorenzView.update_curve(view, points)
        LorenzView.update_curve(view, points)

        view.plotter.add_mesh.assert_called_once()
        actor = view.plotter.add_mesh.return_value
        actor.mapper.SetInputData.assert_called_once()
        curve = actor.mapper.SetInputData.call_args.args[0]
        assert curve.n_points == 2


if __name__ == "__main__":
    pytest.main([__file__])
