"""
Unit tests for glyph geometry and VTK helpers.
"""

import os

import numpy as np
import pytest

from lorenzscene import config
from lorenzscene.view.text import TextFont
from lorenzscene.view.widgets.vtk_utils import VtkUtils


@pytest.fixture(scope="module")
def font():
    return TextFont.from_file(config.FONT_PATH)


class TestTextFont:
    """Test cases for label meshes built from a TrueType font."""

    def test_bundled_font_exists(self):
        """Test the default font path points at a real file."""
        assert os.path.isfile(config.FONT_PATH)

    def test_family(self, font):
        """Test the font family is read from the file."""
        assert font.family == "DejaVu Sans"

    def test_missing_file(self, tmp_path):
        """Test a missing font raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            TextFont.from_file(str(tmp_path / "missing.ttf"))

    def test_digit_geometry(self, font):
        """Test a digit becomes a thin solid in the XY plane."""
        mesh = font.text_geometry("7", size=0.3, depth=0.01)

        assert mesh.n_cells > 0
        x_min, x_max, y_min, y_max, z_min, z_max = mesh.bounds
        assert z_min == pytest.approx(0.0, abs=1e-9)
        assert z_max == pytest.approx(0.01)
        assert 0.0 < y_max - y_min < 0.3
        assert 0.0 < x_max - x_min < 0.3

    def test_glyph_with_hole(self, font):
        """Test glyphs with inner contours are triangulated."""
        mesh = font.text_geometry("0", size=0.3, depth=0.01)

        assert mesh.n_cells > 0

    def test_larger_size_gives_larger_glyph(self, font):
        """Test size scales the glyph."""
        small = font.text_geometry("x", size=0.3, depth=0.01)
        large = font.text_geometry("x", size=0.4, depth=0.01)

        small_h = small.bounds[3] - small.bounds[2]
        large_h = large.bounds[3] - large.bounds[2]
        assert large_h == pytest.approx(small_h * 0.4 / 0.3, rel=1e-3)

    def test_returns_independent_copies(self, font):
        """Test moving one label does not move later ones."""
        first = font.text_geometry("5", size=0.3, depth=0.01)
        first.translate((10.0, 0.0, 0.0), inplace=True)

        second = font.text_geometry("5", size=0.3, depth=0.01)

        assert second.bounds[0] < 1.0


class TestVtkUtils:
    """Test cases for the polyline and triangulation helpers."""

    def test_polyline(self):
        """Test points become one connected line cell."""
        points = np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [1, 1, 1]], dtype=float)

        pd = VtkUtils.polyline_to_polydata(points)

        assert pd.n_points == 4
        assert pd.lines.tolist() == [4, 0, 1, 2, 3]
        assert pd.n_cells == 1

    def test_polyline_single_point(self):
        """Test a single point gives no line cell."""
        pd = VtkUtils.polyline_to_polydata(np.array([[1.0, 2.0, 3.0]]))

        assert pd.n_points == 1
        assert pd.n_cells == 0

    def test_clean_duplicate_points(self):
        """Test consecutive duplicates and the closing point are dropped."""
        ring = np.array([[0, 0], [0, 0], [1, 0], [1, 1], [0, 0]], dtype=float)

        cleaned = VtkUtils.clean_duplicate_points(ring)

        assert cleaned.tolist() == [[0, 0], [1, 0], [1, 1]]

    def test_triangulate_square(self):
        """Test a square loop becomes a filled surface."""
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)

        pd = VtkUtils().triangulate_loops_xy([square])

        assert pd.n_cells >= 2
        assert pd.area == pytest.approx(1.0)

    def test_triangulate_with_hole(self):
        """Test an oppositely wound inner loop is left open."""
        outer = np.array([[0, 0], [4, 0], [4, 4], [0, 4]], dtype=float)
        inner = np.array([[1, 1], [1, 3], [3, 3], [3, 1]], dtype=float)

        pd = VtkUtils().triangulate_loops_xy([outer, inner])

        assert pd.area == pytest.approx(12.0)

    def test_triangulate_nothing(self):
        """Test no loops give an empty mesh."""
        assert VtkUtils().triangulate_loops_xy([]).n_points == 0


if __name__ == "__main__":
    pytest.main([__file__])
