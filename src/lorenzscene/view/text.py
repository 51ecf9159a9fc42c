"""
3D Text Geometry
================
Turns strings into extruded glyph meshes using a TrueType font file.

matplotlib reads the font (FreeType) and produces the glyph outlines as
polygons; VTK triangulates them and PyVista extrudes the result into a thin
solid lying in the XY plane, facing +Z.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Tuple

import pyvista as pv
from matplotlib.font_manager import FontProperties, get_font
from matplotlib.textpath import TextPath, TextToPath

from lorenzscene.view.widgets.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)

_OUTLINE_SIZE = float(TextToPath.FONT_SCALE)


class TextFont:
    """
    Handle to a loaded font. Produces label geometry on demand.
    """

    def __init__(self, path: str) -> None:
        self.path: str = path
        self.family: str = get_font(path).family_name
        self._prop = FontProperties(fname=path)
        self._vtk_utils = VtkUtils()
        self._cache: Dict[Tuple[str, float, float], pv.PolyData] = {}

    @classmethod
    def from_file(cls, path: str) -> TextFont:
        """
        Load and validate a font file.

        Raises:
            FileNotFoundError: If the file does not exist.
            RuntimeError: If FreeType cannot parse the file.
        """
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Font file not found: {path}")
        font = cls(path)
        logger.info(f"Loaded font '{font.family}' from {path}")
        return font

    def text_geometry(self, text: str, size: float, depth: float) -> pv.PolyData:
        """
        Build a solid text mesh with its baseline origin at (0, 0, 0).

        Args:
            text: String to render.
            size: Font size in scene units (em height).
            depth: Extrusion along +Z.

        Returns:
            A new PolyData; the caller may translate it freely.
        """
        key = (text, size, depth)
        if key not in self._cache:
            self._cache[key] = self._build(text, size, depth)
        return self._cache[key].copy()

    def _build(self, text: str, size: float, depth: float) -> pv.PolyData:
        # Curves are flattened with an absolute tolerance, so outline and
        # triangulate at the reference size, then scale down
        path = TextPath((0.0, 0.0), text, size=_OUTLINE_SIZE, prop=self._prop)
        outlines = path.to_polygons(closed_only=True)

        face = self._vtk_utils.triangulate_loops_xy(outlines)
        if face.n_cells == 0:
            logger.warning(f"No glyph outlines for text '{text}'")
            return face

        face.scale(size / _OUTLINE_SIZE, inplace=True)
        return face.extrude((0.0, 0.0, depth), capping=True)
