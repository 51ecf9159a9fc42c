"""
VTK and Geometry Utilities
Helper functions for polyline construction and glyph triangulation.
"""
import numpy as np
import numpy.typing as npt
import pyvista as pv
from vtkmodules.vtkFiltersGeneral import vtkContourTriangulator

import logging

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def polyline_to_polydata(points: npt.NDArray[np.float64]) -> pv.PolyData:
        """
        Convert a (N, 3) array of points to a single connected PolyData line.

        Fewer than two points yield a PolyData with the points and no line cell.
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        n = pts.shape[0]
        pd = pv.PolyData(pts) if n else pv.PolyData()
        if n >= 2:
            pd.lines = np.hstack([[n], np.arange(n, dtype=np.int_)])
        # Fix for markers: PolyData(points) creates one vertex cell per point
        pd.verts = np.empty(0, dtype=int)
        return pd

    @staticmethod
    def clean_duplicate_points(points: npt.NDArray[np.float64], tol: float = 1e-5) -> npt.NDArray[np.float64]:
        """
        Removes consecutive points that are too close to each other.
        This is crucial for vtkContourTriangulator stability.
        """
        if len(points) < 3:
            return points

        diff = points[1:] - points[:-1]
        dist = np.linalg.norm(diff, axis=1)

        # Keep the first point, and any point that is far enough from the previous one
        mask = np.concatenate(([True], dist > tol))

        cleaned = points[mask]

        # Ensure last point is not duplicate of first
        if len(cleaned) > 2:
            if np.linalg.norm(cleaned[-1] - cleaned[0]) < tol:
                cleaned = cleaned[:-1]

        return cleaned

    def triangulate_loops_xy(self, loops: list[npt.NDArray[np.float64]]) -> pv.PolyData:
        """
        Triangulate multiple closed loops on Z=0.

        Loops wound opposite to their enclosing loop become holes, which is how
        glyph outlines such as '0' or '8' are stored in a font.

        Args:
            loops: List of (N, 2) arrays of (x, y) points.

        Returns:
            PolyData: Triangulated loops.
        """
        if not loops:
            return pv.PolyData()

        pts3_list: list[npt.NDArray[np.float64]] = []
        cells_list: list[npt.NDArray[np.int_]] = []
        offset = 0

        for ring in loops:
            ring = np.asarray(ring, dtype=np.float64).reshape(-1, 2)
            if ring.size == 0:
                continue

            ring = self.clean_duplicate_points(ring)
            if len(ring) < 3:
                continue

            if not np.allclose(ring[0], ring[-1]):
                ring = np.vstack([ring, ring[0]])

            n = ring.shape[0]
            pts3 = np.c_[ring, np.zeros((n, 1), dtype=np.float64)]  # (N, 3)
            pts3_list.append(pts3)

            # polyline cell: [n, id0, id1, ..., id(n-1)]
            cells = np.hstack([[n], np.arange(offset, offset + n, dtype=np.int_)])
            cells_list.append(cells)

            offset += n

        if not pts3_list:
            return pv.PolyData()

        points = np.vstack(pts3_list)
        lines = np.concatenate(cells_list).astype(np.int_)

        pd = pv.PolyData(points)
        pd.lines = lines

        try:
            tri = vtkContourTriangulator()
            tri.SetInputData(pd)
            tri.Update()
            return pv.wrap(tri.GetOutput())
        except Exception as e:
            logger.error(f"Triangulation failed: {e}")
            return pv.PolyData()
