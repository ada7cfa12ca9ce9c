"""Measuring path data: polygonization, bounding boxes and filled areas."""

from __future__ import annotations

import logging
from typing import List

import numpy as np
import shapely.geometry
import svgpathtools
from numpy.typing import NDArray

from mosaico.geom import MoBox

logger = logging.getLogger(__name__)


###############################################################################
# PathMeasure
###############################################################################
class PathMeasure:
    """Collection of static functions measuring path data strings.

    Parsing is done by svgpathtools, so any valid SVG path data is accepted,
    not only the output of MoPath.
    """

    # Number of steps used to polygonize a curved segment
    POLYGONIZE_STEPS: int = 50

    @staticmethod
    def parse(path_string: str) -> svgpathtools.Path:
        """Parse _path_string_ into a svgpathtools Path."""
        return svgpathtools.parse_path(path_string)

    @staticmethod
    def polygonize(path_string: str, steps: int = POLYGONIZE_STEPS) -> List[NDArray[np.float64]]:
        """
        Approximate each continuous subpath by a polyline.

        Lines contribute their start point only, curves and arcs are sampled at
        _steps_ evenly spaced parameters. The end point of the subpath is appended,
        so a closed subpath yields a ring whose first and last points coincide.

        Args:
            path_string (str): SVG path data
            steps (int, optional): samples per curved segment. Defaults to POLYGONIZE_STEPS.

        Returns:
            List[NDArray[np.float64]]: one array of shape (n_points, 2) per subpath
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")

        rings: List[NDArray[np.float64]] = []
        for subpath in PathMeasure.parse(path_string).continuous_subpaths():
            if len(subpath) == 0:
                continue
            samples: List[complex] = []
            for segment in subpath:
                if isinstance(segment, svgpathtools.Line):
                    samples.append(segment.start)
                else:
                    samples.extend(segment.point(float(t)) for t in np.linspace(0.0, 1.0, steps, endpoint=False))
            samples.append(subpath[-1].end)
            rings.append(np.array([[point.real, point.imag] for point in samples], dtype=np.float64))
        return rings

    @staticmethod
    def bounding_box(path_string: str) -> MoBox:
        """
        Exact bounding box of the path (arcs and curves included).

        Raises:
            ValueError: if the path draws nothing
        """
        path = PathMeasure.parse(path_string)
        if len(path) == 0:
            raise ValueError("Bounding box of an empty path is undefined")
        xmin, xmax, ymin, ymax = path.bbox()
        return MoBox(xmin, ymin, xmax, ymax)

    @staticmethod
    def area(path_string: str, steps: int = POLYGONIZE_STEPS) -> float:
        """
        Filled area of the path using the even-odd fill rule.

        Each subpath is polygonized and combined with the previous ones by a
        symmetric difference, so a ring drawn inside another one cuts a hole.
        Subpaths with fewer than three distinct points are skipped.

        Args:
            path_string (str): SVG path data
            steps (int, optional): samples per curved segment. Defaults to POLYGONIZE_STEPS.

        Returns:
            float: the area
        """
        result = shapely.geometry.Polygon()
        for ring in PathMeasure.polygonize(path_string, steps):
            if len(np.unique(ring, axis=0)) < 3:
                logger.warning("Skipping degenerate subpath with %d points", len(ring))
                continue
            polygon = shapely.geometry.Polygon(ring)
            if not polygon.is_valid:
                polygon = polygon.buffer(0)
            result = result.symmetric_difference(polygon)
        return float(result.area)
