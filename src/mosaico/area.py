"""Area between two polylines, e.g. the filled band of an area chart."""

from __future__ import annotations

from typing import Sequence

from mosaico.geom import MoPoint
from mosaico.path import PathContext
from mosaico.shape import MoShape


class MoArea(MoShape):
    """
    Closed area between a baseline and a top line.

    The outline runs along the top line (_ending_points_) from left to right and
    back along the baseline (_starting_points_). Consecutive duplicate points are
    skipped.
    """

    def __init__(self, starting_points: Sequence[MoPoint], ending_points: Sequence[MoPoint]):
        """
        Args:
            starting_points (Sequence[MoPoint]): baseline, left to right
            ending_points (Sequence[MoPoint]): top line, left to right

        Raises:
            ValueError: if one of the polylines is empty
        """
        if not starting_points or not ending_points:
            raise ValueError("MoArea needs at least one starting point and one ending point")
        self.starting_points = tuple(starting_points)
        self.ending_points = tuple(ending_points)

    def draw(self, path: PathContext) -> None:
        first = self.ending_points[0]
        path.move_to(self.starting_points[0].x, first.y)
        last = first
        for point in self.ending_points[1:]:
            if point != last:
                path.line_to(point.x, point.y)
                last = point

        last = MoPoint(self.ending_points[-1].x, self.starting_points[-1].y)
        path.line_to(last.x, last.y)
        for point in reversed(self.starting_points):
            if point != last:
                path.line_to(point.x, point.y)
                last = point
        path.close_path()
