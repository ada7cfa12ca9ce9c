"""Rectangles with optional rounded top and bottom corners."""

from __future__ import annotations

from typing import List, Optional, Tuple

from mosaico.common import InvalidArgumentError
from mosaico.geom import ORIGIN, GeomMath, MoPoint
from mosaico.path import PathContext
from mosaico.shape import MoShape

# One entry per outline step: ("L", end) for a line, ("A", end, radius) for a corner arc
_Outline = List[Tuple[str, MoPoint, float]]


class MoRectangle(MoShape):
    """
    A rectangle centered on _center_.

    The two top corners share _top_radius_ and the two bottom corners share
    _bottom_radius_ (think of bars in a bar chart rounded on one end).
    Radii larger than half the shorter side are reduced to it.
    """

    def __init__(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        width: float,
        height: float,
        center: Optional[MoPoint] = None,
        top_radius: Optional[float] = None,
        bottom_radius: Optional[float] = None,
        rotation: Optional[float] = None,
    ):
        """
        Args:
            width (float): Width
            height (float): Height
            center (Optional[MoPoint], optional): Center. Defaults to origin.
            top_radius (Optional[float], optional): Radius of the two top corners. Defaults to None.
            bottom_radius (Optional[float], optional): Radius of the two bottom corners. Defaults to None.
            rotation (Optional[float], optional): Rotation in degrees about the center,
                clockwise on screen. Defaults to None.

        Raises:
            InvalidArgumentError: negative width, height or radius
        """
        for name, value in (
            ("width", width),
            ("height", height),
            ("top_radius", top_radius),
            ("bottom_radius", bottom_radius),
        ):
            if value is not None and value < 0:
                raise InvalidArgumentError(f"negative {name}: {value}", value)
        self.width = width
        self.height = height
        self.center = center if center is not None else ORIGIN
        self.top_radius = top_radius or 0.0
        self.bottom_radius = bottom_radius or 0.0
        self.rotation = rotation or 0.0

    def _outline(self) -> Tuple[MoPoint, _Outline]:
        limit = min(self.width, self.height) / 2
        top = min(self.top_radius, limit)
        bottom = min(self.bottom_radius, limit)

        left = self.center.x - self.width / 2
        right = self.center.x + self.width / 2
        upper = self.center.y - self.height / 2
        lower = self.center.y + self.height / 2

        start = MoPoint(left, upper + top)
        steps: _Outline = []
        if top:
            steps.append(("A", MoPoint(left + top, upper), top))
        steps.append(("L", MoPoint(right - top, upper), 0.0))
        if top:
            steps.append(("A", MoPoint(right, upper + top), top))
        steps.append(("L", MoPoint(right, lower - bottom), 0.0))
        if bottom:
            steps.append(("A", MoPoint(right - bottom, lower), bottom))
        steps.append(("L", MoPoint(left + bottom, lower), 0.0))
        if bottom:
            steps.append(("A", MoPoint(left, lower - bottom), bottom))
        return start, steps

    def draw(self, path: PathContext) -> None:
        start, steps = self._outline()
        trafo = GeomMath.rotation_about(self.center, self.rotation) if self.rotation else None

        def place(point: MoPoint) -> Tuple[float, float]:
            if trafo is None:
                return point.x, point.y
            return GeomMath.transform_point(trafo, (point.x, point.y))

        path.move_to(*place(start))
        for cmd, end, radius in steps:
            x, y = place(end)
            if cmd == "A":
                path.arc_raw(radius, radius, 0, False, True, x, y)
            else:
                path.line_to(x, y)
        path.close_path()
