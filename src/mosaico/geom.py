"""Handling geometries: points, boxes and the arc math behind MoPath"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Tuple, Union

from mosaico.common import DEGREE_TO_RADIAN, PATH_EPSILON, TAU, InvalidArgumentError

###############################################################################
# MoPoint
###############################################################################


@dataclass(frozen=True)
class MoPoint:
    """
    Represents a point in 2D space with the origin at the top-left corner.

    Attributes:
        x (float): The x-coordinate (left-to-right).
        y (float): The y-coordinate (top-to-bottom).
    """

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def approx_equal(self, other: MoPoint, tol: float = PATH_EPSILON) -> bool:
        """Return True if both coordinates differ by at most _tol_."""
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def distance_to(self, other: MoPoint) -> float:
        """Euclidean distance to _other_."""
        return math.hypot(other.x - self.x, other.y - self.y)

    @classmethod
    def from_dict(cls, data: dict) -> MoPoint:
        """Create a MoPoint instance from a dictionary."""
        return cls(x=data.get("x", 0.0), y=data.get("y", 0.0))

    def to_dict(self) -> dict:
        """Convert the MoPoint instance to a dictionary."""
        return {"x": self.x, "y": self.y}


ORIGIN = MoPoint(0.0, 0.0)


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def transform_point(
        affine_trafo: Sequence[Union[int, float]], point: Sequence[Union[int, float]]
    ) -> Tuple[float, float]:
        """
        Perform an affine transformation on the given 2D point.

        The given _affine_trafo_ is a list of 6 floats, performing an affine transformation.
        The transformation is defined as:
            | x' | = | a00 a01 b0 |   | x |
            | y' | = | a10 a11 b1 | * | y |
            | 1  | = |  0   0  1  |   | 1 |
        with
            affine_trafo = [a00, a01, a10, a11, b0, b1]

        Args:
            affine_trafo (Tuple/List[float]): Affine transformation - [a00, a01, a10, a11, b0, b1]
            point (Tuple/List[float]): 2D point - (x, y)

        Returns:
            Tuple[float, float]: the transformed point
        """
        x_new = float(affine_trafo[0] * point[0] + affine_trafo[1] * point[1] + affine_trafo[4])
        y_new = float(affine_trafo[2] * point[0] + affine_trafo[3] * point[1] + affine_trafo[5])
        return (x_new, y_new)

    @staticmethod
    def rotation_about(center: MoPoint, angle_deg: float) -> Tuple[float, float, float, float, float, float]:
        """
        Affine transformation rotating by _angle_deg_ degrees about _center_.

        Positive angles rotate clockwise on screen (y-axis pointing down).

        Returns:
            Tuple[float, ...]: [a00, a01, a10, a11, b0, b1] usable by transform_point
        """
        rad = angle_deg * DEGREE_TO_RADIAN
        cos_a = math.cos(rad)
        sin_a = math.sin(rad)
        b0 = center.x - cos_a * center.x + sin_a * center.y
        b1 = center.y - sin_a * center.x - cos_a * center.y
        return (cos_a, -sin_a, sin_a, cos_a, b0, b1)

    @staticmethod
    def point_on_arc(center: MoPoint, radius: float, angle_deg: float) -> MoPoint:
        """
        Point on a circle using compass angles.

        The angle is given in **degrees**, 0 points up (negative y) and angles
        increase clockwise on screen.

        Args:
            center (MoPoint): center of the circle
            radius (float): radius of the circle
            angle_deg (float): compass angle in degrees, any real value

        Returns:
            MoPoint: the point on the circle
        """
        radians = (90.0 - angle_deg) * DEGREE_TO_RADIAN
        return MoPoint(
            center.x + radius * math.cos(radians),
            center.y - radius * math.sin(radians),
        )


###############################################################################
# MoBox
###############################################################################
@dataclass(frozen=True)
class MoBox:
    """
    Represents a rectangular box with coordinates and dimensions.

    Coordinates are normalized on creation so that xmin <= xmax and ymin <= ymax.

    Attributes:
        xmin (float): The minimum x-coordinate.
        ymin (float): The minimum y-coordinate.
        xmax (float): The maximum x-coordinate.
        ymax (float): The maximum y-coordinate.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self):
        if self.xmin > self.xmax:
            xmin, xmax = self.xmax, self.xmin
            object.__setattr__(self, "xmin", xmin)
            object.__setattr__(self, "xmax", xmax)
        if self.ymin > self.ymax:
            ymin, ymax = self.ymax, self.ymin
            object.__setattr__(self, "ymin", ymin)
            object.__setattr__(self, "ymax", ymax)

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the box as Tuple (xmin, ymin, xmax, ymax)."""
        return self.xmin, self.ymin, self.xmax, self.ymax

    @property
    def width(self) -> float:
        """float: The width of the box (difference between xmax and xmin)."""
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        """float: The height of the box (difference between ymax and ymin)."""
        return self.ymax - self.ymin

    @property
    def centroid(self) -> MoPoint:
        """The centroid of the box."""
        return MoPoint((self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2)

    def union(self, other: MoBox) -> MoBox:
        """Smallest box containing this box and _other_."""
        return MoBox(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def expand(self, margin: float) -> MoBox:
        """Return a box grown by _margin_ on every side."""
        return MoBox(self.xmin - margin, self.ymin - margin, self.xmax + margin, self.ymax + margin)

    @classmethod
    def from_dict(cls, data: dict) -> MoBox:
        """Create a MoBox instance from a dictionary."""
        return cls(
            xmin=data.get("xmin", 0.0),
            ymin=data.get("ymin", 0.0),
            xmax=data.get("xmax", 0.0),
            ymax=data.get("ymax", 0.0),
        )

    def to_dict(self) -> dict:
        """Convert the MoBox instance to a dictionary."""
        return {"xmin": self.xmin, "ymin": self.ymin, "xmax": self.xmax, "ymax": self.ymax}

    def __str__(self):
        return (
            f"MoBox(xmin={self.xmin}, ymin={self.ymin}, "
            f"xmax={self.xmax}, ymax={self.ymax}, "
            f"width={self.width}, height={self.height})"
        )


###############################################################################
# ArcGeometry
###############################################################################


class LineStep(NamedTuple):
    """A straight line to _end_."""

    end: MoPoint


class ArcStep(NamedTuple):
    """A circular arc of _radius_ to _end_, with SVG large-arc and sweep flags."""

    radius: float
    large_arc: bool
    sweep: bool
    end: MoPoint


ArcPlan = List[Union[LineStep, ArcStep]]


class ArcGeometry:
    """
    Pure functions converting high level arc requests into line and arc steps.

    A step list is what MoPath appends to its command log:
        - arc_to_steps: at most one LineStep followed by at most one ArcStep
        - circular_arc_steps: zero, one or two ArcSteps (two for a full turn)
    """

    @staticmethod
    def check_radius(radius: float) -> None:
        """Raise InvalidArgumentError for a negative radius."""
        if radius < 0:
            raise InvalidArgumentError(f"negative radius: {radius}", radius)

    @staticmethod
    def arc_to_steps(p0: MoPoint, p1: MoPoint, p2: MoPoint, radius: float) -> ArcPlan:
        """
        Round the corner p0 -> p1 -> p2 with a fillet of the given _radius_.

        Let a = p0 - p1 and b = p2 - p1. The angle between a and b follows from the
        law of cosines on the three pairwise squared distances, the tangent length is
        l = r * tan((pi - angle) / 2) and the tangent points are p1 + (l/|a|)*a and
        p1 + (l/|b|)*b.

        Degenerate cases:
            - |a|^2 < eps: no steps at all
            - a and b (nearly) collinear or radius == 0: a single line to p1

        Args:
            p0 (MoPoint): the current point
            p1 (MoPoint): the corner point
            p2 (MoPoint): the point the second tangent heads to
            radius (float): fillet radius (>= 0)

        Returns:
            ArcPlan: the steps; a LineStep to the first tangent point is only
                included if that point differs from p0.
        """
        ArcGeometry.check_radius(radius)

        x21 = p2.x - p1.x
        y21 = p2.y - p1.y
        x01 = p0.x - p1.x
        y01 = p0.y - p1.y
        l01_2 = x01 * x01 + y01 * y01

        if l01_2 < PATH_EPSILON:
            return []
        if abs(y01 * x21 - y21 * x01) < PATH_EPSILON or radius == 0:
            return [LineStep(p1)]

        x20 = p2.x - p0.x
        y20 = p2.y - p0.y
        l21_2 = x21 * x21 + y21 * y21
        l20_2 = x20 * x20 + y20 * y20
        l21 = math.sqrt(l21_2)
        l01 = math.sqrt(l01_2)
        tangent_len = radius * math.tan((math.pi - math.acos((l21_2 + l01_2 - l20_2) / (2 * l21 * l01))) / 2)
        t01 = tangent_len / l01
        t21 = tangent_len / l21

        steps: ArcPlan = []
        if abs(t01 - 1) > PATH_EPSILON:
            steps.append(LineStep(MoPoint(p1.x + t01 * x01, p1.y + t01 * y01)))
        sweep = y01 * x20 > x01 * y20
        steps.append(ArcStep(radius, False, sweep, MoPoint(p1.x + t21 * x21, p1.y + t21 * y21)))
        return steps

    @staticmethod
    def normalize_span(start_angle: float, end_angle: float, anticlockwise: bool) -> float:
        """
        Angular span in radians travelled from _start_angle_ to _end_angle_.

        Negative spans are wrapped with a truncating remainder plus one full turn,
        which yields a value in [0, 2*pi).
        """
        span = start_angle - end_angle if anticlockwise else end_angle - start_angle
        if span < 0:
            span = math.fmod(span, TAU) + TAU
        return span

    @staticmethod
    def point_at_angle(center: MoPoint, radius: float, angle: float) -> MoPoint:
        """Point on a circle for a mathematical angle in radians (y-axis pointing down)."""
        return MoPoint(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))

    @staticmethod
    def circular_arc_steps(
        center: MoPoint, radius: float, start_angle: float, end_angle: float, anticlockwise: bool = False
    ) -> List[ArcStep]:
        """
        Arc steps for a circular arc, starting at the point at _start_angle_.

        A span within tolerance of a full turn is split at the point diametrically
        opposite the start, because a single arc command with identical endpoints
        draws nothing.

        Args:
            center (MoPoint): center of the circle
            radius (float): radius (>= 0)
            start_angle (float): start angle in radians
            end_angle (float): end angle in radians
            anticlockwise (bool, optional): direction. Defaults to False.

        Returns:
            List[ArcStep]: empty for a zero radius or a vanishing span
        """
        ArcGeometry.check_radius(radius)
        if radius == 0:
            return []

        sweep = not anticlockwise
        span = ArcGeometry.normalize_span(start_angle, end_angle, anticlockwise)

        if span > TAU - PATH_EPSILON:
            dx = radius * math.cos(start_angle)
            dy = radius * math.sin(start_angle)
            start = MoPoint(center.x + dx, center.y + dy)
            opposite = MoPoint(center.x - dx, center.y - dy)
            return [ArcStep(radius, True, sweep, opposite), ArcStep(radius, True, sweep, start)]
        if span > PATH_EPSILON:
            end = ArcGeometry.point_at_angle(center, radius, end_angle)
            return [ArcStep(radius, span >= math.pi, sweep, end)]
        return []
