"""Circular and annular sectors (pie and donut slices) drawn as closed paths."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from mosaico.common import SHAPE_EPSILON, InvalidArgumentError
from mosaico.geom import ORIGIN, GeomMath, MoPoint
from mosaico.path import PathContext
from mosaico.shape import MoShape

logger = logging.getLogger(__name__)

###############################################################################
# SectorParams
###############################################################################


@dataclass(frozen=True)
class SectorParams:
    """Parameters of a sector.

    Angles are compass angles in degrees: 0 points up, positive angles turn
    clockwise on screen. Angles are not restricted to [0, 360).

    Attributes:
        start_angle: Start angle of the slice
        end_angle: End angle of the slice
        outer_radius: Outer radius of the sector
        inner_radius: Inner radius of the sector, None or 0 for a pie slice
        outer_corner_radius: Radius rounding the two outer corners
        inner_corner_radius: Radius rounding the two inner corners, requires inner_radius
        pad_angle: Angle removed from the slice, half of it at each end
        center: Center of the sector. None means origin.
    """

    start_angle: float
    end_angle: float
    outer_radius: float
    inner_radius: Optional[float] = None
    outer_corner_radius: Optional[float] = None
    inner_corner_radius: Optional[float] = None
    pad_angle: Optional[float] = None
    center: Optional[MoPoint] = None

    @property
    def origin(self) -> MoPoint:
        """The center, defaulting to the origin."""
        return self.center if self.center is not None else ORIGIN

    @property
    def angle_span(self) -> float:
        """Unpadded angular width in degrees."""
        return abs(self.end_angle - self.start_angle)

    def validate(self) -> None:
        """Check the radii.

        Raises:
            InvalidArgumentError: negative radius, inner_corner_radius without
                inner_radius, or inner_radius greater than outer_radius
        """
        for name in ("outer_radius", "inner_radius", "outer_corner_radius", "inner_corner_radius"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidArgumentError(f"negative {name}: {value}", value)
        if not self.inner_radius and self.inner_corner_radius:
            raise InvalidArgumentError("inner_corner_radius requires inner_radius.", self.inner_corner_radius)
        if self.inner_radius is not None and self.inner_radius > self.outer_radius:
            raise InvalidArgumentError(
                f"inner_radius ({self.inner_radius}) is greater than outer_radius ({self.outer_radius})",
                self.inner_radius,
            )

    def padded_angles(self) -> Tuple[float, float]:
        """Start and end angle in ascending order, each inset by half the pad angle.

        The pad is limited to the span, so a huge pad collapses the slice onto its
        middle angle instead of turning it inside out.
        """
        start, end = sorted((self.start_angle, self.end_angle))
        half_pad = min(max(self.pad_angle or 0.0, 0.0), end - start) / 2
        return start + half_pad, end - half_pad

    def to_dict(self) -> dict:
        """Convert the parameters to a dictionary for serialization."""
        return {
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "outer_radius": self.outer_radius,
            "inner_radius": self.inner_radius,
            "outer_corner_radius": self.outer_corner_radius,
            "inner_corner_radius": self.inner_corner_radius,
            "pad_angle": self.pad_angle,
            "center": self.center.to_dict() if self.center is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SectorParams:
        """Create SectorParams from a dictionary."""
        center = data.get("center")
        return cls(
            start_angle=data["start_angle"],
            end_angle=data["end_angle"],
            outer_radius=data["outer_radius"],
            inner_radius=data.get("inner_radius"),
            outer_corner_radius=data.get("outer_corner_radius"),
            inner_corner_radius=data.get("inner_corner_radius"),
            pad_angle=data.get("pad_angle"),
            center=MoPoint.from_dict(center) if center is not None else None,
        )


###############################################################################
# SectorVariant
###############################################################################


class SectorVariant(Enum):
    """The five ways a sector is drawn, chosen by which parameters are set."""

    FULL = auto()  # circle or annulus
    SLICE = auto()  # pie slice with sharp corners
    ROUNDED_SLICE = auto()  # pie slice with rounded outer corners
    ANNULAR = auto()  # ring segment with sharp corners
    ROUNDED_ANNULAR = auto()  # ring segment with rounded corners

    @classmethod
    def of(cls, params: SectorParams) -> SectorVariant:
        """Select the variant, first match wins. A radius of 0 counts as not set."""
        if params.angle_span > 360 - SHAPE_EPSILON:
            return cls.FULL
        if not params.inner_radius:
            return cls.ROUNDED_SLICE if params.outer_corner_radius else cls.SLICE
        if params.outer_corner_radius or params.inner_corner_radius:
            return cls.ROUNDED_ANNULAR
        return cls.ANNULAR


###############################################################################
# MoSector
###############################################################################


class MoSector(MoShape):
    """
    A circular sector: full circle, annulus, pie slice or ring segment.

    Example:
        path = MoPath(3)
        MoSector(start_angle=0, end_angle=90, outer_radius=100, inner_radius=60).draw(path)
        path.to_string()
    """

    def __init__(self, params: Optional[SectorParams] = None, **kwargs):
        """
        Create a sector either from _params_ or from SectorParams keyword arguments.

        Args:
            params (Optional[SectorParams], optional): the parameters. Defaults to None.
            **kwargs: fields of SectorParams if _params_ is None
        """
        if params is None:
            params = SectorParams(**kwargs)
        elif kwargs:
            raise TypeError("pass either params or keyword arguments, not both")
        self.params = params

    @property
    def variant(self) -> SectorVariant:
        """The variant draw() will use."""
        return SectorVariant.of(self.params)

    def draw(self, path: PathContext) -> None:
        """Append one closed subpath (two for an annulus) describing the sector.

        Raises:
            InvalidArgumentError: see SectorParams.validate(), raised before any
                command is appended
        """
        self.params.validate()
        variant = self.variant
        logger.debug("drawing sector %s as %s", self.params, variant.name)

        if variant is SectorVariant.FULL:
            self._draw_full(path)
        elif variant is SectorVariant.SLICE:
            self._draw_slice(path)
        elif variant is SectorVariant.ROUNDED_SLICE:
            self._draw_rounded_slice(path)
        elif variant is SectorVariant.ANNULAR:
            self._draw_annular(path)
        else:
            self._draw_rounded_annular(path)
        path.close_path()

    ###########################################################################
    # Helpers
    ###########################################################################

    @staticmethod
    def rounding_angle(corner_radius: float, radius: float) -> float:
        """Angular width in degrees taken by a fillet of _corner_radius_ on a circle of _radius_."""
        if not corner_radius or not radius:
            return 0.0
        return 360.0 * (corner_radius / (2 * math.pi * radius))

    @staticmethod
    def fit_corner_radius(corner_radius: float, radius: float, span: float) -> float:
        """Shrink _corner_radius_ so the two fillets on a circle of _radius_ fit into _span_ degrees."""
        if corner_radius and radius and 360.0 * (corner_radius / (math.pi * radius)) > span:
            fitted = span / 360.0 * radius * math.pi
            logger.debug("corner radius %s shrunk to %s to fit %s degrees", corner_radius, fitted, span)
            return fitted
        return corner_radius

    ###########################################################################
    # Variants
    ###########################################################################

    def _draw_full(self, path: PathContext) -> None:
        params = self.params
        center = params.origin
        path.move_to(center.x - params.outer_radius, center.y)
        path.circle(params.outer_radius * 2, True)
        if params.inner_radius and params.inner_radius > SHAPE_EPSILON:
            # opposite winding cuts the hole (even-odd)
            path.move_to(center.x - params.inner_radius, center.y)
            path.circle(params.inner_radius * 2, False)

    def _draw_slice(self, path: PathContext) -> None:
        params = self.params
        center = params.origin
        radius = params.outer_radius
        start, end = params.padded_angles()

        start_point = GeomMath.point_on_arc(center, radius, start)
        end_point = GeomMath.point_on_arc(center, radius, end)
        path.move_to(center.x, center.y)
        path.line_to(start_point.x, start_point.y)
        path.arc_raw(radius, radius, 0, end - start > 180, True, end_point.x, end_point.y)

    def _draw_rounded_slice(self, path: PathContext) -> None:
        params = self.params
        center = params.origin
        radius = params.outer_radius
        start, end = params.padded_angles()

        corner = min(radius / 2, params.outer_corner_radius)
        corner = self.fit_corner_radius(corner, radius, end - start)
        rounding = self.rounding_angle(corner, radius)

        outer_start = GeomMath.point_on_arc(center, radius - corner, start)
        arc_start = GeomMath.point_on_arc(center, radius, start + rounding)
        arc_end = GeomMath.point_on_arc(center, radius, end - rounding)
        outer_end = GeomMath.point_on_arc(center, radius - corner, end)

        path.move_to(center.x, center.y)
        path.line_to(outer_start.x, outer_start.y)
        path.arc_raw(corner, corner, 0, False, True, arc_start.x, arc_start.y)
        path.arc_raw(radius, radius, 0, end - start - 2 * rounding > 180, True, arc_end.x, arc_end.y)
        path.arc_raw(corner, corner, 0, False, True, outer_end.x, outer_end.y)

    def _draw_annular(self, path: PathContext) -> None:
        params = self.params
        center = params.origin
        outer = params.outer_radius
        inner = params.inner_radius
        start, end = params.padded_angles()
        large_arc = end - start > 180

        inner_start = GeomMath.point_on_arc(center, inner, start)
        outer_start = GeomMath.point_on_arc(center, outer, start)
        outer_end = GeomMath.point_on_arc(center, outer, end)
        inner_end = GeomMath.point_on_arc(center, inner, end)

        path.move_to(inner_start.x, inner_start.y)
        path.line_to(outer_start.x, outer_start.y)
        path.arc_raw(outer, outer, 0, large_arc, True, outer_end.x, outer_end.y)
        path.line_to(inner_end.x, inner_end.y)
        path.arc_raw(inner, inner, 0, large_arc, False, inner_start.x, inner_start.y)

    def _draw_rounded_annular(self, path: PathContext) -> None:
        # pylint: disable=too-many-locals
        params = self.params
        center = params.origin
        outer = params.outer_radius
        inner = params.inner_radius
        start, end = params.padded_angles()
        span = end - start
        half_gap = (outer - inner) / 2

        outer_corner = min(half_gap, params.outer_corner_radius) if params.outer_corner_radius else 0.0
        inner_corner = min(half_gap, params.inner_corner_radius) if params.inner_corner_radius else 0.0
        outer_corner = self.fit_corner_radius(outer_corner, outer, span)
        inner_corner = self.fit_corner_radius(inner_corner, inner, span)

        outer_rounding = self.rounding_angle(outer_corner, outer)
        inner_rounding = self.rounding_angle(inner_corner, inner)

        # corner points, already moved off the rings by the corner radius
        outer_start = GeomMath.point_on_arc(center, outer - outer_corner, start)
        outer_end = GeomMath.point_on_arc(center, outer - outer_corner, end)
        inner_start = GeomMath.point_on_arc(center, inner + inner_corner, start)
        inner_end = GeomMath.point_on_arc(center, inner + inner_corner, end)

        # where the fillets meet the rings
        outer_arc_start = GeomMath.point_on_arc(center, outer, start + outer_rounding)
        outer_arc_end = GeomMath.point_on_arc(center, outer, end - outer_rounding)
        inner_arc_start = GeomMath.point_on_arc(center, inner, start + inner_rounding)
        inner_arc_end = GeomMath.point_on_arc(center, inner, end - inner_rounding)

        path.move_to(outer_start.x, outer_start.y)
        if outer_corner:
            path.arc_raw(outer_corner, outer_corner, 0, False, True, outer_arc_start.x, outer_arc_start.y)
        path.arc_raw(outer, outer, 0, span - 2 * outer_rounding > 180, True, outer_arc_end.x, outer_arc_end.y)
        if outer_corner:
            path.arc_raw(outer_corner, outer_corner, 0, False, True, outer_end.x, outer_end.y)
        path.line_to(inner_end.x, inner_end.y)
        if inner_corner:
            path.arc_raw(inner_corner, inner_corner, 0, False, True, inner_arc_end.x, inner_arc_end.y)
        path.arc_raw(inner, inner, 0, span - 2 * inner_rounding > 180, False, inner_arc_start.x, inner_arc_start.y)
        if inner_corner:
            path.arc_raw(inner_corner, inner_corner, 0, False, True, inner_start.x, inner_start.y)
