"""Path builder emitting SVG path data through a Canvas-like drawing vocabulary."""

from __future__ import annotations

from decimal import ROUND_DOWN, Context, Decimal
from typing import Callable, List, NamedTuple, Optional, Protocol, Tuple, Union

from mosaico.common import COMMAND_INFO, PATH_EPSILON, MoPathCmds
from mosaico.geom import ArcGeometry, ArcStep, LineStep, MoPoint

Number = Union[int, float]
NumberFormatter = Callable[[Number], str]

_MAX_FLOAT_DIGITS = 310

###############################################################################
# Number formatting
###############################################################################


def format_number(value: Number) -> str:
    """
    Format a number for path data.

    Integral values are written without fractional part ("10" instead of "10.0"),
    negative zero is written as "0" and all other values use the shortest
    representation that round-trips.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def truncating_formatter(precision: int) -> NumberFormatter:
    """
    Return a formatter that truncates toward zero at _precision_ fractional digits.

    Truncation is not rounding: 92.68474 with precision 3 becomes 92.684 and
    -1.23456 becomes -1.234. The shortest decimal representation of the value is
    truncated, not the binary float, so 0.29 with precision 2 stays 0.29.
    """
    if precision < 0:
        raise ValueError(f"precision must be a non-negative integer, got {precision}")
    quantum = Decimal(1).scaleb(-precision)
    # enough digits for the integral part of any finite float
    context = Context(prec=_MAX_FLOAT_DIGITS + precision)

    def _format(value: Number) -> str:
        if isinstance(value, bool):
            return format_number(value)
        truncated = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_DOWN, context=context)
        return format_number(float(truncated))

    return _format


###############################################################################
# PathContext
###############################################################################


class PathContext(Protocol):
    """Drawing vocabulary consumed by shapes.

    Shapes only depend on this protocol, any object providing these
    operations (e.g. MoPath) can be drawn into.
    """

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""

    def line_to(self, x: float, y: float) -> None:
        """Straight line to (x, y)."""

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        """Quadratic Bezier curve to (x, y)."""

    def bezier_curve_to(self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float) -> None:
        """Cubic Bezier curve to (x, y)."""

    def arc_to(self, x1: float, y1: float, x2: float, y2: float, radius: float) -> None:
        """Rounded corner at (x1, y1) heading to (x2, y2)."""

    def arc(
        self, x: float, y: float, radius: float, start_angle: float, end_angle: float, anticlockwise: bool = False
    ) -> None:
        """Circular arc centered at (x, y)."""

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        """Closed rectangle subpath."""

    def arc_raw(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        radius_x: float,
        radius_y: float,
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool,
        x: float,
        y: float,
        absolute: bool = True,
    ) -> None:
        """Elliptical arc command written as given."""

    def circle(self, diameter: float, clockwise: bool = True) -> None:
        """Full circle starting and ending at the current point."""

    def close_path(self) -> None:
        """Close the current subpath."""

    def to_string(self) -> str:
        """The path data written so far."""


###############################################################################
# MoPath
###############################################################################


class MoPathCommand(NamedTuple):
    """One entry of the command log: command letter and its numeric arguments."""

    cmd: MoPathCmds
    args: Tuple[Number, ...]


class MoPath:
    """
    Stateful accumulator of path commands.

    The path keeps track of the current point (end of the last drawing command)
    and of the start point of the current subpath (used by close_path).
    Commands are only ever appended; str(path) renders the SVG path data.

    Attributes:
        precision: number of fractional digits kept when writing numbers
            (truncated toward zero) or None for full precision
    """

    def __init__(self, precision: Optional[int] = None):
        """
        Initialize an empty path.

        Args:
            precision (Optional[int], optional): digits to keep when writing
                coordinates. Defaults to None (no truncation).
        """
        self.precision = precision
        self._format: NumberFormatter = format_number if precision is None else truncating_formatter(precision)
        self._current: Optional[MoPoint] = None
        self._subpath_start: Optional[MoPoint] = None
        self._commands: List[MoPathCommand] = []
        self._chunks: List[str] = []

    ###########################################################################
    # State
    ###########################################################################

    @property
    def current_point(self) -> Optional[MoPoint]:
        """End point of the last drawing command, None before the first one."""
        return self._current

    @property
    def subpath_start(self) -> Optional[MoPoint]:
        """Point close_path returns to, None before the first subpath."""
        return self._subpath_start

    @property
    def commands(self) -> Tuple[MoPathCommand, ...]:
        """Read-only snapshot of the command log."""
        return tuple(self._commands)

    def _append(self, cmd: MoPathCmds, *args: Number) -> None:
        if len(args) != COMMAND_INFO[cmd].num_args:
            raise ValueError(f"command '{cmd}' takes {COMMAND_INFO[cmd].num_args} arguments, got {len(args)}")
        self._commands.append(MoPathCommand(cmd, args))
        self._chunks.append(cmd + ",".join(self._format(arg) for arg in args))

    def _append_steps(self, steps: List[Union[LineStep, ArcStep]]) -> None:
        for step in steps:
            if isinstance(step, LineStep):
                self.line_to(step.end.x, step.end.y)
            else:
                self._append("A", step.radius, step.radius, 0, step.large_arc, step.sweep, step.end.x, step.end.y)
                self._current = step.end

    ###########################################################################
    # Drawing operations
    ###########################################################################

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y) without drawing."""
        self._current = MoPoint(x, y)
        self._subpath_start = self._current
        self._append("M", x, y)

    def line_to(self, x: float, y: float) -> None:
        """
        Draw a straight line from the current point to (x, y).

        Without a current point the line command is still emitted and (x, y)
        becomes the start of the subpath.
        """
        if self._current is None:
            self._subpath_start = MoPoint(x, y)
        self._current = MoPoint(x, y)
        self._append("L", x, y)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        """Quadratic Bezier curve to (x, y) using (cpx, cpy) as control point."""
        self._current = MoPoint(x, y)
        self._append("Q", cpx, cpy, x, y)

    def bezier_curve_to(self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float) -> None:
        """Cubic Bezier curve to (x, y) using (cp1x, cp1y) and (cp2x, cp2y) as control points."""
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self._current = MoPoint(x, y)
        self._append("C", cp1x, cp1y, cp2x, cp2y, x, y)

    def arc_to(self, x1: float, y1: float, x2: float, y2: float, radius: float) -> None:
        """
        Round the corner at (x1, y1) with an arc of the given _radius_.

        The arc is tangent to the line current point -> (x1, y1) and to the line
        (x1, y1) -> (x2, y2). A straight line to the first tangent point is drawn
        first if the current point is not already there.

        Without a current point this just moves to (x1, y1). If the current point
        coincides with (x1, y1) nothing is drawn. If both lines are (nearly)
        collinear or the radius is 0, a straight line to (x1, y1) is drawn.

        Args:
            x1 (float): x of the corner point
            y1 (float): y of the corner point
            x2 (float): x of the point the second tangent heads to
            y2 (float): y of the point the second tangent heads to
            radius (float): radius of the arc

        Raises:
            InvalidArgumentError: negative radius
        """
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        ArcGeometry.check_radius(radius)
        if self._current is None:
            self.move_to(x1, y1)
            return
        steps = ArcGeometry.arc_to_steps(self._current, MoPoint(x1, y1), MoPoint(x2, y2), radius)
        self._append_steps(steps)

    def arc(
        self, x: float, y: float, radius: float, start_angle: float, end_angle: float, anticlockwise: bool = False
    ) -> None:
        """
        Circular arc centered at (x, y) from _start_angle_ to _end_angle_ (radians).

        Without a current point the path moves to the start of the arc, otherwise a
        line to the start of the arc is drawn if the current point differs from it.
        A full turn is written as two half circles.

        Args:
            x (float): x of the center
            y (float): y of the center
            radius (float): radius of the arc
            start_angle (float): start angle in radians
            end_angle (float): end angle in radians
            anticlockwise (bool, optional): draw anticlockwise. Defaults to False.

        Raises:
            InvalidArgumentError: negative radius
        """
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        ArcGeometry.check_radius(radius)
        center = MoPoint(x, y)
        start = ArcGeometry.point_at_angle(center, radius, start_angle)

        if self._current is None:
            self.move_to(start.x, start.y)
        elif not self._current.approx_equal(start, PATH_EPSILON):
            self.line_to(start.x, start.y)

        self._append_steps(ArcGeometry.circular_arc_steps(center, radius, start_angle, end_angle, anticlockwise))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        """Closed rectangle subpath with its top-left corner at (x, y)."""
        self.move_to(x, y)
        self._append("h", w)
        self._append("v", h)
        self._append("h", -w)
        self.close_path()

    def arc_raw(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        radius_x: float,
        radius_y: float,
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool,
        x: float,
        y: float,
        absolute: bool = True,
    ) -> None:
        """
        Append an elliptical arc command exactly as given.

        No geometric validation is done. Used by shapes that already computed
        their tangent points.

        Args:
            radius_x (float): x radius
            radius_y (float): y radius
            x_axis_rotation (float): rotation of the ellipse in degrees
            large_arc (bool): large-arc flag
            sweep (bool): sweep flag (True = clockwise on screen)
            x (float): x of the end point (offset if not _absolute_)
            y (float): y of the end point (offset if not _absolute_)
            absolute (bool, optional): absolute ("A") or relative ("a"). Defaults to True.
        """
        if absolute:
            self._current = MoPoint(x, y)
            self._append("A", radius_x, radius_y, x_axis_rotation, bool(large_arc), bool(sweep), x, y)
        else:
            base = self._current if self._current is not None else MoPoint(0.0, 0.0)
            self._current = MoPoint(base.x + x, base.y + y)
            self._append("a", radius_x, radius_y, x_axis_rotation, bool(large_arc), bool(sweep), x, y)

    def circle(self, diameter: float, clockwise: bool = True) -> None:
        """
        Full circle drawn as two relative half-turn arcs.

        The current point must be the leftmost point of the circle, i.e. the circle
        is centered at current point + (diameter / 2, 0). Without a current point
        the arcs are relative to the origin. The current point is the same after
        the call.

        Args:
            diameter (float): diameter of the circle
            clockwise (bool, optional): winding on screen, draw two circles with
                opposite windings to cut a hole (even-odd). Defaults to True.
        """
        half = diameter / 2
        start = self._current
        self.arc_raw(half, half, 0, True, clockwise, diameter, 0, absolute=False)
        self.arc_raw(half, half, 0, True, clockwise, -diameter, 0, absolute=False)
        self._current = start if start is not None else MoPoint(0.0, 0.0)

    def close_path(self) -> None:
        """Close the current subpath, no-op without a current point."""
        if self._current is not None:
            self._current = self._subpath_start if self._subpath_start is not None else self._current
            self._append("Z")

    ###########################################################################
    # Output
    ###########################################################################

    def to_string(self) -> str:
        """Return the SVG path data."""
        return "".join(self._chunks)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"MoPath(precision={self.precision}, commands={len(self._commands)})"
