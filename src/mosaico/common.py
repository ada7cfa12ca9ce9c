"""Central module containing path command definitions, tolerances and exceptions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Literal

###############################################################################
# Types
###############################################################################


MoPathCmds = Literal[  # Type-Definition for path commands emitted by MoPath
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    # Quadratic Bezier To (4) - one control point and an endpoint (x,y)
    "Q",
    # Cubic Bezier To (6) - two control points and an endpoint (x,y)
    "C",
    # Arc (7) - elliptical arc (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
    "A",
    # Relative arc (7) - like "A" but the endpoint is an offset to the current point
    "a",
    # Relative horizontal line (1)
    "h",
    # Relative vertical line (1)
    "v",
    # ClosePath (0) - close subpath by drawing a line from the current point to start point
    "Z",
]


###############################################################################
# Consts
###############################################################################


TAU: float = 2.0 * math.pi

# Tolerance used by the path builder (arc_to / arc)
PATH_EPSILON: float = 1e-6

# Tolerance used by shapes to detect full turns and vanishing radii
SHAPE_EPSILON: float = 1e-12

DEGREE_TO_RADIAN: float = math.pi / 180.0


@dataclass(frozen=True)
class PathCommandInfo:
    """Metadata for path commands.

    Attributes:
        num_args: Number of numeric arguments the command takes
        is_relative: Whether the arguments are offsets to the current point
        is_drawing: Whether this command draws (vs. move)
    """

    num_args: int
    is_relative: bool = False
    is_drawing: bool = True


# Command registry with metadata
COMMAND_INFO: Dict[str, PathCommandInfo] = {
    "M": PathCommandInfo(2, False, False),
    "L": PathCommandInfo(2),
    "Q": PathCommandInfo(4),
    "C": PathCommandInfo(6),
    "A": PathCommandInfo(7),
    "a": PathCommandInfo(7, True),
    "h": PathCommandInfo(1, True),
    "v": PathCommandInfo(1, True),
    "Z": PathCommandInfo(0),
}


###############################################################################
# Exceptions
###############################################################################


class MosaicoError(Exception):
    """Base exception for path and shape construction errors."""


class InvalidArgumentError(MosaicoError, ValueError):
    """Raised when a drawing operation receives an argument it cannot accept.

    Attributes:
        value: the offending argument value (e.g. the negative radius)
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value
