"""Numeric scales mapping data values to screen coordinates, with tick generation."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Tuple

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


###############################################################################
# TickParams / Tick
###############################################################################


@dataclass(frozen=True)
class TickParams:
    """Parameters for tick generation.

    Attributes:
        start: Force the first tick bound to this value. Defaults to the domain minimum.
        end: Force the last tick bound to this value. Defaults to the domain maximum.
        desired_count: The desired number of ticks.
        format: Function formatting a tick value.
    """

    start: Optional[float] = None
    end: Optional[float] = None
    desired_count: int = 10
    format: Callable[[float], str] = str

    def to_dict(self) -> dict:
        """Convert the parameters to a dictionary (the formatter is left out)."""
        return {"start": self.start, "end": self.end, "desired_count": self.desired_count}

    @classmethod
    def from_dict(cls, data: dict) -> TickParams:
        """Create TickParams from a dictionary."""
        return cls(
            start=data.get("start"),
            end=data.get("end"),
            desired_count=data.get("desired_count", 10),
        )


class Tick(NamedTuple):
    """A tick: its value and the formatted label."""

    value: float
    formatted_value: str


###############################################################################
# MoScale
###############################################################################


class MoScale(ABC):
    """Generic scale interface."""

    @abstractmethod
    def scale(self, value: float) -> float:
        """Map a domain value to the range."""

    @abstractmethod
    def invert(self, value: float) -> float:
        """Map a range value back to the domain, e.g. a mouse position."""

    @abstractmethod
    def ticks(self, tick_params: Optional[TickParams] = None) -> List[Tick]:
        """Return nicely rounded tick values covering the domain."""


class MoLinearScale(MoScale):
    """
    Linear mapping from a domain [d0, d1] onto a range [r0, r1].

    A degenerate domain (d0 == d1) maps everything to r0, a degenerate range
    inverts everything to d0.
    """

    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def scale(self, value: float) -> float:
        (d0, d1), (r0, r1) = self.domain, self.range
        if d1 == d0:
            return r0
        return r0 + (value - d0) * (r1 - r0) / (d1 - d0)

    def invert(self, value: float) -> float:
        (d0, d1), (r0, r1) = self.domain, self.range
        if r1 == r0:
            return d0
        return d0 + (value - r0) * (d1 - d0) / (r1 - r0)

    @staticmethod
    def tick_increment(start: float, stop: float, count: int) -> float:
        """
        Step between ticks using the 1-2-5 rule.

        Returns a positive step for steps >= 1, otherwise the negated inverse of the
        step (e.g. -10 for 0.1) so tick values can be computed without accumulating
        floating point errors.
        """
        step = (stop - start) / count
        power = math.floor(math.log10(step))
        error = step / math.pow(10, power)
        if error >= _E10:
            factor = 10
        elif error >= _E5:
            factor = 5
        elif error >= _E2:
            factor = 2
        else:
            factor = 1
        if power >= 0:
            return factor * math.pow(10, power)
        return -math.pow(10, -power) / factor

    def ticks(self, tick_params: Optional[TickParams] = None) -> List[Tick]:
        params = tick_params if tick_params is not None else TickParams()
        low = params.start if params.start is not None else min(self.domain)
        high = params.end if params.end is not None else max(self.domain)
        if low > high:
            low, high = high, low
        if params.desired_count <= 0:
            return []
        if low == high:
            return [Tick(low, params.format(low))]

        increment = self.tick_increment(low, high, params.desired_count)
        if increment > 0:
            first, last = math.ceil(low / increment), math.floor(high / increment)
            values = [i * increment for i in range(first, last + 1)]
        else:
            inverse = -increment
            first, last = math.ceil(low * inverse), math.floor(high * inverse)
            values = [i / inverse for i in range(first, last + 1)]
        return [Tick(value, params.format(value)) for value in values]
