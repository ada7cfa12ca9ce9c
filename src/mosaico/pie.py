"""Pie layout: turn a sequence of values into start and end angles for sectors."""

from __future__ import annotations

import functools
from typing import Callable, List, NamedTuple, Optional, Sequence

SortFunction = Callable[[float, float], int]


class PieArc(NamedTuple):
    """Angles assigned to one datum, in degrees.

    Attributes:
        index: Position of the datum in the input data
        value: The datum
        start_angle: Start angle of the arc
        end_angle: End angle of the arc
        pad_angle: Pad angle to pass on to MoSector
    """

    index: int
    value: float
    start_angle: float
    end_angle: float
    pad_angle: float = 0.0


class MoPie:
    """
    Pie layout.

    Example:
        arcs = MoPie().sort(lambda a, b: b - a)([1, 2, 3])
        sectors = [MoSector(start_angle=a.start_angle, end_angle=a.end_angle, outer_radius=100) for a in arcs]
    """

    def __init__(self, start_angle: float = 0.0, end_angle: float = 360.0, pad_angle: float = 0.0):
        """
        Args:
            start_angle (float, optional): angle of the first arc. Defaults to 0.0.
            end_angle (float, optional): angle where the last arc ends. Defaults to 360.0.
            pad_angle (float, optional): pad angle reported on each arc. Defaults to 0.0.
        """
        self.start_angle = start_angle
        self.end_angle = end_angle
        self.pad_angle = pad_angle
        self._sort: Optional[SortFunction] = None

    def sort(self, sort: Optional[SortFunction]) -> MoPie:
        """
        Set the order in which angles are assigned.

        Args:
            sort (Optional[SortFunction]): comparator (a, b) -> negative, zero or
                positive, like a cmp function. None keeps the data order.

        Returns:
            MoPie: this layout, for chaining
        """
        self._sort = sort
        return self

    def __call__(self, data: Sequence[float]) -> List[PieArc]:
        """
        Lay out _data_.

        Negative values are treated as 0. If all values are 0 each arc is empty.

        Returns:
            List[PieArc]: one arc per datum, in data order
        """
        values = [max(float(value), 0.0) for value in data]
        order = list(range(len(values)))
        if self._sort is not None:
            compare = self._sort
            order.sort(key=functools.cmp_to_key(lambda i, j: compare(data[i], data[j])))

        total = sum(values)
        span = self.end_angle - self.start_angle
        scale = span / total if total else 0.0

        arcs: List[Optional[PieArc]] = [None] * len(values)
        angle = self.start_angle
        for index in order:
            end = angle + values[index] * scale
            arcs[index] = PieArc(index, data[index], angle, end, self.pad_angle)
            angle = end
        return [arc for arc in arcs if arc is not None]
