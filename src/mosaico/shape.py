"""Base class for shapes that draw themselves into a path."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from mosaico.path import MoPath, PathContext


class MoShape(ABC):
    """A drawable shape.

    Shapes capture their parameters on creation. draw() may be called any number
    of times; each call only appends commands to the given path.
    """

    @abstractmethod
    def draw(self, path: PathContext) -> None:
        """Append the commands describing this shape to _path_."""

    def to_path_string(self, precision: Optional[int] = None) -> str:
        """Draw into a fresh MoPath and return its path data.

        Args:
            precision (Optional[int], optional): digits kept per number. Defaults to None.

        Returns:
            str: the SVG path data of this shape
        """
        path = MoPath(precision)
        self.draw(path)
        return path.to_string()
