"""Shape value objects used by the object exercises and JSON helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Rectangle with width, height and an area accessor.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height, r.get_area()
        (10, 20, 200)
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle described by its radius.

    Example:
        >>> Circle(10).get_diameter()
        20
    """

    radius: float

    def get_diameter(self) -> float:
        return 2 * self.radius

    def get_circumference(self) -> float:
        return 2 * math.pi * self.radius

    def get_area(self) -> float:
        return math.pi * self.radius**2


__all__ = ["Circle", "Rectangle"]
