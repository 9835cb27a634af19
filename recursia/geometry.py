"""Integer points, rectangles and displacement vectors in the plane."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Point:
    """A point in 2D space with integer coordinates."""

    x: int
    y: int

    def __add__(self, other: object) -> Point:
        if isinstance(other, Vector2D):
            return Point(self.x + other.dx, self.y + other.dy)
        return NotImplemented

    def __sub__(self, other: object):
        """Point - Point gives a Vector2D; Point - Vector2D gives a Point."""
        if isinstance(other, Point):
            return Vector2D(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2D):
            return self + (-other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{{ {self.x}, {self.y} }}"


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its upper-left corner and size.

    The top and left edges belong to the rectangle; the bottom and right
    edges do not.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __str__(self) -> str:
        return f"{{ {self.x}, {self.y}, {self.width}, {self.height} }}"


@dataclass(frozen=True)
class Vector2D:
    """A displacement in 2D space with integer components."""

    dx: int = 0
    dy: int = 0

    def __add__(self, other: object):
        if isinstance(other, Vector2D):
            return Vector2D(self.dx + other.dx, self.dy + other.dy)
        if isinstance(other, Point):
            return Point(other.x + self.dx, other.y + self.dy)
        return NotImplemented

    def __radd__(self, other: object):
        if isinstance(other, (Point, Vector2D)):
            return self + other
        # Lets sum() start from its default of 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Vector2D:
        if isinstance(other, Vector2D):
            return self + (-other)
        return NotImplemented

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.dx, -self.dy)

    def __mul__(self, scalar: object) -> Vector2D:
        """Scale each component, truncating the result toward zero."""
        if isinstance(scalar, Real) and not isinstance(scalar, bool):
            return Vector2D(int(self.dx * scalar), int(self.dy * scalar))
        return NotImplemented

    def __rmul__(self, scalar: object) -> Vector2D:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vector2D:
        """Divide by multiplying with the reciprocal, then truncating."""
        if isinstance(scalar, Real) and not isinstance(scalar, bool):
            return self * (1 / scalar)
        return NotImplemented

    def __str__(self) -> str:
        return f"{{ {self.dx}, {self.dy} }}"