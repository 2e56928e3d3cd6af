from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from curvy.geometry.angle import Angle, AngleDiff
from curvy.geometry.scalar import Real, Scalar, cos, finite, hypot, sin
from curvy.geometry.tolerance import EPS_WELD

Rotation = Union[Angle, AngleDiff]


@dataclass(frozen=True)
class Delta:
    """2D displacement."""

    dx: Scalar
    dy: Scalar

    def __post_init__(self) -> None:
        object.__setattr__(self, "dx", finite(self.dx))
        object.__setattr__(self, "dy", finite(self.dy))

    @classmethod
    def magnitude_angle(cls, magnitude: Real, angle: Rotation) -> "Delta":
        """Polar construction: *magnitude* units along *angle*."""
        m = finite(magnitude)
        return cls(m * cos(angle.radians), m * sin(angle.radians))

    def __add__(self, other: "Delta") -> "Delta":
        if not isinstance(other, Delta):
            return NotImplemented
        return Delta(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: "Delta") -> "Delta":
        if not isinstance(other, Delta):
            return NotImplemented
        return Delta(self.dx - other.dx, self.dy - other.dy)

    def __mul__(self, scalar: Real) -> "Delta":
        s = finite(scalar)
        return Delta(self.dx * s, self.dy * s)

    def __rmul__(self, scalar: Real) -> "Delta":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Real) -> "Delta":
        s = finite(scalar)
        return Delta(self.dx / s, self.dy / s)

    def __neg__(self) -> "Delta":
        return Delta(-self.dx, -self.dy)

    def magnitude(self) -> Scalar:
        return hypot(self.dx, self.dy)

    def angle(self) -> Angle:
        return Angle.from_delta(self)

    def arc_length(self) -> Scalar:
        # Distance travelled from angle 0 along a circle through this offset.
        return self.magnitude() * self.angle().radians

    def rotate(self, angle: Rotation) -> "Delta":
        s = sin(angle.radians)
        c = cos(angle.radians)
        return Delta(self.dx * c - self.dy * s, self.dx * s + self.dy * c)

    def isclose(self, other: "Delta", eps: float = EPS_WELD) -> bool:
        return abs(float(self.dx) - float(other.dx)) <= eps and abs(float(self.dy) - float(other.dy)) <= eps

    def to_tuple(self) -> Tuple[float, float]:
        return (float(self.dx), float(self.dy))

    def __str__(self) -> str:
        return f"{float(self.dx)},{float(self.dy)}"


@dataclass(frozen=True)
class Point:
    """2D position. ``Point - Point`` is a :class:`Delta`."""

    x: Scalar
    y: Scalar

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", finite(self.x))
        object.__setattr__(self, "y", finite(self.y))

    @staticmethod
    def origin() -> "Point":
        return Point(0.0, 0.0)

    def __add__(self, delta: Delta) -> "Point":
        if not isinstance(delta, Delta):
            return NotImplemented
        return Point(self.x + delta.dx, self.y + delta.dy)

    def __sub__(self, other: Union["Point", Delta]) -> Union[Delta, "Point"]:
        if isinstance(other, Point):
            return Delta(self.x - other.x, self.y - other.y)
        if isinstance(other, Delta):
            return Point(self.x - other.dx, self.y - other.dy)
        return NotImplemented

    def midpoint(self, other: "Point") -> "Point":
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)

    def distance(self, other: "Point") -> Scalar:
        return (self - other).magnitude()

    def rotate_about(self, pivot: "Point", angle: Rotation) -> "Point":
        return pivot + (self - pivot).rotate(angle)

    def isclose(self, other: "Point", eps: float = EPS_WELD) -> bool:
        return abs(float(self.x) - float(other.x)) <= eps and abs(float(self.y) - float(other.y)) <= eps

    def to_tuple(self) -> Tuple[float, float]:
        return (float(self.x), float(self.y))

    def __str__(self) -> str:
        return f"{float(self.x)},{float(self.y)}"


__all__ = ["Delta", "Point", "Rotation"]
