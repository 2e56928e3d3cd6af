from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

import numpy as np

from curvy.geometry.errors import InvariantViolation
from curvy.geometry.scalar import Real, Scalar, atan2, finite, pi, two_pi

if TYPE_CHECKING:
    from curvy.geometry.primitives import Delta


class Direction(Enum):
    NONE = auto()
    CLOCKWISE = auto()
    COUNTERCLOCKWISE = auto()


def wrap_radians(value: Real) -> Scalar:
    """Normalise any finite value into [0, 2pi)."""

    tau = two_pi()
    out = finite(np.mod(finite(value), tau))
    # np.mod of a tiny negative value rounds up to tau itself.
    if out >= tau:
        out = finite(0.0)
    return out


@dataclass(frozen=True, eq=False)
class Angle:
    """Rotation in [0, 2pi).

    Two angles only combine through :class:`AngleDiff`; ``a - b`` is the
    shortest signed rotation from ``b`` to ``a``.
    """

    radians: Scalar

    def __post_init__(self) -> None:
        value = finite(self.radians)
        if not (0.0 <= value < two_pi()):
            raise InvariantViolation(f"Angle must be within [0, 2pi), got {value!r}")
        object.__setattr__(self, "radians", value)

    @classmethod
    def wrap(cls, value: Real) -> "Angle":
        return cls(wrap_radians(value))

    @classmethod
    def from_delta(cls, delta: "Delta") -> "Angle":
        return cls.wrap(atan2(delta.dy, delta.dx))

    @classmethod
    def from_diff(cls, diff: "AngleDiff") -> "Angle":
        return cls.wrap(diff.radians)

    @classmethod
    def from_degrees(cls, degrees: Real) -> "Angle":
        return cls.wrap(math.radians(float(degrees)))

    def degrees(self) -> float:
        return math.degrees(float(self.radians))

    def __float__(self) -> float:
        return float(self.radians)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        tau = two_pi()
        return bool(np.mod(self.radians, tau) == np.mod(other.radians, tau))

    def __hash__(self) -> int:
        return hash(float(np.mod(self.radians, two_pi())))

    def __neg__(self) -> "Angle":
        return Angle.wrap(two_pi() - self.radians)

    def __add__(self, diff: "AngleDiff") -> "Angle":
        if not isinstance(diff, AngleDiff):
            return NotImplemented
        return Angle.wrap(self.radians + diff.radians)

    def __sub__(self, other: Union["Angle", "AngleDiff"]) -> Union["AngleDiff", "Angle"]:
        if isinstance(other, AngleDiff):
            return Angle.wrap(self.radians - other.radians)
        if not isinstance(other, Angle):
            return NotImplemented
        half = pi()
        diff = finite(np.mod(self.radians - other.radians + half, two_pi())) - half
        # Keep the result in (-pi, pi]; an exact half turn is reported as +pi.
        if diff <= -half:
            diff = half
        return AngleDiff(diff)

    def direction(self, other: "Angle") -> Direction:
        """Direction of the shortest rotation from this angle to *other*.

        An exact half turn has no preferred direction and gives
        ``Direction.NONE``. Otherwise swapping the two angles flips the result,
        with one exception: equal angles do not rotate at all and also give
        ``Direction.NONE``.
        """

        diff = (other - self).radians
        if diff == 0.0 or abs(diff) == pi():
            return Direction.NONE
        if diff > 0.0:
            return Direction.COUNTERCLOCKWISE
        return Direction.CLOCKWISE

    def between(self, start: "Angle", stop: "Angle") -> bool:
        """True if rotating from *start* to self turns the same way as from *start* to *stop*."""

        if self == start or self == stop:
            return True
        return start.direction(self) == start.direction(stop)

    def __str__(self) -> str:
        return f"{float(self.radians)} ({self.degrees()}deg)"


@dataclass(frozen=True)
class AngleDiff:
    """Signed rotation; kept within (-2pi, 2pi) by the arithmetic that produces it."""

    radians: Scalar

    def __post_init__(self) -> None:
        object.__setattr__(self, "radians", finite(self.radians))

    @classmethod
    def from_angle(cls, angle: Angle) -> "AngleDiff":
        return cls(angle.radians)

    def degrees(self) -> float:
        return math.degrees(float(self.radians))

    def __float__(self) -> float:
        return float(self.radians)

    def __neg__(self) -> "AngleDiff":
        return AngleDiff(-self.radians)

    def __add__(self, other: "AngleDiff") -> "AngleDiff":
        if not isinstance(other, AngleDiff):
            return NotImplemented
        return AngleDiff(self.radians + other.radians)

    def __sub__(self, other: "AngleDiff") -> "AngleDiff":
        if not isinstance(other, AngleDiff):
            return NotImplemented
        return AngleDiff(self.radians - other.radians)

    def __abs__(self) -> Scalar:
        return abs(self.radians)


__all__ = ["Angle", "AngleDiff", "Direction", "wrap_radians"]
