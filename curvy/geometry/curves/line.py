from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from curvy.geometry.angle import Angle, AngleDiff
from curvy.geometry.curves.intersections import line_line_intersection
from curvy.geometry.errors import CurvyError
from curvy.geometry.primitives import Delta, Point
from curvy.geometry.scalar import Real, Scalar, finite, frac_pi_2, pi


@dataclass(frozen=True)
class Line:
    """Bounded segment of an infinite line.

    The infinite line is fixed by its direction ``angle`` and the signed
    ``distance_from_origin`` of its foot point, measured to the left of the
    direction. ``begin``/``end`` are positions along the direction, relative to
    the foot point. Offsetting only changes ``distance_from_origin``.

    A segment whose ``end`` has been clipped below ``begin`` is degenerate; it
    is only produced transiently while re-stitching offset segments.
    """

    angle: Angle
    distance_from_origin: Scalar
    begin: Scalar
    end: Scalar

    def __post_init__(self) -> None:
        object.__setattr__(self, "distance_from_origin", finite(self.distance_from_origin))
        object.__setattr__(self, "begin", finite(self.begin))
        object.__setattr__(self, "end", finite(self.end))

    @classmethod
    def new(cls, start: Point, stop: Point) -> "Line":
        if start == stop:
            raise CurvyError("Start, stop points are the same")
        angle = (stop - start).angle()
        back = AngleDiff(-angle.radians)
        local_start = (start - Point.origin()).rotate(back)
        local_stop = (stop - Point.origin()).rotate(back)

        begin = local_start.dx
        end = local_stop.dx
        distance = local_start.dy
        if begin > end:
            begin, end = end, begin
            distance = -distance
        return cls(angle=angle, distance_from_origin=distance, begin=begin, end=end)

    @classmethod
    def from_point_angle(cls, start: Point, angle: Angle, length: Real) -> "Line":
        return cls.new(start, start + Delta.magnitude_angle(length, angle))

    def normal_angle(self) -> Angle:
        return self.angle + AngleDiff(frac_pi_2())

    def point_nearest_origin(self) -> Point:
        return Point.origin() + Delta.magnitude_angle(self.distance_from_origin, self.normal_angle())

    def point_along(self, t: Real) -> Point:
        return self.point_nearest_origin() + Delta.magnitude_angle(t, self.angle)

    def apply(self, t: Real) -> Point:
        return self.point_along(t)

    def apply_bounded(self, t: Real) -> Optional[Point]:
        if t < self.begin or t > self.end:
            return None
        return self.point_along(t)

    def signed_distance(self, point: Point) -> Scalar:
        """Coordinate of *point* along the direction, relative to the foot point."""
        return (point - self.point_nearest_origin()).rotate(AngleDiff(-self.angle.radians)).dx

    def length(self) -> Scalar:
        return self.end - self.begin

    def start(self) -> Point:
        return self.point_along(self.begin)

    def stop(self) -> Point:
        return self.point_along(self.end)

    def herefrom(self, point: Point) -> "Line":
        return replace(self, begin=self.signed_distance(point))

    def until(self, point: Point) -> "Line":
        return replace(self, end=self.signed_distance(point))

    def reversed(self) -> "Line":
        return Line(
            angle=self.angle + AngleDiff(pi()),
            distance_from_origin=-self.distance_from_origin,
            begin=-self.end,
            end=-self.begin,
        )

    def offset(self, distance: Real) -> "Line":
        return replace(self, distance_from_origin=self.distance_from_origin + finite(distance))

    def intersect(self, other: Any) -> Any:
        if isinstance(other, Line):
            return line_line_intersection(self, other)
        return other.intersect(self)

    def __str__(self) -> str:
        return f"Line({self.start()} -> {self.stop()})"


__all__ = ["Line"]
