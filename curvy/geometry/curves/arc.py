from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from curvy.geometry.angle import Angle, AngleDiff, wrap_radians
from curvy.geometry.curves.intersections import (
    ArcIntersection,
    LineIntersectionKind,
    arc_arc_intersection,
    arc_line_intersection,
)
from curvy.geometry.curves.line import Line
from curvy.geometry.errors import CurvyError
from curvy.geometry.primitives import Delta, Point
from curvy.geometry.scalar import Real, Scalar, finite, frac_pi_2, isclose, pi, two_pi
from curvy.geometry.tolerance import EPS_ANG

_JOINABLE = (LineIntersectionKind.ONE_POINT, LineIntersectionKind.OUT_OF_BOUNDS)


def _ccw_span(start: Angle, stop: Angle) -> Scalar:
    return wrap_radians(stop.radians - start.radians)


@dataclass(frozen=True)
class Arc:
    """Circular arc stored as center, signed radius, start angle and signed span.

    ``stop_diff`` is positive for counterclockwise arcs. Offsetting only
    changes ``radius``; a radius driven below zero flips the sign of
    ``begin``/``end``/``length`` along with it.
    """

    center: Point
    radius: Scalar
    start_angle: Angle
    stop_diff: AngleDiff

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", finite(self.radius))

    @classmethod
    def new(cls, start: Point, stop: Point, angle: Angle) -> "Arc":
        """Arc from *start* to *stop* leaving *start* along tangent *angle*."""

        if start == stop:
            raise CurvyError("Undefinable circular arc: start, stop points are the same")

        quarter = AngleDiff(frac_pi_2())
        start_perpendicular = Line.from_point_angle(start, angle + quarter, 1.0)
        chord_angle = (stop - start).angle()
        midpoint_perpendicular = Line.from_point_angle(start.midpoint(stop), chord_angle + quarter, 1.0)

        hit = start_perpendicular.intersect(midpoint_perpendicular)
        if hit.kind not in _JOINABLE:
            raise CurvyError("Undefinable circular arc")
        center = hit.point

        start_delta = start - center
        start_angle = start_delta.angle()
        span = _ccw_span(start_angle, (stop - center).angle())
        # The tangent leads the radius by a quarter turn when travelling counterclockwise.
        if (angle - start_angle).radians > 0.0:
            stop_diff = AngleDiff(span)
        else:
            stop_diff = AngleDiff(span - two_pi())
        return cls(center=center, radius=start_delta.magnitude(), start_angle=start_angle, stop_diff=stop_diff)

    @classmethod
    def from_center(
        cls,
        center: Point,
        start: Point,
        stop: Point,
        ccw: Optional[bool] = None,
    ) -> "Arc":
        """Over-specified arc; *stop* must lie on the circle through *start*.

        Without *ccw* the arc takes the shorter way round.
        """

        start_delta = start - center
        stop_delta = stop - center
        radius = start_delta.magnitude()
        if not isclose(radius, stop_delta.magnitude()):
            raise CurvyError("Undefinable circular arc: stop is not equidistant from center")

        start_angle = start_delta.angle()
        stop_angle = stop_delta.angle()
        if ccw is None:
            stop_diff = stop_angle - start_angle
        else:
            span = _ccw_span(start_angle, stop_angle)
            stop_diff = AngleDiff(span if ccw or span == 0.0 else span - two_pi())
        return cls(center=center, radius=radius, start_angle=start_angle, stop_diff=stop_diff)

    def stop_angle(self) -> Angle:
        return self.start_angle + self.stop_diff

    def begin(self) -> Scalar:
        return self.start_angle.radians * self.radius

    def end(self) -> Scalar:
        # Unwrapped, so that end - begin is always the signed length.
        return (self.start_angle.radians + self.stop_diff.radians) * self.radius

    def length(self) -> Scalar:
        return self.stop_diff.radians * self.radius

    def apply_angle(self, angle: Angle) -> Point:
        return self.center + Delta.magnitude_angle(self.radius, angle)

    def apply(self, t: Real) -> Point:
        if self.radius == 0.0:
            return self.center
        return self.apply_angle(Angle.wrap(finite(t) / self.radius))

    def apply_bounded(self, t: Real) -> Optional[Point]:
        low, high = sorted((self.begin(), self.end()))
        if t < low or t > high:
            return None
        return self.apply(t)

    def start(self) -> Point:
        return self.apply_angle(self.start_angle)

    def stop(self) -> Point:
        return self.apply_angle(self.stop_angle())

    def angle_of(self, point: Point) -> Angle:
        """Angle parameter of *point* as seen from the center, honouring a negative radius."""

        delta = point - self.center
        if self.radius < 0.0:
            delta = -delta
        return delta.angle()

    def signed_distance(self, point: Point) -> Scalar:
        return (point - self.center).angle().radians * self.radius

    def contains_angle(self, theta: Angle) -> bool:
        rel = wrap_radians(theta.radians - self.start_angle.radians)
        span = self.stop_diff.radians
        tau = two_pi()
        if rel <= EPS_ANG or rel >= tau - EPS_ANG:
            return True
        if span >= 0.0:
            return bool(rel <= span + EPS_ANG)
        return bool(rel >= tau + span - EPS_ANG)

    def control_point(self) -> Point:
        """Intersection of the tangents at the two ends of the arc."""

        quarter = AngleDiff(frac_pi_2())
        start_tangent = Line.from_point_angle(self.start(), self.start_angle + quarter, 1.0)
        stop_tangent = Line.from_point_angle(self.stop(), self.stop_angle() + quarter, 1.0)
        hit = start_tangent.intersect(stop_tangent)
        if hit.kind not in _JOINABLE:
            raise CurvyError("Arc tangents are parallel; no control point")
        return hit.point

    def curve_size(self) -> Scalar:
        return self.start().distance(self.control_point())

    def sweep_flag(self) -> bool:
        return bool(self.stop_diff.radians > 0.0)

    def large_arc_flag(self) -> bool:
        return bool(abs(self.stop_diff.radians) > pi())

    def offset(self, distance: Real) -> "Arc":
        return replace(self, radius=self.radius + finite(distance))

    def intersect(self, other: Any) -> ArcIntersection:
        if isinstance(other, Line):
            return arc_line_intersection(self, other)
        if isinstance(other, Arc):
            return arc_arc_intersection(self, other)
        raise TypeError(f"Cannot intersect Arc with {type(other).__name__}")

    def __str__(self) -> str:
        return f"Arc(center={self.center}, radius={float(self.radius)}, {self.start_angle} {self.stop_diff.degrees()}deg)"


__all__ = ["Arc"]
