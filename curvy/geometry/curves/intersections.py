"""Pairwise intersection of lines and arcs.

Results keep the distinction between an intersection inside the bounded
pieces and one that only exists on the underlying infinite line or full
circle; offset re-stitching relies on the out-of-bounds points too.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Optional, Protocol, Tuple

from curvy.geometry.errors import UnsupportedOperation
from curvy.geometry.primitives import Delta, Point
from curvy.geometry.scalar import cos, finite, isclose, pi, sin, sqrt
from curvy.geometry.tolerance import EPS_ANG, EPS_POS

if TYPE_CHECKING:
    from curvy.geometry.curves.arc import Arc
    from curvy.geometry.curves.line import Line


class LineIntersectionKind(Enum):
    NONE = auto()
    OUT_OF_BOUNDS = auto()
    ONE_POINT = auto()
    # Collinear overlap; there is no single point to report.
    MANY = auto()
    MANY_OUT_OF_BOUNDS = auto()


@dataclass(frozen=True)
class LineIntersection:
    kind: LineIntersectionKind
    point: Optional[Point] = None

    @property
    def has_point(self) -> bool:
        return self.point is not None


class PointBounds(Enum):
    IN_BOUNDS = auto()
    IN_ARC_BOUNDS = auto()
    IN_LINE_BOUNDS = auto()
    OUT_OF_BOUNDS = auto()


@dataclass(frozen=True)
class ArcIntersectionPoint:
    bounds: PointBounds
    point: Point

    @classmethod
    def classify(cls, on_line_segment: bool, on_circular_arc: bool, point: Point) -> "ArcIntersectionPoint":
        if on_line_segment and on_circular_arc:
            return cls(PointBounds.IN_BOUNDS, point)
        if on_line_segment:
            return cls(PointBounds.IN_LINE_BOUNDS, point)
        if on_circular_arc:
            return cls(PointBounds.IN_ARC_BOUNDS, point)
        return cls(PointBounds.OUT_OF_BOUNDS, point)


class ArcIntersectionKind(Enum):
    NONE = auto()
    ONE = auto()
    TWO = auto()
    # Reserved for coincident arcs.
    MANY = auto()


@dataclass(frozen=True)
class ArcIntersection:
    kind: ArcIntersectionKind
    points: Tuple[ArcIntersectionPoint, ...] = ()


class Intersects(Protocol):
    def intersect(self, other: Any) -> Any:
        ...


def intersect(a: Intersects, b: Any) -> Any:
    return a.intersect(b)


def _collinear(a: "Line", begin: Any, end: Any) -> LineIntersection:
    # *begin*/*end* are the other segment's bounds expressed along *a*.
    if a.begin > end or begin > a.end:
        return LineIntersection(LineIntersectionKind.MANY_OUT_OF_BOUNDS)
    if a.begin == end:
        return LineIntersection(LineIntersectionKind.ONE_POINT, a.point_along(a.begin))
    if begin == a.end:
        return LineIntersection(LineIntersectionKind.ONE_POINT, a.point_along(a.end))
    return LineIntersection(LineIntersectionKind.MANY)


def line_line_intersection(a: "Line", b: "Line") -> LineIntersection:
    turn = (b.angle - a.angle).radians
    # Edges split at a straight vertex differ in angle and distance by rounding only.
    if abs(turn) <= EPS_ANG and isclose(a.distance_from_origin, b.distance_from_origin):
        return _collinear(a, b.begin, b.end)
    if pi() - abs(turn) <= EPS_ANG and isclose(a.distance_from_origin, -b.distance_from_origin):
        return _collinear(a, -b.end, -b.begin)
    if turn == 0.0 or abs(turn) == pi():
        return LineIntersection(LineIntersectionKind.NONE)

    # Normal form x*cos(n) + y*sin(n) = d for each line, n = angle + pi/2.
    na = a.normal_angle().radians
    nb = b.normal_angle().radians
    sin_a, cos_a = sin(na), cos(na)
    sin_b, cos_b = sin(nb), cos(nb)
    da = a.distance_from_origin
    db = b.distance_from_origin
    denominator = cos_a * sin_b - sin_a * cos_b
    if denominator == 0.0:
        return LineIntersection(LineIntersectionKind.NONE)
    point = Point(
        (da * sin_b - db * sin_a) / denominator,
        (db * cos_a - da * cos_b) / denominator,
    )

    t_a = a.signed_distance(point)
    if t_a < a.begin or t_a > a.end:
        return LineIntersection(LineIntersectionKind.OUT_OF_BOUNDS, point)
    t_b = b.signed_distance(point)
    if t_b < b.begin or t_b > b.end:
        return LineIntersection(LineIntersectionKind.OUT_OF_BOUNDS, point)
    return LineIntersection(LineIntersectionKind.ONE_POINT, point)


def arc_line_intersection(arc: "Arc", line: "Line") -> ArcIntersection:
    """Intersect *line* with the circle of *arc* and classify each root.

    With the line written as ``foot + t*u`` the roots solve
    ``a*t^2 + 2*b*t + c = 0`` relative to the arc center.
    """

    u = Delta.magnitude_angle(1.0, line.angle)
    delta = line.point_nearest_origin() - arc.center

    a = u.dx * u.dx + u.dy * u.dy
    b = delta.dx * u.dx + delta.dy * u.dy
    c = delta.dx * delta.dx + delta.dy * delta.dy - arc.radius * arc.radius

    radicand = finite(b * b - a * c)
    # A tangent line leaves only rounding noise in the radicand.
    if abs(radicand) <= EPS_POS * max(1.0, float(arc.radius * arc.radius)):
        radicand = finite(0.0)
    if radicand < 0.0:
        return ArcIntersection(ArcIntersectionKind.NONE)

    if radicand == 0.0:
        t = -b / a
        point = line.point_along(t)
        on_line = line.begin <= t <= line.end
        on_arc = arc.contains_angle(arc.angle_of(point))
        bounds = PointBounds.IN_BOUNDS if on_line and on_arc else PointBounds.OUT_OF_BOUNDS
        return ArcIntersection(ArcIntersectionKind.ONE, (ArcIntersectionPoint(bounds, point),))

    root = sqrt(radicand)
    out = []
    for t in ((-b + root) / a, (-b - root) / a):
        point = line.point_along(t)
        out.append(
            ArcIntersectionPoint.classify(
                bool(line.begin <= t <= line.end),
                arc.contains_angle(arc.angle_of(point)),
                point,
            )
        )
    return ArcIntersection(ArcIntersectionKind.TWO, tuple(out))


def arc_arc_intersection(a: "Arc", b: "Arc") -> ArcIntersection:
    raise UnsupportedOperation("Arc-arc intersection is not supported")


__all__ = [
    "LineIntersectionKind",
    "LineIntersection",
    "PointBounds",
    "ArcIntersectionPoint",
    "ArcIntersectionKind",
    "ArcIntersection",
    "Intersects",
    "intersect",
    "line_line_intersection",
    "arc_line_intersection",
    "arc_arc_intersection",
]
