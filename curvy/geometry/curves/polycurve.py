from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from curvy.geometry.angle import Direction
from curvy.geometry.curves.arc import Arc
from curvy.geometry.curves.line import Line
from curvy.geometry.curves.offset import offset_lines
from curvy.geometry.errors import CurvyError, InvariantViolation, UnsupportedOperation
from curvy.geometry.polygon2d import PolygonValidityReport, signed_area, validate_polygon, winding
from curvy.geometry.primitives import Point
from curvy.geometry.scalar import Real, Scalar, finite
from curvy.logging_utils import debug_log_call

logger = logging.getLogger(__name__)

CurvePart = Union[Line, Arc]


def _dedupe(points: Iterable[Point], *, closed: bool) -> List[Point]:
    out: List[Point] = []
    for p in points:
        if out and out[-1] == p:
            continue
        out.append(p)
    if closed:
        while len(out) > 1 and out[-1] == out[0]:
            out.pop()
    return out


@dataclass(frozen=True)
class _PointChain:
    points: Tuple[Point, ...]

    min_points: ClassVar[int] = 2
    closed: ClassVar[bool] = False

    def __post_init__(self) -> None:
        pts = tuple(self.points)
        object.__setattr__(self, "points", pts)
        kind = type(self).__name__
        if len(pts) < self.min_points:
            raise InvariantViolation(f"{kind} needs at least {self.min_points} points, got {len(pts)}")
        pairs = list(zip(pts, pts[1:]))
        if self.closed:
            pairs.append((pts[-1], pts[0]))
        for a, b in pairs:
            if a == b:
                raise InvariantViolation(f"{kind} has repeated consecutive point {a}")

    @classmethod
    def from_tuples(cls, coords: Sequence[Tuple[Real, Real]]):
        return cls(tuple(Point(x, y) for x, y in coords))

    def to_tuples(self) -> List[Tuple[float, float]]:
        return [p.to_tuple() for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def iter_segments(self) -> Iterator[Line]:
        pts = self.points
        for a, b in zip(pts, pts[1:]):
            yield Line.new(a, b)
        if self.closed:
            yield Line.new(pts[-1], pts[0])

    def start(self) -> Point:
        return self.points[0]

    def stop(self) -> Point:
        return self.points[-1]

    def _curve_sizes(self, size: Real) -> Tuple[Scalar, ...]:
        limit = finite(size)
        if limit < 0.0:
            raise InvariantViolation(f"Curve size must not be negative, got {limit!r}")
        lengths = [line.length() for line in self.iter_segments()]
        if self.closed:
            # Vertex i sits between edge i - 1 and edge i; vertex 0 wraps to the closing edge.
            pairs = [(lengths[i - 1], lengths[i]) for i in range(len(lengths))]
        else:
            pairs = list(zip(lengths, lengths[1:]))
        return tuple(min(min(before, after) / 2.0, limit) for before, after in pairs)


class Polyline(_PointChain):
    """Open chain of at least two points."""

    @debug_log_call(logger)
    def offset(self, distance: Real) -> "Polyline":
        lines = offset_lines(list(self.iter_segments()), distance, closed=False)
        points = _dedupe([line.start() for line in lines] + [lines[-1].stop()], closed=False)
        if len(points) < 2:
            raise CurvyError("Offset collapses the polyline")
        return Polyline(tuple(points))

    @debug_log_call(logger)
    def curve(self, size: Real) -> "Polyarc":
        return Polyarc(self, self._curve_sizes(size))


class Polygon(_PointChain):
    """Closed chain of at least three points; the last point joins the first."""

    min_points: ClassVar[int] = 3
    closed: ClassVar[bool] = True

    @debug_log_call(logger)
    def offset(self, distance: Real) -> "Polygon":
        lines = offset_lines(list(self.iter_segments()), distance, closed=True)
        points = _dedupe([line.start() for line in lines], closed=True)
        if len(points) < 3:
            logger.warning("Offset by %s collapsed polygon to %d distinct point(s)", distance, len(points))
            raise CurvyError("Offset collapses the polygon")
        return Polygon(tuple(points))

    @debug_log_call(logger)
    def curve(self, size: Real) -> "Polycurve":
        return Polycurve(self, self._curve_sizes(size))

    def signed_area(self) -> float:
        return signed_area(self.to_tuples())

    def winding(self) -> Direction:
        return winding(self.to_tuples())

    def validity(self) -> PolygonValidityReport:
        return validate_polygon(self.to_tuples())


def _fillet(before: Point, vertex: Point, after: Point, size: Scalar) -> Optional[Arc]:
    """Arc rounding the corner at *vertex*, or None when the corner stays sharp."""

    if size <= 0.0:
        return None
    incoming = (vertex - before).angle()
    outgoing = (after - vertex).angle()
    if incoming.direction(outgoing) is Direction.NONE:
        # Straight through, or a full reversal that no arc can round.
        return None
    entry = vertex - (vertex - before) * (size / before.distance(vertex))
    exit_ = vertex + (after - vertex) * (size / vertex.distance(after))
    return Arc.new(entry, exit_, incoming)


def _connect(parts: List[CurvePart], current: Point, target: Point) -> None:
    if current != target:
        parts.append(Line.new(current, target))


@dataclass(frozen=True)
class Polyarc:
    """Polyline with a fillet size for each interior vertex."""

    polyline: Polyline
    curve_sizes: Tuple[Scalar, ...]

    def __post_init__(self) -> None:
        sizes = tuple(finite(s) for s in self.curve_sizes)
        object.__setattr__(self, "curve_sizes", sizes)
        expected = len(self.polyline) - 2
        if len(sizes) != expected:
            raise InvariantViolation(f"Polyarc needs {expected} curve sizes, got {len(sizes)}")
        if any(s < 0.0 for s in sizes):
            raise InvariantViolation("Curve sizes must not be negative")

    @property
    def points(self) -> Tuple[Point, ...]:
        return self.polyline.points

    def start(self) -> Point:
        return self.polyline.start()

    def stop(self) -> Point:
        return self.polyline.stop()

    def pieces(self) -> List[CurvePart]:
        pts = self.points
        parts: List[CurvePart] = []
        current = pts[0]
        for i, size in enumerate(self.curve_sizes, start=1):
            arc = _fillet(pts[i - 1], pts[i], pts[i + 1], size)
            if arc is None:
                _connect(parts, current, pts[i])
                current = pts[i]
                continue
            _connect(parts, current, arc.start())
            parts.append(arc)
            current = arc.stop()
        _connect(parts, current, pts[-1])
        return parts

    def offset(self, distance: Real) -> "Polyarc":
        raise UnsupportedOperation("Offsetting a Polyarc is not supported")


@dataclass(frozen=True)
class Polycurve:
    """Polygon with a fillet size for every vertex."""

    polygon: Polygon
    curve_sizes: Tuple[Scalar, ...]

    def __post_init__(self) -> None:
        sizes = tuple(finite(s) for s in self.curve_sizes)
        object.__setattr__(self, "curve_sizes", sizes)
        expected = len(self.polygon)
        if len(sizes) != expected:
            raise InvariantViolation(f"Polycurve needs {expected} curve sizes, got {len(sizes)}")
        if any(s < 0.0 for s in sizes):
            raise InvariantViolation("Curve sizes must not be negative")

    @property
    def points(self) -> Tuple[Point, ...]:
        return self.polygon.points

    def start(self) -> Point:
        return self.polygon.start()

    def stop(self) -> Point:
        return self.polygon.stop()

    def pieces(self) -> List[CurvePart]:
        pts = self.points
        n = len(pts)
        fillets = [_fillet(pts[i - 1], pts[i], pts[(i + 1) % n], self.curve_sizes[i]) for i in range(n)]

        parts: List[CurvePart] = []
        first = fillets[0]
        current = pts[0] if first is None else first.stop()
        for i in list(range(1, n)) + [0]:
            arc = fillets[i]
            if arc is None:
                _connect(parts, current, pts[i])
                current = pts[i]
                continue
            _connect(parts, current, arc.start())
            parts.append(arc)
            current = arc.stop()
        return parts

    def offset(self, distance: Real) -> "Polycurve":
        raise UnsupportedOperation("Offsetting a Polycurve is not supported")


__all__ = ["CurvePart", "Polyline", "Polygon", "Polyarc", "Polycurve"]
