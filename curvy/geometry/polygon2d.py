from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from curvy.geometry.angle import Direction
from curvy.geometry.curves.intersections import LineIntersectionKind, line_line_intersection
from curvy.geometry.curves.line import Line
from curvy.geometry.primitives import Point
from curvy.geometry.tolerance import EPS_AREA, EPS_POS


Point2 = Tuple[float, float]


@dataclass(frozen=True)
class PolygonValidityReport:
    valid: bool
    self_intersections: int = 0
    winding: Direction = Direction.COUNTERCLOCKWISE
    duplicate_vertices: int = 0
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": bool(self.valid),
            "self_intersections": int(self.self_intersections),
            "winding": self.winding.name,
            "duplicate_vertices": int(self.duplicate_vertices),
            "warnings": list(self.warnings),
        }


def signed_area(poly: Sequence[Point2]) -> float:
    """Shoelace area; positive for counterclockwise vertex order."""

    if len(poly) < 3:
        return 0.0
    pts = np.asarray(poly, dtype=float)
    x = pts[:, 0]
    y = pts[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def winding(poly: Sequence[Point2]) -> Direction:
    area = signed_area(poly)
    if abs(area) <= EPS_AREA:
        return Direction.NONE
    return Direction.COUNTERCLOCKWISE if area > 0.0 else Direction.CLOCKWISE


def _edges(points: Sequence[Point2]) -> List[Optional[Line]]:
    """Closed-ring edges; a zero-length edge has no line and is left as None."""

    pts = [Point(x, y) for x, y in points]
    edges: List[Optional[Line]] = []
    for a, b in zip(pts, pts[1:] + pts[:1]):
        edges.append(Line.new(a, b) if a != b else None)
    return edges


def _strictly_inside(edge: Line, point: Point) -> bool:
    t = edge.signed_distance(point)
    return bool(edge.begin + EPS_POS < t < edge.end - EPS_POS)


def _edges_cross(first: Line, second: Line) -> bool:
    """True for a proper crossing or a collinear overlap; touching ends do not count."""

    hit = line_line_intersection(first, second)
    if hit.kind is LineIntersectionKind.MANY:
        return True
    if hit.kind is not LineIntersectionKind.ONE_POINT:
        return False
    return _strictly_inside(first, hit.point) and _strictly_inside(second, hit.point)


def _count_duplicates(points: Sequence[Point2]) -> int:
    seen: List[Point] = []
    dup = 0
    for x, y in points:
        p = Point(x, y)
        if any(p.isclose(q) for q in seen):
            dup += 1
        else:
            seen.append(p)
    return dup


def _count_crossings(points: Sequence[Point2]) -> int:
    edges = _edges(points)
    n = len(edges)
    crossings = 0
    for i, first in enumerate(edges):
        for j in range(i + 2, n):
            # the closing edge is adjacent to the first one
            if i == 0 and j == n - 1:
                continue
            second = edges[j]
            if first is not None and second is not None and _edges_cross(first, second):
                crossings += 1
    return crossings


def validate_polygon(points: Sequence[Point2]) -> PolygonValidityReport:
    warnings: List[str] = []
    if len(points) < 3:
        return PolygonValidityReport(valid=False, winding=Direction.NONE, warnings=["Polygon has fewer than 3 points."])

    dup = _count_duplicates(points)
    si = _count_crossings(points)
    turn = winding(points)
    if turn is Direction.NONE:
        warnings.append("Polygon has zero area.")

    valid = si == 0 and dup == 0 and turn is not Direction.NONE
    return PolygonValidityReport(
        valid=valid,
        self_intersections=si,
        winding=turn,
        duplicate_vertices=dup,
        warnings=warnings,
    )


__all__ = ["Point2", "PolygonValidityReport", "signed_area", "winding", "validate_polygon"]
