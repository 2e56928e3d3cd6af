from .arc import Arc
from .intersections import (
    ArcIntersection,
    ArcIntersectionKind,
    ArcIntersectionPoint,
    LineIntersection,
    LineIntersectionKind,
    PointBounds,
    arc_arc_intersection,
    arc_line_intersection,
    intersect,
    line_line_intersection,
)
from .line import Line
from .offset import offset, offset_lines, stitch
from .polycurve import CurvePart, Polyarc, Polycurve, Polygon, Polyline

__all__ = [
    "Line",
    "Arc",
    "LineIntersection",
    "LineIntersectionKind",
    "ArcIntersection",
    "ArcIntersectionKind",
    "ArcIntersectionPoint",
    "PointBounds",
    "intersect",
    "line_line_intersection",
    "arc_line_intersection",
    "arc_arc_intersection",
    "offset",
    "offset_lines",
    "stitch",
    "CurvePart",
    "Polyline",
    "Polygon",
    "Polyarc",
    "Polycurve",
]
