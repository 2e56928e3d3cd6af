"""
Curvy Geometry Module

Planar angles, points, lines and arcs in a representation where offsetting
is a single field update, plus offsetting and filleting of point chains.
"""

from curvy.geometry.angle import Angle, AngleDiff, Direction
from curvy.geometry.curves import (
    Arc,
    ArcIntersection,
    ArcIntersectionKind,
    ArcIntersectionPoint,
    Line,
    LineIntersection,
    LineIntersectionKind,
    PointBounds,
    Polyarc,
    Polycurve,
    Polygon,
    Polyline,
    intersect,
    offset,
)
from curvy.geometry.errors import CurvyError, InvariantViolation, UnsupportedOperation
from curvy.geometry.primitives import Delta, Point
from curvy.geometry.scalar import ScalarConfig, get_scalar_config, set_scalar_config, use_precision

__all__ = [
    "Angle",
    "AngleDiff",
    "Direction",
    "Delta",
    "Point",
    "Line",
    "Arc",
    "LineIntersection",
    "LineIntersectionKind",
    "ArcIntersection",
    "ArcIntersectionKind",
    "ArcIntersectionPoint",
    "PointBounds",
    "Polyline",
    "Polygon",
    "Polyarc",
    "Polycurve",
    "intersect",
    "offset",
    "CurvyError",
    "InvariantViolation",
    "UnsupportedOperation",
    "ScalarConfig",
    "get_scalar_config",
    "set_scalar_config",
    "use_precision",
]
