"""Perpendicular offsetting and re-stitching of straight segments.

Every segment is offset independently, which leaves gaps at convex corners
and overlaps at concave ones. :func:`stitch` rejoins consecutive segments at
the intersection of their infinite lines, discarding any previously accepted
segment that the join consumes entirely.
"""

from __future__ import annotations

import logging
from typing import Any, List, Protocol, Sequence

from curvy.geometry.curves.intersections import LineIntersectionKind
from curvy.geometry.curves.line import Line
from curvy.geometry.errors import CurvyError
from curvy.geometry.primitives import Point
from curvy.geometry.scalar import Real

logger = logging.getLogger(__name__)

_POINT_JOINS = (LineIntersectionKind.ONE_POINT, LineIntersectionKind.OUT_OF_BOUNDS)
_COLLINEAR_JOINS = (LineIntersectionKind.MANY, LineIntersectionKind.MANY_OUT_OF_BOUNDS)


class Offsettable(Protocol):
    def offset(self, distance: Real) -> Any:
        ...


def offset(shape: Offsettable, distance: Real) -> Any:
    """Offset *shape* by *distance*; positive moves to the left of travel."""
    return shape.offset(distance)


def _join_point(previous: Line, line: Line) -> Point:
    hit = previous.intersect(line)
    if hit.kind in _POINT_JOINS:
        return hit.point
    if hit.kind in _COLLINEAR_JOINS:
        return line.start()
    raise CurvyError(f"Cannot join offset segments {previous} and {line}: they never meet")


def stitch(accepted: List[Line], line: Line) -> None:
    """Append *line* to *accepted*, popping accepted segments the join consumes."""

    while accepted:
        point = _join_point(accepted[-1], line)
        clipped = accepted[-1].until(point)
        if clipped.length() < 0.0:
            dropped = accepted.pop()
            logger.debug("Discarding consumed offset segment %s", dropped)
            continue
        accepted[-1] = clipped
        accepted.append(line.herefrom(point))
        return
    accepted.append(line)


def close_loop(accepted: List[Line]) -> List[Line]:
    """Join the last accepted segment back onto the first.

    The first segment is re-stitched onto the end of the chain and rotated
    back to the front. If that consumes it, it is dropped and the next one
    closes the loop instead. Fewer than three surviving segments means the
    polygon has collapsed.
    """

    while len(accepted) >= 3:
        head = accepted.pop(0)
        stitch(accepted, head)
        accepted.insert(0, accepted.pop())
        if accepted[0].length() >= 0.0:
            if len(accepted) >= 3:
                return accepted
            break
        dropped = accepted.pop(0)
        logger.debug("Discarding consumed offset segment %s while closing", dropped)

    logger.warning("Offset collapsed polygon to %d segment(s)", len(accepted))
    raise CurvyError("Offset collapses the polygon")


def offset_lines(lines: Sequence[Line], distance: Real, *, closed: bool) -> List[Line]:
    accepted: List[Line] = []
    for line in lines:
        stitch(accepted, line.offset(distance))
    if closed:
        return close_loop(accepted)
    return accepted


__all__ = ["Offsettable", "offset", "stitch", "close_loop", "offset_lines"]
