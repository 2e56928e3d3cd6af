from __future__ import annotations

import logging
import math

import pytest
from shapely.geometry import Polygon as ShapelyPolygon

from curvy.geometry.curves import Line, Polygon, Polyline, offset
from curvy.geometry.errors import CurvyError, InvariantViolation, UnsupportedOperation
from curvy.geometry.primitives import Point

L_SHAPE = [(0.0, 0.0), (4.0, 0.0), (4.0, 1.0), (1.0, 1.0), (1.0, 4.0), (0.0, 4.0)]


def _assert_points(actual, expected) -> None:
    assert len(actual) == len(expected)
    for p, (x, y) in zip(actual, expected):
        assert p.isclose(Point(x, y)), f"{p} != {x},{y}"


def test_square_inset_and_outset() -> None:
    square = Polygon.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)])
    _assert_points(square.offset(1.0).points, [(1.0, 1.0), (9.0, 1.0), (9.0, 9.0), (1.0, 9.0)])
    _assert_points(offset(square, -1.0).points, [(-1.0, -1.0), (11.0, -1.0), (11.0, 11.0), (-1.0, 11.0)])


def test_zero_offset_reproduces_input() -> None:
    shape = Polygon.from_tuples(L_SHAPE)
    _assert_points(shape.offset(0.0).points, L_SHAPE)


def test_inset_drops_consumed_chamfer_edge(caplog: pytest.LogCaptureFixture) -> None:
    chamfered = Polygon.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 9.0), (9.0, 10.0), (0.0, 10.0)])
    with caplog.at_level(logging.DEBUG, logger="curvy"):
        inset = chamfered.offset(2.0)
    _assert_points(inset.points, [(2.0, 2.0), (8.0, 2.0), (8.0, 8.0), (2.0, 8.0)])
    assert any("Discarding consumed offset segment" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("distance", [0.25, -0.25, 0.4])
def test_polygon_offset_matches_shapely_mitre_buffer(distance: float) -> None:
    ours = Polygon.from_tuples(L_SHAPE).offset(distance)
    assert ours.validity().valid

    expected = ShapelyPolygon(L_SHAPE).buffer(-distance, join_style="mitre")
    got = ShapelyPolygon(ours.to_tuples())
    assert got.is_valid
    assert got.symmetric_difference(expected).area < 1e-9


def test_triangle_collapses_past_its_inradius(caplog: pytest.LogCaptureFixture) -> None:
    triangle = Polygon.from_tuples([(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)])
    with caplog.at_level(logging.DEBUG, logger="curvy"):
        with pytest.raises(CurvyError) as exc:
            triangle.offset(2.0)
    assert "collapses" in exc.value.message
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_narrow_rectangle_inset_fails() -> None:
    rect = Polygon.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 2.0), (0.0, 2.0)])
    with pytest.raises(CurvyError):
        rect.offset(1.5)


def test_polyline_offset_keeps_open_ends() -> None:
    corner = Polyline.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])
    _assert_points(corner.offset(1.0).points, [(0.0, 1.0), (9.0, 1.0), (9.0, 10.0)])
    _assert_points(corner.offset(-1.0).points, [(0.0, -1.0), (11.0, -1.0), (11.0, 10.0)])


def test_polyline_offset_backtracks_over_consumed_segment() -> None:
    shape = Polyline.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 1.0), (0.0, 5.0)])
    root = math.sqrt(116.0)
    _assert_points(
        shape.offset(2.0).points,
        [(0.0, 2.0), (7.5 - root / 2.0, 2.0), (-8.0 / root, 5.0 - 20.0 / root)],
    )


@pytest.mark.parametrize(
    "coords",
    [
        [(0.0, 0.0), (0.1, 0.3), (0.3, 0.9)],
        [(0.0, 0.0), (0.3, 0.1), (0.6, 0.2)],
        [(0.0, 0.0), (1.0, 3.0), (2.0, 6.0)],
    ],
)
def test_polyline_offset_passes_straight_vertices(coords) -> None:
    (x0, y0), _, (x1, y1) = coords
    length = math.hypot(x1 - x0, y1 - y0)
    nx, ny = -(y1 - y0) / length * 0.1, (x1 - x0) / length * 0.1
    expected = [(x + nx, y + ny) for x, y in coords]
    _assert_points(Polyline.from_tuples(coords).offset(0.1).points, expected)


def test_polygon_offset_passes_straight_vertex() -> None:
    coords = [(0.0, 0.0), (0.1, 0.3), (0.3, 0.9), (-1.0, 1.0)]
    ours = Polygon.from_tuples(coords).offset(0.05)
    assert ours.validity().valid

    expected = ShapelyPolygon(coords).buffer(-0.05, join_style="mitre")
    assert ShapelyPolygon(ours.to_tuples()).symmetric_difference(expected).area < 1e-9


def test_polyline_reversal_cannot_be_joined() -> None:
    spike = Polyline.from_tuples([(0.0, 0.0), (10.0, 0.0), (5.0, 0.0)])
    with pytest.raises(CurvyError):
        spike.offset(1.0)


def test_line_offset_through_capability() -> None:
    line = Line.new(Point(0.0, 0.0), Point(1.0, 0.0))
    assert offset(line, 3.0).distance_from_origin == 3.0


def test_curved_shapes_cannot_be_offset() -> None:
    polyarc = Polyline.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]).curve(1.0)
    polycurve = Polygon.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]).curve(1.0)
    with pytest.raises(UnsupportedOperation):
        polyarc.offset(1.0)
    with pytest.raises(UnsupportedOperation):
        offset(polycurve, 1.0)


def test_point_chains_enforce_their_invariants() -> None:
    with pytest.raises(InvariantViolation):
        Polyline.from_tuples([(0.0, 0.0)])
    with pytest.raises(InvariantViolation):
        Polygon.from_tuples([(0.0, 0.0), (1.0, 0.0)])
    with pytest.raises(InvariantViolation):
        Polyline.from_tuples([(0.0, 0.0), (1.0, 0.0), (1.0, 0.0)])
    with pytest.raises(InvariantViolation):
        Polygon.from_tuples([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)])
