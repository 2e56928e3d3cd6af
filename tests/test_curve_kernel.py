from __future__ import annotations

import math

import pytest

from curvy.geometry.curves import Arc, Line, Polyarc, Polycurve, Polygon, Polyline
from curvy.geometry.errors import InvariantViolation
from curvy.geometry.primitives import Point


def test_polyline_curve_sizes_are_limited_by_half_edges() -> None:
    zigzag = Polyline.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 4.0), (20.0, 4.0)])
    assert [float(s) for s in zigzag.curve(3.0).curve_sizes] == pytest.approx([2.0, 2.0])
    assert [float(s) for s in zigzag.curve(1.0).curve_sizes] == pytest.approx([1.0, 1.0])
    assert zigzag.curve(0.0).curve_sizes == (0.0, 0.0)


def test_polygon_curve_sizes_wrap_around_first_vertex() -> None:
    quad = Polygon.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 4.0)])
    sizes = quad.curve(10.0).curve_sizes
    assert len(sizes) == 4
    assert [float(s) for s in sizes] == pytest.approx([2.0, 5.0, 5.0, 2.0])


def test_curved_shapes_require_matching_sizes() -> None:
    line = Polyline.from_tuples([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)])
    with pytest.raises(InvariantViolation):
        Polyarc(line, (0.5, 0.5))
    with pytest.raises(InvariantViolation):
        Polyarc(line, (-0.5,))
    with pytest.raises(InvariantViolation):
        Polycurve(Polygon(line.points), (0.1, 0.1))
    with pytest.raises(InvariantViolation):
        line.curve(-1.0)


def test_polyarc_pieces_round_the_corner() -> None:
    corner = Polyline.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]).curve(2.0)
    pieces = corner.pieces()
    assert [type(p) for p in pieces] == [Line, Arc, Line]

    first, fillet, last = pieces
    assert first.start().isclose(Point(0.0, 0.0))
    assert first.stop().isclose(Point(8.0, 0.0))
    assert fillet.center.isclose(Point(8.0, 2.0))
    assert fillet.radius == pytest.approx(2.0)
    assert fillet.sweep_flag() is True
    assert fillet.curve_size() == pytest.approx(2.0)
    assert last.start().isclose(Point(10.0, 2.0))
    assert last.stop().isclose(Point(10.0, 10.0))


def test_straight_vertex_stays_sharp() -> None:
    straight = Polyline.from_tuples([(0.0, 0.0), (5.0, 0.0), (10.0, 0.0)]).curve(1.0)
    pieces = straight.pieces()
    assert [type(p) for p in pieces] == [Line, Line]
    assert pieces[0].stop().isclose(Point(5.0, 0.0))


def test_polycurve_pieces_close_the_loop() -> None:
    square = Polygon.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]).curve(2.0)
    pieces = square.pieces()
    assert [type(p) for p in pieces] == [Line, Arc] * 4
    arcs = [p for p in pieces if isinstance(p, Arc)]
    assert all(a.radius == pytest.approx(2.0) for a in arcs)
    assert all(abs(a.stop_diff.radians - math.pi / 2.0) < 1e-9 for a in arcs)
    # every piece starts where the previous one stopped
    for before, after in zip(pieces, pieces[1:] + pieces[:1]):
        assert before.stop().isclose(after.start())


def test_clockwise_corner_gets_clockwise_fillet() -> None:
    corner = Polyline.from_tuples([(0.0, 0.0), (10.0, 0.0), (10.0, -10.0)]).curve(3.0)
    fillet = corner.pieces()[1]
    assert isinstance(fillet, Arc)
    assert fillet.sweep_flag() is False
    assert fillet.center.isclose(Point(7.0, -3.0))
    assert fillet.length() == pytest.approx(-3.0 * math.pi / 2.0)
