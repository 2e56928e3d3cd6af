"""SVG path rendering.

Shapes are read only through ``start()``/``stop()`` and, for arcs, ``radius``,
``sweep_flag()`` and ``large_arc_flag()``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

from curvy.geometry.curves import Arc, CurvePart, Line, Polyarc, Polycurve, Polygon, Polyline
from curvy.geometry.primitives import Point

SVG_NS = "http://www.w3.org/2000/svg"
DEBUG_STROKE = "#FF00FF"

Shape = Union[Line, Arc, Polyline, Polygon, Polyarc, Polycurve]
ViewBox = Tuple[float, float, float, float]


def _fmt(value: float) -> str:
    return format(float(value), ".10g")


def _pt(point: Point) -> str:
    return f"{_fmt(point.x)},{_fmt(point.y)}"


def _arc_command(arc: Arc) -> str:
    r = _fmt(abs(float(arc.radius)))
    return f"A{r},{r} 0 {int(arc.large_arc_flag())},{int(arc.sweep_flag())} {_pt(arc.stop())}"


def _piece_command(piece: CurvePart) -> str:
    if isinstance(piece, Arc):
        return _arc_command(piece)
    return f"L{_pt(piece.stop())}"


def _pieces_data(pieces: Sequence[CurvePart], fallback: Point) -> List[str]:
    if not pieces:
        return [f"M{_pt(fallback)}"]
    return [f"M{_pt(pieces[0].start())}"] + [_piece_command(p) for p in pieces]


def path_data(shape: Shape) -> str:
    """SVG path ``d`` attribute for *shape*."""

    if isinstance(shape, Line):
        return f"M{_pt(shape.start())} L{_pt(shape.stop())}"
    if isinstance(shape, Arc):
        return f"M{_pt(shape.start())} {_arc_command(shape)}"
    if isinstance(shape, Polygon):
        head, *rest = shape.points
        return " ".join([f"M{_pt(head)}"] + [f"L{_pt(p)}" for p in rest] + ["Z"])
    if isinstance(shape, Polyline):
        head, *rest = shape.points
        return " ".join([f"M{_pt(head)}"] + [f"L{_pt(p)}" for p in rest])
    if isinstance(shape, Polycurve):
        return " ".join(_pieces_data(shape.pieces(), shape.start()) + ["Z"])
    if isinstance(shape, Polyarc):
        return " ".join(_pieces_data(shape.pieces(), shape.start()))
    raise TypeError(f"Cannot render {type(shape).__name__} as an SVG path")


def viewbox_for(points: Iterable[Point], margin: float = 1.0) -> ViewBox:
    xs: List[float] = []
    ys: List[float] = []
    for p in points:
        xs.append(float(p.x))
        ys.append(float(p.y))
    if not xs:
        return (0.0, 0.0, 10.0, 10.0)
    return (min(xs) - margin, min(ys) - margin, max(xs) - min(xs) + 2.0 * margin, max(ys) - min(ys) + 2.0 * margin)


def to_document(
    paths: Iterable[str],
    viewbox: ViewBox = (0.0, 0.0, 10.0, 10.0),
    *,
    stroke: str = DEBUG_STROKE,
    stroke_width: float = 0.05,
) -> ET.Element:
    x, y, w, h = viewbox
    svg = ET.Element("svg", {
        "xmlns": SVG_NS,
        "viewBox": f"{_fmt(x)} {_fmt(y)} {_fmt(w)} {_fmt(h)}",
        "version": "1.1",
    })
    group = ET.SubElement(svg, "g")
    for d in paths:
        ET.SubElement(group, "path", {
            "d": d,
            "fill": "none",
            "stroke": stroke,
            "stroke-width": _fmt(stroke_width),
        })
    return svg


def to_string(document: ET.Element) -> str:
    return ET.tostring(document, encoding="unicode")


def write_svg(document: ET.Element, output_path: Union[str, Path]) -> Path:
    out = Path(output_path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(to_string(document), encoding="utf-8")
    return out


__all__ = ["Shape", "ViewBox", "path_data", "viewbox_for", "to_document", "to_string", "write_svg"]
