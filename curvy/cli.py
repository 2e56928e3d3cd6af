from __future__ import annotations

import argparse
import logging
from typing import List, Union

from curvy.export.svg import path_data, to_document, viewbox_for, write_svg
from curvy.geometry.curves import Arc, Polyarc, Polycurve, Polygon, Polyline
from curvy.geometry.errors import CurvyError
from curvy.geometry.primitives import Point
from curvy.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _parse_points(text: str) -> List[Point]:
    points: List[Point] = []
    for token in text.replace(";", " ").split():
        try:
            x, y = token.split(",")
            points.append(Point(float(x), float(y)))
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid point {token!r}; expected x,y")
    return points


def _shape(args: argparse.Namespace) -> Union[Polyline, Polygon]:
    if args.closed:
        return Polygon(tuple(args.points))
    return Polyline(tuple(args.points))


def _save_svg(args: argparse.Namespace, shapes: list, points: List[Point]) -> None:
    if not args.svg:
        return
    document = to_document([path_data(s) for s in shapes], viewbox_for(points))
    out = write_svg(document, args.svg)
    print(f"Saved: {out}")


def _cmd_offset(args: argparse.Namespace) -> int:
    shape = _shape(args)
    try:
        result = shape.offset(args.distance)
    except CurvyError as exc:
        print(f"[ERROR] {exc.message}")
        return 2

    for p in result.points:
        print(str(p))
    _save_svg(args, [shape, result], list(shape.points) + list(result.points))
    return 0


def _cmd_curve(args: argparse.Namespace) -> int:
    shape = _shape(args)
    try:
        curved: Union[Polyarc, Polycurve] = shape.curve(args.size)
        pieces = curved.pieces()
    except CurvyError as exc:
        print(f"[ERROR] {exc.message}")
        return 2

    for piece in pieces:
        if isinstance(piece, Arc):
            print(f"arc {piece.start()} -> {piece.stop()} center={piece.center} radius={float(piece.radius):g}")
        else:
            print(f"line {piece.start()} -> {piece.stop()}")
    _save_svg(args, [curved], list(shape.points))
    return 0


def _add_shape_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--points", type=_parse_points, required=True, help='Vertices as "x,y x,y ..."')
    p.add_argument("--closed", action="store_true", help="Treat the points as a polygon")
    p.add_argument("--svg", default=None, help="Also write an SVG file to this path")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="curvy")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    o = sub.add_parser("offset", help="Offset a polyline or polygon by a signed distance.")
    _add_shape_arguments(o)
    o.add_argument("--distance", type=float, required=True, help="Positive offsets move left of travel")
    o.set_defaults(func=_cmd_offset)

    c = sub.add_parser("curve", help="Round the corners of a polyline or polygon.")
    _add_shape_arguments(c)
    c.add_argument("--size", type=float, required=True, help="Requested fillet size")
    c.set_defaults(func=_cmd_curve)

    args = p.parse_args(argv)
    configure_logging(args.log_level)
    logger.debug("Running %s", args.cmd)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
