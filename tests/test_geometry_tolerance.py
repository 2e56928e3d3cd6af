from __future__ import annotations

import inspect
import re
from pathlib import Path

from curvy.geometry import polygon2d, primitives, scalar
from curvy.geometry.curves import arc
from curvy.geometry.tolerance import EPS_ANG, EPS_AREA, EPS_F32, EPS_POS, EPS_REL, EPS_WELD


def test_tolerance_constants_exist() -> None:
    assert EPS_POS > 0.0
    assert EPS_ANG > 0.0
    assert EPS_REL > 0.0
    assert EPS_AREA > 0.0
    assert EPS_WELD > 0.0
    assert EPS_F32 > EPS_POS


def test_key_geometry_functions_use_central_tolerance_defaults() -> None:
    assert inspect.signature(primitives.Point.isclose).parameters["eps"].default == EPS_WELD
    assert inspect.signature(primitives.Delta.isclose).parameters["eps"].default == EPS_WELD
    assert scalar.ScalarConfig().approx_abs == EPS_POS
    assert scalar.ScalarConfig().approx_rel == EPS_REL
    assert scalar.default_config("float32").approx_abs == EPS_F32


def test_key_geometry_modules_reference_shared_tolerance_symbols() -> None:
    assert polygon2d.EPS_AREA == EPS_AREA
    assert primitives.EPS_WELD == EPS_WELD
    assert arc.EPS_ANG == EPS_ANG


def test_geometry_package_has_no_inline_scientific_epsilon_literals() -> None:
    root = Path(__file__).resolve().parents[1] / "curvy" / "geometry"
    pattern = re.compile(r"\b1e-\d+\b")
    offenders: list[str] = []
    for p in sorted(root.rglob("*.py")):
        if p.name == "tolerance.py":
            continue
        text = p.read_text(encoding="utf-8")
        if pattern.search(text):
            offenders.append(str(p.relative_to(root.parent.parent)))
    assert offenders == []
