from __future__ import annotations

import numpy as np
import pytest

from curvy.geometry.angle import Angle
from curvy.geometry.errors import InvariantViolation
from curvy.geometry.primitives import Point
from curvy.geometry.scalar import (
    ScalarConfig,
    finite,
    get_scalar_config,
    isclose,
    set_scalar_config,
    sqrt,
    use_precision,
)


def test_finite_rejects_nan_and_infinity() -> None:
    assert finite(1.5) == 1.5
    with pytest.raises(InvariantViolation):
        finite(float("nan"))
    with pytest.raises(InvariantViolation):
        finite(float("inf"))
    with pytest.raises(InvariantViolation):
        sqrt(-1.0)


def test_default_precision_is_double() -> None:
    assert get_scalar_config().dtype == "float64"
    assert isinstance(Point(1.0, 2.0).x, np.float64)


def test_use_precision_switches_and_restores() -> None:
    before = get_scalar_config()
    with use_precision("float32") as cfg:
        assert cfg.dtype == "float32"
        p = Point(1.0, 2.0)
        assert isinstance(p.x, np.float32)
        assert isinstance(Angle.wrap(-1.0).radians, np.float32)
    assert get_scalar_config() == before


def test_set_scalar_config_round_trip() -> None:
    before = get_scalar_config()
    try:
        set_scalar_config(ScalarConfig(dtype="float64", approx_abs=0.5))
        assert isclose(1.0, 1.4)
        assert not isclose(1.0, 1.6)
    finally:
        set_scalar_config(before)
    assert not isclose(1.0, 1.4)


def test_unknown_precision_is_rejected() -> None:
    with pytest.raises(ValueError):
        ScalarConfig(dtype="float16")
