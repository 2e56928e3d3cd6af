"""Finite scalar domain shared by every geometry type.

Values are NumPy floating scalars of the active precision. Construction goes
through :func:`finite`, which rejects NaN and infinities, so a non-finite value
can never be stored in a Point, Delta, Angle, Line or Arc.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Type, Union

import numpy as np

from curvy.geometry.errors import InvariantViolation
from curvy.geometry.tolerance import EPS_F32, EPS_POS, EPS_REL

Scalar = np.floating
Real = Union[float, int, np.floating]

_DTYPES: Dict[str, Type[np.floating]] = {
    "float32": np.float32,
    "float64": np.float64,
}


@dataclass(frozen=True)
class ScalarConfig:
    """Active precision and the tolerances used for approximate comparisons."""

    dtype: str = "float64"
    approx_abs: float = EPS_POS
    approx_rel: float = EPS_REL

    def __post_init__(self) -> None:
        if self.dtype not in _DTYPES:
            raise ValueError(f"Unsupported precision {self.dtype!r}; expected one of {sorted(_DTYPES)}")

    @property
    def numpy_type(self) -> Type[np.floating]:
        return _DTYPES[self.dtype]


def default_config(dtype: str = "float64") -> ScalarConfig:
    if dtype == "float32":
        return ScalarConfig(dtype="float32", approx_abs=EPS_F32, approx_rel=EPS_F32)
    return ScalarConfig(dtype=dtype)


_SCALAR_CONFIG = default_config(os.environ.get("CURVY_PRECISION", "float64").strip().lower())


def get_scalar_config() -> ScalarConfig:
    return _SCALAR_CONFIG


def set_scalar_config(config: ScalarConfig) -> None:
    global _SCALAR_CONFIG
    _SCALAR_CONFIG = config


@contextmanager
def use_precision(dtype: str) -> Iterator[ScalarConfig]:
    """Temporarily switch the precision used for newly constructed scalars."""

    previous = get_scalar_config()
    config = default_config(dtype)
    set_scalar_config(config)
    try:
        yield config
    finally:
        set_scalar_config(previous)


def finite(value: Real) -> Scalar:
    """Convert *value* to the active precision, rejecting NaN and infinities."""

    with np.errstate(over="ignore", invalid="ignore"):
        out = _SCALAR_CONFIG.numpy_type(value)
    if not np.isfinite(out):
        raise InvariantViolation(f"Scalar value is not finite: {value!r}")
    return out


def pi() -> Scalar:
    return finite(np.pi)


def two_pi() -> Scalar:
    return finite(2.0 * np.pi)


def frac_pi_2() -> Scalar:
    return finite(np.pi / 2.0)


def sin(x: Real) -> Scalar:
    return finite(np.sin(finite(x)))


def cos(x: Real) -> Scalar:
    return finite(np.cos(finite(x)))


def atan2(y: Real, x: Real) -> Scalar:
    return finite(np.arctan2(finite(y), finite(x)))


def sqrt(x: Real) -> Scalar:
    if x < 0:
        raise InvariantViolation(f"Square root of negative value: {x!r}")
    return finite(np.sqrt(finite(x)))


def hypot(x: Real, y: Real) -> Scalar:
    return finite(np.hypot(finite(x), finite(y)))


def isclose(a: Real, b: Real, *, abs_tol: Optional[float] = None, rel_tol: Optional[float] = None) -> bool:
    cfg = _SCALAR_CONFIG
    atol = cfg.approx_abs if abs_tol is None else float(abs_tol)
    rtol = cfg.approx_rel if rel_tol is None else float(rel_tol)
    return bool(np.isclose(float(a), float(b), rtol=rtol, atol=atol))


__all__ = [
    "Scalar",
    "Real",
    "ScalarConfig",
    "default_config",
    "get_scalar_config",
    "set_scalar_config",
    "use_precision",
    "finite",
    "pi",
    "two_pi",
    "frac_pi_2",
    "sin",
    "cos",
    "atan2",
    "sqrt",
    "hypot",
    "isclose",
]
