from __future__ import annotations

import logging

import numpy as np
import pytest

from curvy.geometry.curves import Polygon
from curvy.logging_utils import _safe_repr, configure_logging, debug_log_call


def test_debug_log_call_records_entry_and_exit(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("curvy.tests")

    @debug_log_call(logger)
    def double(x):
        return 2 * x

    with caplog.at_level(logging.DEBUG, logger="curvy"):
        assert double(21) == 42
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Entering") and "double" in m for m in messages)
    assert any(m.startswith("Exiting") and "42" in m for m in messages)
    assert debug_log_call(logger)(double) is double


def test_debug_log_call_is_silent_above_debug(caplog: pytest.LogCaptureFixture) -> None:
    square = Polygon.from_tuples([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
    with caplog.at_level(logging.INFO, logger="curvy"):
        square.offset(0.1)
    assert caplog.records == []


def test_safe_repr_bounds_output() -> None:
    assert _safe_repr(np.float64(0.1234567891)) == "0.123457"
    assert _safe_repr(list(range(20))).endswith("... (20 items)]")
    assert len(_safe_repr("x" * 1000)) < 500


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("chatty")
    configure_logging("warning")
    assert logging.getLogger("curvy").level == logging.WARNING
