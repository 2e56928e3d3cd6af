from __future__ import annotations


class InvariantViolation(AssertionError):
    """Raised when a caller breaks a precondition of the geometry kernel.

    These are programmer errors: non-finite scalars, angles outside [0, 2pi),
    shapes with too few or repeated points. They are never recovered from
    inside the package.
    """


class CurvyError(ValueError):
    """Recoverable geometric degeneracy carrying a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedOperation(NotImplementedError):
    """Raised for operations without a defined algorithm (arc-arc, curved offset)."""
