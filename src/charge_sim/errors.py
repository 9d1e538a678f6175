# MIT License (see LICENSE)
"""
Exception types raised by the charge system.

Index errors on population and force queries are not raised; they are
logged and the call becomes a no-op. The exceptions here cover the failures
that cannot be turned into a meaningful result.
"""
from __future__ import annotations


class ChargeSystemError(Exception):
    """Base class for all charge system errors."""


class DegenerateGeometryError(ChargeSystemError, ZeroDivisionError):
    """
    Raised when a direction is requested for a zero-length separation.

    Happens when a field query point coincides with a contributing charge,
    or when two distinct charges share the same position.
    """


class IncompleteSystemError(ChargeSystemError):
    """Raised when an aggregate query runs while some slots are still empty."""

    def __init__(self, missing: list[int]):
        self.missing = missing
        super().__init__(f"Charge system is not fully initialized; unset slots: {missing}")
