"""Exceptions raised by grid configuration and coordinate arithmetic."""

from __future__ import annotations


class InvalidBound(ValueError):
    """Grid bound with a non-positive width or height."""


class InvalidModulus(ValueError):
    """Floored modulo requested with a non-positive divisor.

    Bound validation happens at configuration time, so reaching this is a
    programming error rather than a recoverable condition.
    """
