"""Exceptions raised by the SPFF codec."""

from __future__ import annotations


class SpffError(Exception):
    """Base exception for all SPFF codec errors."""


class InvalidDimensionsError(SpffError):
    """Width or height is zero, negative or too large for the header."""


class SizeMismatchError(SpffError):
    """Encoded payload length does not match the declared dimensions."""


class TruncatedInputError(SizeMismatchError):
    """Encoded data ends before the header or payload is complete."""


class AllocationError(SpffError):
    """Output buffer could not be allocated."""
