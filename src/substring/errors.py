"""Exception types raised by substring."""

from __future__ import annotations


class SubstringError(Exception):
    """Base class for every error raised by this package."""


class InvalidEncodingError(SubstringError, ValueError):
    """A bytes-like source is not valid UTF-8."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class CapabilityUnavailableError(SubstringError, RuntimeError):
    """An optional capability was requested but its dependency is missing."""
