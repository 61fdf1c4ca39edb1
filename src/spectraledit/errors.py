"""Typed failures raised by spectral editing operations."""

from __future__ import annotations


class SpectralEditError(Exception):
    """Base class for all spectral editing failures."""


class InvalidInputError(SpectralEditError, ValueError):
    """Empty or degenerate sample/spectrum input to a transform."""


class NotLoadedError(SpectralEditError, RuntimeError):
    """Edit requested before any series was loaded."""


class IndexOutOfRangeError(SpectralEditError, IndexError):
    """Bin index outside spectrum bounds."""


class LengthMismatchError(SpectralEditError, ValueError):
    """Series lengths differ where elementwise alignment is required."""


class ParseError(SpectralEditError, ValueError):
    """Malformed numeric token in a sample input row."""

    def __init__(self, message: str, *, line_number: int, token: str) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.token = token
