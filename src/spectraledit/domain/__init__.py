"""Shared domain types for spectral editing."""

from spectraledit.domain.models import (
    ComplexArray,
    EditMode,
    EditorState,
    FloatArray,
    RankedBin,
)

__all__ = [
    "ComplexArray",
    "EditMode",
    "EditorState",
    "FloatArray",
    "RankedBin",
]
