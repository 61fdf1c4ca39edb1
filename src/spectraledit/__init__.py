"""Frequency-bin editing and reconstruction for one-dimensional real signals."""

from spectraledit.analysis import ResidualSummary, difference, rank_bins, summarize_residual, top_bins
from spectraledit.domain import EditMode, EditorState, RankedBin
from spectraledit.editing import BinEditor
from spectraledit.errors import (
    IndexOutOfRangeError,
    InvalidInputError,
    LengthMismatchError,
    NotLoadedError,
    ParseError,
    SpectralEditError,
)
from spectraledit.transforms import backward, forward, isolate_dominant, truncate

__all__ = [
    "BinEditor",
    "EditMode",
    "EditorState",
    "IndexOutOfRangeError",
    "InvalidInputError",
    "LengthMismatchError",
    "NotLoadedError",
    "ParseError",
    "RankedBin",
    "ResidualSummary",
    "SpectralEditError",
    "backward",
    "difference",
    "forward",
    "isolate_dominant",
    "rank_bins",
    "summarize_residual",
    "top_bins",
    "truncate",
]
