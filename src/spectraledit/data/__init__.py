"""Text adapters for sample input and reconstruction export."""

from spectraledit.data.export import format_series, write_series
from spectraledit.data.loader import load_samples, parse_samples

__all__ = [
    "format_series",
    "load_samples",
    "parse_samples",
    "write_series",
]
