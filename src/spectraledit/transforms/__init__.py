"""Forward/inverse spectral transforms over real sample series."""

from spectraledit.transforms.spectral import (
    backward,
    clamp_bin_count,
    dominant_bin,
    forward,
    isolate_dominant,
    spectrum_length,
    suppress_all_except,
    truncate,
)

__all__ = [
    "backward",
    "clamp_bin_count",
    "dominant_bin",
    "forward",
    "isolate_dominant",
    "spectrum_length",
    "suppress_all_except",
    "truncate",
]
