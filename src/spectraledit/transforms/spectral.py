"""One-sided real FFT wrapper with bin masking helpers.

Spectra are always the non-redundant half produced by a real-input transform:
``N // 2 + 1`` complex bins ordered from DC up to Nyquist. The inverse needs the
original sample count because odd and even ``N`` share the same half length.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from spectraledit.domain.models import ComplexArray, FloatArray
from spectraledit.errors import InvalidInputError


def spectrum_length(sample_count: int) -> int:
    """Number of half-spectrum bins for ``sample_count`` real samples."""
    if sample_count <= 0:
        raise InvalidInputError("sample_count must be > 0")
    return sample_count // 2 + 1


def forward(samples: npt.ArrayLike) -> ComplexArray:
    """Real samples to half spectrum."""
    x = _as_valid_series(samples)
    spectrum = np.asarray(np.fft.rfft(x), dtype=np.complex128)
    if not np.all(np.isfinite(spectrum)):
        raise InvalidInputError("spectrum overflows; sample magnitudes are too large")
    return spectrum


def backward(spectrum: npt.ArrayLike, *, sample_count: int) -> FloatArray:
    """Half spectrum back to ``sample_count`` real samples."""
    bins = _as_valid_spectrum(spectrum)
    expected = spectrum_length(sample_count)
    if bins.size != expected:
        raise InvalidInputError(
            f"spectrum length {bins.size} is inconsistent with sample_count={sample_count} "
            f"(expected {expected} bins)"
        )
    return np.asarray(np.fft.irfft(bins, n=sample_count), dtype=np.float64)


def clamp_bin_count(max_bins: int, bin_count: int) -> int:
    """Clamp a requested bin count into ``[0, bin_count]``."""
    return max(0, min(int(max_bins), bin_count))


def suppress_all_except(spectrum: npt.ArrayLike, max_bins: int) -> ComplexArray:
    """Copy of ``spectrum`` with every bin at index >= ``max_bins`` zeroed."""
    bins = np.array(_as_valid_spectrum(spectrum), dtype=np.complex128, copy=True)
    keep = clamp_bin_count(max_bins, bins.size)
    bins[keep:] = 0
    return bins


def truncate(samples: npt.ArrayLike, max_bins: int) -> FloatArray:
    """Reconstruct ``samples`` from only its lowest ``max_bins`` frequency bins.

    Out-of-range ``max_bins`` is clamped, never rejected.
    """
    x = _as_valid_series(samples)
    return backward(suppress_all_except(forward(x), max_bins), sample_count=x.size)


def dominant_bin(spectrum: npt.ArrayLike) -> int | None:
    """Index of the strongest non-DC bin, or ``None`` when no non-DC bin carries energy."""
    bins = _as_valid_spectrum(spectrum)
    if bins.size < 2:
        return None
    mags = np.abs(bins[1:])
    idx = int(np.argmax(mags))
    if mags[idx] <= 0:
        return None
    return idx + 1


def isolate_dominant(samples: npt.ArrayLike) -> FloatArray:
    """Reconstruct ``samples`` from DC plus its single strongest non-DC component."""
    x = _as_valid_series(samples)
    spectrum = forward(x)
    keep = dominant_bin(spectrum)
    masked = np.zeros_like(spectrum)
    masked[0] = spectrum[0]
    if keep is not None:
        masked[keep] = spectrum[keep]
    return backward(masked, sample_count=x.size)


def _as_valid_series(samples: npt.ArrayLike) -> FloatArray:
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim != 1:
        raise InvalidInputError("samples must be 1D")
    if x.size == 0:
        raise InvalidInputError("samples must not be empty")
    if not np.all(np.isfinite(x)):
        raise InvalidInputError("samples must contain only finite values")
    return x


def _as_valid_spectrum(spectrum: npt.ArrayLike) -> ComplexArray:
    bins = np.asarray(spectrum, dtype=np.complex128)
    if bins.ndim != 1:
        raise InvalidInputError("spectrum must be 1D")
    if bins.size == 0:
        raise InvalidInputError("spectrum must not be empty")
    if not np.all(np.isfinite(bins)):
        raise InvalidInputError("spectrum must contain only finite values")
    return bins
