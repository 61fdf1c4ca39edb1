"""Residual between an original series and its reconstruction."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from spectraledit.domain.models import FloatArray
from spectraledit.errors import InvalidInputError, LengthMismatchError


@dataclass(frozen=True, slots=True)
class ResidualSummary:
    """Compact summary of one residual series."""

    max_abs: float
    rms: float
    energy: float


def difference(a: npt.ArrayLike, b: npt.ArrayLike) -> FloatArray:
    """Elementwise ``a - b`` for equal-length real series."""
    x = np.asarray(a, dtype=np.float64)
    y = np.asarray(b, dtype=np.float64)
    if x.ndim != 1 or y.ndim != 1:
        raise InvalidInputError("series must be 1D")
    if x.size != y.size:
        raise LengthMismatchError(f"series lengths differ: {x.size} != {y.size}")
    return np.subtract(x, y)


def summarize_residual(residual: npt.ArrayLike) -> ResidualSummary:
    """Max absolute value, RMS and energy of one residual series."""
    r = np.asarray(residual, dtype=np.float64)
    if r.ndim != 1:
        raise InvalidInputError("residual must be 1D")
    if r.size == 0:
        return ResidualSummary(max_abs=0.0, rms=0.0, energy=0.0)
    return ResidualSummary(
        max_abs=float(np.max(np.abs(r))),
        rms=float(np.sqrt(np.mean(np.square(r)))),
        energy=float(np.sum(np.square(r))),
    )
