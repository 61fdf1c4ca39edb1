"""Deterministic magnitude ranking of spectrum bins."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from spectraledit.domain.models import RankedBin
from spectraledit.errors import InvalidInputError


def rank_bins(spectrum: npt.ArrayLike) -> tuple[RankedBin, ...]:
    """Order bins by magnitude descending, ties by ascending bin index."""
    bins = np.asarray(spectrum, dtype=np.complex128)
    if bins.ndim != 1:
        raise InvalidInputError("spectrum must be 1D")
    if bins.size == 0:
        return ()

    mags = np.abs(bins)
    indices = np.arange(bins.size)
    # lexsort uses the last key as primary
    order = np.lexsort((indices, -mags))
    return tuple(RankedBin(index=int(i), magnitude=float(mags[i])) for i in order)


def top_bins(spectrum: npt.ArrayLike, count: int) -> tuple[RankedBin, ...]:
    """First ``count`` entries of :func:`rank_bins`."""
    if count < 0:
        raise InvalidInputError("count must be >= 0")
    return rank_bins(spectrum)[:count]
