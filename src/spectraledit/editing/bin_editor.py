"""Stateful spectrum editor driving time-domain reconstruction."""

from __future__ import annotations

import operator

import numpy as np
import numpy.typing as npt

from spectraledit.analysis.residual import difference
from spectraledit.domain.models import ComplexArray, EditMode, EditorState, FloatArray
from spectraledit.errors import IndexOutOfRangeError, NotLoadedError
from spectraledit.transforms.spectral import backward, clamp_bin_count, dominant_bin, forward


class BinEditor:
    """Own canonical/working spectra for one series and keep its reconstruction current.

    Per-bin suppression, truncation and dominant isolation all write the same
    suppression set. They do not stack: each truncation or isolation replaces
    whatever pattern was there before, and the first per-bin edit after either
    one starts again from the canonical spectrum. Consecutive per-bin edits
    accumulate.

    Every mutating call runs one full inverse transform before returning, so
    ``reconstruction`` always matches ``suppressed_bins``. Instances are not
    thread-safe.
    """

    def __init__(self) -> None:
        self._samples: FloatArray | None = None
        self._canonical: ComplexArray | None = None
        self._working: ComplexArray | None = None
        self._reconstruction: FloatArray | None = None
        self._suppressed: set[int] = set()
        self._mode = EditMode.NONE

    @property
    def state(self) -> EditorState:
        if self._canonical is None:
            return EditorState.EMPTY
        if self._suppressed:
            return EditorState.EDITED
        return EditorState.LOADED

    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def sample_count(self) -> int:
        return 0 if self._samples is None else int(self._samples.size)

    @property
    def bin_count(self) -> int:
        return 0 if self._canonical is None else int(self._canonical.size)

    @property
    def samples(self) -> FloatArray:
        samples, _, _ = self._require_loaded()
        return samples

    @property
    def canonical_spectrum(self) -> ComplexArray:
        """Untouched spectrum from the last ``load`` (read-only)."""
        _, canonical, _ = self._require_loaded()
        return canonical

    @property
    def working_spectrum(self) -> ComplexArray:
        """Copy of the masked spectrum currently feeding the reconstruction."""
        _, _, working = self._require_loaded()
        return working.copy()

    @property
    def suppressed_bins(self) -> frozenset[int]:
        return frozenset(self._suppressed)

    @property
    def reconstruction(self) -> FloatArray:
        """Most recently computed reconstruction (read-only)."""
        self._require_loaded()
        if self._reconstruction is None:
            raise NotLoadedError("no reconstruction computed")
        return self._reconstruction

    @property
    def magnitudes(self) -> FloatArray:
        _, canonical, _ = self._require_loaded()
        return np.asarray(np.abs(canonical), dtype=np.float64)

    def load(self, samples: npt.ArrayLike) -> None:
        """Replace the current series and reset all suppression."""
        series = np.array(samples, dtype=np.float64, copy=True)
        canonical = forward(series)
        reconstruction = backward(canonical, sample_count=series.size)
        series.flags.writeable = False
        canonical.flags.writeable = False
        reconstruction.flags.writeable = False

        self._samples = series
        self._canonical = canonical
        self._working = canonical.copy()
        self._suppressed = set()
        self._mode = EditMode.NONE
        self._reconstruction = reconstruction

    def is_suppressed(self, index: int) -> bool:
        self._require_loaded()
        return self._checked_index(index) in self._suppressed

    def set_suppressed(self, index: int, suppressed: bool) -> None:
        """Suppress or restore one bin; repeating the current setting still recomputes."""
        _, canonical, _ = self._require_loaded()
        idx = self._checked_index(index)
        self._discard_bulk_pattern()
        _, _, working = self._require_loaded()
        if suppressed:
            working[idx] = 0
            self._suppressed.add(idx)
        else:
            working[idx] = canonical[idx]
            self._suppressed.discard(idx)
        self._mode = EditMode.PER_BIN
        self._recompute()

    def toggle(self, index: int) -> bool:
        """Flip suppression of one bin and return the new suppressed flag."""
        self._require_loaded()
        idx = self._checked_index(index)
        self._discard_bulk_pattern()
        now_suppressed = idx not in self._suppressed
        self.set_suppressed(index, now_suppressed)
        return now_suppressed

    def truncate_to(self, max_bins: int) -> None:
        """Keep bins ``[0, max_bins)`` and suppress the rest, discarding earlier edits."""
        self._require_loaded()
        keep = clamp_bin_count(max_bins, self.bin_count)
        self._replace_suppression(set(range(keep, self.bin_count)), EditMode.TRUNCATE)

    def isolate_dominant(self) -> int | None:
        """Keep DC and the strongest non-DC bin only; return that bin's index."""
        _, canonical, _ = self._require_loaded()
        keep = {0}
        dominant = dominant_bin(canonical)
        if dominant is not None:
            keep.add(dominant)
        self._replace_suppression(set(range(self.bin_count)) - keep, EditMode.DOMINANT)
        return dominant

    def restore_all(self) -> None:
        """Clear every suppression and return to the canonical spectrum."""
        self._require_loaded()
        self._replace_suppression(set(), EditMode.NONE)

    def residual(self) -> FloatArray:
        """Original samples minus the current reconstruction."""
        return difference(self.samples, self.reconstruction)

    def _discard_bulk_pattern(self) -> None:
        # truncation and dominant isolation patterns never carry over into per-bin edits
        if self._mode in (EditMode.TRUNCATE, EditMode.DOMINANT):
            _, canonical, _ = self._require_loaded()
            self._working = canonical.copy()
            self._suppressed = set()

    def _replace_suppression(self, suppressed: set[int], mode: EditMode) -> None:
        _, canonical, _ = self._require_loaded()
        working = canonical.copy()
        if suppressed:
            working[sorted(suppressed)] = 0
        self._working = working
        self._suppressed = suppressed
        self._mode = mode
        self._recompute()

    def _recompute(self) -> None:
        samples, _, working = self._require_loaded()
        reconstruction = backward(working, sample_count=samples.size)
        reconstruction.flags.writeable = False
        self._reconstruction = reconstruction

    def _checked_index(self, index: int) -> int:
        idx = operator.index(index)
        if idx < 0 or idx >= self.bin_count:
            raise IndexOutOfRangeError(f"bin index {idx} outside [0, {self.bin_count})")
        return idx

    def _require_loaded(self) -> tuple[FloatArray, ComplexArray, ComplexArray]:
        if self._samples is None or self._canonical is None or self._working is None:
            raise NotLoadedError("no sample series loaded")
        return self._samples, self._canonical, self._working
