"""Core domain models for spectral editing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import numpy as np
import numpy.typing as npt


FloatArray = npt.NDArray[np.float64]
ComplexArray = npt.NDArray[np.complex128]


class EditorState(StrEnum):
    """Lifecycle states of one bin editor."""

    EMPTY = "empty"
    LOADED = "loaded"
    EDITED = "edited"


class EditMode(StrEnum):
    """Editing operation that produced the current suppression pattern."""

    NONE = "none"
    PER_BIN = "per_bin"
    TRUNCATE = "truncate"
    DOMINANT = "dominant"


@dataclass(frozen=True, slots=True)
class RankedBin:
    """One spectrum bin with its magnitude, used for ranked presentation."""

    index: int
    magnitude: float

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("index must be >= 0")
        if self.magnitude < 0:
            raise ValueError("magnitude must be >= 0")
