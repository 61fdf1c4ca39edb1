"""Plain-text export of reconstructed series."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt


def format_series(series: npt.ArrayLike) -> str:
    """One value per line, shortest round-trip decimal form, no header."""
    values = np.asarray(series, dtype=np.float64)
    if values.ndim != 1:
        raise ValueError("series must be 1D")
    return "".join(f"{float(value)!r}\n" for value in values)


def write_series(path: str | Path, series: npt.ArrayLike) -> Path:
    """Write ``series`` with :func:`format_series`, creating parent directories."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(format_series(series), encoding="utf-8")
    return output_path
