"""Tests for reconstruction text export."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from spectraledit.data import format_series, write_series


def test_format_series_one_value_per_line() -> None:
    assert format_series([1.0, 2.5, -0.1]) == "1.0\n2.5\n-0.1\n"


def test_format_series_round_trips_exact_values() -> None:
    values = np.asarray([1.0 / 3.0, 2.0**-40, -123456.789])
    text = format_series(values)

    parsed = np.asarray([float(line) for line in text.splitlines()])
    assert np.array_equal(parsed, values)


def test_format_series_empty() -> None:
    assert format_series([]) == ""


def test_format_series_rejects_2d() -> None:
    with pytest.raises(ValueError, match="1D"):
        format_series(np.zeros((2, 2)))


def test_write_series_creates_parent_dirs(tmp_path: Path) -> None:
    path = write_series(tmp_path / "nested" / "out.txt", [2.5, 2.5])

    assert path.read_text(encoding="utf-8") == "2.5\n2.5\n"
