"""Whitespace-delimited three-column sample file reader."""

from __future__ import annotations

import math
from pathlib import Path
import re
from typing import Iterable

import numpy as np

from spectraledit.domain.models import FloatArray
from spectraledit.errors import ParseError

_EXPECTED_COLUMNS = 3
_VALUE_COLUMN = 1
_DECIMAL_TOKEN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_samples(lines: Iterable[str]) -> FloatArray:
    """Collect the middle column of every three-token row.

    Rows with any other token count are skipped. A bad value in a three-token
    row fails the whole parse.
    """
    values: list[float] = []
    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if len(tokens) != _EXPECTED_COLUMNS:
            continue
        token = tokens[_VALUE_COLUMN]
        if _DECIMAL_TOKEN.fullmatch(token) is None:
            raise ParseError(
                f"line {line_number}: sample value is not numeric: {token!r}",
                line_number=line_number,
                token=token,
            )
        value = float(token)
        if not math.isfinite(value):
            raise ParseError(
                f"line {line_number}: sample value is not finite: {token!r}",
                line_number=line_number,
                token=token,
            )
        values.append(value)

    samples = np.asarray(values, dtype=np.float64)
    samples.flags.writeable = False
    return samples


def load_samples(path: str | Path) -> FloatArray:
    """Read a sample file from disk."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Sample file does not exist: {file_path}")
    if file_path.is_dir():
        raise IsADirectoryError(f"Sample path is a directory: {file_path}")
    text = file_path.read_text(encoding="utf-8")
    return parse_samples(text.splitlines())
