"""One-shot reconstruction run: load, edit, rank, compare."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from spectraledit.analysis import ResidualSummary, rank_bins, summarize_residual
from spectraledit.data import load_samples
from spectraledit.domain.models import EditMode, FloatArray, RankedBin
from spectraledit.editing import BinEditor


@dataclass(frozen=True, slots=True)
class ReconstructionConfig:
    """Configuration for one non-interactive edit session."""

    input_path: Path
    mode: EditMode = EditMode.NONE
    max_bins: int | None = None
    suppressed_bins: tuple[int, ...] = ()
    top_bins: int = 10

    def __post_init__(self) -> None:
        if self.top_bins < 0:
            raise ValueError("top_bins must be >= 0")
        if self.mode == EditMode.TRUNCATE:
            if self.max_bins is None:
                raise ValueError("max_bins is required for truncate mode")
        elif self.max_bins is not None:
            raise ValueError(f"max_bins is only valid for truncate mode, got mode={self.mode.value}")
        if self.mode == EditMode.PER_BIN:
            if not self.suppressed_bins:
                raise ValueError("suppressed_bins must not be empty for per_bin mode")
            if any(index < 0 for index in self.suppressed_bins):
                raise ValueError("suppressed_bins must be >= 0")
        elif self.suppressed_bins:
            raise ValueError(f"suppressed_bins is only valid for per_bin mode, got mode={self.mode.value}")


@dataclass(frozen=True, slots=True)
class ReconstructionResult:
    """Arrays and summaries produced by one reconstruction run."""

    input_path: Path
    mode: EditMode
    samples: FloatArray
    reconstruction: FloatArray
    residual: FloatArray
    ranked_bins: tuple[RankedBin, ...]
    suppressed_bins: tuple[int, ...]
    bin_count: int
    dominant_bin: int | None
    residual_summary: ResidualSummary


def run_reconstruction(config: ReconstructionConfig) -> ReconstructionResult:
    """Load samples and apply the configured edit to a fresh editor."""
    editor = BinEditor()
    editor.load(load_samples(config.input_path))

    dominant: int | None = None
    if config.mode == EditMode.TRUNCATE and config.max_bins is not None:
        editor.truncate_to(config.max_bins)
    elif config.mode == EditMode.PER_BIN:
        for index in config.suppressed_bins:
            editor.set_suppressed(index, True)
    elif config.mode == EditMode.DOMINANT:
        dominant = editor.isolate_dominant()

    residual = editor.residual()
    return ReconstructionResult(
        input_path=config.input_path,
        mode=editor.mode,
        samples=editor.samples,
        reconstruction=editor.reconstruction,
        residual=residual,
        ranked_bins=rank_bins(editor.canonical_spectrum)[: config.top_bins],
        suppressed_bins=tuple(sorted(editor.suppressed_bins)),
        bin_count=editor.bin_count,
        dominant_bin=dominant,
        residual_summary=summarize_residual(residual),
    )


def result_to_jsonable(result: ReconstructionResult) -> dict[str, Any]:
    """JSON-serializable report without the raw sample arrays."""
    summary = result.residual_summary
    return {
        "input_path": str(result.input_path),
        "mode": result.mode.value,
        "sample_count": int(result.samples.size),
        "bin_count": result.bin_count,
        "suppressed_bins": list(result.suppressed_bins),
        "dominant_bin": result.dominant_bin,
        "top_bins": [
            {"index": ranked.index, "magnitude": ranked.magnitude} for ranked in result.ranked_bins
        ],
        "residual": {
            "max_abs": summary.max_abs,
            "rms": summary.rms,
            "energy": summary.energy,
        },
    }
