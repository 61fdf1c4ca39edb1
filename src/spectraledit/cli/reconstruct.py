"""CLI for one-shot spectral editing and reconstruction export."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from spectraledit.data import write_series
from spectraledit.domain.models import EditMode
from spectraledit.errors import SpectralEditError
from spectraledit.pipeline import ReconstructionConfig, result_to_jsonable, run_reconstruction


@dataclass(frozen=True, slots=True)
class ReconstructionCliArtifacts:
    """Paths and residual gate status produced by one CLI execution."""

    reconstruction_path: Path
    residual_path: Path
    report_path: Path
    residual_rms: float
    residual_gate_passed: bool


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser for spectral edit + reconstruction."""
    parser = argparse.ArgumentParser(
        prog="spectraledit-reconstruct",
        description=(
            "Load a three-column sample file, suppress frequency bins, and write the "
            "reconstructed signal with its residual."
        ),
    )
    parser.add_argument(
        "--workspace-root",
        type=Path,
        default=Path.cwd(),
        help="Workspace root path used to resolve relative inputs/outputs.",
    )
    parser.add_argument("--input", type=Path, required=True, help="Sample file to load.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("artifacts/reconstruction"),
        help="Directory for reconstruction.txt, residual.txt, and report.json.",
    )

    edit = parser.add_mutually_exclusive_group()
    edit.add_argument(
        "--truncate",
        type=int,
        default=None,
        metavar="MAX_BINS",
        help="Keep only the lowest MAX_BINS frequency bins (clamped to the spectrum length).",
    )
    edit.add_argument(
        "--suppress",
        type=int,
        action="append",
        default=None,
        metavar="INDEX",
        help="Suppress one frequency bin; repeat for several bins.",
    )
    edit.add_argument(
        "--dominant",
        action="store_true",
        help="Keep DC and the strongest non-DC bin only.",
    )

    parser.add_argument("--top-bins", type=int, default=10, help="Ranked bins listed in report.json.")
    parser.add_argument(
        "--max-residual-rms",
        type=float,
        default=None,
        help="Exit with status 1 when the residual RMS exceeds this value.",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ReconstructionConfig:
    """Map parsed CLI arguments to a reconstruction config."""
    input_path = _resolve_path(args.workspace_root.resolve(), args.input)
    if args.truncate is not None:
        return ReconstructionConfig(
            input_path=input_path,
            mode=EditMode.TRUNCATE,
            max_bins=args.truncate,
            top_bins=args.top_bins,
        )
    if args.suppress:
        return ReconstructionConfig(
            input_path=input_path,
            mode=EditMode.PER_BIN,
            suppressed_bins=tuple(args.suppress),
            top_bins=args.top_bins,
        )
    if args.dominant:
        return ReconstructionConfig(input_path=input_path, mode=EditMode.DOMINANT, top_bins=args.top_bins)
    return ReconstructionConfig(input_path=input_path, top_bins=args.top_bins)


def run_from_args(args: argparse.Namespace) -> ReconstructionCliArtifacts:
    """Execute one reconstruction and write its artifacts."""
    workspace_root = args.workspace_root.resolve()
    output_dir = _resolve_path(workspace_root, args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    result = run_reconstruction(config_from_args(args))

    reconstruction_path = write_series(output_dir / "reconstruction.txt", result.reconstruction)
    residual_path = write_series(output_dir / "residual.txt", result.residual)

    residual_rms = result.residual_summary.rms
    gate_passed = args.max_residual_rms is None or residual_rms <= args.max_residual_rms
    report = result_to_jsonable(result)
    report["residual_gate"] = {
        "max_residual_rms": args.max_residual_rms,
        "passed": gate_passed,
    }
    report_path = output_dir / "report.json"
    _write_json(report_path, report)

    return ReconstructionCliArtifacts(
        reconstruction_path=reconstruction_path,
        residual_path=residual_path,
        report_path=report_path,
        residual_rms=residual_rms,
        residual_gate_passed=gate_passed,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        artifacts = run_from_args(args)
    except (SpectralEditError, OSError, ValueError) as exc:
        print(f"[ERROR] Reconstruction failed: {exc}", file=sys.stderr)
        return 2

    print(f"reconstruction: {artifacts.reconstruction_path}")
    print(f"residual: {artifacts.residual_path}")
    print(f"report: {artifacts.report_path}")
    print(f"residual_rms: {artifacts.residual_rms}")
    if not artifacts.residual_gate_passed:
        print("[ERROR] Residual RMS exceeds --max-residual-rms.", file=sys.stderr)
        return 1
    return 0


def _resolve_path(base_dir: Path, path_value: Path) -> Path:
    if path_value.is_absolute():
        return path_value.resolve()
    return (base_dir / path_value).resolve()


def _write_json(path: Path, payload: dict[str, Any]) -> None:
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


if __name__ == "__main__":
    raise SystemExit(main())
