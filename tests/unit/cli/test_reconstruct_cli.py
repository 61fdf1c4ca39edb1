"""Tests for the reconstruction CLI."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from spectraledit.cli import reconstruct


def _write_input(workspace_root: Path) -> Path:
    path = workspace_root / "data" / "samples.txt"
    path.parent.mkdir(parents=True)
    path.write_text("0 1.0 a\n1 2.0 b\n2 3.0 c\n3 4.0 d\n", encoding="utf-8")
    return path


def test_main_writes_artifacts(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_input(tmp_path)

    exit_code = reconstruct.main(
        [
            "--workspace-root",
            str(tmp_path),
            "--input",
            "data/samples.txt",
            "--output-dir",
            "artifacts/out",
            "--truncate",
            "1",
        ]
    )
    assert exit_code == 0

    out_dir = tmp_path / "artifacts" / "out"
    reconstruction = [float(line) for line in (out_dir / "reconstruction.txt").read_text().splitlines()]
    residual = [float(line) for line in (out_dir / "residual.txt").read_text().splitlines()]
    assert np.allclose(reconstruction, 2.5)
    assert np.allclose(residual, [-1.5, -0.5, 0.5, 1.5])

    payload = json.loads((out_dir / "report.json").read_text(encoding="utf-8"))
    assert payload["mode"] == "truncate"
    assert payload["suppressed_bins"] == [1, 2]
    assert payload["residual_gate"]["passed"] is True
    assert "report:" in capsys.readouterr().out


def test_main_suppress_flag_is_repeatable(tmp_path: Path) -> None:
    _write_input(tmp_path)

    exit_code = reconstruct.main(
        ["--workspace-root", str(tmp_path), "--input", "data/samples.txt", "--suppress", "1", "--suppress", "2"]
    )
    assert exit_code == 0

    payload = json.loads(
        (tmp_path / "artifacts" / "reconstruction" / "report.json").read_text(encoding="utf-8")
    )
    assert payload["mode"] == "per_bin"
    assert payload["suppressed_bins"] == [1, 2]


def test_main_rejects_combined_edit_modes(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        reconstruct.main(["--input", str(tmp_path / "x.txt"), "--truncate", "1", "--dominant"])


def test_main_returns_one_when_residual_gate_fails(tmp_path: Path) -> None:
    _write_input(tmp_path)

    exit_code = reconstruct.main(
        [
            "--workspace-root",
            str(tmp_path),
            "--input",
            "data/samples.txt",
            "--truncate",
            "1",
            "--max-residual-rms",
            "0.5",
        ]
    )
    assert exit_code == 1


def test_main_reports_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = reconstruct.main(["--workspace-root", str(tmp_path), "--input", "missing.txt"])

    assert exit_code == 2
    assert "[ERROR] Reconstruction failed" in capsys.readouterr().err


def test_main_reports_parse_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "bad.txt").write_text("1 5.0 x\n2 foo y\n", encoding="utf-8")

    exit_code = reconstruct.main(["--workspace-root", str(tmp_path), "--input", "bad.txt"])

    assert exit_code == 2
    assert "not numeric" in capsys.readouterr().err
    assert not (tmp_path / "artifacts" / "reconstruction" / "reconstruction.txt").exists()
