"""Tests for run_simulation / plot_history orchestration."""

from __future__ import annotations

from pathlib import Path
from random import Random

import pytest

from cyclic_dominance.config.types import RunConfig, SimulationConfig
from cyclic_dominance.experiments.run import plot_history, run_simulation
from cyclic_dominance.simulation.persistence import read_history, write_history


def _config(tmp_path: Path, **overrides: object) -> RunConfig:
    params: dict[str, object] = {
        "simulation": SimulationConfig(grid_size=10, steps_per_tick=100, max_history_length=600),
        "ticks": 0,
        "out_dir": tmp_path,
        "render_figures": False,
    }
    params.update(overrides)
    return RunConfig(**params)  # type: ignore[arg-type]


def test_run_ten_by_ten_counts_sum_to_cells(tmp_path: Path) -> None:
    summary = run_simulation(_config(tmp_path, ticks=10), rng=Random(9))
    assert summary["steps_taken"] == 1_000
    assert sum(summary["final_counts"]) == 100  # type: ignore[arg-type]
    samples = read_history(Path(str(summary["history_path"])))
    assert [s.time_step for s in samples] == list(range(10))


def test_zero_ticks_still_exports(tmp_path: Path) -> None:
    summary = run_simulation(_config(tmp_path, render_figures=True), rng=Random(0))
    assert summary["final_counts"] is None
    assert len(summary["figures"]) == 1  # type: ignore[arg-type]


def test_unknown_theme_rejected_before_running(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unknown theme"):
        run_simulation(_config(tmp_path, theme="neon"))
    assert not (tmp_path / "logs").exists()


def test_plot_history_rejects_empty_file(tmp_path: Path) -> None:
    path = write_history([], tmp_path / "history.parquet")
    with pytest.raises(ValueError, match="no samples"):
        plot_history(path, tmp_path / "charts")
