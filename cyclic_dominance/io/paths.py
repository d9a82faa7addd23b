"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def figures_dir(out_dir: Path) -> Path:
    return out_dir / "figures"


def history_path(out_dir: Path) -> Path:
    """Return path to the population history Parquet file."""
    return logs_dir(out_dir) / "history.parquet"


def grid_figure_path(out_dir: Path) -> Path:
    return figures_dir(out_dir) / "final_grid.png"


def population_figure_path(out_dir: Path) -> Path:
    return figures_dir(out_dir) / "population_over_time.png"


def composition_figure_path(out_dir: Path) -> Path:
    return figures_dir(out_dir) / "relative_composition.png"
