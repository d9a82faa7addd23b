"""Headless run orchestration: simulate, export history, render figures."""

from __future__ import annotations

import logging
from pathlib import Path
from random import Random

from cyclic_dominance.config.types import RunConfig
from cyclic_dominance.io import paths
from cyclic_dominance.simulation.persistence import read_history, write_history
from cyclic_dominance.simulation.session import Simulation
from cyclic_dominance.viz.render import (
    render_composition_stacked,
    render_grid,
    render_population_timeseries,
)
from cyclic_dominance.viz.theme import get_theme

logger = logging.getLogger(__name__)


def run_simulation(config: RunConfig, rng: Random | None = None) -> dict[str, object]:
    """Run `config.ticks` ticks, persist the series and return a summary dict."""
    theme = get_theme(config.theme)
    out_dir = Path(config.out_dir)
    sim = Simulation(config.simulation, rng=rng)
    samples = sim.run(config.ticks)

    history_file = write_history(samples, paths.history_path(out_dir))
    figures: list[str] = []
    if config.render_figures:
        figures.append(
            str(render_grid(sim.engine.read_grid(), paths.grid_figure_path(out_dir), theme=theme))
        )
        if samples:
            figures.append(
                str(
                    render_population_timeseries(
                        samples, paths.population_figure_path(out_dir), theme=theme
                    )
                )
            )
            figures.append(
                str(
                    render_composition_stacked(
                        samples, paths.composition_figure_path(out_dir), theme=theme
                    )
                )
            )
        logger.info("Rendered %d figures under %s", len(figures), paths.figures_dir(out_dir))

    final_counts = samples[-1].counts.as_tuple() if samples else None
    return {
        "grid_size": sim.engine.size,
        "steps_per_tick": sim.steps_per_tick,
        "ticks": config.ticks,
        "steps_taken": sim.engine.steps_taken,
        "samples_retained": len(samples),
        "final_counts": list(final_counts) if final_counts is not None else None,
        "history_path": str(history_file),
        "figures": figures,
    }


def plot_history(history_file: Path, output_dir: Path, theme_name: str = "default") -> list[Path]:
    """Render both population charts from an exported history file."""
    theme = get_theme(theme_name)
    samples = read_history(history_file)
    if not samples:
        raise ValueError(f"History file {history_file} contains no samples")
    output_dir = Path(output_dir)
    return [
        render_population_timeseries(
            samples, output_dir / "population_over_time.png", theme=theme
        ),
        render_composition_stacked(samples, output_dir / "relative_composition.png", theme=theme),
    ]
