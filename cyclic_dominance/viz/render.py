"""Matplotlib-based rendering functions for grids and population charts."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from cyclic_dominance.config.constants import FIGURE_DPI, NUM_SPECIES
from cyclic_dominance.domain.grid import as_species_grid
from cyclic_dominance.domain.history import HistorySample
from cyclic_dominance.viz.theme import DEFAULT_THEME, Theme

# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def _species_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 3-color colormap, one color per species."""
    cmap = ListedColormap(list(theme.species_colors))
    norm = BoundaryNorm([i - 0.5 for i in range(NUM_SPECIES + 1)], cmap.N)
    return cmap, norm


def _build_species_legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch]:
    return [
        Patch(facecolor=color, edgecolor="gray", label=label)
        for color, label in zip(theme.species_colors, theme.species_labels, strict=True)
    ]


def _save(fig: plt.Figure, output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=FIGURE_DPI, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path


def _require_samples(samples: Sequence[HistorySample]) -> None:
    if not samples:
        raise ValueError("samples must not be empty")


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


def render_grid(
    grid: object,
    output_path: Path,
    title: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Draw the species grid as a cell-fill image."""
    cells = as_species_grid(grid)
    n = cells.shape[0]
    cmap, norm = _species_cmap(theme)

    fig, ax = plt.subplots(figsize=(6, 6))
    fig.patch.set_facecolor(theme.background_color)
    ax.imshow(cells, cmap=cmap, norm=norm, origin="upper", aspect="equal", interpolation="none")
    if theme.draw_grid_lines:
        for i in range(n + 1):
            ax.axvline(i - 0.5, color=theme.grid_line_color, linewidth=0.5)
            ax.axhline(i - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title or f"{n} x {n} grid")
    fig.legend(
        handles=_build_species_legend_handles(theme),
        loc="lower center",
        ncol=NUM_SPECIES,
        frameon=False,
    )
    fig.tight_layout(rect=(0, 0.06, 1, 1))
    return _save(fig, output_path)


def render_population_timeseries(
    samples: Sequence[HistorySample],
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Absolute species counts per time step, y-range [0, N*N]."""
    _require_samples(samples)
    steps = [s.time_step for s in samples]
    counts = np.array([s.counts.as_tuple() for s in samples])
    total_cells = max(s.total_cells for s in samples)

    fig, ax = plt.subplots(figsize=(8, 4))
    fig.patch.set_facecolor(theme.background_color)
    for species in range(NUM_SPECIES):
        ax.plot(
            steps,
            counts[:, species],
            color=theme.species_colors[species],
            label=theme.species_labels[species],
        )
    ax.set_ylim(0, total_cells)
    ax.set_xlabel("Time Steps")
    ax.set_ylabel("Population (cells)")
    ax.set_title("Population Over Time")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return _save(fig, output_path)


def render_composition_stacked(
    samples: Sequence[HistorySample],
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Stacked area of each species' share per time step, y-range [0, 100]."""
    _require_samples(samples)
    steps = [s.time_step for s in samples]
    shares = np.array([s.percentages() for s in samples])

    fig, ax = plt.subplots(figsize=(8, 4))
    fig.patch.set_facecolor(theme.background_color)
    ax.stackplot(
        steps,
        *(shares[:, species] for species in range(NUM_SPECIES)),
        colors=list(theme.species_colors),
        labels=list(theme.species_labels),
    )
    ax.set_ylim(0, 100)
    if len(steps) > 1:
        ax.set_xlim(steps[0], steps[-1])
    ax.set_xlabel("Time Steps")
    ax.set_ylabel("Percentage (%)")
    ax.set_title("Relative Population Composition Over Time")
    ax.legend(loc="upper right")
    fig.tight_layout()
    return _save(fig, output_path)
