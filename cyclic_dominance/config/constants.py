"""Centralized domain constants for cyclic-dominance simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_GRID_SIZE = 100
"""Default grid side length N (the grid holds N * N cells)."""

DEFAULT_STEPS_PER_TICK = 1_000
"""Default number of single-cell interactions batched per driver tick."""

DEFAULT_TICKS = 600
"""Default number of ticks executed by a headless run."""

MAX_HISTORY_LENGTH = 600
"""Default capacity of the sliding-window population history."""

NUM_SPECIES = 3
"""Number of species in the cyclic dominance relation."""

SPECIES_NAMES: tuple[str, ...] = ("Rock", "Paper", "Scissors")
"""Display names indexed by species value."""

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))
"""Von Neumann neighborhood as (dx, dy): up, down, left, right."""

FIGURE_DPI = 150
"""Resolution used when saving rendered figures."""
