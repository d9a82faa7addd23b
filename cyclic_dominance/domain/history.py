"""Population aggregation and the sliding-window history series.

Counts are recomputed from a full scan of the grid snapshot on every sample.
Nothing is maintained incrementally, so a sample always agrees with the
grid it was taken from.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

import numpy as np

from cyclic_dominance.config.constants import MAX_HISTORY_LENGTH, NUM_SPECIES
from cyclic_dominance.domain.grid import as_species_grid
from cyclic_dominance.domain.species import Species


@dataclass(frozen=True)
class PopulationCounts:
    """Number of cells held by each species."""

    rock: int
    paper: int
    scissors: int

    @property
    def total(self) -> int:
        return self.rock + self.paper + self.scissors

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.rock, self.paper, self.scissors)

    def __getitem__(self, species: int) -> int:
        return self.as_tuple()[Species(species)]

    def percentages(self, total_cells: int) -> tuple[float, float, float]:
        """Share of each species as a percentage of `total_cells`."""
        if total_cells < 1:
            raise ValueError("total_cells must be >= 1")
        rock, paper, scissors = (count / total_cells * 100 for count in self.as_tuple())
        return (rock, paper, scissors)


@dataclass(frozen=True)
class HistorySample:
    """One point of the series; `total_cells` is the normalization basis."""

    time_step: int
    counts: PopulationCounts
    total_cells: int

    def percentages(self) -> tuple[float, float, float]:
        return self.counts.percentages(self.total_cells)


def count_populations(grid_snapshot: object) -> PopulationCounts:
    """Tally every cell of `grid_snapshot` by species."""
    return _tally(as_species_grid(grid_snapshot, name="grid_snapshot"))


def _tally(grid: np.ndarray) -> PopulationCounts:
    """Count species in an already-validated grid."""
    tally = np.bincount(grid.ravel(), minlength=NUM_SPECIES)
    return PopulationCounts(rock=int(tally[0]), paper=int(tally[1]), scissors=int(tally[2]))


class HistoryTracker:
    """Bounded, time-ordered series of population samples."""

    def __init__(self, max_length: int = MAX_HISTORY_LENGTH) -> None:
        if max_length < 1:
            raise ValueError("max_length must be >= 1")
        self._max_length = max_length
        self._samples: deque[HistorySample] = deque(maxlen=max_length)
        self._time_step = 0

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def time_step(self) -> int:
        """Time step that the next sample will receive."""
        return self._time_step

    def __len__(self) -> int:
        return len(self._samples)

    def reset(self) -> None:
        """Drop every sample and restart the time counter at 0."""
        self._samples.clear()
        self._time_step = 0

    def sample(self, grid_snapshot: object) -> HistorySample:
        """Recount `grid_snapshot` and append it; the oldest sample drops at capacity."""
        grid = as_species_grid(grid_snapshot, name="grid_snapshot")
        sample = HistorySample(
            time_step=self._time_step,
            counts=_tally(grid),
            total_cells=int(grid.size),
        )
        self._samples.append(sample)
        self._time_step += 1
        return sample

    def series(self) -> list[HistorySample]:
        return list(self._samples)

    def percentages(self) -> list[tuple[int, tuple[float, float, float]]]:
        """Per-sample species shares, each against its own stored basis."""
        return [(s.time_step, s.percentages()) for s in self._samples]
