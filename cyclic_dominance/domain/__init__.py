"""Domain layer: species rules, the grid engine and the history tracker."""

from cyclic_dominance.domain.grid import (
    EngineNotInitializedError,
    GridEngine,
    as_species_grid,
)
from cyclic_dominance.domain.history import (
    HistorySample,
    HistoryTracker,
    PopulationCounts,
    count_populations,
)
from cyclic_dominance.domain.species import Species, wins_over

__all__ = [
    "EngineNotInitializedError",
    "GridEngine",
    "HistorySample",
    "HistoryTracker",
    "PopulationCounts",
    "Species",
    "as_species_grid",
    "count_populations",
    "wins_over",
]
