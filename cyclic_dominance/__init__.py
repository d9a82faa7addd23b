"""Spatial rock-paper-scissors cyclic dominance on a toroidal grid."""

from cyclic_dominance.domain import (
    EngineNotInitializedError,
    GridEngine,
    HistorySample,
    HistoryTracker,
    PopulationCounts,
    Species,
    count_populations,
    wins_over,
)
from cyclic_dominance.simulation import Simulation

__version__ = "0.1.0"

__all__ = [
    "EngineNotInitializedError",
    "GridEngine",
    "HistorySample",
    "HistoryTracker",
    "PopulationCounts",
    "Simulation",
    "Species",
    "count_populations",
    "wins_over",
]
