"""Configuration layer: constants and typed config dataclasses."""

from cyclic_dominance.config.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_STEPS_PER_TICK,
    DEFAULT_TICKS,
    FIGURE_DPI,
    MAX_HISTORY_LENGTH,
    NEIGHBOR_OFFSETS,
    NUM_SPECIES,
    SPECIES_NAMES,
)
from cyclic_dominance.config.types import RunConfig, SimulationConfig

__all__ = [
    "DEFAULT_GRID_SIZE",
    "DEFAULT_STEPS_PER_TICK",
    "DEFAULT_TICKS",
    "FIGURE_DPI",
    "MAX_HISTORY_LENGTH",
    "NEIGHBOR_OFFSETS",
    "NUM_SPECIES",
    "RunConfig",
    "SPECIES_NAMES",
    "SimulationConfig",
]
