"""Configuration dataclasses for simulation runs.

All frozen dataclasses that parameterise the engine, the history tracker
and headless runs live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cyclic_dominance.config.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_STEPS_PER_TICK,
    DEFAULT_TICKS,
    MAX_HISTORY_LENGTH,
)

__all__ = [
    "RunConfig",
    "SimulationConfig",
]


@dataclass(frozen=True)
class SimulationConfig:
    """Grid and cadence knobs shared by every driver."""

    grid_size: int = DEFAULT_GRID_SIZE
    steps_per_tick: int = DEFAULT_STEPS_PER_TICK
    max_history_length: int = MAX_HISTORY_LENGTH

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be >= 1")
        if self.steps_per_tick < 1:
            raise ValueError("steps_per_tick must be >= 1")
        if self.max_history_length < 1:
            raise ValueError("max_history_length must be >= 1")

    @property
    def total_cells(self) -> int:
        return self.grid_size * self.grid_size


@dataclass(frozen=True)
class RunConfig:
    """Headless run settings: simulation knobs plus output handling."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    ticks: int = DEFAULT_TICKS
    out_dir: Path = Path("data")
    render_figures: bool = True
    theme: str = "default"

    def __post_init__(self) -> None:
        if self.ticks < 0:
            raise ValueError("ticks must be >= 0")
        if not self.theme:
            raise ValueError("theme must be a non-empty string")
