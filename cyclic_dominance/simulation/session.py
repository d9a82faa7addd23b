"""Headless driver: batches engine steps into ticks and samples after each."""

from __future__ import annotations

import logging
from random import Random

from cyclic_dominance.config.types import SimulationConfig
from cyclic_dominance.domain.grid import GridEngine
from cyclic_dominance.domain.history import HistorySample, HistoryTracker

logger = logging.getLogger(__name__)


class Simulation:
    """One engine plus its history tracker, wired so every reset clears history."""

    def __init__(self, config: SimulationConfig | None = None, rng: Random | None = None) -> None:
        self.config = config or SimulationConfig()
        self.engine = GridEngine(rng=rng)
        self.tracker = HistoryTracker(max_length=self.config.max_history_length)
        self.engine.add_reset_listener(self.tracker.reset)
        self._steps_per_tick = self.config.steps_per_tick
        self.engine.initialize(self.config.grid_size)

    @property
    def steps_per_tick(self) -> int:
        return self._steps_per_tick

    @steps_per_tick.setter
    def steps_per_tick(self, value: int) -> None:
        if value < 1:
            raise ValueError("steps_per_tick must be >= 1")
        self._steps_per_tick = value

    def tick(self) -> HistorySample:
        """Run one batch of steps and record a population sample."""
        self.engine.run_steps(self._steps_per_tick)
        return self.tracker.sample(self.engine.read_grid())

    def step_once(self) -> HistorySample:
        """Advance a paused simulation by a single tick."""
        return self.tick()

    def run(self, ticks: int) -> list[HistorySample]:
        """Execute `ticks` ticks and return the retained series."""
        if ticks < 0:
            raise ValueError("ticks must be >= 0")
        for i in range(ticks):
            sample = self.tick()
            if (i + 1) % 100 == 0:
                logger.info("tick %d/%d counts=%s", i + 1, ticks, sample.counts.as_tuple())
        return self.tracker.series()

    def reset(self, grid_size: int | None = None) -> None:
        """Reinitialize the grid (optionally at a new size); history clears."""
        if grid_size is None or grid_size == self.engine.size:
            self.engine.initialize(self.engine.size)
        else:
            self.engine.resize_and_reinitialize(grid_size)
