"""Tests for cyclic_dominance.domain.history module."""

from __future__ import annotations

from random import Random

import numpy as np
import pytest

from cyclic_dominance.config.constants import MAX_HISTORY_LENGTH
from cyclic_dominance.domain.grid import GridEngine
from cyclic_dominance.domain.history import (
    HistoryTracker,
    PopulationCounts,
    count_populations,
)


class TestCountPopulations:
    def test_counts_each_species(self) -> None:
        counts = count_populations([[0, 1], [2, 0]])
        assert counts == PopulationCounts(rock=2, paper=1, scissors=1)

    def test_missing_species_count_zero(self) -> None:
        counts = count_populations(np.full((3, 3), 2))
        assert counts.as_tuple() == (0, 0, 9)

    def test_counts_sum_to_cell_count_after_steps(self) -> None:
        engine = GridEngine(rng=Random(7))
        engine.initialize(10)
        engine.run_steps(1_000)
        assert count_populations(engine.read_grid()).total == 100

    def test_rejects_invalid_snapshot(self) -> None:
        with pytest.raises(ValueError):
            count_populations([[0, 1, 2]])


class TestPopulationCounts:
    def test_indexing_by_species(self) -> None:
        counts = PopulationCounts(rock=5, paper=3, scissors=1)
        assert counts[0] == 5
        assert counts[1] == 3
        assert counts[2] == 1

    def test_indexing_rejects_unknown_species(self) -> None:
        with pytest.raises(ValueError):
            PopulationCounts(rock=1, paper=1, scissors=1)[3]

    def test_percentages(self) -> None:
        counts = PopulationCounts(rock=1, paper=1, scissors=2)
        assert counts.percentages(4) == pytest.approx((25.0, 25.0, 50.0))

    def test_percentages_reject_empty_basis(self) -> None:
        with pytest.raises(ValueError):
            PopulationCounts(rock=0, paper=0, scissors=0).percentages(0)


class TestHistoryTracker:
    def test_defaults(self) -> None:
        tracker = HistoryTracker()
        assert tracker.max_length == MAX_HISTORY_LENGTH == 600
        assert tracker.series() == []
        assert tracker.time_step == 0

    def test_rejects_non_positive_capacity(self) -> None:
        with pytest.raises(ValueError):
            HistoryTracker(max_length=0)

    def test_sample_appends_with_increasing_time_step(self) -> None:
        tracker = HistoryTracker()
        first = tracker.sample([[0, 1], [2, 0]])
        second = tracker.sample([[1, 1], [1, 1]])
        assert (first.time_step, second.time_step) == (0, 1)
        assert second.counts.as_tuple() == (0, 4, 0)
        assert second.total_cells == 4
        assert [s.time_step for s in tracker.series()] == [0, 1]

    def test_capacity_evicts_oldest(self) -> None:
        tracker = HistoryTracker(max_length=3)
        for _ in range(5):
            tracker.sample([[0]])
        series = tracker.series()
        assert len(series) == 3
        assert [s.time_step for s in series] == [2, 3, 4]

    def test_sliding_window_front_strictly_increases(self) -> None:
        tracker = HistoryTracker(max_length=4)
        fronts: list[int] = []
        for _ in range(12):
            tracker.sample([[2]])
            assert len(tracker) <= 4
            fronts.append(tracker.series()[0].time_step)
        overflowed = fronts[4:]
        assert all(b > a for a, b in zip(overflowed, overflowed[1:], strict=False))
        steps = [s.time_step for s in tracker.series()]
        assert steps == list(range(steps[0], steps[0] + len(steps)))

    def test_reset_clears_series_and_time(self) -> None:
        tracker = HistoryTracker()
        tracker.sample([[0]])
        tracker.sample([[0]])
        tracker.reset()
        assert tracker.series() == []
        assert tracker.time_step == 0
        assert tracker.sample([[0]]).time_step == 0

    def test_invalid_snapshot_leaves_tracker_untouched(self) -> None:
        tracker = HistoryTracker()
        tracker.sample([[0]])
        with pytest.raises(ValueError):
            tracker.sample([[0, 5], [1, 1]])
        assert len(tracker) == 1
        assert tracker.time_step == 1

    def test_series_is_a_copy(self) -> None:
        tracker = HistoryTracker()
        tracker.sample([[0]])
        tracker.series().clear()
        assert len(tracker) == 1

    def test_percentages_use_per_sample_basis(self) -> None:
        tracker = HistoryTracker()
        tracker.sample([[0, 0], [1, 2]])
        tracker.sample(np.zeros((3, 3), dtype=int))
        (t0, p0), (t1, p1) = tracker.percentages()
        assert (t0, t1) == (0, 1)
        assert p0 == pytest.approx((50.0, 25.0, 25.0))
        assert p1 == pytest.approx((100.0, 0.0, 0.0))

    def test_sample_tallies_match_count_populations(self) -> None:
        engine = GridEngine(rng=Random(8))
        engine.initialize(9)
        engine.run_steps(300)
        snapshot = engine.read_grid()
        sample = HistoryTracker().sample(snapshot)
        assert sample.counts == count_populations(snapshot)
        assert sample.counts.total == sample.total_cells == 81

    def test_sample_observes_snapshot_not_live_grid(self) -> None:
        engine = GridEngine(rng=Random(4))
        engine.initialize(6)
        tracker = HistoryTracker()
        snapshot = engine.read_grid()
        sample = tracker.sample(snapshot)
        engine.run_steps(500)
        assert sample.counts == count_populations(snapshot)
