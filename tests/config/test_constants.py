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


def test_grid_size_is_positive_int() -> None:
    assert isinstance(DEFAULT_GRID_SIZE, int) and DEFAULT_GRID_SIZE > 0


def test_steps_and_ticks_are_positive() -> None:
    assert isinstance(DEFAULT_STEPS_PER_TICK, int) and DEFAULT_STEPS_PER_TICK > 0
    assert isinstance(DEFAULT_TICKS, int) and DEFAULT_TICKS > 0


def test_history_capacity_default() -> None:
    assert MAX_HISTORY_LENGTH == 600


def test_species_names_match_species_count() -> None:
    assert NUM_SPECIES == 3
    assert SPECIES_NAMES == ("Rock", "Paper", "Scissors")


def test_neighbor_offsets_are_von_neumann() -> None:
    assert len(NEIGHBOR_OFFSETS) == 4
    assert set(NEIGHBOR_OFFSETS) == {(0, -1), (0, 1), (-1, 0), (1, 0)}


def test_figure_dpi_is_positive() -> None:
    assert isinstance(FIGURE_DPI, int) and FIGURE_DPI > 0
