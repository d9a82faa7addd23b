"""Toroidal species grid with a random-sequential cyclic dominance update.

Each call to :meth:`GridEngine.step` draws one attacker cell and one of its
four von Neumann neighbors. When the attacker's species beats the
defender's, the defender cell is overwritten; otherwise nothing changes.
Coordinates wrap modulo N, so every cell has exactly four neighbors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from random import Random

import numpy as np

from cyclic_dominance.config.constants import NEIGHBOR_OFFSETS, NUM_SPECIES
from cyclic_dominance.domain.species import wins_over

logger = logging.getLogger(__name__)

GRID_DTYPE = np.int8

ResetListener = Callable[[], None]


class EngineNotInitializedError(RuntimeError):
    """Raised when the engine is used before ``initialize``."""


def as_species_grid(values: object, name: str = "grid") -> np.ndarray:
    """Validate `values` as a non-empty square grid of species and return a copy.

    Raises :exc:`ValueError` when the input is not 2-D, not square, empty,
    not integer-typed, or holds values outside ``0..NUM_SPECIES-1``.
    """
    arr = np.asarray(values)
    if arr.ndim != 2:
        raise ValueError(f"{name} must be two-dimensional, got ndim={arr.ndim}")
    rows, cols = arr.shape
    if rows < 1 or rows != cols:
        raise ValueError(f"{name} must be a non-empty square grid, got shape {arr.shape}")
    if arr.dtype.kind not in "iu":
        raise ValueError(f"{name} must hold integer species values, got dtype {arr.dtype}")
    if arr.min() < 0 or arr.max() >= NUM_SPECIES:
        raise ValueError(f"{name} values must be in [0, {NUM_SPECIES - 1}]")
    return arr.astype(GRID_DTYPE, copy=True)


def _read_only(arr: np.ndarray) -> np.ndarray:
    view = arr.copy()
    view.setflags(write=False)
    return view


class GridEngine:
    """Owns the N x N species grid and evolves it one interaction at a time.

    The randomness source is injected so tests can seed or script draws.
    """

    def __init__(self, rng: Random | None = None) -> None:
        self._rng = rng if rng is not None else Random()
        self._grid: np.ndarray | None = None
        self._initial_grid: np.ndarray | None = None
        self._steps_taken = 0
        self._reset_listeners: list[ResetListener] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def add_reset_listener(self, listener: ResetListener) -> None:
        """Register a callable invoked after every (re)initialization."""
        self._reset_listeners.append(listener)

    def initialize(self, size: int) -> None:
        """Allocate a size x size grid filled uniformly at random."""
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ValueError(f"size must be an integer, got {size!r}")
        if size < 1:
            raise ValueError("size must be >= 1")
        size = int(size)
        rng = self._rng
        cells = [[rng.randrange(NUM_SPECIES) for _x in range(size)] for _y in range(size)]
        self._install(np.array(cells, dtype=GRID_DTYPE))

    def resize_and_reinitialize(self, new_size: int) -> None:
        """Discard the current grid and start over at `new_size`."""
        logger.debug("Resizing grid to %d x %d", new_size, new_size)
        self.initialize(new_size)

    def initialize_from(self, layout: object) -> None:
        """Initialize from an explicit square layout indexed ``[y][x]``."""
        self._install(as_species_grid(layout, name="layout"))

    def _install(self, grid: np.ndarray) -> None:
        self._grid = grid
        self._initial_grid = _read_only(grid)
        self._steps_taken = 0
        logger.debug("Initialized %d x %d grid", grid.shape[0], grid.shape[1])
        for listener in self._reset_listeners:
            listener()

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def is_ready(self) -> bool:
        return self._grid is not None

    def _require_grid(self) -> np.ndarray:
        if self._grid is None:
            raise EngineNotInitializedError("GridEngine.initialize() must be called first")
        return self._grid

    @property
    def size(self) -> int:
        return int(self._require_grid().shape[0])

    @property
    def steps_taken(self) -> int:
        """Steps executed since the last (re)initialization."""
        return self._steps_taken

    def read_grid(self) -> np.ndarray:
        """Return a read-only copy of the current grid, indexed ``[y, x]``."""
        return _read_only(self._require_grid())

    def read_initial_grid(self) -> np.ndarray:
        """Return a read-only copy of the grid as it was at initialization."""
        if self._initial_grid is None:
            raise EngineNotInitializedError("GridEngine.initialize() must be called first")
        return _read_only(self._initial_grid)

    # ------------------------------------------------------------------
    # Dynamics
    # ------------------------------------------------------------------

    def random_neighbor(self, x: int, y: int) -> tuple[int, int]:
        """Pick one of the four von Neumann neighbors of (x, y), wrapped."""
        n = self.size
        dx, dy = NEIGHBOR_OFFSETS[self._rng.randrange(len(NEIGHBOR_OFFSETS))]
        return (x + dx) % n, (y + dy) % n

    def step(self) -> None:
        """Perform exactly one attacker/defender interaction."""
        grid = self._require_grid()
        n = grid.shape[0]
        x = self._rng.randrange(n)
        y = self._rng.randrange(n)
        nx_, ny_ = self.random_neighbor(x, y)
        attacker = int(grid[y, x])
        if wins_over(attacker, int(grid[ny_, nx_])):
            grid[ny_, nx_] = attacker
        self._steps_taken += 1

    def run_steps(self, count: int) -> None:
        """Call :meth:`step` exactly `count` times."""
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
            raise ValueError(f"count must be an integer, got {count!r}")
        if count < 0:
            raise ValueError("count must be >= 0")
        self._require_grid()
        for _ in range(count):
            self.step()
