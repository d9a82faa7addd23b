"""Simulation layer: headless driver and history persistence."""

from cyclic_dominance.simulation.persistence import read_history, write_history
from cyclic_dominance.simulation.session import Simulation

__all__ = [
    "Simulation",
    "read_history",
    "write_history",
]
