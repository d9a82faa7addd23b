"""Species vocabulary and the cyclic win rule.

Rock beats Scissors, Paper beats Rock, Scissors beats Paper. No species
beats itself and the relation has no global maximum.
"""

from __future__ import annotations

from enum import IntEnum

from cyclic_dominance.config.constants import NUM_SPECIES, SPECIES_NAMES


class Species(IntEnum):
    """Discrete cell state."""

    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @property
    def label(self) -> str:
        return SPECIES_NAMES[self.value]

    @property
    def prey(self) -> Species:
        """The species this one defeats."""
        return Species((self.value - 1) % NUM_SPECIES)

    @property
    def predator(self) -> Species:
        """The species that defeats this one."""
        return Species((self.value + 1) % NUM_SPECIES)


def wins_over(attacker: int, defender: int) -> bool:
    """Return True when `attacker` defeats `defender`: (a - b + 3) % 3 == 1."""
    return (attacker - defender + NUM_SPECIES) % NUM_SPECIES == 1
