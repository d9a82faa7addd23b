"""Run orchestration and the command-line entrypoint."""

from cyclic_dominance.experiments.run import plot_history, run_simulation

__all__ = [
    "plot_history",
    "run_simulation",
]
