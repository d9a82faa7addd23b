"""Visualization layer: themes and matplotlib renderers."""

from cyclic_dominance.viz.render import (
    render_composition_stacked,
    render_grid,
    render_population_timeseries,
)
from cyclic_dominance.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_composition_stacked",
    "render_grid",
    "render_population_timeseries",
]
