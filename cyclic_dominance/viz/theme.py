"""Visualization theme presets for grid and chart renderers.

Themes are frozen dataclasses that group all styling constants together.
Renderers accept a ``Theme`` instance instead of referencing hard-coded
module-level constants, so palettes can be swapped via ``--theme``.
"""

from __future__ import annotations

from dataclasses import dataclass

from cyclic_dominance.config.constants import SPECIES_NAMES


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Indexed by species value: Rock, Paper, Scissors
    species_colors: tuple[str, str, str] = ("#FF5733", "#33C1FF", "#75FF33")
    species_labels: tuple[str, str, str] = SPECIES_NAMES  # type: ignore[assignment]
    grid_line_color: str = "#CCCCCC"
    draw_grid_lines: bool = False
    background_color: str = "#FFFFFF"


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    species_colors=("#d62728", "#1f77b4", "#2ca02c"),
    grid_line_color="#E0E0E0",
    draw_grid_lines=True,
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
