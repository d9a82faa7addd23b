"""CLI entrypoint for headless runs and chart rendering.

This module owns CLI argument parsing and subcommand dispatch. All domain
logic lives in the extracted modules:

- ``cyclic_dominance.config``             – configuration dataclasses
- ``cyclic_dominance.simulation``         – headless driver & Parquet export
- ``cyclic_dominance.experiments.run``    – run / plot orchestration
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from cyclic_dominance.config.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_STEPS_PER_TICK,
    DEFAULT_TICKS,
    MAX_HISTORY_LENGTH,
)
from cyclic_dominance.config.types import RunConfig, SimulationConfig
from cyclic_dominance.experiments.run import plot_history, run_simulation
from cyclic_dominance.viz.theme import REGISTERED_THEMES

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Value coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    """Read a JSON object of defaults; malformed files abort via ``parser.error``."""
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return loaded


def build_run_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    """Merge CLI arguments over config-file values over built-in defaults."""
    simulation = SimulationConfig(
        grid_size=_get_int(args.grid_size, "grid_size", file_cfg, DEFAULT_GRID_SIZE),
        steps_per_tick=_get_int(
            args.steps_per_tick, "steps_per_tick", file_cfg, DEFAULT_STEPS_PER_TICK
        ),
        max_history_length=_get_int(
            args.max_history, "max_history_length", file_cfg, MAX_HISTORY_LENGTH
        ),
    )
    return RunConfig(
        simulation=simulation,
        ticks=_get_int(args.ticks, "ticks", file_cfg, DEFAULT_TICKS),
        out_dir=Path(_get_str(args.out_dir, "out_dir", file_cfg, "data")),
        render_figures=_get_bool(args.render_figures, "render_figures", file_cfg, True),
        theme=_get_str(args.theme, "theme", file_cfg, "default"),
    )


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Run a headless simulation and export its history")
    p.set_defaults(func=_handle_run)
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    p.add_argument("--grid-size", type=int, default=None)
    p.add_argument("--steps-per-tick", type=int, default=None)
    p.add_argument("--ticks", type=int, default=None)
    p.add_argument("--max-history", type=int, default=None)
    p.add_argument("--out-dir", type=Path, default=None)
    p.add_argument("--render-figures", action=argparse.BooleanOptionalAction, default=None)
    p.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None)


def _build_plot_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("plot", help="Render population charts from an exported history")
    p.set_defaults(func=_handle_plot)
    p.add_argument("--history", type=Path, required=True)
    p.add_argument("--output-dir", type=Path, required=True)
    p.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default="default")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spatial rock-paper-scissors simulation")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(sub)
    _build_plot_parser(sub)
    return parser


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    file_cfg = _load_config_file(parser, args.config)
    config = build_run_config(args, file_cfg)
    logger.info(
        "Running %d ticks on a %d x %d grid",
        config.ticks,
        config.simulation.grid_size,
        config.simulation.grid_size,
    )
    summary = run_simulation(config)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


def _handle_plot(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    outputs = plot_history(args.history, args.output_dir, theme_name=args.theme)
    print(json.dumps({"figures": [str(p) for p in outputs]}, ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with ``run`` and ``plot`` subcommands."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args, parser)


if __name__ == "__main__":
    main()
