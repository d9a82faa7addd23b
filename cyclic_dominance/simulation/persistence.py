"""Parquet persistence helpers for the population history series."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from cyclic_dominance.domain.history import HistorySample, PopulationCounts
from cyclic_dominance.io.schemas import HISTORY_COLUMNS, HISTORY_SCHEMA

logger = logging.getLogger(__name__)


def history_columns(samples: Iterable[HistorySample]) -> dict[str, list[int]]:
    """Pivot samples into the column layout of ``HISTORY_SCHEMA``."""
    columns: dict[str, list[int]] = {name: [] for name in HISTORY_COLUMNS}
    for sample in samples:
        columns["time_step"].append(sample.time_step)
        columns["rock"].append(sample.counts.rock)
        columns["paper"].append(sample.counts.paper)
        columns["scissors"].append(sample.counts.scissors)
        columns["total_cells"].append(sample.total_cells)
    return columns


def write_history(samples: Iterable[HistorySample], path: Path) -> Path:
    """Write `samples` to a Parquet file at `path`, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pydict(history_columns(samples), schema=HISTORY_SCHEMA)
    pq.write_table(table, path)
    logger.info("Wrote %d history samples to %s", table.num_rows, path)
    return path


def read_history(path: Path) -> list[HistorySample]:
    """Load a history export; raises ValueError on a foreign schema."""
    table = pq.read_table(Path(path))
    missing = [name for name in HISTORY_COLUMNS if name not in table.column_names]
    if missing:
        raise ValueError(f"History file {path} is missing columns: {missing}")
    for field in HISTORY_SCHEMA:
        actual = table.schema.field(field.name).type
        if actual != field.type:
            raise ValueError(
                f"History file {path} column {field.name!r} has type {actual}, expected {field.type}"
            )
        if table.column(field.name).null_count:
            raise ValueError(f"History file {path} column {field.name!r} contains nulls")
    rows = table.select(HISTORY_COLUMNS).to_pylist()
    return [
        HistorySample(
            time_step=int(row["time_step"]),
            counts=PopulationCounts(
                rock=int(row["rock"]),
                paper=int(row["paper"]),
                scissors=int(row["scissors"]),
            ),
            total_cells=int(row["total_cells"]),
        )
        for row in rows
    ]
