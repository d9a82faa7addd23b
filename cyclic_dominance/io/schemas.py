"""Parquet schema definitions for simulation artifacts.

The history export is the only persisted artifact; its column contract is
defined once here so writers and readers agree.
"""

from __future__ import annotations

import pyarrow as pa

HISTORY_SCHEMA_VERSION = 1

HISTORY_COLUMNS = ["time_step", "rock", "paper", "scissors", "total_cells"]

HISTORY_SCHEMA = pa.schema(
    [(name, pa.int64()) for name in HISTORY_COLUMNS],
    metadata={b"history_schema_version": str(HISTORY_SCHEMA_VERSION).encode()},
)
