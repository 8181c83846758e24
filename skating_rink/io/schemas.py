"""Arrow schemas and column names for simulation artifacts.

The Parquet angle series and the per-skater payoff CSV share these
definitions so writers and readers work against the same column contracts.
"""

from __future__ import annotations

from collections.abc import Sequence

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

RUN_SUMMARY_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Angle series
# ---------------------------------------------------------------------------

ANGLE_SERIES_SCHEMA = pa.schema(
    [
        ("round", pa.int64()),
        ("angle", pa.int64()),
        ("mean_payoff", pa.float64()),
    ]
)

# ---------------------------------------------------------------------------
# Per-skater payoff table
# ---------------------------------------------------------------------------

ROUND_COLUMN = "ROUND"
SKATER_COLUMN = "SKATER"


def payoff_column_names(angles: Sequence[int]) -> list[str]:
    """Column names of the payoff table: round, skater, then one per angle."""
    return [ROUND_COLUMN, SKATER_COLUMN, *(str(angle) for angle in sorted(angles))]


def payoff_table_schema(angles: Sequence[int]) -> pa.Schema:
    """Schema of the per-skater payoff table for the given catalog angles."""
    return pa.schema([(name, pa.int64()) for name in payoff_column_names(angles)])
