"""Parquet/CSV/JSON writers for simulation artifacts."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.csv as pacsv
import pyarrow.parquet as pq

from skating_rink.domain.rink import AngleSeries, PayoffRow
from skating_rink.io.schemas import (
    ANGLE_SERIES_SCHEMA,
    payoff_column_names,
    payoff_table_schema,
)


def angle_series_table(series: AngleSeries) -> pa.Table:
    """Flatten the per-angle series into long-format rows sorted by (round, angle)."""
    rows = sorted(
        (round_number, angle, value)
        for angle, points in series.items()
        for round_number, value in points
    )
    columns: dict[str, list[int | float]] = {"round": [], "angle": [], "mean_payoff": []}
    for round_number, angle, value in rows:
        columns["round"].append(round_number)
        columns["angle"].append(angle)
        columns["mean_payoff"].append(value)
    return pa.Table.from_pydict(columns, schema=ANGLE_SERIES_SCHEMA)


def payoff_table(rows: Sequence[PayoffRow], angles: Sequence[int]) -> pa.Table:
    """Build the ``ROUND,SKATER,<angle>...`` table of cumulated payoffs."""
    names = payoff_column_names(angles)
    columns: dict[str, list[int]] = {name: [] for name in names}
    for row in rows:
        if len(row.payoffs) != len(angles):
            raise ValueError(
                f"payoff row has {len(row.payoffs)} values, expected {len(angles)}"
            )
        values = (row.round, row.skater_index, *row.payoffs)
        for name, value in zip(names, values, strict=True):
            columns[name].append(value)
    return pa.Table.from_pydict(columns, schema=payoff_table_schema(angles))


def write_angle_series(series: AngleSeries, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(angle_series_table(series), path)
    return path


def write_payoff_csv(rows: Sequence[PayoffRow], angles: Sequence[int], path: Path) -> Path:
    """Write the payoff table with the plain ``ROUND,SKATER,<angle>...`` header line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    table = payoff_table(rows, angles)
    options = pacsv.WriteOptions(include_header=False, quoting_style="none")
    with path.open("wb") as sink:
        sink.write((",".join(table.column_names) + "\n").encode())
        pacsv.write_csv(table, sink, write_options=options)
    return path


def write_run_summary(summary: dict[str, object], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, ensure_ascii=False, indent=2))
    return path
