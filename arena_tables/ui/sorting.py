from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timezone
from decimal import Decimal
from fractions import Fraction
from typing import Any, Literal

from arena_tables.ui.columns import Row, SortKeyFunc, display_value, is_missing, resolve_value

SortDirection = Literal["asc", "desc"]

# Kind ranks for values sharing one column; missing values are handled separately.
RANK_NUMBER = 0
RANK_BOOLEAN = 1
RANK_TEMPORAL = 2
RANK_TEXT = 3
RANK_OTHER = 4


def _temporal_text(value: date) -> str:
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat()


def default_sort_key(value: Any) -> tuple[int, Any]:
    if isinstance(value, bool):
        return (RANK_BOOLEAN, int(value))
    if isinstance(value, (int, float, Decimal, Fraction)):
        return (RANK_NUMBER, value)
    if isinstance(value, date):
        return (RANK_TEMPORAL, _temporal_text(value))
    if isinstance(value, str):
        return (RANK_TEXT, value)
    return (RANK_OTHER, display_value(value))


def sort_rows(
    rows: Sequence[Row],
    key: str | None,
    direction: SortDirection = "asc",
    sort_key: SortKeyFunc | None = None,
) -> list[Row]:
    """Stable sort on one field; missing values always trail in input order."""
    if not key:
        return list(rows)

    present: list[tuple[Row, Any]] = []
    missing: list[Row] = []
    for row in rows:
        value = resolve_value(row, key)
        if is_missing(value):
            missing.append(row)
        else:
            present.append((row, value))

    key_func = sort_key or default_sort_key
    ordered = sorted(present, key=lambda pair: key_func(pair[1]), reverse=direction == "desc")
    return [row for row, _ in ordered] + missing


def toggle_direction(current_key: str | None, current_dir: SortDirection, key: str) -> SortDirection:
    if current_key == key and current_dir == "asc":
        return "desc"
    return "asc"
