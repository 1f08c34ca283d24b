from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from arena_tables.core.errors import ErrorCatalog, TableConfigError

Row = Any
Renderer = Callable[[Any, Row], Any]
SortKeyFunc = Callable[[Any], Any]

ALL = "all"


@dataclass(frozen=True)
class ColumnDef:
    key: str
    label: str
    sortable: bool = True
    filterable: bool = False
    filter_options: tuple[Any, ...] | None = None
    filter_value_map: Mapping[Any, Any] | None = None
    render: Renderer | None = None
    sort_key: SortKeyFunc | None = None


@dataclass(frozen=True)
class FilterOnlyColumn:
    """Filter control that is not rendered as a table column."""

    key: str
    label: str
    filter_options: tuple[Any, ...] | None = None
    filter_value_map: Mapping[Any, Any] | None = None


FilterSource = ColumnDef | FilterOnlyColumn


def validate_columns(columns: Sequence[ColumnDef], filter_only: Sequence[FilterOnlyColumn] = ()) -> None:
    seen: set[str] = set()
    for column in columns:
        if not column.key:
            raise TableConfigError(ErrorCatalog.EMPTY_COLUMN_KEY, details={"label": column.label})
        if column.key in seen:
            raise TableConfigError(ErrorCatalog.DUPLICATE_COLUMN_KEY, details={"key": column.key})
        seen.add(column.key)
    filter_seen: set[str] = set()
    for column in filter_only:
        if not column.key:
            raise TableConfigError(ErrorCatalog.EMPTY_COLUMN_KEY, details={"label": column.label})
        if column.key in filter_seen:
            raise TableConfigError(ErrorCatalog.DUPLICATE_COLUMN_KEY, details={"key": column.key})
        filter_seen.add(column.key)


def resolve_value(row: Row, key: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


def row_values(row: Row) -> list[Any]:
    if isinstance(row, Mapping):
        return list(row.values())
    if dataclasses.is_dataclass(row) and not isinstance(row, type):
        return [getattr(row, field.name) for field in dataclasses.fields(row)]
    try:
        return list(vars(row).values())
    except TypeError:
        return [row]


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def display_value(value: Any) -> str:
    if is_missing(value):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def render_cell(column: ColumnDef, row: Row) -> Any:
    value = resolve_value(row, column.key)
    if column.render is not None:
        return column.render(value, row)
    return display_value(value)
