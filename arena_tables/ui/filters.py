from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from arena_tables.ui.columns import ALL, FilterSource, Row, is_missing, resolve_value


RowPredicate = Callable[[Row], bool]


def clean_filters(filters: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in filters.items() if not is_inactive(value)}


def is_inactive(value: Any) -> bool:
    return value is None or value == "" or value == ALL


def strict_equals(left: Any, right: Any) -> bool:
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def resolve_source(key: str, sources: Sequence[FilterSource]) -> FilterSource | None:
    return next((source for source in sources if source.key == key), None)


def build_predicate(source: FilterSource, selected: Any) -> RowPredicate:
    key = source.key
    value_map = source.filter_value_map
    if value_map:
        mapped = value_map.get(selected)
        return lambda row: strict_equals(resolve_value(row, key), mapped)

    needle = selected.lower() if isinstance(selected, str) else None

    def _matches(row: Row) -> bool:
        value = resolve_value(row, key)
        if isinstance(value, str) and needle is not None:
            return needle in value.lower()
        return strict_equals(value, selected)

    return _matches


def filter_rows(rows: Sequence[Row], selections: Mapping[str, Any], sources: Sequence[FilterSource]) -> list[Row]:
    predicates: list[RowPredicate] = []
    for key, selected in clean_filters(selections).items():
        source = resolve_source(key, sources)
        if source is None:
            continue
        predicates.append(build_predicate(source, selected))
    if not predicates:
        return list(rows)
    return [row for row in rows if all(predicate(row) for predicate in predicates)]


def derive_filter_options(rows: Sequence[Row], source: FilterSource) -> list[Any]:
    if source.filter_options is not None:
        return list(source.filter_options)

    options: list[Any] = []
    seen: set[tuple[bool, Any]] = set()
    for row in rows:
        value = resolve_value(row, source.key)
        if is_missing(value):
            continue
        try:
            marker = (isinstance(value, bool), value)
            if marker in seen:
                continue
            seen.add(marker)
        except TypeError:
            if any(strict_equals(value, existing) for existing in options):
                continue
        options.append(value)
    return options
