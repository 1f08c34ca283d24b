from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from arena_tables.ui.columns import Row, display_value, resolve_value, row_values


def to_search_text(value: Any) -> Iterable[str]:
    """Yield the text fragments a value can be matched against.

    Nested mappings and sequences contribute their nested values rather than
    a container repr, so a search can reach into embedded records.
    """
    if isinstance(value, Mapping):
        for nested in value.values():
            yield from to_search_text(nested)
        return
    if isinstance(value, (list, tuple, set, frozenset)):
        for nested in value:
            yield from to_search_text(nested)
        return
    text = display_value(value)
    if text:
        yield text


def row_matches(row: Row, needle: str, fields: Sequence[str] | None = None) -> bool:
    values = row_values(row) if fields is None else [resolve_value(row, key) for key in fields]
    return any(needle in text.lower() for value in values for text in to_search_text(value))


def search_rows(rows: Sequence[Row], term: str, fields: Sequence[str] | None = None) -> list[Row]:
    if not term:
        return list(rows)
    needle = term.lower()
    return [row for row in rows if row_matches(row, needle, fields)]
