from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from arena_tables.core.errors import AppError, ErrorCatalog
from arena_tables.schemas.listing import QueryStateSnapshot
from arena_tables.ui.columns import ALL
from arena_tables.ui.filters import clean_filters
from arena_tables.ui.sorting import SortDirection, toggle_direction


@dataclass
class QueryState:
    search_term: str = ""
    filters: dict[str, Any] = field(default_factory=dict)
    sort_key: str | None = None
    sort_dir: SortDirection = "asc"
    page: int = 1

    def set_search_term(self, term: str) -> None:
        self.search_term = term or ""
        self.page = 1

    def set_filter(self, key: str, value: Any) -> None:
        self.filters[key] = ALL if value is None or value == "" else value
        self.page = 1

    def clear_filters(self) -> None:
        self.filters = {}
        self.page = 1

    def toggle_sort(self, key: str) -> None:
        self.sort_dir = toggle_direction(self.sort_key, self.sort_dir, key)
        self.sort_key = key

    def set_page(self, page: int) -> None:
        self.page = page

    def selected_filter(self, key: str) -> Any:
        return self.filters.get(key, ALL)

    def active_filters(self) -> dict[str, Any]:
        return clean_filters(self.filters)


def serialize_query_state(state: QueryState) -> dict[str, Any]:
    snapshot = QueryStateSnapshot(
        search_term=state.search_term,
        filters=state.active_filters(),
        sort_by=state.sort_key,
        sort_dir=state.sort_dir,
        page=max(1, state.page),
    )
    return snapshot.model_dump()


def hydrate_query_state(
    payload: Mapping[str, Any] | None,
    *,
    sortable_keys: Collection[str],
    filter_keys: Collection[str],
) -> QueryState:
    if payload is None:
        return QueryState()
    try:
        snapshot = QueryStateSnapshot.model_validate(payload)
    except ValidationError as exc:
        raise AppError(ErrorCatalog.INVALID_QUERY_STATE, details={"errors": exc.errors()}) from exc

    filters = {key: value for key, value in clean_filters(snapshot.filters).items() if key in filter_keys}
    sort_key = snapshot.sort_by if snapshot.sort_by in sortable_keys else None
    return QueryState(
        search_term=snapshot.search_term,
        filters=filters,
        sort_key=sort_key,
        sort_dir=snapshot.sort_dir if sort_key else "asc",
        page=snapshot.page,
    )
