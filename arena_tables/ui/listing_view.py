from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from arena_tables.core.config import Settings, settings as default_settings
from arena_tables.core.errors import ErrorCatalog, TableConfigError
from arena_tables.core.logging import log_json
from arena_tables.schemas.listing import PaginationMeta
from arena_tables.ui.columns import ALL, ColumnDef, FilterOnlyColumn, FilterSource, Row, render_cell, validate_columns
from arena_tables.ui.filters import derive_filter_options, filter_rows
from arena_tables.ui.pagination import first_page, goto_page, last_page, next_page, paginate, previous_page
from arena_tables.ui.query_state import QueryState, hydrate_query_state, serialize_query_state
from arena_tables.ui.search import search_rows
from arena_tables.ui.sorting import SortDirection, sort_rows

logger = logging.getLogger(__name__)

RowSource = Sequence[Row] | Callable[[], Sequence[Row]]

SORT_INDICATORS = {"asc": "↑", "desc": "↓"}


@dataclass(frozen=True)
class HeaderCell:
    key: str
    label: str
    sortable: bool
    indicator: str = ""


@dataclass(frozen=True)
class FilterControl:
    key: str
    label: str
    options: tuple[Any, ...]
    selected: Any = ALL

    @property
    def placeholder(self) -> str:
        return f"All {self.label}"


@dataclass(frozen=True)
class TableView:
    """Read-only snapshot produced by one pipeline run."""

    title: str
    page_rows: tuple[Row, ...]
    cells: tuple[tuple[Any, ...], ...]
    headers: tuple[HeaderCell, ...]
    filter_controls: tuple[FilterControl, ...]
    total_rows: int
    total_pages: int
    current_page: int
    page_size: int
    page_numbers: tuple[int, ...]
    start_index: int
    end_index: int
    sort_key: str | None
    sort_dir: SortDirection
    search_term: str
    filters: Mapping[str, Any]
    searchable: bool
    filterable: bool
    loading: bool
    empty_message: str

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.page_rows

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 1

    @property
    def summary(self) -> str:
        if not self.total_rows:
            return "Showing 0 to 0 of 0 results"
        return f"Showing {self.start_index + 1} to {self.end_index} of {self.total_rows} results"

    def meta(self) -> PaginationMeta:
        return PaginationMeta(
            page=self.current_page,
            page_size=self.page_size,
            total=self.total_rows,
            total_pages=self.total_pages,
            count=len(self.page_rows),
            offset=self.start_index,
            page_numbers=list(self.page_numbers),
            has_previous=self.has_previous,
            has_next=self.has_next,
            sort_by=self.sort_key,
            sort_dir=self.sort_dir,
        )


class DataTable:
    """Search, filter, sort and paginate a caller-owned row collection.

    The table keeps a reference to ``rows`` (or calls it, when a zero-argument
    callable is given) and re-reads it on every recomputation. Each mutating
    operation rebuilds the :class:`TableView` synchronously; :attr:`view`
    always returns a complete snapshot.
    """

    def __init__(
        self,
        rows: RowSource,
        columns: Sequence[ColumnDef],
        *,
        filter_only_columns: Sequence[FilterOnlyColumn] = (),
        page_size: int | None = None,
        searchable: bool = True,
        filterable: bool = True,
        title: str | None = None,
        empty_message: str | None = None,
        search_fields: Sequence[str] | None = None,
        on_row_click: Callable[[Row], Any] | None = None,
        loading: bool = False,
        settings: Settings | None = None,
    ) -> None:
        config = settings or default_settings
        resolved_page_size = config.DEFAULT_PAGE_SIZE if page_size is None else page_size
        if isinstance(resolved_page_size, bool) or not isinstance(resolved_page_size, int) or resolved_page_size < 1:
            raise TableConfigError(ErrorCatalog.INVALID_PAGE_SIZE, details={"page_size": resolved_page_size})
        validate_columns(columns, filter_only_columns)

        self._rows = rows
        self._columns = tuple(columns)
        self._filter_only = tuple(filter_only_columns)
        self._filter_sources: tuple[FilterSource, ...] = self._columns + self._filter_only
        self._sortable = {column.key: column for column in self._columns if column.sortable}
        self.page_size = resolved_page_size
        self.searchable = searchable
        self.filterable = filterable
        self.title = title if title is not None else config.DEFAULT_TITLE
        self.empty_message = empty_message if empty_message is not None else config.EMPTY_MESSAGE
        self.search_fields = tuple(search_fields) if search_fields is not None else None
        self.on_row_click = on_row_click
        self._loading = loading
        self._state = QueryState()
        self._recomputing = False
        self._view = self._recompute()

    @property
    def columns(self) -> tuple[ColumnDef, ...]:
        return self._columns

    @property
    def filter_only_columns(self) -> tuple[FilterOnlyColumn, ...]:
        return self._filter_only

    @property
    def state(self) -> QueryState:
        return dataclasses.replace(self._state, filters=dict(self._state.filters))

    @property
    def view(self) -> TableView:
        return self._view

    @property
    def is_recomputing(self) -> bool:
        return self._recomputing

    # Query operations ----------------------------------------------------

    def set_search_term(self, term: str) -> TableView:
        self._state.set_search_term(term)
        return self.refresh()

    def set_filter(self, key: str, value: Any) -> TableView:
        self._state.set_filter(key, value)
        return self.refresh()

    def clear_filters(self) -> TableView:
        self._state.clear_filters()
        return self.refresh()

    def toggle_sort(self, key: str) -> TableView:
        if key not in self._sortable:
            log_json(
                logger,
                {"module": "data_table", "action": "toggle_sort", "outcome": "ignored", "sort_key": key},
                level=logging.WARNING,
            )
            return self._view
        self._state.toggle_sort(key)
        return self.refresh()

    # Page navigation -----------------------------------------------------

    def set_page(self, page: int) -> TableView:
        return self._navigate(goto_page(page, self._view.total_pages))

    def first_page(self) -> TableView:
        return self._navigate(first_page(self._view.current_page, self._view.total_pages))

    def previous_page(self) -> TableView:
        return self._navigate(previous_page(self._view.current_page, self._view.total_pages))

    def next_page(self) -> TableView:
        return self._navigate(next_page(self._view.current_page, self._view.total_pages))

    def last_page(self) -> TableView:
        return self._navigate(last_page(self._view.current_page, self._view.total_pages))

    def _navigate(self, page: int) -> TableView:
        if page == self._view.current_page and page == self._state.page:
            return self._view
        self._state.set_page(page)
        return self.refresh()

    # Inputs owned by the caller -----------------------------------------

    def set_rows(self, rows: RowSource) -> TableView:
        self._rows = rows
        return self.refresh()

    def set_loading(self, loading: bool) -> TableView:
        self._loading = loading
        return self.refresh()

    def refresh(self) -> TableView:
        self._view = self._recompute()
        return self._view

    def click_row(self, position: int) -> Any:
        if self.on_row_click is None:
            return None
        if not 0 <= position < len(self._view.page_rows):
            return None
        return self.on_row_click(self._view.page_rows[position])

    # Query state snapshots ----------------------------------------------

    def snapshot_state(self) -> dict[str, Any]:
        return serialize_query_state(self._state)

    def restore_state(self, payload: Mapping[str, Any] | None) -> TableView:
        self._state = hydrate_query_state(
            payload,
            sortable_keys=self._sortable.keys(),
            filter_keys={source.key for source in self._filter_sources},
        )
        return self.refresh()

    def filter_controls(self) -> tuple[FilterControl, ...]:
        return self._view.filter_controls

    # Pipeline ------------------------------------------------------------

    def _read_rows(self) -> Sequence[Row]:
        rows = self._rows() if callable(self._rows) else self._rows
        return rows if rows is not None else ()

    def _recompute(self) -> TableView:
        started = time.perf_counter()
        self._recomputing = True
        try:
            rows = self._read_rows()
            state = self._state

            current = search_rows(rows, state.search_term, self.search_fields) if self.searchable else list(rows)
            if self.filterable:
                current = filter_rows(current, state.filters, self._filter_sources)
            matched = len(current)

            sort_column = self._sortable.get(state.sort_key) if state.sort_key else None
            if sort_column is not None:
                current = sort_rows(current, sort_column.key, state.sort_dir, sort_column.sort_key)

            page = paginate(current, self.page_size, state.page)
            cells = tuple(tuple(render_cell(column, row) for column in self._columns) for row in page.rows)
            view = TableView(
                title=self.title,
                page_rows=page.rows,
                cells=cells,
                headers=self._build_headers(sort_column, state.sort_dir),
                filter_controls=self._build_filter_controls(rows, state),
                total_rows=page.total_rows,
                total_pages=page.total_pages,
                current_page=page.current_page,
                page_size=self.page_size,
                page_numbers=page.page_numbers,
                start_index=page.start_index,
                end_index=page.end_index,
                sort_key=sort_column.key if sort_column is not None else None,
                sort_dir=state.sort_dir,
                search_term=state.search_term if self.searchable else "",
                filters=state.active_filters() if self.filterable else {},
                searchable=self.searchable,
                filterable=self.filterable,
                loading=self._loading,
                empty_message=self.empty_message,
            )
        finally:
            self._recomputing = False

        log_json(
            logger,
            {
                "module": "data_table",
                "action": "recompute",
                "title": self.title,
                "rows": len(rows),
                "matched": matched,
                "page": view.current_page,
                "total_pages": view.total_pages,
                "duration_ms": round((time.perf_counter() - started) * 1000, 3),
            },
            level=logging.DEBUG,
        )
        return view

    def _build_headers(self, sort_column: ColumnDef | None, sort_dir: SortDirection) -> tuple[HeaderCell, ...]:
        headers = []
        for column in self._columns:
            indicator = SORT_INDICATORS[sort_dir] if sort_column is not None and column.key == sort_column.key else ""
            headers.append(HeaderCell(key=column.key, label=column.label, sortable=column.sortable, indicator=indicator))
        return tuple(headers)

    def _build_filter_controls(self, rows: Sequence[Row], state: QueryState) -> tuple[FilterControl, ...]:
        if not self.filterable:
            return ()
        sources: list[FilterSource] = [column for column in self._columns if column.filterable]
        sources.extend(self._filter_only)
        return tuple(
            FilterControl(
                key=source.key,
                label=source.label,
                options=tuple(derive_filter_options(rows, source)),
                selected=state.selected_filter(source.key),
            )
            for source in sources
        )
