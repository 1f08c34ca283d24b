from .core.config import Settings, settings
from .core.errors import AppError, ErrorCatalog, ErrorDefinition, TableConfigError
from .schemas.listing import PaginationMeta, QueryStateSnapshot
from .ui.columns import ALL, ColumnDef, FilterOnlyColumn, display_value, resolve_value
from .ui.filters import derive_filter_options, filter_rows
from .ui.listing_view import DataTable, FilterControl, HeaderCell, TableView
from .ui.pagination import Page, page_window, paginate
from .ui.query_state import QueryState
from .ui.search import search_rows
from .ui.sorting import default_sort_key, sort_rows

__all__ = [
    "ALL",
    "AppError",
    "ColumnDef",
    "DataTable",
    "ErrorCatalog",
    "ErrorDefinition",
    "FilterControl",
    "FilterOnlyColumn",
    "HeaderCell",
    "Page",
    "PaginationMeta",
    "QueryState",
    "QueryStateSnapshot",
    "Settings",
    "TableConfigError",
    "TableView",
    "default_sort_key",
    "derive_filter_options",
    "display_value",
    "filter_rows",
    "page_window",
    "paginate",
    "resolve_value",
    "search_rows",
    "settings",
    "sort_rows",
]
