from __future__ import annotations

import csv
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from arena_tables.core.config import settings
from arena_tables.ui.columns import ColumnDef, Row, display_value, resolve_value
from arena_tables.ui.listing_view import TableView

MASKED_VALUE = "***"
SENSITIVE_KEYS = {"token", "refresh_token", "secret", "password", "access_token"}


def is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(token in lowered for token in SENSITIVE_KEYS)


def sanitize_row(row: Row, columns: Sequence[ColumnDef]) -> dict[str, str]:
    sanitized: dict[str, str] = {}
    for column in columns:
        if is_sensitive(column.key):
            sanitized[column.label] = MASKED_VALUE
            continue
        sanitized[column.label] = display_value(resolve_value(row, column.key))
    return sanitized


def export_current_view(
    view: TableView,
    columns: Sequence[ColumnDef],
    *,
    module: str,
    output_dir: str | Path | None = None,
) -> Path:
    destination = Path(output_dir or settings.EXPORTS_PATH)
    destination.mkdir(parents=True, exist_ok=True)

    now = datetime.now().astimezone()
    timestamp = now.strftime("%Y%m%d_%H%M%S")
    path = destination / f"{module}_{timestamp}_p{view.current_page}.csv"

    headers = [column.label for column in columns]
    sort = f"{view.sort_key} {view.sort_dir}" if view.sort_key else "none"
    with path.open("w", newline="", encoding="utf-8-sig") as handle:
        handle.write(f"# timestamp_local: {now.isoformat()}\n")
        handle.write(f"# module: {module}\n")
        handle.write(f"# search: {view.search_term or ''}\n")
        handle.write(f"# filters: {dict(view.filters)}\n")
        handle.write(f"# sort: {sort}\n")
        handle.write(f"# page: {view.current_page}/{view.total_pages}\n")
        writer = csv.DictWriter(handle, fieldnames=headers, extrasaction="ignore")
        writer.writeheader()
        for row in view.page_rows:
            writer.writerow(sanitize_row(row, columns))

    return path
