from __future__ import annotations

import sys
from typing import Any, TextIO

from arena_tables.ui.columns import display_value
from arena_tables.ui.listing_view import TableView


def _cell_text(value: Any) -> str:
    return value if isinstance(value, str) else display_value(value)


def _page_bar(view: TableView) -> str:
    numbers = " ".join(f"[{number}]" if number == view.current_page else str(number) for number in view.page_numbers)
    first = "«" if view.has_previous else " "
    last = "»" if view.has_next else " "
    return f"{first} {numbers} {last}".strip()


def render_table(view: TableView) -> str:
    headers = [f"{header.label} {header.indicator}".rstrip() for header in view.headers]
    lines = [view.title]
    if view.search_term:
        lines.append(f"Search: {view.search_term}")
    if view.filters:
        lines.append("Filters: " + ", ".join(f"{key}={value}" for key, value in view.filters.items()))

    if view.loading:
        lines.append("Loading...")
        return "\n".join(lines)

    rows = [[_cell_text(cell) for cell in row] for row in view.cells]
    widths = [max([len(header)] + [len(row[idx]) for row in rows]) for idx, header in enumerate(headers)]

    lines.append(" | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)))
    lines.append("-+-".join("-" * width for width in widths))
    if not rows:
        lines.append(view.empty_message)
    for row in rows:
        lines.append(" | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row)))

    if view.show_pagination:
        lines.append(view.summary)
        lines.append(_page_bar(view))
    return "\n".join(lines)


def print_table(view: TableView, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    out.write(render_table(view) + "\n")
