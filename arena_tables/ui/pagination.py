from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from arena_tables.ui.columns import Row

PAGE_WINDOW_SIZE = 5


@dataclass(frozen=True)
class Page:
    rows: tuple[Row, ...]
    total_rows: int
    total_pages: int
    current_page: int
    page_numbers: tuple[int, ...]
    start_index: int
    end_index: int


def total_pages_for(total_rows: int, page_size: int) -> int:
    return max(1, math.ceil(total_rows / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, int(page)), max(1, total_pages))


def page_window(current_page: int, total_pages: int) -> list[int]:
    """Page numbers shown in the navigation bar, centered on the current page."""
    if total_pages <= PAGE_WINDOW_SIZE:
        return list(range(1, total_pages + 1))
    half = PAGE_WINDOW_SIZE // 2
    if current_page <= half + 1:
        start = 1
    elif current_page >= total_pages - half:
        start = total_pages - PAGE_WINDOW_SIZE + 1
    else:
        start = current_page - half
    return list(range(start, start + PAGE_WINDOW_SIZE))


def paginate(rows: Sequence[Row], page_size: int, page: int) -> Page:
    total_rows = len(rows)
    total_pages = total_pages_for(total_rows, page_size)
    current = clamp_page(page, total_pages)
    start = (current - 1) * page_size
    end = min(start + page_size, total_rows)
    return Page(
        rows=tuple(rows[start:end]),
        total_rows=total_rows,
        total_pages=total_pages,
        current_page=current,
        page_numbers=tuple(page_window(current, total_pages)),
        start_index=start,
        end_index=end,
    )


def first_page(current_page: int, total_pages: int) -> int:
    return 1


def previous_page(current_page: int, total_pages: int) -> int:
    return max(current_page - 1, 1)


def next_page(current_page: int, total_pages: int) -> int:
    return min(current_page + 1, max(1, total_pages))


def last_page(current_page: int, total_pages: int) -> int:
    return max(1, total_pages)


def goto_page(page: int, total_pages: int) -> int:
    return clamp_page(page, total_pages)
