from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")

WINDOW_RADIUS = 2


@dataclass(frozen=True)
class Page(Generic[T]):
    rows: List[T]
    total_pages: int


def total_pages(n_rows: int, rows_per_page: int) -> int:
    return math.ceil(n_rows / rows_per_page)


def paginate(records: Sequence[T], page: int, rows_per_page: int) -> Page[T]:
    """
    Slice out one page. Pages past the end come back empty; the page
    number is not clamped to the available range.
    """
    start = (page - 1) * rows_per_page
    stop = page * rows_per_page
    rows = list(records[max(start, 0):max(stop, 0)])
    return Page(rows=rows, total_pages=total_pages(len(records), rows_per_page))


def pagination_window(page: int, n_pages: int) -> List[int]:
    """Page buttons around the current page: up to two on each side."""
    first = max(1, page - WINDOW_RADIUS)
    last = min(n_pages, page + WINDOW_RADIUS)
    return list(range(first, last + 1))


def has_previous(page: int) -> bool:
    return page > 1


def has_next(page: int, n_pages: int) -> bool:
    return page < n_pages
