"""Module: pagination."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow:
    """Position of one page inside a listing of ``total_items`` rows."""

    current_page: int
    total_pages: int
    total_items: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def limit(self) -> int:
        # Pages past the end select nothing.
        if self.current_page > self.total_pages:
            return 0
        return self.page_size


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    current_page: int
    total_pages: int
    total_items: int


def parse_page(raw: str | int | None) -> int:
    # Absent, non-numeric and non-positive values all mean the first page.
    if raw is None:
        return 1
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def page_window(total_items: int, page_size: int, requested_page: int) -> PageWindow:
    """
    Compute the page boundaries for a listing.

    ``total_pages`` is never below 1, ``requested_page`` below 1 clamps to the
    first page, and a page past the end keeps its number but selects no rows.
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    total_items = max(total_items, 0)
    total_pages = max(1, math.ceil(total_items / page_size))
    current_page = max(requested_page, 1)
    return PageWindow(
        current_page=current_page,
        total_pages=total_pages,
        total_items=total_items,
        page_size=page_size,
    )


def paginate(items: Sequence[T], page_size: int, requested_page: int) -> Page[T]:
    window = page_window(len(items), page_size, requested_page)
    start = window.offset
    return Page(
        items=list(items[start:start + window.limit]),
        current_page=window.current_page,
        total_pages=window.total_pages,
        total_items=window.total_items,
    )
