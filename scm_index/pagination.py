"""In-memory pagination of search results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .config import PAGE_SIZE

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of an ordered result; *total* counts every matching element."""

    content: list[T] = field(default_factory=list)
    number: int = 0
    size: int = PAGE_SIZE
    total: int = 0


class InMemoryPagination:
    """Slice an already computed collection into pages."""

    def new_page(self, items: Iterable[T], page_index: int = 0, page_size: int = PAGE_SIZE) -> Page[T]:
        """
        Return page *page_index* of *items*, keeping the input order.

        page_size must be positive; a page past the end is empty.
        """
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        if page_index < 0:
            raise ValueError(f"page_index must not be negative, got {page_index}")
        all_items = list(items)
        start = page_index * page_size
        return Page(
            content=all_items[start:start + page_size],
            number=page_index,
            size=page_size,
            total=len(all_items),
        )
