"""
Offset pagination without a count query.

Fetch one row past the page size; the extra row only tells whether a next
page exists and is never returned.
"""
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

ORDER_PAGE_SIZE = 25


@dataclass(frozen=True)
class Page(Generic[T]):
    """Page wrapper: ``{items, has_next}``."""
    items: List[T] = field(default_factory=list)
    has_next: bool = False


class PaginationPolicy:
    """Over-fetch-by-one pagination policy."""

    def __init__(self, page_size: int = ORDER_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size

    @staticmethod
    def normalize_page(page: Optional[int]) -> int:
        """Missing or negative page numbers mean the first page."""
        if page is None:
            return 0
        return max(int(page), 0)

    def window(self, page: Optional[int]) -> Tuple[int, int]:
        """
        Rows to fetch for ``page``.

        Returns:
            (offset, limit) where limit is page_size + 1
        """
        page = self.normalize_page(page)
        return page * self.page_size, self.page_size + 1

    def build_page(self, rows: Sequence[T]) -> Page[T]:
        """Trim the look-ahead row and set ``has_next``."""
        if len(rows) > self.page_size:
            return Page(items=list(rows[: self.page_size]), has_next=True)
        return Page(items=list(rows), has_next=False)
