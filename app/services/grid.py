import math
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10


class ProductGrid(Generic[T]):
    """Paged grid the catalog page binds its rows to."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE, page_index: int = 0):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        if page_index < 0:
            raise ValueError("page_index cannot be negative")
        self.page_size = page_size
        self.page_index = page_index
        self.data_source: list[T] | None = None

    @property
    def is_bound(self) -> bool:
        return self.data_source is not None

    @property
    def row_count(self) -> int:
        return len(self.data_source) if self.data_source is not None else 0

    @property
    def page_count(self) -> int:
        if self.data_source is None:
            return 0
        return max(1, math.ceil(len(self.data_source) / self.page_size))

    def bind(self, rows: Sequence[T]) -> None:
        """Replace the grid's rows, keeping the page index within range."""
        self.data_source = list(rows)
        last_page = self.page_count - 1
        if self.page_index > last_page:
            self.page_index = last_page

    @property
    def page_rows(self) -> list[T]:
        if self.data_source is None:
            return []
        start = self.page_index * self.page_size
        return self.data_source[start:start + self.page_size]
