"""Page domain model."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of an ordered result set."""

    items: tuple[T, ...]
    page_number: int
    total_pages: int
    total_items: int = 0

    @property
    def has_next(self) -> bool:
        """Return True when a following page exists."""
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Return True when a preceding page exists."""
        return self.page_number > 1
