from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import Generic, TypeVar

from ..domain.exceptions import PageAlreadyCached

T = TypeVar("T")


class PageCache(ABC, Generic[T]):
    """Mechanism for memoizing fetched pages.

    A page cache maps 1-based page indexes to the items fetched for that
    page. Entries are append-only: a page, once stored, is never
    overwritten or evicted, so `entirety` always reflects every page ever
    fetched. Implementations may store pages elsewhere (e.g. on disk for
    very large result sets) as long as they keep that guarantee.
    """

    @staticmethod
    def in_memory() -> "PageCache[T]":
        return InMemoryPageCache()

    @abstractmethod
    def get(self, page: int) -> tuple[T, ...] | None: ...

    @abstractmethod
    def store(self, page: int, items: Iterable[T]) -> tuple[T, ...]:
        """Store the items of a page.

        Args:
            page: The page index.
            items: The items fetched for the page.

        Returns:
            The stored items as an immutable sequence.

        Raises:
            PageAlreadyCached: If the page is already stored.
        """
        ...

    @abstractmethod
    def pages(self) -> Iterator[int]:
        """Iterate over stored page indexes in ascending order."""
        ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __contains__(self, page: object) -> bool:
        return isinstance(page, int) and self.get(page) is not None

    def entirety(self) -> tuple[T, ...]:
        """Concatenate every stored page in ascending page order."""
        return tuple(chain.from_iterable(self.get(page) or () for page in self.pages()))


class InMemoryPageCache(PageCache[T]):
    """Unbounded dictionary-backed page cache."""

    def __init__(self) -> None:
        self._pages: dict[int, tuple[T, ...]] = {}

    def get(self, page: int) -> tuple[T, ...] | None:
        return self._pages.get(page)

    def store(self, page: int, items: Iterable[T]) -> tuple[T, ...]:
        if page in self._pages:
            raise PageAlreadyCached(page)
        stored = self._pages[page] = tuple(items)
        return stored

    def pages(self) -> Iterator[int]:
        # Jumps can populate pages out of order.
        return iter(sorted(self._pages))

    def __len__(self) -> int:
        return len(self._pages)
