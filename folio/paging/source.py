import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Generic, TypeVar

from typing_extensions import Self

from ..config import PagingSettings
from ..domain.exceptions import InvalidArgument, InvalidConfiguration
from ..domain.range import IndexRange, page_range
from .cache import PageCache

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
TFetch = TypeVar("TFetch", bound=Callable[..., Any])

EMPTY: tuple[Any, ...] = ()


class PageBook(Generic[T]):
    """Paging state and the decisions taken on it.

    The book owns the cursor (`current_page`), the end-of-stream flag and
    the page cache. It never performs I/O: each access operation is split
    into a `resolve_*` step, which answers from state when it can, and a
    `settle_*` step, which commits a freshly fetched page. Both source
    variants run the fetch step between the two, so a fetch that fails
    or is cancelled never reaches `settle_*` and leaves the book as it
    was.
    """

    # `end_reached` is only ever set by sequential access. Random access
    # neither reads nor clears it, so once a short page has been seen,
    # `next` stays empty even if a later jump finds data past that point.

    __slots__ = ("page_size", "current_page", "end_reached", "cache")

    def __init__(self, page_size: int, cache: PageCache[T] | None = None):
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise InvalidConfiguration(f"Page size must be a positive integer, got {page_size!r}.")

        self.page_size = page_size
        self.current_page = 0
        self.end_reached = False
        self.cache: PageCache[T] = cache if cache is not None else PageCache.in_memory()

    def range_for(self, page: int) -> IndexRange:
        return page_range(page, self.page_size)

    def resolve_next(self, page: int) -> tuple[T, ...] | None:
        """Answer a sequential read from state, or None if a fetch is needed."""
        if (cached := self.cache.get(page)) is not None:
            return cached
        if self.end_reached:
            return EMPTY
        return None

    def settle_next(self, page: int, items: tuple[T, ...]) -> tuple[T, ...]:
        if len(items) < self.page_size:
            # A short final page is handed out once and never replayed.
            self.end_reached = True
            return items

        self.current_page = page
        return self.cache.store(page, items)

    def resolve_jump(self, page: int) -> tuple[T, ...] | None:
        """Answer a random read from state, or None if a fetch is needed."""
        if isinstance(page, bool) or not isinstance(page, int):
            raise InvalidArgument(f"Page index must be an integer, got {page!r}.")
        if page <= 0:
            raise InvalidArgument("Cannot browse non-positive page index.")
        return self.cache.get(page)

    def settle_jump(self, page: int, items: tuple[T, ...]) -> tuple[T, ...]:
        if not items:
            return EMPTY

        self.current_page = page
        return self.cache.store(page, items)


class _PagedSourceBase(Generic[T, TFetch]):
    __slots__ = ("_book", "_fetch", "_level")

    def __init__(
        self,
        page_size: int,
        fetch: TFetch,
        cache: PageCache[T] | None = None,
        level: int = logging.DEBUG,
    ):
        self._book: PageBook[T] = PageBook(page_size, cache)
        self._fetch = fetch
        self._level = level

    @classmethod
    def from_settings(
        cls,
        fetch: TFetch,
        settings: PagingSettings | None = None,
        cache: PageCache[T] | None = None,
    ) -> Self:
        """Create a source using the configured page size and log level.

        Args:
            fetch: The fetch step that materializes a range into items.
            settings: Paging settings. Loaded from the environment when
                omitted.
            cache: Page cache to use. Defaults to an in-memory cache.
        """
        settings = settings if settings is not None else PagingSettings()
        return cls(settings.page_size, fetch, cache, level=settings.level)

    @property
    def page_size(self) -> int:
        return self._book.page_size

    @property
    def current_page(self) -> int:
        return self._book.current_page

    @property
    def end_reached(self) -> bool:
        return self._book.end_reached

    @property
    def entirety(self) -> tuple[T, ...]:
        """Every cached item, in ascending page order."""
        return self._book.cache.entirety()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(page_size={self.page_size}, "
            f"current_page={self.current_page}, end_reached={self.end_reached}, "
            f"cached_pages={len(self._book.cache)})"
        )

    def _log_fetched(self, page: int, index_range: IndexRange, items: tuple[T, ...]) -> None:
        LOGGER.log(
            self._level,
            "Fetched page",
            extra={
                "page": page,
                "page_size": self.page_size,
                "range_min": index_range.min,
                "range_max": index_range.max,
                "items": len(items),
            },
        )

    def _log_failure(self, page: int, error: BaseException) -> None:
        LOGGER.warning(
            "Fetching page failed",
            extra={"page": page, "page_size": self.page_size, "error_type": type(error).__name__},
        )

    def _log_exhaustion(self, page: int) -> None:
        if self._book.end_reached:
            LOGGER.log(self._level, "End of source reached", extra={"page": page})


class PagedSource(_PagedSourceBase[T, Callable[[IndexRange], Iterable[T]]]):
    """A memoizing source that fetches items one fixed-size page at a time.

    The source delegates retrieval to a fetch step: a callable receiving
    the `IndexRange` of a page and returning its items in order. Every
    full page is cached, so re-reading it costs nothing. A fetch returning
    fewer items than the page size marks the end of the source for
    sequential access.

    A source is not safe for concurrent use; give each caller its own.

    Examples:
        >>> letters = list("abcdefg")
        >>> source = PagedSource(3, lambda r: letters[r.offset : r.max])
        >>> source.next()
        ('a', 'b', 'c')
        >>> source.next()
        ('d', 'e', 'f')
        >>> source.next()
        ('g',)
        >>> source.end_reached, source.current_page
        (True, 2)
        >>> source.next()
        ()
        >>> source.entirety
        ('a', 'b', 'c', 'd', 'e', 'f')
    """

    __slots__ = ()

    def next(self) -> tuple[T, ...]:
        """Read the page following the current one.

        Returns:
            The items of the page, or an empty tuple once the end of the
            source has been reached.
        """
        page = self._book.current_page + 1
        if (resolved := self._book.resolve_next(page)) is not None:
            return resolved

        items = self._fetch_page(page)
        settled = self._book.settle_next(page, items)
        self._log_exhaustion(page)
        return settled

    def jump_to_page(self, page: int) -> tuple[T, ...]:
        """Read an arbitrary page and move the cursor to it.

        Args:
            page: The 1-based page index.

        Returns:
            The items of the page, or an empty tuple when it has none.

        Raises:
            InvalidArgument: If ``page`` is not positive.
        """
        if (cached := self._book.resolve_jump(page)) is not None:
            return cached

        return self._book.settle_jump(page, self._fetch_page(page))

    def _fetch_page(self, page: int) -> tuple[T, ...]:
        index_range = self._book.range_for(page)
        try:
            items = tuple(self._fetch(index_range))
        except Exception as e:
            self._log_failure(page, e)
            raise

        self._log_fetched(page, index_range, items)
        return items


class AsyncPagedSource(_PagedSourceBase[T, Callable[[IndexRange], Awaitable[Iterable[T]]]]):
    """The awaitable counterpart of `PagedSource`.

    The fetch step is a coroutine function, so a page can be retrieved
    over the network or from a database without blocking the event loop.
    Paging semantics are identical to `PagedSource`.

    There is no cancellation token argument: asyncio task cancellation
    takes its place. An in-flight fetch is cancelled by cancelling
    the task awaiting `next` or `jump_to_page`. The `CancelledError`
    propagates to the caller and the source is left exactly as it was
    before the call.

    Examples:
        >>> async def fetch(r: IndexRange) -> list[Row]:
        ...     return await db.fetch_rows(limit=r.limit, offset=r.offset)
        >>>
        >>> source = AsyncPagedSource(100, fetch)
        >>> first = await source.next()
        >>> fifth = await source.jump_to_page(5)
    """

    __slots__ = ()

    async def next(self) -> tuple[T, ...]:
        """Read the page following the current one.

        Returns:
            The items of the page, or an empty tuple once the end of the
            source has been reached.
        """
        page = self._book.current_page + 1
        if (resolved := self._book.resolve_next(page)) is not None:
            return resolved

        items = await self._fetch_page(page)
        settled = self._book.settle_next(page, items)
        self._log_exhaustion(page)
        return settled

    async def jump_to_page(self, page: int) -> tuple[T, ...]:
        """Read an arbitrary page and move the cursor to it.

        Args:
            page: The 1-based page index.

        Returns:
            The items of the page, or an empty tuple when it has none.

        Raises:
            InvalidArgument: If ``page`` is not positive.
        """
        if (cached := self._book.resolve_jump(page)) is not None:
            return cached

        return self._book.settle_jump(page, await self._fetch_page(page))

    async def _fetch_page(self, page: int) -> tuple[T, ...]:
        index_range = self._book.range_for(page)
        try:
            items = tuple(await self._fetch(index_range))
        except asyncio.CancelledError:
            LOGGER.debug("Fetching page cancelled", extra={"page": page})
            raise
        except Exception as e:
            self._log_failure(page, e)
            raise

        self._log_fetched(page, index_range, items)
        return items
