"""Contracts between paged sources, their fetch steps and their callers."""

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from ..domain.range import IndexRange

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class RangeFetcher(Protocol[T_co]):
    """A fetch step materializing a range into items.

    Implementations return the items of the range in ascending order, at
    most ``len(index_range)`` of them. Returning fewer is how a fetch step
    tells a source that it has run out of items. Errors raised here reach
    the caller of the source untouched.
    """

    def __call__(self, index_range: IndexRange, /) -> Iterable[T_co]: ...


class AsyncRangeFetcher(Protocol[T_co]):
    """Awaitable counterpart of `RangeFetcher`."""

    async def __call__(self, index_range: IndexRange, /) -> Iterable[T_co]: ...


class OneWayDataSource(Protocol[T_co]):
    """What callers of a blocking paged source rely on."""

    @property
    def page_size(self) -> int: ...

    @property
    def current_page(self) -> int: ...

    @property
    def end_reached(self) -> bool: ...

    @property
    def entirety(self) -> tuple[T_co, ...]: ...

    def next(self) -> tuple[T_co, ...]: ...

    def jump_to_page(self, page: int) -> tuple[T_co, ...]: ...


class AsyncOneWayDataSource(Protocol[T_co]):
    """What callers of an awaitable paged source rely on."""

    @property
    def page_size(self) -> int: ...

    @property
    def current_page(self) -> int: ...

    @property
    def end_reached(self) -> bool: ...

    @property
    def entirety(self) -> tuple[T_co, ...]: ...

    async def next(self) -> tuple[T_co, ...]: ...

    async def jump_to_page(self, page: int) -> tuple[T_co, ...]: ...


def slice_fetcher(items: Sequence[T]) -> RangeFetcher[T]:
    """Serve ranges out of an in-memory sequence."""

    def fetch(index_range: IndexRange) -> Sequence[T]:
        return items[index_range.offset : index_range.max]

    return fetch


def async_slice_fetcher(items: Sequence[T]) -> AsyncRangeFetcher[T]:
    """Serve ranges out of an in-memory sequence, awaitably."""

    async def fetch(index_range: IndexRange) -> Sequence[T]:
        return items[index_range.offset : index_range.max]

    return fetch
