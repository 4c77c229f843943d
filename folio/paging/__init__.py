"""Paged, memoizing data sources.

This package provides:
- PagedSource / AsyncPagedSource: Sequential and random page access
- PageBook: Paging state shared by both sources
- PageCache / InMemoryPageCache: Pluggable page memoization
- Fetch and caller contracts, plus in-memory slice fetchers
"""

from .cache import InMemoryPageCache, PageCache
from .fetch import (
    AsyncOneWayDataSource,
    AsyncRangeFetcher,
    OneWayDataSource,
    RangeFetcher,
    async_slice_fetcher,
    slice_fetcher,
)
from .source import AsyncPagedSource, PageBook, PagedSource

__all__ = [
    # Sources
    "PagedSource",
    "AsyncPagedSource",
    "PageBook",
    # Cache
    "PageCache",
    "InMemoryPageCache",
    # Contracts
    "RangeFetcher",
    "AsyncRangeFetcher",
    "OneWayDataSource",
    "AsyncOneWayDataSource",
    "slice_fetcher",
    "async_slice_fetcher",
]
