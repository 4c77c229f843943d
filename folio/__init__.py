"""Folio - Paged, memoizing data sources for Python.

This module provides the public API for paging through large result sets.
"""

from .config import PagingSettings
from .domain import IndexRange, InvalidArgument, InvalidConfiguration, PagingError, page_range
from .paging import AsyncPagedSource, InMemoryPageCache, PageCache, PagedSource

__all__ = [
    # Sources
    "PagedSource",
    "AsyncPagedSource",
    # Cache
    "PageCache",
    "InMemoryPageCache",
    # Ranges
    "IndexRange",
    "page_range",
    # Configuration
    "PagingSettings",
    # Errors
    "PagingError",
    "InvalidConfiguration",
    "InvalidArgument",
]
