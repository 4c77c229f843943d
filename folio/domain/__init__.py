"""Domain primitives shared by paged sources and repositories.

- IndexRange: Inclusive 1-based bounds handed to a fetch step
- page_range: Page index to IndexRange arithmetic
- PagingError and its subclasses: Errors raised by folio
"""

from .exceptions import InvalidArgument, InvalidConfiguration, PageAlreadyCached, PagingError
from .range import IndexRange, page_range

__all__ = [
    "IndexRange",
    "page_range",
    "PagingError",
    "InvalidConfiguration",
    "InvalidArgument",
    "PageAlreadyCached",
]
