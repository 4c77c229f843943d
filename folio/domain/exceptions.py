"""Exceptions raised by paged data sources."""


class PagingError(Exception):
    """Base class for all errors raised by folio."""

    pass


class InvalidConfiguration(PagingError, ValueError):
    """Raised when a paged source is constructed with invalid settings.

    No source instance is produced when this is raised.
    """

    pass


class InvalidArgument(PagingError, ValueError):
    """Raised when an operation receives an argument it cannot browse.

    The failing call leaves the source untouched. This signals a
    programming error in the caller and should not be retried as-is.
    """

    pass


class PageAlreadyCached(PagingError, KeyError):
    """Raised when a page cache is asked to overwrite an existing page."""

    pass
