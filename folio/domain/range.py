"""Index ranges and the page-to-range arithmetic."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import InvalidArgument, InvalidConfiguration


class IndexRange(BaseModel):
    """Inclusive, 1-based bounds of the items belonging to a page.

    This is the only thing a fetch step receives. It is up to the fetch
    step to map it onto its storage, e.g. ``LIMIT range.limit OFFSET
    range.offset`` for SQL or ``items[range.offset:range.max]`` for an
    in-memory sequence.

    Attributes:
        min: Index of the first item in the range (1-based, inclusive).
        max: Index of the last item in the range (1-based, inclusive).

    Examples:
        >>> r = IndexRange(min=11, max=20)
        >>> r.offset, r.limit
        (10, 10)
    """

    model_config = ConfigDict(frozen=True)

    min: int = Field(ge=1)
    max: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_order(self) -> "IndexRange":
        if self.max < self.min:
            raise ValueError(f"max ({self.max}) must not be lower than min ({self.min})")
        return self

    @property
    def offset(self) -> int:
        """Number of items preceding the range (0-based start)."""
        return self.min - 1

    @property
    def limit(self) -> int:
        """Number of items the range spans."""
        return self.max - self.min + 1

    def __len__(self) -> int:
        return self.limit

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.min <= index <= self.max


def page_range(page: int, page_size: int) -> IndexRange:
    """Compute the index range denoted by a page.

    Page ``p`` covers ``[(p - 1) * page_size + 1, p * page_size]``.

    Args:
        page: The 1-based page index.
        page_size: The number of items per page.

    Returns:
        The inclusive index range of the page.

    Raises:
        InvalidArgument: If ``page`` is not positive.
        InvalidConfiguration: If ``page_size`` is not positive.
    """
    if page_size <= 0:
        raise InvalidConfiguration(f"Page size must be positive, got {page_size}.")
    if page <= 0:
        raise InvalidArgument("Cannot browse non-positive page index.")

    return IndexRange(min=(page * page_size) - page_size + 1, max=page * page_size)
