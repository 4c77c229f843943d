"""Central test fixtures."""

import pytest

from folio.paging import AsyncPagedSource, PagedSource
from folio.testing import AsyncRecordingFetcher, RecordingFetcher


@pytest.fixture
def letters() -> list[str]:
    """Seven items, which is two full pages and one partial page of three."""
    return list("abcdefg")


@pytest.fixture
def fetcher(letters: list[str]) -> RecordingFetcher[str]:
    return RecordingFetcher(letters)


@pytest.fixture
def source(fetcher: RecordingFetcher[str]) -> PagedSource[str]:
    return PagedSource(3, fetcher)


@pytest.fixture
def async_fetcher(letters: list[str]) -> AsyncRecordingFetcher[str]:
    return AsyncRecordingFetcher(letters)


@pytest.fixture
def async_source(async_fetcher: AsyncRecordingFetcher[str]) -> AsyncPagedSource[str]:
    return AsyncPagedSource(3, async_fetcher)
