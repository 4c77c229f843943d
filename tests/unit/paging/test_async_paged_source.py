"""Tests for the awaitable paged source."""

import asyncio

import pytest

from folio.config import PagingSettings
from folio.domain import IndexRange, InvalidArgument, InvalidConfiguration
from folio.paging import AsyncPagedSource, async_slice_fetcher
from folio.testing import AsyncRecordingFetcher


def test_non_positive_page_size_is_rejected():
    with pytest.raises(InvalidConfiguration):
        AsyncPagedSource(0, async_slice_fetcher([]))


def test_fresh_source_state(async_source):
    assert async_source.page_size == 3
    assert async_source.current_page == 0
    assert async_source.end_reached is False
    assert async_source.entirety == ()


@pytest.mark.asyncio
async def test_sequential_scenario(async_source, async_fetcher):
    """Walk seven items in pages of three until the source runs dry."""
    assert await async_source.next() == ("a", "b", "c")
    assert await async_source.next() == ("d", "e", "f")
    assert async_source.current_page == 2

    assert await async_source.next() == ("g",)
    assert async_source.end_reached is True
    assert async_source.current_page == 2

    assert await async_source.next() == ()
    assert async_source.entirety == ("a", "b", "c", "d", "e", "f")
    assert len(async_fetcher.calls) == 3


@pytest.mark.asyncio
async def test_jump_after_end_keeps_source_exhausted(async_source, async_fetcher):
    for _ in range(4):
        await async_source.next()

    assert await async_source.jump_to_page(3) == ("g",)
    assert async_source.current_page == 3
    assert async_fetcher.calls[-1] == IndexRange(min=7, max=9)

    assert await async_source.next() == ()


@pytest.mark.asyncio
async def test_cached_pages_are_not_fetched_again(async_source, async_fetcher):
    await async_source.next()

    assert await async_source.jump_to_page(1) == ("a", "b", "c")
    assert len(async_fetcher.calls) == 1


@pytest.mark.asyncio
async def test_empty_source_ends_immediately():
    source = AsyncPagedSource(3, AsyncRecordingFetcher([]))

    assert await source.next() == ()
    assert source.end_reached is True
    assert source.current_page == 0
    assert source.entirety == ()


@pytest.mark.asyncio
async def test_next_serves_cached_page_without_fetching(async_source, async_fetcher):
    """A cached next page is re-read for free and leaves state alone."""
    await async_source.jump_to_page(2)
    await async_source.jump_to_page(1)
    calls = len(async_fetcher.calls)

    first = await async_source.next()
    second = await async_source.next()

    assert first == second == ("d", "e", "f")
    assert async_source.current_page == 1
    assert len(async_fetcher.calls) == calls


@pytest.mark.asyncio
async def test_jump_to_empty_page_changes_nothing(async_source):
    assert await async_source.jump_to_page(5) == ()
    assert async_source.current_page == 0
    assert async_source.end_reached is False


@pytest.mark.asyncio
@pytest.mark.parametrize("page", [0, -1])
async def test_jump_to_non_positive_page_is_rejected(async_source, async_fetcher, page):
    with pytest.raises(InvalidArgument):
        await async_source.jump_to_page(page)

    assert async_source.current_page == 0
    assert async_fetcher.calls == []


@pytest.mark.asyncio
async def test_fetch_failure_propagates_and_leaves_state(async_source, async_fetcher):
    await async_source.next()
    async_fetcher.fail_with(ConnectionError("timeout talking to api"))

    with pytest.raises(ConnectionError):
        await async_source.next()

    assert async_source.current_page == 1
    assert async_source.end_reached is False
    assert await async_source.next() == ("d", "e", "f")


@pytest.mark.asyncio
async def test_cancelled_fetch_leaves_state(async_source, async_fetcher):
    """Cancelling an in-flight fetch commits nothing."""
    await async_source.next()
    async_fetcher.block()

    task = asyncio.create_task(async_source.next())
    await async_fetcher.started.wait()
    async_fetcher.started.clear()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    assert async_source.current_page == 1
    assert async_source.end_reached is False
    assert async_source.entirety == ("a", "b", "c")

    async_fetcher.release()
    assert await async_source.next() == ("d", "e", "f")
    assert async_source.current_page == 2


@pytest.mark.asyncio
async def test_cancelled_jump_leaves_state(async_source, async_fetcher):
    async_fetcher.block()

    task = asyncio.create_task(async_source.jump_to_page(2))
    await async_fetcher.started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    assert async_source.current_page == 0
    assert async_source.entirety == ()


@pytest.mark.asyncio
async def test_timeout_cancels_fetch(async_source, async_fetcher):
    async_fetcher.block()

    with pytest.raises(TimeoutError):
        await asyncio.wait_for(async_source.next(), timeout=0.01)

    assert async_source.current_page == 0
    assert async_source.end_reached is False


@pytest.mark.asyncio
async def test_from_settings(letters):
    source = AsyncPagedSource.from_settings(
        async_slice_fetcher(letters), PagingSettings(page_size=5)
    )

    assert await source.next() == ("a", "b", "c", "d", "e")
    assert await source.next() == ("f", "g")
    assert source.end_reached is True
