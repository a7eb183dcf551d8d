"""Tests for the async pagination engine."""

import asyncio

import pytest

from mwquery.errors import MWNetworkError, NoMoreElementsError
from mwquery.models.descriptor import QueryDescriptor
from mwquery.models.enums import QueryState
from mwquery.pagination import AsyncPaginatedQuery
from mwquery.parsing import ListParser
from mwquery.queries.backlinks import BacklinksRequest1x17, BacklinkTitles


def engine(transport):
    return AsyncPaginatedQuery(
        transport,
        QueryDescriptor(title="Sandbox"),
        BacklinksRequest1x17(),
        ListParser("backlinks", "blcontinue"),
    )


@pytest.mark.asyncio
async def test_multi_page(async_scripted, make_page):
    transport = async_scripted([make_page(["A", "B"], "tok1"), make_page(["C"])])
    items = await engine(transport).flatten()
    assert items == ["A", "B", "C"]
    assert len(transport.requests) == 2


@pytest.mark.asyncio
async def test_async_for_iteration(async_scripted, make_page):
    transport = async_scripted([make_page([], "tok1"), make_page(["A"])])
    items = []
    async for title in engine(transport):
        items.append(title)
    assert items == ["A"]


@pytest.mark.asyncio
async def test_next_past_end_raises(async_scripted, make_page):
    it = engine(async_scripted([make_page(["A"])]))
    assert await it.next() == "A"
    assert await it.has_next() is False
    with pytest.raises(NoMoreElementsError):
        await it.next()


@pytest.mark.asyncio
async def test_error_during_pagination(async_scripted, make_page):
    transport = async_scripted([make_page(["A"], "tok1"), MWNetworkError("boom")])
    it = engine(transport)
    with pytest.raises(MWNetworkError):
        await it.flatten()
    assert it.continuation_token == "tok1"


@pytest.mark.asyncio
async def test_cancelled_fetch_leaves_state_untouched(make_page):
    """Cancelling a task mid-fetch must not advance the iterator."""
    started = asyncio.Event()
    requests = []

    class SlowTransport:
        def __init__(self):
            self.block = True

        async def execute(self, request):
            requests.append(request)
            if self.block:
                started.set()
                await asyncio.sleep(3600)
            return make_page(["A"])

    transport = SlowTransport()
    it = engine(transport)

    task = asyncio.ensure_future(it.has_next())
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert it.state is QueryState.INIT
    transport.block = False
    assert await it.flatten() == ["A"]
    assert requests[0] == requests[1]


@pytest.mark.asyncio
async def test_query_aiter_starts_fresh(async_scripted, make_page):
    transport = async_scripted([make_page(["A"]), make_page(["A"])])
    query = BacklinkTitles(transport, "Sandbox", version="1.17")

    first = [t async for t in query]
    second = [t async for t in query]

    assert first == second == ["A"]
