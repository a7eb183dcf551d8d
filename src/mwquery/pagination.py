"""Iterators that hide continuation-token pagination behind one item sequence."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, AsyncIterator, Generic, Iterator, TypeVar

from mwquery.errors import NoMoreElementsError, ParseError, UnsupportedOperationError
from mwquery.models.enums import ParsePolicy, QueryState
from mwquery.parsing import Page, read_page

if TYPE_CHECKING:
    from mwquery.creators import RequestCreator
    from mwquery.http import AsyncTransport, Transport
    from mwquery.models.descriptor import QueryDescriptor
    from mwquery.parsing import ResponseParser
    from mwquery.request import ApiRequest

log = logging.getLogger(__name__)

T = TypeVar("T")


class _PageCursor(Generic[T]):
    """Buffer and continuation state shared by the sync and async iterators.

    Nothing here changes until a response body has been parsed, so a request
    that fails (or is cancelled) can be retried and produces the same request.
    """

    def __init__(
        self,
        descriptor: QueryDescriptor,
        creator: RequestCreator,
        parser: ResponseParser[T],
        *,
        parse_policy: ParsePolicy = ParsePolicy.EXHAUST,
    ) -> None:
        self.descriptor = descriptor
        self._creator = creator
        self._parser = parser
        self._parse_policy = ParsePolicy(parse_policy)
        self._buffer: deque[T] = deque()
        self._token = ""
        self._exhausted = False
        self._started = False
        self.requests_issued = 0
        self.last_parse_error: ParseError | None = None

    @property
    def state(self) -> QueryState:
        if self._buffer:
            return QueryState.HAS_BUFFERED
        if self._exhausted:
            return QueryState.EXHAUSTED
        if not self._started:
            return QueryState.INIT
        return QueryState.FETCHING

    @property
    def continuation_token(self) -> str:
        return self._token

    def _needs_fetch(self) -> bool:
        return not self._buffer and not self._exhausted

    def _next_request(self) -> ApiRequest:
        if self._token:
            log.debug("Continuing list=%s from %r", self._creator.list_name, self._token)
            return self._creator.new_continue_request(self.descriptor, self._token)
        log.debug("Starting list=%s for %r", self._creator.list_name, self.descriptor.title)
        return self._creator.new_initial_request(self.descriptor)

    def _read(self, body: str) -> Page:
        try:
            return read_page(self._parser, body)
        except ParseError as exc:
            if self._parse_policy is ParsePolicy.RAISE:
                raise
            log.warning("Ending list=%s on unparseable page: %s", self._creator.list_name, exc)
            self.last_parse_error = exc
            return Page([], "")

    def _absorb(self, body: str) -> None:
        self.requests_issued += 1
        page = self._read(body)
        self._started = True
        self._buffer.extend(page.items)
        if not page.token:
            self._exhausted = True
        elif page.token == self._token:
            log.warning(
                "list=%s returned the same continuation %r twice, stopping", self._creator.list_name, page.token
            )
            self._exhausted = True
        else:
            self._token = page.token

    def remove(self) -> None:
        raise UnsupportedOperationError("query results are read-only")


class PaginatedQuery(_PageCursor[T], Iterator[T]):
    """Yields items across continuation-paginated API responses.

    Pages are fetched on demand: ``has_next()`` issues a request when the
    buffer is empty, and keeps fetching past empty pages that still carry a
    continuation token. Once exhausted it never requests again. Iterating
    does not rewind; start a new traversal from the owning query instead.
    """

    def __init__(
        self,
        transport: Transport,
        descriptor: QueryDescriptor,
        creator: RequestCreator,
        parser: ResponseParser[T],
        *,
        parse_policy: ParsePolicy = ParsePolicy.EXHAUST,
    ) -> None:
        super().__init__(descriptor, creator, parser, parse_policy=parse_policy)
        self._transport = transport

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self._buffer.popleft()

    def has_next(self) -> bool:
        while self._needs_fetch():
            body = self._transport.execute(self._next_request())
            self._absorb(body)
        return bool(self._buffer)

    def next(self) -> T:
        if not self.has_next():
            raise NoMoreElementsError(f"list={self._creator.list_name} has no more items")
        return self._buffer.popleft()

    def flatten(self) -> list[T]:
        """Consume the rest of the iterator into a list."""
        return list(self)


class AsyncPaginatedQuery(_PageCursor[T], AsyncIterator[T]):
    """Async counterpart of :class:`PaginatedQuery`.

    If the awaiting task is cancelled while a page is in flight, the
    ``CancelledError`` propagates and the iterator is left as it was before
    the fetch.
    """

    def __init__(
        self,
        transport: AsyncTransport,
        descriptor: QueryDescriptor,
        creator: RequestCreator,
        parser: ResponseParser[T],
        *,
        parse_policy: ParsePolicy = ParsePolicy.EXHAUST,
    ) -> None:
        super().__init__(descriptor, creator, parser, parse_policy=parse_policy)
        self._transport = transport

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        if not await self.has_next():
            raise StopAsyncIteration
        return self._buffer.popleft()

    async def has_next(self) -> bool:
        while self._needs_fetch():
            body = await self._transport.execute(self._next_request())
            self._absorb(body)
        return bool(self._buffer)

    async def next(self) -> T:
        if not await self.has_next():
            raise NoMoreElementsError(f"list={self._creator.list_name} has no more items")
        return self._buffer.popleft()

    async def flatten(self) -> list[T]:
        """Consume the rest of the iterator into a list."""
        result: list[T] = []
        async for item in self:
            result.append(item)
        return result
