"""Base class for iterable ``list=`` queries."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Iterable, TypeVar

from mwquery.models.base import MWModel
from mwquery.models.descriptor import QueryDescriptor
from mwquery.models.enums import ParsePolicy
from mwquery.models.pages import PageRef
from mwquery.pagination import AsyncPaginatedQuery, PaginatedQuery
from mwquery.parsing import ListParser, ResponseParser

if TYPE_CHECKING:
    from mwquery.creators import RequestCreator
    from mwquery.http import AsyncTransport, Transport
    from mwquery.version import MWVersion, VersionMap

T = TypeVar("T")


class Query(Iterable[T], Generic[T]):
    """A reusable list query.

    The request adapter is picked once, here, from ``creators`` and the wiki
    version. Every ``iter(query)`` starts a fresh :class:`PaginatedQuery`
    from the first page; no pagination state lives on the query itself.
    """

    creators: ClassVar[VersionMap[type[RequestCreator]]]
    item_model: ClassVar[type[MWModel]] = PageRef

    def __init__(
        self,
        transport: Transport | AsyncTransport,
        descriptor: QueryDescriptor,
        *,
        version: MWVersion | str | None = None,
        parse_policy: ParsePolicy = ParsePolicy.EXHAUST,
    ) -> None:
        self._transport = transport
        self.descriptor = descriptor
        self.version = version
        self.parse_policy = ParsePolicy(parse_policy)
        self.creator: RequestCreator = self.creators.select(version)()
        self.parser: ResponseParser[T] = self.new_parser()

    def new_parser(self) -> ResponseParser[T]:
        return ListParser(self.creator.list_name, self.creator.continue_param, model=self.item_model)

    def iterator(self) -> PaginatedQuery[T]:
        return PaginatedQuery(
            self._transport,  # type: ignore[arg-type]
            self.descriptor,
            self.creator,
            self.parser,
            parse_policy=self.parse_policy,
        )

    def __iter__(self) -> PaginatedQuery[T]:
        return self.iterator()

    def __aiter__(self) -> AsyncPaginatedQuery[T]:
        return AsyncPaginatedQuery(
            self._transport,  # type: ignore[arg-type]
            self.descriptor,
            self.creator,
            self.parser,
            parse_policy=self.parse_policy,
        )

    def clone(self) -> Query[T]:
        """An equivalent query; its iterators share nothing with this one's."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.descriptor!r}, creator={self.creator!r})"


def require_title(title: Any, what: str) -> str:
    if not isinstance(title, str) or not title:
        raise ValueError(f"{what} must be a non-empty string")
    return title


def with_prefix(title: str, prefixes: tuple[str, ...]) -> str:
    """``title`` with the first of ``prefixes`` added unless one is already present."""
    for prefix in prefixes:
        if title.startswith(f"{prefix}:"):
            return title
    return f"{prefixes[0]}:{title}"


def without_prefix(title: str, prefixes: tuple[str, ...]) -> str:
    for prefix in prefixes:
        if title.startswith(f"{prefix}:"):
            return title[len(prefix) + 1 :]
    return title
