"""``list=recentchanges``: titles touched by recent edits, newest first."""

from __future__ import annotations

from typing import Any, Iterable

from mwquery.creators import RequestCreator
from mwquery.models.descriptor import QueryDescriptor
from mwquery.models.pages import RecentChange
from mwquery.queries.base import Query
from mwquery.request import ApiRequest, RequestBuilder
from mwquery.version import MW1_15, MW1_23, MW1_26, VersionMap


class _RecentChangesRequest(RequestCreator):
    list_name = "recentchanges"
    prefix = "rc"

    def _builder(self, descriptor: QueryDescriptor) -> RequestBuilder:
        return self.with_namespaces(self.new_builder(descriptor), descriptor)

    def new_initial_request(self, descriptor: QueryDescriptor) -> ApiRequest:
        return self._builder(descriptor).build()

    def new_continue_request(self, descriptor: QueryDescriptor, token: str) -> ApiRequest:
        return self._builder(descriptor).param(self.continue_param, token).build()


class RecentChangesRequest1x15(_RecentChangesRequest):
    """Before 1.23 the continuation is the timestamp to resume from."""

    continue_param = "rcstart"


class RecentChangesRequest1x23(_RecentChangesRequest):
    continue_param = "rccontinue"


class RecentChangesRequest1x26(RecentChangesRequest1x23):
    raw_continue = True


class RecentChangeTitles(Query[str]):
    """Titles from the recent changes feed. A page edited twice appears twice.

    ``namespaces`` defaults to None, which leaves the feed unrestricted; pass
    ``Namespace.MAIN`` for articles only.
    """

    creators = VersionMap(
        {
            MW1_15: RecentChangesRequest1x15,
            MW1_23: RecentChangesRequest1x23,
            MW1_26: RecentChangesRequest1x26,
        }
    )
    item_model = RecentChange

    def __init__(
        self,
        transport: Any,
        namespaces: Iterable[int] | int | None = None,
        *,
        limit: int = 50,
        **kwargs: Any,
    ) -> None:
        super().__init__(transport, QueryDescriptor(namespaces=namespaces, limit=limit), **kwargs)
