"""``list=backlinks``: pages linking to a given page."""

from __future__ import annotations

from typing import Any, Iterable

from mwquery.creators import RequestCreator
from mwquery.models.descriptor import QueryDescriptor
from mwquery.models.enums import RedirectFilter
from mwquery.queries.base import Query, require_title
from mwquery.request import ApiRequest
from mwquery.version import MW1_15, MW1_17, MW1_26, VersionMap


class _BacklinksRequest(RequestCreator):
    list_name = "backlinks"
    prefix = "bl"
    continue_param = "blcontinue"

    def new_initial_request(self, descriptor: QueryDescriptor) -> ApiRequest:
        builder = (
            self.new_builder(descriptor)
            .param("bltitle", descriptor.title)
            .param("blfilterredir", descriptor.redirect_filter.value)
        )
        return self.with_namespaces(builder, descriptor).build()


class BacklinksRequest1x15(_BacklinksRequest):
    """MW 1.15 and 1.16. ``blcontinue`` alone carries title, filter and namespaces."""

    def new_continue_request(self, descriptor: QueryDescriptor, token: str) -> ApiRequest:
        return self.new_builder(descriptor).param("blcontinue", token).build()


class BacklinksRequest1x17(_BacklinksRequest):
    """MW 1.17 to 1.25. Continuations must restate ``bltitle``."""

    def new_continue_request(self, descriptor: QueryDescriptor, token: str) -> ApiRequest:
        return (
            self.new_builder(descriptor)
            .param("blcontinue", token)
            .param("bltitle", descriptor.title)
            .build()
        )


class BacklinksRequest1x26(BacklinksRequest1x17):
    """MW 1.26 onwards."""

    raw_continue = True


class BacklinkTitles(Query[str]):
    """Titles of the pages that link to ``title``.

    Usage::

        for title in BacklinkTitles(http, "Sandbox", namespaces=[0], version="1.16"):
            print(title)
    """

    creators = VersionMap(
        {
            MW1_15: BacklinksRequest1x15,
            MW1_17: BacklinksRequest1x17,
            MW1_26: BacklinksRequest1x26,
        }
    )

    def __init__(
        self,
        transport: Any,
        title: str,
        redirect_filter: RedirectFilter | str = RedirectFilter.all,
        namespaces: Iterable[int] | int | None = None,
        *,
        limit: int = 50,
        **kwargs: Any,
    ) -> None:
        descriptor = QueryDescriptor(
            title=require_title(title, "title"),
            redirect_filter=RedirectFilter(redirect_filter),
            namespaces=namespaces,
            limit=limit,
        )
        super().__init__(transport, descriptor, **kwargs)
