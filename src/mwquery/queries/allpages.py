"""``list=allpages``: every page in one namespace, in title order."""

from __future__ import annotations

from typing import Any

from mwquery.creators import RequestCreator
from mwquery.models.descriptor import QueryDescriptor
from mwquery.models.enums import Namespace, RedirectFilter
from mwquery.queries.base import Query
from mwquery.request import ApiRequest, RequestBuilder
from mwquery.version import MW1_15, MW1_20, MW1_26, VersionMap


class _AllPagesRequest(RequestCreator):
    list_name = "allpages"
    prefix = "ap"

    def _builder(self, descriptor: QueryDescriptor) -> RequestBuilder:
        return self.with_namespaces(
            self.new_builder(descriptor)
            .param_if("apfrom", descriptor.title)
            .param_if("apprefix", descriptor.prefix)
            .param("apfilterredir", descriptor.redirect_filter.value),
            descriptor,
        )

    def new_initial_request(self, descriptor: QueryDescriptor) -> ApiRequest:
        return self._builder(descriptor).build()

    def new_continue_request(self, descriptor: QueryDescriptor, token: str) -> ApiRequest:
        # For 1.15 the token replaces the apfrom the caller started at.
        return self._builder(descriptor).param(self.continue_param, token).build()


class AllPagesRequest1x15(_AllPagesRequest):
    """MW 1.15 to 1.19 continue with the next title, sent back as ``apfrom``."""

    continue_param = "apfrom"


class AllPagesRequest1x20(_AllPagesRequest):
    continue_param = "apcontinue"


class AllPagesRequest1x26(AllPagesRequest1x20):
    raw_continue = True


class AllPageTitles(Query[str]):
    """Titles in ``namespace``, optionally starting at ``start`` or limited to ``prefix``."""

    creators = VersionMap(
        {
            MW1_15: AllPagesRequest1x15,
            MW1_20: AllPagesRequest1x20,
            MW1_26: AllPagesRequest1x26,
        }
    )

    def __init__(
        self,
        transport: Any,
        start: str | None = None,
        prefix: str | None = None,
        redirect_filter: RedirectFilter | str = RedirectFilter.all,
        namespace: int = Namespace.MAIN,
        *,
        limit: int = 50,
        **kwargs: Any,
    ) -> None:
        descriptor = QueryDescriptor(
            title=start or None,
            prefix=prefix or None,
            redirect_filter=RedirectFilter(redirect_filter),
            namespaces=(int(namespace),),
            limit=limit,
        )
        super().__init__(transport, descriptor, **kwargs)
