"""``list=imageusage`` and ``list=embeddedin``: pages using a file or a template."""

from __future__ import annotations

from typing import Any, ClassVar, Iterable

from mwquery.creators import RequestCreator
from mwquery.models.descriptor import QueryDescriptor
from mwquery.models.enums import RedirectFilter
from mwquery.queries.base import Query, require_title, with_prefix
from mwquery.request import ApiRequest, RequestBuilder
from mwquery.version import MW1_15, MW1_26, VersionMap


class _UsageRequest(RequestCreator):
    """Both modules take a target title, a redirect filter and namespaces, restated on every request."""

    title_prefixes: ClassVar[tuple[str, ...]]

    def _builder(self, descriptor: QueryDescriptor) -> RequestBuilder:
        builder = (
            self.new_builder(descriptor)
            .param(f"{self.prefix}title", with_prefix(descriptor.title or "", self.title_prefixes))
            .param(f"{self.prefix}filterredir", descriptor.redirect_filter.value)
        )
        return self.with_namespaces(builder, descriptor)

    def new_initial_request(self, descriptor: QueryDescriptor) -> ApiRequest:
        return self._builder(descriptor).build()

    def new_continue_request(self, descriptor: QueryDescriptor, token: str) -> ApiRequest:
        return self._builder(descriptor).param(self.continue_param, token).build()


class ImageUsageRequest1x15(_UsageRequest):
    list_name = "imageusage"
    prefix = "iu"
    continue_param = "iucontinue"
    title_prefixes = ("File", "Image")


class ImageUsageRequest1x26(ImageUsageRequest1x15):
    raw_continue = True


class EmbeddedInRequest1x15(_UsageRequest):
    list_name = "embeddedin"
    prefix = "ei"
    continue_param = "eicontinue"
    title_prefixes = ("Template",)


class EmbeddedInRequest1x26(EmbeddedInRequest1x15):
    raw_continue = True


class _UsageQuery(Query[str]):
    def __init__(
        self,
        transport: Any,
        title: str,
        namespaces: Iterable[int] | int | None = None,
        *,
        redirect_filter: RedirectFilter | str = RedirectFilter.all,
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


class ImageUsageTitles(_UsageQuery):
    """Titles of pages that display a file. ``File:`` is added when missing."""

    creators = VersionMap({MW1_15: ImageUsageRequest1x15, MW1_26: ImageUsageRequest1x26})


class TemplateUserTitles(_UsageQuery):
    """Titles of pages that transclude a template. ``Template:`` is added when missing."""

    creators = VersionMap({MW1_15: EmbeddedInRequest1x15, MW1_26: EmbeddedInRequest1x26})
