"""Per-version request shapes for ``list=`` queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from mwquery.models.descriptor import QueryDescriptor
from mwquery.request import ApiRequest, RequestBuilder


class RequestCreator(ABC):
    """Builds the initial and follow-up requests for one API-version family.

    Subclasses are stateless. A new request shape gets a new subclass and a
    :class:`~mwquery.version.VersionMap` entry; existing subclasses stay as they are.
    """

    list_name: ClassVar[str]
    prefix: ClassVar[str]
    continue_param: ClassVar[str]
    # 1.26 made the new-style "continue" the default; ask for query-continue instead.
    raw_continue: ClassVar[bool] = False

    def new_builder(self, descriptor: QueryDescriptor) -> RequestBuilder:
        builder = (
            RequestBuilder()
            .action("query")
            .format_json()
            .param("list", self.list_name)
            .param(f"{self.prefix}limit", descriptor.limit)
        )
        if descriptor.props:
            builder.param(f"{self.prefix}prop", "|".join(descriptor.props))
        if self.raw_continue:
            builder.param("rawcontinue", "")
        return builder

    def with_namespaces(self, builder: RequestBuilder, descriptor: QueryDescriptor) -> RequestBuilder:
        return builder.param_if(f"{self.prefix}namespace", descriptor.namespace_param)

    @abstractmethod
    def new_initial_request(self, descriptor: QueryDescriptor) -> ApiRequest:
        """Request for the first page."""

    @abstractmethod
    def new_continue_request(self, descriptor: QueryDescriptor, token: str) -> ApiRequest:
        """Request for the page that ``token`` points at."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))
