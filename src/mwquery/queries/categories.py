"""``list=categorymembers``: pages in a category."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Iterable

from mwquery.creators import RequestCreator
from mwquery.models.descriptor import QueryDescriptor
from mwquery.models.pages import CategoryItem
from mwquery.parsing import ListParser, ResponseParser
from mwquery.queries.base import Query, require_title, with_prefix, without_prefix
from mwquery.request import ApiRequest, RequestBuilder
from mwquery.version import MW1_11, MW1_14, MW1_26, VersionMap

CATEGORY_PREFIXES = ("Category",)

FULL_PROPS = ("ids", "title", "sortkey", "timestamp")


class _CategoryMembersRequest(RequestCreator):
    list_name = "categorymembers"
    prefix = "cm"
    continue_param = "cmcontinue"

    @abstractmethod
    def with_category(self, builder: RequestBuilder, descriptor: QueryDescriptor) -> RequestBuilder:
        """Add the parameter naming the category."""

    def new_initial_request(self, descriptor: QueryDescriptor) -> ApiRequest:
        builder = self.with_category(self.new_builder(descriptor), descriptor)
        return self.with_namespaces(builder, descriptor).build()

    def new_continue_request(self, descriptor: QueryDescriptor, token: str) -> ApiRequest:
        builder = self.with_category(self.new_builder(descriptor), descriptor)
        return self.with_namespaces(builder, descriptor).param("cmcontinue", token).build()


class CategoryMembersRequest1x11(_CategoryMembersRequest):
    """MW 1.11 to 1.13 name the category without its namespace prefix."""

    def with_category(self, builder: RequestBuilder, descriptor: QueryDescriptor) -> RequestBuilder:
        return builder.param("cmcategory", without_prefix(descriptor.title or "", CATEGORY_PREFIXES))


class CategoryMembersRequest1x14(_CategoryMembersRequest):
    def with_category(self, builder: RequestBuilder, descriptor: QueryDescriptor) -> RequestBuilder:
        return builder.param("cmtitle", with_prefix(descriptor.title or "", CATEGORY_PREFIXES))


class CategoryMembersRequest1x26(CategoryMembersRequest1x14):
    raw_continue = True


_CREATORS = VersionMap(
    {
        MW1_11: CategoryMembersRequest1x11,
        MW1_14: CategoryMembersRequest1x14,
        MW1_26: CategoryMembersRequest1x26,
    }
)


def _descriptor(category: str, namespaces: Iterable[int] | int | None, limit: int, props: tuple[str, ...] | None):
    return QueryDescriptor(
        title=require_title(category, "category"),
        namespaces=namespaces,
        limit=limit,
        props=props,
    )


class CategoryMembersSimple(Query[str]):
    """Titles of the members of ``category`` (with or without the ``Category:`` prefix).

    Members from every namespace are returned unless ``namespaces`` is given.
    """

    creators = _CREATORS

    def __init__(
        self,
        transport: Any,
        category: str,
        namespaces: Iterable[int] | int | None = None,
        *,
        limit: int = 50,
        **kwargs: Any,
    ) -> None:
        super().__init__(transport, _descriptor(category, namespaces, limit, None), **kwargs)


class CategoryMembersFull(Query[CategoryItem]):
    """Members of ``category`` as :class:`CategoryItem` records."""

    creators = _CREATORS
    item_model = CategoryItem

    def __init__(
        self,
        transport: Any,
        category: str,
        namespaces: Iterable[int] | int | None = None,
        *,
        limit: int = 50,
        **kwargs: Any,
    ) -> None:
        super().__init__(transport, _descriptor(category, namespaces, limit, FULL_PROPS), **kwargs)

    def new_parser(self) -> ResponseParser[CategoryItem]:
        return ListParser(
            self.creator.list_name,
            self.creator.continue_param,
            model=CategoryItem,
            extract=lambda record: record,
        )
