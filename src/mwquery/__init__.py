"""mwquery: lazy, version-aware iteration over MediaWiki list queries."""

from mwquery.client import AsyncClient, Client
from mwquery.errors import (
    ActionError,
    APIError,
    MWError,
    MWHTTPError,
    MWNetworkError,
    NoMoreElementsError,
    ParseError,
    TransportError,
    UnsupportedOperationError,
    UnsupportedVersionError,
)
from mwquery.http import AsyncHTTPClient, HTTPClient
from mwquery.models import Namespace, ParsePolicy, QueryDescriptor, QueryState, RedirectFilter
from mwquery.pagination import AsyncPaginatedQuery, PaginatedQuery
from mwquery.queries import (
    AllPageTitles,
    BacklinkTitles,
    CategoryMembersFull,
    CategoryMembersSimple,
    ImageUsageTitles,
    Query,
    RecentChangeTitles,
    TemplateUserTitles,
)
from mwquery.version import MWVersion, VersionMap

__all__ = [
    "AsyncClient",
    "Client",
    "AsyncHTTPClient",
    "HTTPClient",
    "AsyncPaginatedQuery",
    "PaginatedQuery",
    "MWVersion",
    "VersionMap",
    # models
    "Namespace",
    "ParsePolicy",
    "QueryDescriptor",
    "QueryState",
    "RedirectFilter",
    # queries
    "AllPageTitles",
    "BacklinkTitles",
    "CategoryMembersFull",
    "CategoryMembersSimple",
    "ImageUsageTitles",
    "Query",
    "RecentChangeTitles",
    "TemplateUserTitles",
    # errors
    "ActionError",
    "APIError",
    "MWError",
    "MWHTTPError",
    "MWNetworkError",
    "NoMoreElementsError",
    "ParseError",
    "TransportError",
    "UnsupportedOperationError",
    "UnsupportedVersionError",
]
