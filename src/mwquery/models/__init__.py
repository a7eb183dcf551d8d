"""Value types and API response models."""

from mwquery.models.base import MWModel
from mwquery.models.descriptor import QueryDescriptor
from mwquery.models.enums import Namespace, ParsePolicy, QueryState, RedirectFilter
from mwquery.models.envelopes import (
    APIErrorBody,
    GeneralInfo,
    ListResponse,
    SiteInfoQuery,
    SiteInfoResponse,
)
from mwquery.models.pages import CategoryItem, PageRef, RecentChange

__all__ = [
    "MWModel",
    "QueryDescriptor",
    # enums
    "Namespace",
    "ParsePolicy",
    "QueryState",
    "RedirectFilter",
    # envelopes
    "APIErrorBody",
    "GeneralInfo",
    "ListResponse",
    "SiteInfoQuery",
    "SiteInfoResponse",
    # pages
    "CategoryItem",
    "PageRef",
    "RecentChange",
]
