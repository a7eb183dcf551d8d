"""Iterable ``list=`` queries, one module per API list module."""

from mwquery.queries.allpages import AllPageTitles
from mwquery.queries.backlinks import BacklinkTitles
from mwquery.queries.base import Query
from mwquery.queries.categories import CategoryMembersFull, CategoryMembersSimple
from mwquery.queries.recentchanges import RecentChangeTitles
from mwquery.queries.usage import ImageUsageTitles, TemplateUserTitles

__all__ = [
    "AllPageTitles",
    "BacklinkTitles",
    "CategoryMembersFull",
    "CategoryMembersSimple",
    "ImageUsageTitles",
    "Query",
    "RecentChangeTitles",
    "TemplateUserTitles",
]
