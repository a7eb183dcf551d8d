"""Top-level shapes of ``action=query`` JSON responses."""

from typing import Any

from pydantic import Field

from mwquery.models.base import MWModel


class APIErrorBody(MWModel):
    code: str = "unknown"
    info: str = ""


class ListResponse(MWModel):
    """A ``list=`` query result, with its legacy ``query-continue`` section."""

    query: dict[str, Any] | None = None
    query_continue: dict[str, dict[str, Any]] | None = Field(default=None, alias="query-continue")
    error: APIErrorBody | None = None
    warnings: dict[str, Any] | None = None


class GeneralInfo(MWModel):
    generator: str
    sitename: str | None = None
    base: str | None = None


class SiteInfoQuery(MWModel):
    general: GeneralInfo


class SiteInfoResponse(MWModel):
    query: SiteInfoQuery | None = None
    error: APIErrorBody | None = None
