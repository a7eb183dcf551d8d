"""Clients pairing a transport with the wiki's detected MediaWiki version."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from mwquery.errors import APIError, ParseError
from mwquery.http import DEFAULT_USER_AGENT, AsyncHTTPClient, HTTPClient
from mwquery.models.enums import ParsePolicy
from mwquery.models.envelopes import SiteInfoResponse
from mwquery.queries.base import Query
from mwquery.request import ApiRequest, RequestBuilder
from mwquery.version import MWVersion

log = logging.getLogger(__name__)

Q = TypeVar("Q", bound=Query[Any])


def siteinfo_request() -> ApiRequest:
    return (
        RequestBuilder()
        .action("query")
        .format_json()
        .param("meta", "siteinfo")
        .param("siprop", "general")
        .build()
    )


def _explicit_version(version: MWVersion | str | None) -> MWVersion | None:
    if version is None:
        return None
    try:
        return MWVersion.parse(version)
    except ValueError:
        log.warning("Unrecognised version %r, assuming the newest MediaWiki", version)
        return None


def parse_site_version(body: str) -> MWVersion | None:
    """Version from a ``meta=siteinfo`` body; None when the generator string is not recognisable."""
    try:
        response = SiteInfoResponse.model_validate_json(body)
    except ValidationError as exc:
        raise ParseError("malformed siteinfo response", body) from exc
    if response.error is not None:
        raise APIError(response.error)
    if response.query is None:
        raise ParseError("siteinfo response has no query section", body)
    generator = response.query.general.generator
    try:
        return MWVersion.parse(generator)
    except ValueError:
        log.warning("Unrecognised generator %r, assuming the newest MediaWiki", generator)
        return None


class Client:
    """Blocking client.

    Usage::

        with Client("https://en.wikipedia.org/w/api.php") as client:
            for title in client.query(BacklinkTitles, "Sandbox"):
                print(title)

    The version is read from ``meta=siteinfo`` on first use unless passed in.
    """

    def __init__(
        self,
        api_url: str,
        *,
        version: MWVersion | str | None = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        parse_policy: ParsePolicy = ParsePolicy.EXHAUST,
    ) -> None:
        self.http = HTTPClient(api_url, timeout=timeout, user_agent=user_agent)
        self.parse_policy = ParsePolicy(parse_policy)
        self._version = _explicit_version(version)
        self._version_known = version is not None

    @property
    def version(self) -> MWVersion | None:
        if not self._version_known:
            self._version = parse_site_version(self.http.execute(siteinfo_request()))
            self._version_known = True
            log.info("%s runs MediaWiki %s", self.http.api_url, self._version or "(unknown)")
        return self._version

    def query(self, kind: type[Q], *args: Any, **kwargs: Any) -> Q:
        """Build a ``kind`` query bound to this client's transport and version."""
        kwargs.setdefault("version", self.version)
        kwargs.setdefault("parse_policy", self.parse_policy)
        return kind(self.http, *args, **kwargs)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


class AsyncClient:
    """Async client; call :meth:`fetch_version` (or pass ``version``) before :meth:`query`."""

    def __init__(
        self,
        api_url: str,
        *,
        version: MWVersion | str | None = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        parse_policy: ParsePolicy = ParsePolicy.EXHAUST,
    ) -> None:
        self.http = AsyncHTTPClient(api_url, timeout=timeout, user_agent=user_agent)
        self.parse_policy = ParsePolicy(parse_policy)
        self._version = _explicit_version(version)
        self._version_known = version is not None

    @property
    def version(self) -> MWVersion | None:
        return self._version

    async def fetch_version(self) -> MWVersion | None:
        if not self._version_known:
            self._version = parse_site_version(await self.http.execute(siteinfo_request()))
            self._version_known = True
            log.info("%s runs MediaWiki %s", self.http.api_url, self._version or "(unknown)")
        return self._version

    def query(self, kind: type[Q], *args: Any, **kwargs: Any) -> Q:
        if not self._version_known and "version" not in kwargs:
            raise RuntimeError("Call fetch_version() before building queries")
        kwargs.setdefault("version", self._version)
        kwargs.setdefault("parse_policy", self.parse_policy)
        return kind(self.http, *args, **kwargs)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> AsyncClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
