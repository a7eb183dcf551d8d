"""HTTP transports wrapping httpx for the MediaWiki API endpoint."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from mwquery.errors import MWHTTPError, MWNetworkError
from mwquery.request import ApiRequest

log = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "mwquery/0.1 (+https://www.mediawiki.org/wiki/API:Etiquette)"


class Transport(Protocol):
    def execute(self, request: ApiRequest) -> str: ...


class AsyncTransport(Protocol):
    async def execute(self, request: ApiRequest) -> str: ...


class _BaseHTTPClient:
    def __init__(
        self,
        api_url: str,
        *,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        self._headers = {"User-Agent": user_agent}
        if headers:
            self._headers.update(headers)

    def url_for(self, request: ApiRequest) -> str:
        """Absolute URL for ``request``; an empty request endpoint means the API URL."""
        base = request.endpoint or self.api_url
        if not request.query_string:
            return base
        return f"{base}?{request.query_string}"

    def _body(self, request: ApiRequest, response: httpx.Response) -> str:
        if response.status_code >= 400:
            raise MWHTTPError.from_response(response)
        log.debug("%s %s -> %d (%d bytes)", request.method, response.url, response.status_code, len(response.content))
        return response.text


class HTTPClient(_BaseHTTPClient):
    """Blocking transport. Failures are raised, never retried."""

    def __init__(self, api_url: str, **kwargs: Any) -> None:
        super().__init__(api_url, **kwargs)
        self._client = httpx.Client(timeout=self.timeout, headers=self._headers, follow_redirects=True)

    def execute(self, request: ApiRequest) -> str:
        try:
            response = self._client.request(request.method, self.url_for(request))
        except httpx.TransportError as exc:
            raise MWNetworkError(str(exc)) from exc
        return self._body(request, response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


class AsyncHTTPClient(_BaseHTTPClient):
    """Async transport over ``httpx.AsyncClient``."""

    def __init__(self, api_url: str, **kwargs: Any) -> None:
        super().__init__(api_url, **kwargs)
        self._client = httpx.AsyncClient(timeout=self.timeout, headers=self._headers, follow_redirects=True)

    async def execute(self, request: ApiRequest) -> str:
        try:
            response = await self._client.request(request.method, self.url_for(request))
        except httpx.TransportError as exc:
            raise MWNetworkError(str(exc)) from exc
        return self._body(request, response)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncHTTPClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
