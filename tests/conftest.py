"""Shared test fixtures."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from mwquery.http import HTTPClient
from mwquery.request import ApiRequest


class ScriptedTransport:
    """Answers each ``execute`` with the next scripted body, or raises it if it is an exception."""

    def __init__(self, script: list[Any]) -> None:
        self.script = list(script)
        self.requests: list[ApiRequest] = []

    def _next(self, request: ApiRequest) -> str:
        self.requests.append(request)
        if not self.script:
            raise AssertionError(f"unexpected request: {request.url}")
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def execute(self, request: ApiRequest) -> str:
        return self._next(request)


class AsyncScriptedTransport(ScriptedTransport):
    async def execute(self, request: ApiRequest) -> str:  # type: ignore[override]
        return self._next(request)


def build_page(
    titles: list[str] | tuple[str, ...] = (),
    token: str | None = None,
    *,
    list_name: str = "backlinks",
    continue_param: str = "blcontinue",
    records: list[dict[str, Any]] | None = None,
) -> str:
    if records is None:
        records = [{"pageid": i + 1, "ns": 0, "title": t} for i, t in enumerate(titles)]
    body: dict[str, Any] = {"query": {list_name: records}}
    if token:
        body["query-continue"] = {list_name: {continue_param: token}}
    return json.dumps(body)


@pytest.fixture
def make_page() -> Callable[..., str]:
    """Builds a ``list=`` JSON body: ``make_page(["A", "B"], "tok1")``."""
    return build_page


@pytest.fixture
def scripted() -> Callable[[list[Any]], ScriptedTransport]:
    return ScriptedTransport


@pytest.fixture
def async_scripted() -> Callable[[list[Any]], AsyncScriptedTransport]:
    return AsyncScriptedTransport


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={})

    class RecordingTransport(httpx.BaseTransport):
        def __init__(self):
            self.response = default_response

        def handle_request(self, request: httpx.Request) -> httpx.Response:
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "params": dict(request.url.params),
                "headers": dict(request.headers),
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient("https://wiki.test/w/api.php")
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.Client(transport=transport, headers=client._headers)
    yield client, transport, calls
    client.close()
