"""Library exception hierarchy."""

from __future__ import annotations

import httpx

from mwquery.models.envelopes import APIErrorBody


class MWError(Exception):
    """Base class for every error raised by mwquery."""


class ActionError(MWError):
    """An API request could not be completed."""


class TransportError(ActionError):
    """Raised when the request never produced a usable response body."""


class MWHTTPError(TransportError):
    """Raised when the API endpoint answers with a non-2xx status."""

    def __init__(self, status: int, response: httpx.Response | None = None) -> None:
        self.status = status
        self.response = response
        reason = ""
        if response is not None:
            reason = response.reason_phrase
        super().__init__(f"HTTP {status} {reason}".rstrip())

    @classmethod
    def from_response(cls, response: httpx.Response) -> MWHTTPError:
        return cls(status=response.status_code, response=response)


class MWNetworkError(TransportError):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class APIError(ActionError):
    """Raised when MediaWiki returns an ``{"error": ...}`` envelope."""

    def __init__(self, error: APIErrorBody) -> None:
        self.error = error
        super().__init__(f"{error.code}: {error.info}")

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def info(self) -> str:
        return self.error.info


class ParseError(MWError):
    """Raised when a response body cannot be read as a query result."""

    def __init__(self, message: str, body: str | None = None) -> None:
        self.body = body
        super().__init__(message)


class UnsupportedVersionError(MWError):
    """Raised when the wiki is older than the oldest known request shape."""

    def __init__(self, version: object, minimum: object) -> None:
        self.version = version
        self.minimum = minimum
        super().__init__(f"MediaWiki {version} is not supported (minimum is {minimum})")


class UnsupportedOperationError(MWError):
    """Raised on attempts to mutate a read-only result sequence."""


class NoMoreElementsError(MWError):
    """Raised by ``next()`` once a query has no further items."""
