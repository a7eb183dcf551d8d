"""Request descriptors handed to a transport, and a builder for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote


def encode(value: str) -> str:
    """Percent-encode a parameter value as UTF-8, leaving nothing unescaped."""
    return quote(value, safe="")


@dataclass(frozen=True)
class ApiRequest:
    """A read-only GET against the API endpoint.

    ``params`` keeps insertion order and holds values that are already
    percent-encoded, so two requests built from the same inputs compare equal.
    """

    params: tuple[tuple[str, str], ...] = ()
    method: str = "GET"
    endpoint: str = ""

    @property
    def query_string(self) -> str:
        return "&".join(f"{key}={value}" for key, value in self.params)

    @property
    def url(self) -> str:
        if not self.query_string:
            return self.endpoint
        return f"{self.endpoint}?{self.query_string}"

    def param(self, key: str) -> str | None:
        for k, v in self.params:
            if k == key:
                return v
        return None

    def keys(self) -> list[str]:
        return [k for k, _ in self.params]


@dataclass
class RequestBuilder:
    """Fluent builder for :class:`ApiRequest`.

    Usage::

        req = RequestBuilder().action("query").format_json().param("list", "backlinks").build()
    """

    endpoint: str = ""
    _params: list[tuple[str, str]] = field(default_factory=list)

    def action(self, name: str) -> RequestBuilder:
        return self.param("action", name)

    def format_json(self) -> RequestBuilder:
        return self.param("format", "json")

    def param(self, key: str, value: object) -> RequestBuilder:
        """Append ``key=value``, encoding the value; a repeated key replaces the earlier one."""
        encoded = encode(str(value))
        for i, (k, _) in enumerate(self._params):
            if k == key:
                self._params[i] = (key, encoded)
                return self
        self._params.append((key, encoded))
        return self

    def param_if(self, key: str, value: object | None) -> RequestBuilder:
        if value is not None:
            self.param(key, value)
        return self

    def build(self) -> ApiRequest:
        return ApiRequest(params=tuple(self._params), endpoint=self.endpoint)
