"""Turning raw ``list=`` response bodies into items and continuation tokens."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, NamedTuple, Protocol, TypeVar

from pydantic import ValidationError

from mwquery.errors import APIError, ParseError
from mwquery.models.base import MWModel
from mwquery.models.envelopes import ListResponse
from mwquery.models.pages import PageRef

log = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Page(NamedTuple):
    items: list[Any]
    token: str


class ResponseParser(Protocol[T_co]):
    """Extracts one page from a response body. Implementations keep no state between calls."""

    def parse_items(self, body: str) -> list[T_co]: ...

    def parse_continuation(self, body: str) -> str: ...


def read_page(parser: ResponseParser[T], body: str) -> Page:
    """Items and token of one body, decoded once when the parser offers ``parse_page``."""
    parse_page = getattr(parser, "parse_page", None)
    if parse_page is not None:
        return parse_page(body)
    return Page(parser.parse_items(body), parser.parse_continuation(body))


def _title(record: Any) -> str:
    return record.title


class ListParser(Generic[T]):
    """Parser for JSON ``list=<name>`` results with a ``query-continue`` section.

    Records under ``query.<list_name>`` are validated against ``model`` and
    passed through ``extract`` (the page title by default). The continuation
    token is ``query-continue.<list_name>.<continue_param>``.
    """

    def __init__(
        self,
        list_name: str,
        continue_param: str,
        *,
        model: type[MWModel] = PageRef,
        extract: Callable[[Any], T] = _title,  # type: ignore[assignment]
    ) -> None:
        self.list_name = list_name
        self.continue_param = continue_param
        self.model = model
        self.extract = extract

    def _load(self, body: str) -> ListResponse:
        try:
            response = ListResponse.model_validate_json(body)
        except ValidationError as exc:
            raise ParseError(f"malformed {self.list_name} response: {exc.error_count()} error(s)", body) from exc
        if response.error is not None:
            raise APIError(response.error)
        if response.warnings:
            log.warning("API warnings for list=%s: %s", self.list_name, response.warnings)
        return response

    def parse_items(self, body: str) -> list[T]:
        return self._items(self._load(body), body)

    def parse_continuation(self, body: str) -> str:
        return self._token(self._load(body))

    def parse_page(self, body: str) -> Page:
        response = self._load(body)
        return Page(self._items(response, body), self._token(response))

    def _items(self, response: ListResponse, body: str) -> list[T]:
        if response.query is None:
            if response.query_continue:
                return []
            raise ParseError(f"{self.list_name} response has no query section", body)
        if self.list_name not in response.query:
            log.warning("query section has no %s list: %s", self.list_name, sorted(response.query))
            return []
        raw = response.query[self.list_name]
        if not isinstance(raw, list):
            raise ParseError(f"query.{self.list_name} is not a list", body)
        try:
            return [self.extract(self.model.model_validate(record)) for record in raw]
        except ValidationError as exc:
            raise ParseError(f"malformed {self.list_name} record: {exc.error_count()} error(s)", body) from exc

    def _token(self, response: ListResponse) -> str:
        section = (response.query_continue or {}).get(self.list_name) or {}
        value = section.get(self.continue_param)
        if value is None:
            if section:
                log.debug("query-continue.%s has no %s: %s", self.list_name, self.continue_param, section)
            return ""
        return str(value)
