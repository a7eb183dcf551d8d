"""Unit tests for error classes."""

from __future__ import annotations

import httpx

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
from mwquery.models.envelopes import APIErrorBody
from mwquery.version import MWVersion


class TestMWHTTPError:
    def test_from_response(self):
        response = httpx.Response(403, text="Forbidden")
        err = MWHTTPError.from_response(response)
        assert err.status == 403
        assert err.response is response
        assert str(err) == "HTTP 403 Forbidden"

    def test_without_response(self):
        err = MWHTTPError(status=500)
        assert err.response is None
        assert str(err) == "HTTP 500"


class TestAPIError:
    def test_properties(self):
        err = APIError(APIErrorBody(code="badtitle", info="Bad title"))
        assert err.code == "badtitle"
        assert err.info == "Bad title"
        assert "badtitle" in str(err)


class TestHierarchy:
    def test_transport_errors_are_action_errors(self):
        assert issubclass(MWHTTPError, TransportError)
        assert issubclass(MWNetworkError, TransportError)
        assert issubclass(TransportError, ActionError)
        assert issubclass(APIError, ActionError)

    def test_everything_is_an_mw_error(self):
        for cls in (
            ActionError,
            ParseError,
            UnsupportedVersionError,
            UnsupportedOperationError,
            NoMoreElementsError,
        ):
            assert issubclass(cls, MWError)

    def test_no_more_elements_is_not_stop_iteration(self):
        assert not issubclass(NoMoreElementsError, StopIteration)

    def test_network_error_as_cause(self):
        original = ConnectionError("refused")
        err = MWNetworkError("Connection refused")
        err.__cause__ = original
        assert err.__cause__ is original
        assert str(err) == "Connection refused"


def test_unsupported_version_message():
    err = UnsupportedVersionError(MWVersion(1, 14), MWVersion(1, 15))
    assert "1.14" in str(err)
    assert "1.15" in str(err)


def test_parse_error_keeps_body():
    err = ParseError("bad", body="<html>")
    assert err.body == "<html>"
