"""Tests for request descriptors and the builder."""

from mwquery.request import ApiRequest, RequestBuilder, encode


def test_builder_keeps_order():
    req = RequestBuilder().action("query").format_json().param("list", "backlinks").build()
    assert req.keys() == ["action", "format", "list"]
    assert req.query_string == "action=query&format=json&list=backlinks"
    assert req.method == "GET"


def test_values_are_percent_encoded():
    req = RequestBuilder().param("bltitle", "Main Page/Ä&x").param("blnamespace", "0|2").build()
    assert req.param("bltitle") == "Main%20Page%2F%C3%84%26x"
    assert req.param("blnamespace") == "0%7C2"


def test_repeated_key_replaces():
    req = RequestBuilder().param("apfrom", "A").param("aplimit", 5).param("apfrom", "M").build()
    assert req.keys() == ["apfrom", "aplimit"]
    assert req.param("apfrom") == "M"


def test_param_if_skips_none():
    req = RequestBuilder().param_if("blnamespace", None).param_if("bltitle", "X").build()
    assert req.keys() == ["bltitle"]


def test_empty_value_is_kept():
    req = RequestBuilder().param("rawcontinue", "").build()
    assert req.query_string == "rawcontinue="


def test_requests_compare_by_value():
    a = RequestBuilder().action("query").param("bltitle", "Sandbox").build()
    b = RequestBuilder().action("query").param("bltitle", "Sandbox").build()
    assert a == b
    assert hash(a) == hash(b)


def test_url_with_endpoint():
    req = ApiRequest(params=(("action", "query"),), endpoint="https://wiki.test/api.php")
    assert req.url == "https://wiki.test/api.php?action=query"
    assert ApiRequest(endpoint="https://wiki.test/api.php").url == "https://wiki.test/api.php"


def test_encode_leaves_nothing_unescaped():
    assert encode("a b/c?d=e") == "a%20b%2Fc%3Fd%3De"
