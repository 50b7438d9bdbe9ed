import pytest

from gatewaycheck.core.errors import DecodeError
from gatewaycheck.core.models import JsonBody, TextBody
from gatewaycheck.parsers.response import decode_body, is_json, preview, shape


@pytest.mark.parametrize("ctype,expected", [
    ("application/json", True),
    ("application/json; charset=UTF-8", True),
    ("application/problem+json", True),
    ("text/html", False),
    ("", False),
    (None, False),
])
def test_is_json(ctype, expected):
    assert is_json(ctype) is expected


def test_json_decoded():
    assert decode_body("application/json", b'[{"name":"Frostmourne"}]') == \
        JsonBody([{"name": "Frostmourne"}])


def test_text_kept_raw():
    assert decode_body("text/plain", b"Unauthorized") == TextBody("Unauthorized")


def test_bad_json_raises():
    with pytest.raises(DecodeError):
        decode_body("application/json", b"<html>oops</html>")


def test_preview_truncates():
    assert preview(TextBody("x" * 500)) == "x" * 200
    assert preview(JsonBody({"a": 1})) == '{"a":1}'
    assert preview(None) == ""


def test_shape():
    assert shape(JsonBody([1, 2, 3])) == "Array (3)"
    assert shape(JsonBody({"a": 1})) == "Object"
    assert shape(JsonBody(3)) is None
    assert shape(TextBody("[]")) is None


def test_empty_body_is_none():
    assert decode_body("application/json", b"") is None
    assert decode_body("text/plain", b"") is None


def test_unknown_charset_falls_back_to_utf8():
    assert decode_body("text/plain; charset=bogus-x", "héllo".encode("utf-8"), "bogus-x") == \
        TextBody("héllo")
