"""Tests for encode / decode."""

import pytest

from repldb import BackendError, decode, encode


def test_encode_plain():
    assert encode("hello") == "hello"


def test_encode_space_becomes_plus():
    assert encode("hello world") == "hello+world"


def test_encode_reserved_characters():
    assert encode("a/b?c=d&e") == "a%2Fb%3Fc%3Dd%26e"
    assert encode("50%+") == "50%25%2B"


def test_encode_keeps_unreserved():
    assert encode("a-b.c_d*e") == "a-b.c_d*e"


def test_encode_utf8():
    assert encode("ünï") == "%C3%BCn%C3%AF"


@pytest.mark.parametrize("blank", [None, "", " ", "\t\n"])
def test_blank_encodes_to_empty(blank):
    assert encode(blank) == ""


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_decodes_to_empty(blank):
    assert decode(blank) == ""


def test_decode_plus_and_escapes():
    assert decode("hello+world") == "hello world"
    assert decode("%C3%BCn%C3%AF") == "ünï"
    assert decode("a%2Fb") == "a/b"


@pytest.mark.parametrize(
    "text",
    ["key with spaces", "a+b=c&d", "100% sure", "line1\nline2", "日本語", "emoji 🎉", "*"],
)
def test_round_trip(text):
    assert decode(encode(text)) == text


@pytest.mark.parametrize("malformed", ["%zz", "abc%", "%4", "x%G1y"])
def test_malformed_escape_raises_backend_error(malformed):
    with pytest.raises(BackendError) as exc_info:
        decode(malformed)
    assert exc_info.value.operation == "decode"
    assert isinstance(exc_info.value.cause, ValueError)


def test_invalid_utf8_raises_backend_error():
    with pytest.raises(BackendError) as exc_info:
        decode("%FF%FE")
    assert isinstance(exc_info.value.cause, UnicodeDecodeError)
