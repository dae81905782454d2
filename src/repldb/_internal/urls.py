"""Request construction and response parsing shared by both clients.

The store form-decodes request bodies, query strings and paths once, and
keeps what is left.  Keys and values are therefore escaped twice on the
wire: the store keeps the once-escaped text, sends it back as-is, and the
clients decode it into the original string.
"""

from __future__ import annotations

from repldb.codec import decode, encode

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def _wire(text: str | None) -> str:
    # The store keeps encode(text).
    return encode(encode(text))


def key_url(base_url: str, key: str | None) -> str:
    return f"{base_url}/{_wire(key)}"


def list_url(base_url: str, prefix: str | None) -> str:
    return f"{base_url}?prefix={_wire(prefix)}"


def form_body(key: str | None, value: str | None) -> str:
    return f"{_wire(key)}={_wire(value)}"


def parse_key_list(body: str) -> list[str]:
    """Split a newline-delimited listing into keys, in server order.

    A body that decodes to nothing means there are no keys.
    """
    decoded = decode(body)
    if not decoded:
        return []
    return decoded.split("\n")
