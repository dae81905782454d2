"""Percent-encoding of keys and values.

Keys and values travel in URL paths, query strings and form bodies, so both
directions use form-style (``application/x-www-form-urlencoded``) escaping
in UTF-8.  ``None`` and blank strings map to ``""`` without being escaped.
"""

from __future__ import annotations

import re
from urllib.parse import quote_plus, unquote_plus

from repldb.exceptions import BackendError

# Characters left as-is besides ASCII letters, digits and "_.-".
_SAFE = "*"
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode(value: str | None) -> str:
    """Percent-encode *value* for use in a URL path, query or form body."""
    if value is None or not value.strip():
        return ""
    return quote_plus(value, safe=_SAFE, encoding="utf-8")


def decode(value: str | None) -> str:
    """Inverse of :func:`encode`.

    Raises:
        BackendError: If *value* holds a malformed escape or the escaped
            bytes are not valid UTF-8.
    """
    if value is None or not value.strip():
        return ""
    match = _BAD_ESCAPE.search(value)
    if match is not None:
        raise BackendError(
            "decode", f"malformed escape at position {match.start()}"
        ) from ValueError(f"Illegal percent-escape in {value!r}")
    try:
        return unquote_plus(value, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise BackendError("decode", "escaped bytes are not valid UTF-8") from exc
