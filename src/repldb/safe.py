"""SafeReplDBClient — every operation returns a :class:`KVResult`.

For callers that prefer to branch on an error kind instead of catching
exceptions.  Only :class:`~repldb.exceptions.ReplDBError` is turned into a
failed result; anything else (including interrupts) still propagates.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from repldb.client import ReplDBClient
from repldb.exceptions import ReplDBError
from repldb.result import KVResult


class SafeReplDBClient:
    """Wraps a :class:`ReplDBClient`, trading exceptions for results.

    Example:
        >>> connected = SafeReplDBClient.connect("https://kv.replit.com/v0/token")
        >>> if not connected.ok:
        ...     print(connected.error_kind)   # "configuration"
        >>> db = connected.value
        >>> result = db.get("greeting")
        >>> result.value if result.ok else result.error
    """

    def __init__(self, client: ReplDBClient) -> None:
        self._client = client

    @classmethod
    def connect(cls, url: str | None = None, **kwargs: Any) -> KVResult:
        """Build a client; the result holds either it or the configuration error."""
        return _capture(lambda: cls(ReplDBClient(url, **kwargs)))

    @property
    def client(self) -> ReplDBClient:
        return self._client

    def get(self, key: str) -> KVResult:
        return _capture(self._client.get, key)

    def get_many(self, *keys: str) -> KVResult:
        return _capture(self._client.get_many, *keys)

    def set(self, key: str, value: str) -> KVResult:
        return _capture(self._client.set, key, value)

    def set_many(self, items: Mapping[str, str]) -> KVResult:
        return _capture(self._client.set_many, items)

    def delete(self, key: str) -> KVResult:
        return _capture(self._client.delete, key)

    def delete_many(self, keys: Iterable[str]) -> KVResult:
        return _capture(self._client.delete_many, keys)

    def list(self, prefix: str = "") -> KVResult:
        return _capture(self._client.list, prefix)

    def empty(self) -> KVResult:
        return _capture(self._client.empty)

    def close(self) -> None:
        self._client.close()


def _capture(fn: Callable[..., Any], *args: Any) -> KVResult:
    try:
        return KVResult.success(fn(*args))
    except ReplDBError as exc:
        return KVResult.failure(exc)
