"""ReplDBClient — blocking client for the Replit key-value database."""

from __future__ import annotations

import builtins
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import httpx

from repldb._internal.urls import FORM_HEADERS, form_body, key_url, list_url, parse_key_list
from repldb.codec import decode
from repldb.config import DEFAULT_TIMEOUT, REQUIRED_HOST, ConnectionConfig, load_config
from repldb.exceptions import BackendError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class ReplDBClient:
    """Translates get/set/delete/list calls into HTTP requests against the store.

    The base URL is validated while the client is constructed; afterwards the
    client only holds that URL and a reusable ``httpx.Client``, so one instance
    can be shared by any number of threads.

    Every operation blocks until its request completes.  Batch operations run
    their single-key requests one after another and stop at the first failure:
    there is no rollback, so the keys handled before the failure stay changed
    remotely.  Any transport failure surfaces as :class:`BackendError`.

    Parameters:
        url:           Database URL.  Falls back to the ``REPLIT_DB_URL``
                       environment variable, read once, here.
        required_host: Host the URL must point at.
        timeout:       Transport timeout in seconds.
        http_client:   Optional pre-built ``httpx.Client``.  The caller keeps
                       ownership of an injected client.

    Raises:
        ConfigurationError: If the URL is missing or invalid.

    Example:
        >>> with ReplDBClient("https://kv.replit.com/v0/token") as db:
        ...     db.set("greeting", "hello world")
        ...     db.get("greeting")
        'hello world'
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        required_host: str = REQUIRED_HOST,
        timeout: float | None = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = load_config(url, required_host=required_host, timeout=timeout)
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=self._config.timeout)

    @classmethod
    def from_config(
        cls,
        config: ConnectionConfig,
        http_client: httpx.Client | None = None,
    ) -> ReplDBClient:
        return cls(
            config.url,
            required_host=config.required_host,
            timeout=config.timeout,
            http_client=http_client,
        )

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    # ── get ──────────────────────────────────────────────────

    def get(self, key: str) -> str:
        """Return the value stored under *key*.

        The response status is not inspected: a missing key comes back as
        whatever body the store sends for it, which is empty (``""``).
        """
        response = self._send("get", "GET", key_url(self.url, key), detail=f"key {key!r}")
        return decode(response.text)

    def get_many(self, *keys: str) -> builtins.list[str]:
        """Return the values for *keys*, in the same order."""
        return [self.get(key) for key in keys]

    # ── set ──────────────────────────────────────────────────

    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*.  Any response counts as success."""
        self._send(
            "set",
            "POST",
            self.url,
            detail=f"key {key!r}",
            content=form_body(key, value),
            headers=FORM_HEADERS,
        )

    def set_many(self, items: Mapping[str, str]) -> None:
        """Store every pair of *items*, in the mapping's iteration order."""
        logger.debug("set_many(%d items)", len(items))
        for key, value in items.items():
            self.set(key, value)

    # ── delete ───────────────────────────────────────────────

    def delete(self, key: str) -> None:
        """Delete *key*.  Deleting a missing key also succeeds."""
        self._send("delete", "DELETE", key_url(self.url, key), detail=f"key {key!r}")

    def delete_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self.delete(key)

    # ── list ─────────────────────────────────────────────────

    def list(self, prefix: str = "") -> builtins.list[str]:
        """Return the keys starting with *prefix*, in the order the store sent them."""
        response = self._send(
            "list", "GET", list_url(self.url, prefix), detail=f"prefix {prefix!r}"
        )
        keys = parse_key_list(response.text)
        logger.debug("Received %d keys with prefix %r", len(keys), prefix)
        return keys

    def empty(self) -> None:
        """Delete every key in the database.  Not transactional."""
        self.delete_many(self.list())

    # ── lifecycle ────────────────────────────────────────────

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> ReplDBClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ── transport ────────────────────────────────────────────

    def _send(
        self,
        operation: str,
        method: str,
        url: str,
        *,
        detail: str,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            response = self._http.request(method, url, content=content, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise backend_error(operation, detail, exc) from exc
        logger.debug("%s %s (%s) -> HTTP %d", method, operation, detail, response.status_code)
        return response


def backend_error(operation: str, detail: str, exc: Exception) -> BackendError:
    """Log a failed operation and build the error to raise for it."""
    message = f"{detail}: {exc}"
    logger.error("Error during %s of %s", operation, message)
    return BackendError(operation, message)
