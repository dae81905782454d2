"""AsyncReplDBClient — asyncio flavour of :class:`~repldb.client.ReplDBClient`."""

from __future__ import annotations

import builtins
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import httpx

from repldb._internal.urls import FORM_HEADERS, form_body, key_url, list_url, parse_key_list
from repldb.client import backend_error
from repldb.codec import decode
from repldb.config import DEFAULT_TIMEOUT, REQUIRED_HOST, ConnectionConfig, load_config

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class AsyncReplDBClient:
    """Same contract as ``ReplDBClient``, over ``httpx.AsyncClient``.

    Batch operations await their requests one at a time, never concurrently,
    so a failure still stops the batch at the key that failed.  Task
    cancellation is not translated: ``asyncio.CancelledError`` reaches the
    caller untouched.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        required_host: str = REQUIRED_HOST,
        timeout: float | None = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = load_config(url, required_host=required_host, timeout=timeout)
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self._config.timeout)

    @classmethod
    def from_config(
        cls,
        config: ConnectionConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> AsyncReplDBClient:
        return cls(
            config.url,
            required_host=config.required_host,
            timeout=config.timeout,
            http_client=http_client,
        )

    @property
    def url(self) -> str:
        return self._config.url

    async def get(self, key: str) -> str:
        response = await self._send("get", "GET", key_url(self.url, key), detail=f"key {key!r}")
        return decode(response.text)

    async def get_many(self, *keys: str) -> builtins.list[str]:
        return [await self.get(key) for key in keys]

    async def set(self, key: str, value: str) -> None:
        await self._send(
            "set",
            "POST",
            self.url,
            detail=f"key {key!r}",
            content=form_body(key, value),
            headers=FORM_HEADERS,
        )

    async def set_many(self, items: Mapping[str, str]) -> None:
        logger.debug("set_many(%d items)", len(items))
        for key, value in items.items():
            await self.set(key, value)

    async def delete(self, key: str) -> None:
        await self._send("delete", "DELETE", key_url(self.url, key), detail=f"key {key!r}")

    async def delete_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            await self.delete(key)

    async def list(self, prefix: str = "") -> builtins.list[str]:
        response = await self._send(
            "list", "GET", list_url(self.url, prefix), detail=f"prefix {prefix!r}"
        )
        return parse_key_list(response.text)

    async def empty(self) -> None:
        await self.delete_many(await self.list())

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> AsyncReplDBClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _send(
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
            response = await self._http.request(method, url, content=content, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise backend_error(operation, detail, exc) from exc
        logger.debug("%s %s (%s) -> HTTP %d", method, operation, detail, response.status_code)
        return response
