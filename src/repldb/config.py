"""Connection configuration for the store client.

The connection string is validated once, here, before any client can be
used.  Only ``https`` URLs whose host is the required authority pass.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from repldb.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

REPLIT_DB_URL = "REPLIT_DB_URL"
REQUIRED_SCHEME = "https"
REQUIRED_HOST = "kv.replit.com"
DEFAULT_TIMEOUT = 5.0


class ConnectionConfig(BaseModel):
    """Validated, immutable connection settings.

    Attributes:
        url:           Base URL of the database, without a trailing ``/``.
        required_host: The only host the client may talk to.
        timeout:       Transport timeout in seconds (``None`` disables it).
                       Applies uniformly to every request.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    required_host: str = REQUIRED_HOST
    timeout: float | None = DEFAULT_TIMEOUT

    @field_validator("url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        parts = urlsplit(value.strip())
        if parts.scheme != REQUIRED_SCHEME:
            raise ValueError(f"scheme '{parts.scheme}' is not {REQUIRED_SCHEME}")
        # Raises ValueError for a malformed port.
        _ = parts.port
        return value.strip().rstrip("/")

    @model_validator(mode="after")
    def _check_host(self) -> ConnectionConfig:
        host = urlsplit(self.url).hostname or ""
        if host != self.required_host.lower():
            raise ValueError(f"host '{host}' is not {self.required_host}")
        return self

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> ConnectionConfig:
        """Build a config from the ``REPLIT_DB_URL`` environment variable.

        Meant for application bootstrap code: the environment is read once,
        here, and the result is handed to the client.
        """
        env = os.environ if environ is None else environ
        return load_config(env.get(REPLIT_DB_URL) or None, **overrides)


def load_config(
    url: str | None = None,
    *,
    required_host: str = REQUIRED_HOST,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> ConnectionConfig:
    """Validate *url* and return a :class:`ConnectionConfig`.

    When *url* is ``None`` the ``REPLIT_DB_URL`` environment variable is
    read instead.

    Raises:
        ConfigurationError: If no URL is available, or it cannot be parsed,
            or its scheme or host is wrong.
    """
    if url is None:
        url = os.getenv(REPLIT_DB_URL) or None
    if url is None:
        logger.error("No database URL given and %s is not set", REPLIT_DB_URL)
        raise ConfigurationError(None, f"set {REPLIT_DB_URL} or pass a url")

    try:
        return ConnectionConfig(url=url, required_host=required_host, timeout=timeout)
    except ValidationError as exc:
        reason = "; ".join(err["msg"].removeprefix("Value error, ") for err in exc.errors())
        logger.error("Rejected database URL: %s", reason)
        raise ConfigurationError(url, reason) from exc
