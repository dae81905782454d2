"""Custom exceptions for the repldb package."""

from __future__ import annotations


class ReplDBError(Exception):
    """Base exception for all repldb errors."""


class ConfigurationError(ReplDBError):
    """Raised when the connection URL is missing or not acceptable.

    Only ever raised while a client is being constructed.  A client whose
    construction failed does not exist, so it can never be used afterwards.
    """

    def __init__(self, url: str | None, message: str = "") -> None:
        self.url = url
        msg = f"Invalid URL provided for ReplDBClient: {url}"
        if message:
            msg += f" ({message})"
        super().__init__(msg)


class BackendError(ReplDBError):
    """Raised when a live operation against the store fails.

    Always raised with ``from`` so the original failure is available as
    ``__cause__`` (and through :attr:`cause`).
    """

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Backend error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__
