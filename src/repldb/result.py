"""KVResult — the outcome of a store operation, as a value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from repldb.exceptions import BackendError, ConfigurationError, ReplDBError


@dataclass(frozen=True)
class KVResult:
    """Immutable result returned by :class:`~repldb.safe.SafeReplDBClient`.

    Attributes:
        ok:    ``True`` if the operation completed.
        value: The operation's return value (``None`` for writes).
        error: The error that stopped the operation, when ``ok`` is ``False``.
    """

    ok: bool
    value: Any = None
    error: ReplDBError | None = None

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def success(value: Any = None) -> KVResult:
        return KVResult(ok=True, value=value)

    @staticmethod
    def failure(error: ReplDBError) -> KVResult:
        return KVResult(ok=False, error=error)

    # ── Accessors ────────────────────────────────────────────

    @property
    def error_kind(self) -> str:
        """``"configuration"``, ``"backend"`` or ``""`` on success."""
        if isinstance(self.error, ConfigurationError):
            return "configuration"
        if isinstance(self.error, BackendError):
            return "backend"
        return ""

    def unwrap(self) -> Any:
        """Return ``value``, or raise ``error`` if the operation failed."""
        if self.error is not None:
            raise self.error
        return self.value
