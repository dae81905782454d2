"""repldb — a small client for the Replit key-value database.

Keys and values are strings.  Every call is a round trip to the database;
nothing is cached locally.  All failures surface as one of two errors:
:class:`ConfigurationError` while a client is built, :class:`BackendError`
while it is used.
"""

from repldb.aio import AsyncReplDBClient
from repldb.client import ReplDBClient
from repldb.codec import decode, encode
from repldb.config import REPLIT_DB_URL, REQUIRED_HOST, ConnectionConfig, load_config
from repldb.exceptions import BackendError, ConfigurationError, ReplDBError
from repldb.result import KVResult
from repldb.safe import SafeReplDBClient

__all__ = [
    "REPLIT_DB_URL",
    "REQUIRED_HOST",
    "AsyncReplDBClient",
    "BackendError",
    "ConfigurationError",
    "ConnectionConfig",
    "KVResult",
    "ReplDBClient",
    "ReplDBError",
    "SafeReplDBClient",
    "decode",
    "encode",
    "load_config",
]
