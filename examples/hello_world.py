"""
repldb — Hello World

Every call is a round trip to the database. Set REPLIT_DB_URL (Replit does
this for you inside a repl) and run:

    python examples/hello_world.py
"""

import logging

from repldb import BackendError, ConfigurationError, ConnectionConfig, ReplDBClient, SafeReplDBClient


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # ──────────────────────────────────────
    #  1. Bootstrap: read the environment once
    # ──────────────────────────────────────
    try:
        config = ConnectionConfig.from_env()
    except ConfigurationError as e:
        print(f"  [CONFIG] {e}")
        return

    # ──────────────────────────────────────
    #  2. Plain client: errors are exceptions
    # ──────────────────────────────────────
    with ReplDBClient.from_config(config) as db:
        try:
            db.set_many({"hello": "world", "hello:fr": "monde"})
            print("  get  ->", db.get_many("hello", "hello:fr"))
            print("  list ->", db.list("hello"))
            db.delete("hello:fr")
            print("  list ->", db.list())
        except BackendError as e:
            print(f"  [BACKEND] {e} (cause: {e.cause!r})")

        # ──────────────────────────────────────
        #  3. Safe client: errors are values
        # ──────────────────────────────────────
        safe = SafeReplDBClient(db)
        result = safe.empty()
        print("  empty ->", "ok" if result.ok else result.error_kind)


if __name__ == "__main__":
    main()
