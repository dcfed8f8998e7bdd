"""
Session Stores

Durable key-value holders for the auth token and the serialized user record,
so a session can outlive the process that created it.

Two implementations share the same get/set/clear contract:
- MemorySessionStore: dict-backed, lives as long as the process
- SqliteSessionStore: a single key-value table in a SQLite file
"""

import json
from typing import Dict, Optional

from valuationdesk.config import get_config
from valuationdesk.core.constants import SESSION_TOKEN_KEY, SESSION_USER_KEY, TABLE_SESSION
from valuationdesk.core.database import execute, fetch_one, get_connection, table_exists
from valuationdesk.core.models import User
from valuationdesk.exceptions import ConfigurationError
from valuationdesk.logging_config import get_logger

logger = get_logger(__name__)


class SessionStore:
    """Base class for session stores.

    Subclasses implement the raw ``_read``, ``_write`` and ``_delete``
    operations; the token/user accessors are built on top of them.
    """

    def _read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _write(self, key: str, value: str) -> None:
        raise NotImplementedError

    def _delete(self, key: str) -> None:
        raise NotImplementedError

    def get_token(self) -> Optional[str]:
        return self._read(SESSION_TOKEN_KEY)

    def set_token(self, token: str) -> None:
        self._write(SESSION_TOKEN_KEY, token)

    def get_user(self) -> Optional[User]:
        """Return the stored user, or None if absent or unreadable."""
        raw = self._read(SESSION_USER_KEY)
        if not raw:
            return None
        try:
            return User.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError):
            logger.warning("Discarding unreadable stored user record")
            return None

    def set_user(self, user: User) -> None:
        self._write(SESSION_USER_KEY, user.to_json())

    def clear(self) -> None:
        self._delete(SESSION_TOKEN_KEY)
        self._delete(SESSION_USER_KEY)


class MemorySessionStore(SessionStore):
    """Session store held in a plain dictionary."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def _read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write(self, key: str, value: str) -> None:
        self._data[key] = value

    def _delete(self, key: str) -> None:
        self._data.pop(key, None)


class SqliteSessionStore(SessionStore):
    """Session store persisted in a SQLite key-value table."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or get_config().session.db_path
        self._init_table()

    def _init_table(self) -> None:
        with get_connection(self.db_path) as conn:
            if table_exists(conn, TABLE_SESSION):
                return
            logger.info("Creating session table in %s", self.db_path)
            execute(conn, f"""
                CREATE TABLE IF NOT EXISTS {TABLE_SESSION} (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    def _read(self, key: str) -> Optional[str]:
        with get_connection(self.db_path) as conn:
            row = fetch_one(
                conn,
                f"SELECT value FROM {TABLE_SESSION} WHERE key = ?",
                (key,),
            )
        return row["value"] if row else None

    def _write(self, key: str, value: str) -> None:
        with get_connection(self.db_path) as conn:
            execute(
                conn,
                f"INSERT OR REPLACE INTO {TABLE_SESSION} (key, value) VALUES (?, ?)",
                (key, value),
            )

    def _delete(self, key: str) -> None:
        with get_connection(self.db_path) as conn:
            execute(conn, f"DELETE FROM {TABLE_SESSION} WHERE key = ?", (key,))


def create_session_store(kind: Optional[str] = None) -> SessionStore:
    """Build the session store named in config ("memory" or "sqlite").

    Raises:
        ConfigurationError: If ``kind`` names no known store.
    """
    config = get_config()
    kind = kind or config.session.store
    if kind == "sqlite":
        logger.info("Using SQLite session store at %s", config.session.db_path)
        return SqliteSessionStore(config.session.db_path)
    if kind == "memory":
        return MemorySessionStore()
    raise ConfigurationError(f"Unknown session store: {kind}")
