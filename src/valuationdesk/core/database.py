"""
Database Helper Functions

Context manager and query helpers for the SQLite file backing the durable
session store.

Usage:
    from valuationdesk.core.database import get_connection, fetch_one

    with get_connection() as conn:
        row = fetch_one(conn, "SELECT value FROM session_store WHERE key = ?", ("user",))
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator, Optional, Tuple, Union

from valuationdesk.config import get_config
from valuationdesk.exceptions import SessionStoreConnectionError, SessionStoreError
from valuationdesk.logging_config import get_logger

logger = get_logger(__name__)

# Type aliases
Row = Dict[str, Any]
Params = Union[Tuple, Dict[str, Any], None]


def dict_factory(cursor: sqlite3.Cursor, row: tuple) -> Dict[str, Any]:
    """Convert SQLite row to dictionary."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


@contextmanager
def get_connection(db_path: Optional[str] = None) -> Generator[sqlite3.Connection, None, None]:
    """Context manager for database connections.

    Args:
        db_path: Path to database file. Uses the session config default if
            not specified.

    Yields:
        SQLite connection object with dictionary rows.

    Raises:
        SessionStoreConnectionError: If unable to connect to the database.
    """
    if db_path is None:
        db_path = get_config().session.db_path

    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = None
    try:
        conn = sqlite3.connect(db_path)
        conn.row_factory = dict_factory
        logger.debug("Connected to database: %s", db_path)
        yield conn
    except sqlite3.Error as e:
        logger.error("Database connection error: %s", e)
        raise SessionStoreConnectionError(f"Failed to connect to database: {e}") from e
    finally:
        if conn:
            conn.close()
            logger.debug("Closed database connection")


def fetch_one(
    conn: sqlite3.Connection,
    query: str,
    params: Params = None,
) -> Optional[Row]:
    """Execute a query and fetch one result.

    Returns:
        Single result row as dictionary, or None if no results.

    Raises:
        SessionStoreError: If query execution fails.
    """
    try:
        cursor = conn.cursor()
        if params:
            cursor.execute(query, params)
        else:
            cursor.execute(query)
        return cursor.fetchone()
    except sqlite3.Error as e:
        logger.error("Query failed: %s - Error: %s", query[:100], e)
        raise SessionStoreError(f"Query failed: {e}") from e


def execute(
    conn: sqlite3.Connection,
    query: str,
    params: Params = None,
    commit: bool = True,
) -> int:
    """Execute a statement (CREATE, INSERT, DELETE).

    Returns:
        Number of rows affected.

    Raises:
        SessionStoreError: If execution fails.
    """
    try:
        cursor = conn.cursor()
        if params:
            cursor.execute(query, params)
        else:
            cursor.execute(query)
        if commit:
            conn.commit()
        return cursor.rowcount
    except sqlite3.Error as e:
        logger.error("Execute failed: %s - Error: %s", query[:100], e)
        raise SessionStoreError(f"Execute failed: {e}") from e


def table_exists(conn: sqlite3.Connection, table_name: str) -> bool:
    """Check if a table exists in the database."""
    result = fetch_one(
        conn,
        "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
        (table_name,),
    )
    return result is not None
