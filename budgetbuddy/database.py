"""SQLite storage for users, transactions, monthly goals and alerts."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from types import TracebackType

DEFAULT_PATH = "budgetbuddy.db"

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT UNIQUE,
        password TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER,
        type TEXT,
        category TEXT,
        amount REAL,
        date TEXT,
        FOREIGN KEY(user_id) REFERENCES users(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS monthly_goals (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER,
        month TEXT,
        year INTEGER,
        amount REAL,
        UNIQUE(user_id, month, year)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS alerts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER,
        message TEXT,
        created_at TEXT,
        FOREIGN KEY(user_id) REFERENCES users(id)
    )
    """,
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class Database:
    """A connection to the application's SQLite file.

    Opening the database creates any missing tables.
    """

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = str(path)
        self._conn: sqlite3.Connection | None = None

    def open(self) -> None:
        """Open the connection and make sure every table exists."""
        if self._conn is not None:
            return
        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Failed to open database: {exc}") from exc
        try:
            with conn:
                for statement in _SCHEMA:
                    conn.execute(statement)
        except sqlite3.Error as exc:
            conn.close()
            raise DatabaseError(f"Failed to open database: {exc}") from exc
        self._conn = conn

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @property
    def is_open(self) -> bool:
        """Whether the connection is currently open."""
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        """The open SQLite connection."""
        if self._conn is None:
            raise DatabaseError("Database is not open")
        return self._conn

    def __enter__(self) -> Database:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()