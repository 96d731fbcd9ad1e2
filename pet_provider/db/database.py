"""Store handle — SQLite connection lifecycle, schema creation and migration."""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Optional

from pet_provider.db.schema import DATABASE_VERSION, MIGRATIONS, SCHEMA_DDL
from pet_provider.errors import StorageError

logger = logging.getLogger(__name__)


class Database:
    """
    SQLite database wrapper shared by every caller in the process.

    Each thread gets its own connection to the same file; connections of
    threads that have exited are closed before a new one is opened.  With WAL
    journalling readers run in parallel while SQLite serialises writers,
    waiting up to ``busy_timeout`` seconds for a competing write to finish.
    Every mutation goes through ``transaction()``, which commits on success
    and rolls back on failure.
    """

    def __init__(self, path: Optional[Path | str] = None, busy_timeout: Optional[float] = None):
        from pet_provider.config import get_settings
        settings = get_settings()
        if path is None:
            self.path: Path = settings.DATABASE_PATH
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self.busy_timeout = settings.DB_BUSY_TIMEOUT if busy_timeout is None else busy_timeout
        self._connections: dict[threading.Thread, sqlite3.Connection] = {}
        self._lock = threading.Lock()

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def open_connections(self) -> int:
        with self._lock:
            return len(self._connections)

    def _reap_dead_threads(self) -> None:
        """Close the connections of threads that have exited."""
        with self._lock:
            dead = [t for t in self._connections if not t.is_alive()]
            stale = [self._connections.pop(t) for t in dead]
        for conn in stale:
            conn.close()
        if stale:
            logger.debug(f"Closed {len(stale)} connection(s) left by finished threads")

    def connection(self) -> sqlite3.Connection:
        thread = threading.current_thread()
        with self._lock:
            conn = self._connections.get(thread)
        if conn is not None:
            return conn

        self._reap_dead_threads()
        self._ensure_dir()
        conn = sqlite3.connect(
            str(self.path), timeout=self.busy_timeout, check_same_thread=False
        )
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode = WAL")
        with self._lock:
            self._connections[thread] = conn
        return conn

    def close(self) -> None:
        """Close every connection opened by any thread."""
        with self._lock:
            connections = list(self._connections.values())
            self._connections.clear()
        for conn in connections:
            conn.close()

    # -- schema lifecycle ------------------------------------------------------

    def user_version(self) -> int:
        return int(self.connection().execute("PRAGMA user_version").fetchone()[0])

    def _set_user_version(self, version: int) -> None:
        conn = self.connection()
        conn.execute(f"PRAGMA user_version = {int(version)}")
        conn.commit()

    def init(self) -> None:
        """Ensure the schema is present; create it once on a fresh store."""
        version = self.user_version()
        if version == 0:
            logger.info(f"Creating schema v{DATABASE_VERSION} at {self.path}")
            conn = self.connection()
            conn.executescript(SCHEMA_DDL)
            self._set_user_version(DATABASE_VERSION)
        elif version != DATABASE_VERSION:
            self.migrate(version, DATABASE_VERSION)

    def migrate(self, old_version: int, new_version: int) -> None:
        """
        Upgrade the store from ``old_version`` to ``new_version``.

        Applies the step registered in ``MIGRATIONS`` for every version in
        ``(old_version, new_version]``.  With a single schema version this
        is the identity.
        """
        if old_version > new_version:
            raise StorageError(
                f"Database at {self.path} is version {old_version}, "
                f"newer than supported version {new_version}"
            )
        for version in range(old_version + 1, new_version + 1):
            step = MIGRATIONS.get(version)
            if step is None:
                raise StorageError(f"No migration registered for schema version {version}")
            logger.info(f"Migrating {self.path} to schema v{version}")
            self.connection().executescript(step)
            self._set_user_version(version)

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """ACID transaction: commits on success, rolls back on exception."""
        conn = self.connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    # -- low-level query helpers -----------------------------------------------

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        return self.connection().execute(sql, params)

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        row = self.connection().execute(sql, params).fetchone()
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        rows = self.connection().execute(sql, params).fetchall()
        return [dict(r) for r in rows]


# -- module singleton ----------------------------------------------------------

_default_db: Optional[Database] = None
_default_lock = threading.Lock()


def get_db(path: Optional[Path] = None) -> Database:
    """Return (and lazily initialise) the module-level Database singleton."""
    global _default_db
    with _default_lock:
        if _default_db is None:
            db = Database(path)
            db.init()
            _default_db = db
    return _default_db


def reset_db() -> None:
    """Close and discard the singleton (useful in tests)."""
    global _default_db
    with _default_lock:
        if _default_db is not None:
            _default_db.close()
            _default_db = None
