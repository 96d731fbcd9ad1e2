"""Query results returned by ``PetProvider.query``."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Iterator, Optional

from pet_provider.db.database import Database
from pet_provider.errors import StorageError

logger = logging.getLogger(__name__)


class PetCursor:
    """
    Finite sequence of rows from one query.

    The statement runs when the cursor is created, so engine errors surface
    from ``PetProvider.query``.  Rows are then stepped out of SQLite one at
    a time while iterating.  A cursor is read once and never refreshes
    itself; ``requery()`` runs the same statement again and returns a new
    cursor.

    ``notification_uri`` is the URI the rows were derived from, so that a
    change observer can tell when the cursor has gone stale.
    """

    def __init__(self, db: Database, sql: str, params: tuple, notification_uri: str):
        self._db = db
        self._sql = sql
        self._params = params
        self.notification_uri = notification_uri
        self._cursor: Optional[sqlite3.Cursor] = db.execute(sql, params)
        self.columns: tuple[str, ...] = tuple(d[0] for d in self._cursor.description)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        while True:
            row = self.fetchone()
            if row is None:
                return
            yield row

    def __enter__(self) -> "PetCursor":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._cursor is None

    def fetchone(self) -> Optional[dict[str, Any]]:
        if self._cursor is None:
            return None
        try:
            row = self._cursor.fetchone()
        except sqlite3.Error as exc:
            logger.error(f"Failed to read rows for {self.notification_uri}: {exc}")
            raise StorageError(f"Failed to read rows for {self.notification_uri}") from exc
        if row is None:
            self.close()
            return None
        return dict(row)

    def fetchall(self) -> list[dict[str, Any]]:
        return list(self)

    def requery(self) -> "PetCursor":
        """Run the query again and return a fresh cursor."""
        try:
            return PetCursor(self._db, self._sql, self._params, self.notification_uri)
        except sqlite3.Error as exc:
            logger.error(f"Requery failed for {self.notification_uri}: {exc}")
            raise StorageError(f"Requery failed for {self.notification_uri}") from exc

    def close(self) -> None:
        if self._cursor is not None:
            self._cursor.close()
            self._cursor = None
