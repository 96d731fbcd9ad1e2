"""Pet provider — dispatches URI-addressed CRUD operations to the pets table.

The provider owns no locks and caches no rows: every call is a single
blocking round trip to SQLite, which serialises concurrent writers itself.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Mapping, Optional, Sequence

from pet_provider.contract import SQLITE_MAX_INTEGER, PetEntry, content_uri
from pet_provider.db.database import Database, get_db
from pet_provider.errors import InvalidResource, StorageError, UnsupportedOperation
from pet_provider.provider.cursor import PetCursor
from pet_provider.provider.matcher import (
    ResourceCode,
    ResourceMatcher,
    build_pet_matcher,
    parse_id,
    with_appended_id,
)
from pet_provider.provider.mime import resolve_type
from pet_provider.provider.validation import validate_projection, validate_values

logger = logging.getLogger(__name__)


class PetProvider:
    """
    Content provider for the ``pets`` table.

    ``<authority>/pets`` addresses the whole table and ``<authority>/pets/<id>``
    a single pet.  For an item URI the id in the URI replaces any selection
    the caller passes.

    The store handle is created on first use (the process-wide ``get_db()``
    singleton unless one is injected) and kept for the provider's lifetime.
    """

    def __init__(
        self,
        db: Optional[Database] = None,
        matcher: Optional[ResourceMatcher] = None,
        authority: Optional[str] = None,
    ):
        if authority is None:
            from pet_provider.config import get_settings
            authority = get_settings().CONTENT_AUTHORITY
        self.authority = authority
        self.content_uri = content_uri(authority)
        self._matcher = matcher if matcher is not None else build_pet_matcher(authority)
        self._db = db
        self._schema_ready = False

    @property
    def matcher(self) -> ResourceMatcher:
        return self._matcher

    # -- store access ----------------------------------------------------------

    def _database(self) -> Database:
        try:
            if self._db is None:
                self._db = get_db()
            elif not self._schema_ready:
                self._db.init()
        except (sqlite3.Error, OSError) as exc:
            logger.error(f"Failed to open pets database: {exc}")
            raise StorageError(f"Failed to open pets database: {exc}") from exc
        self._schema_ready = True
        return self._db

    def close(self) -> None:
        if self._db is not None:
            self._db.close()

    def _item_selection(self, uri: str) -> tuple[str, tuple[Any, ...]]:
        row_id = parse_id(uri)
        if row_id > SQLITE_MAX_INTEGER:
            # Beyond any SQLite rowid, so no row can have it.
            return "0", ()
        return f"{PetEntry.ID} = ?", (row_id,)

    def _resolve_selection(
        self,
        uri: str,
        selection: Optional[str],
        selection_args: Optional[Sequence[Any]],
    ) -> tuple[Optional[str], tuple[Any, ...]]:
        code = self._matcher.match(uri)
        if code == ResourceCode.COLLECTION:
            return selection, tuple(selection_args or ())
        if code == ResourceCode.ITEM:
            return self._item_selection(uri)
        raise InvalidResource(uri)

    # -- Read ------------------------------------------------------------------

    def query(
        self,
        uri: str,
        projection: Optional[Sequence[str]] = None,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
        sort_order: Optional[str] = None,
    ) -> PetCursor:
        """Query the given URI; an empty projection selects every column."""
        where, params = self._resolve_selection(uri, selection, selection_args)
        columns = validate_projection(projection)

        sql = f"SELECT {', '.join(columns)} FROM {PetEntry.TABLE_NAME}"
        if where:
            sql += f" WHERE {where}"
        if sort_order:
            sql += f" ORDER BY {sort_order}"

        db = self._database()
        try:
            return PetCursor(db, sql, params, notification_uri=uri)
        except sqlite3.Error as exc:
            logger.error(f"Query failed for {uri}: {exc}")
            raise StorageError(f"Query failed for {uri}: {exc}") from exc

    def get_type(self, uri: str) -> str:
        """MIME type of the data at ``uri`` (directory or item)."""
        return resolve_type(self._matcher.match(uri), self.authority, uri=uri)

    # -- Create ----------------------------------------------------------------

    def insert(self, uri: str, values: Optional[Mapping[str, Any]]) -> str:
        """
        Insert a pet and return the URI of the new row.

        The returned URI is always the canonical
        ``content://<authority>/pets/<id>``, whatever form ``uri`` took.
        """
        if self._matcher.match(uri) != ResourceCode.COLLECTION:
            raise UnsupportedOperation("insert", uri)

        row = validate_values(values, creating=True)
        columns = ", ".join(row)
        placeholders = ", ".join("?" for _ in row)

        db = self._database()
        try:
            with db.transaction() as conn:
                cursor = conn.execute(
                    f"INSERT INTO {PetEntry.TABLE_NAME} ({columns}) VALUES ({placeholders})",
                    tuple(row.values()),
                )
        except sqlite3.Error as exc:
            logger.error(f"Failed to insert row for {uri}: {exc}")
            raise StorageError(f"Failed to insert row for {uri}: {exc}") from exc

        row_id = cursor.lastrowid
        logger.info(f"Inserted pet {row_id}: {row[PetEntry.COLUMN_NAME]}")
        return with_appended_id(self.content_uri, row_id)

    # -- Update ----------------------------------------------------------------

    def update(
        self,
        uri: str,
        values: Optional[Mapping[str, Any]],
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> int:
        """
        Update the rows at ``uri`` with ``values`` and return how many changed.

        Only the supplied columns are validated and written.  An empty value
        map changes nothing and returns 0.
        """
        where, params = self._resolve_selection(uri, selection, selection_args)
        fields = validate_values(values, creating=False)
        if not fields:
            return 0

        set_parts = ", ".join(f"{k} = ?" for k in fields)
        sql = f"UPDATE {PetEntry.TABLE_NAME} SET {set_parts}"
        if where:
            sql += f" WHERE {where}"

        db = self._database()
        try:
            with db.transaction() as conn:
                cursor = conn.execute(sql, tuple(fields.values()) + params)
        except sqlite3.Error as exc:
            logger.error(f"Failed to update {uri}: {exc}")
            raise StorageError(f"Failed to update {uri}: {exc}") from exc

        logger.info(f"Updated {cursor.rowcount} pet(s) at {uri}")
        return cursor.rowcount

    # -- Delete ----------------------------------------------------------------

    def delete(
        self,
        uri: str,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> int:
        """Delete the rows at ``uri`` and return how many were removed."""
        where, params = self._resolve_selection(uri, selection, selection_args)
        # "WHERE 1" keeps the row count accurate for a whole-table delete.
        sql = f"DELETE FROM {PetEntry.TABLE_NAME} WHERE {where or '1'}"

        db = self._database()
        try:
            with db.transaction() as conn:
                cursor = conn.execute(sql, params)
        except sqlite3.Error as exc:
            logger.error(f"Failed to delete {uri}: {exc}")
            raise StorageError(f"Failed to delete {uri}: {exc}") from exc

        logger.info(f"Deleted {cursor.rowcount} pet(s) at {uri}")
        return cursor.rowcount
