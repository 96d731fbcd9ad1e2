"""API contract for the pets provider — table, columns, gender values, URIs.

Every other module takes table and column names from here so the schema,
the matcher and the dispatcher cannot drift apart.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

CONTENT_SCHEME = "content"

# Default authority; the provider may be built for another one.
CONTENT_AUTHORITY = "com.example.android.pets"

PATH_PETS = "pets"

DIR_BASE_TYPE = "vnd.cursor.dir"
ITEM_BASE_TYPE = "vnd.cursor.item"

# Largest value an SQLite INTEGER column can hold.
SQLITE_MAX_INTEGER = 2**63 - 1


def base_content_uri(authority: str = CONTENT_AUTHORITY) -> str:
    return f"{CONTENT_SCHEME}://{authority}"


def content_uri(authority: str = CONTENT_AUTHORITY) -> str:
    """URI of the whole pets collection, e.g. ``content://<authority>/pets``."""
    return f"{base_content_uri(authority)}/{PATH_PETS}"


class Gender(IntEnum):
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2


def is_valid_gender(value: Any) -> bool:
    """True for 0, 1 or 2. Booleans and non-integers are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in {g.value for g in Gender}


class PetEntry:
    """Names for the ``pets`` table. Each row is a single pet."""

    TABLE_NAME = "pets"

    ID = "id"
    COLUMN_NAME = "name"
    COLUMN_BREED = "breed"
    COLUMN_GENDER = "gender"
    COLUMN_WEIGHT = "weight"

    # column -> SQLite type affinity
    COLUMN_TYPES = {
        ID: "INTEGER",
        COLUMN_NAME: "TEXT",
        COLUMN_BREED: "TEXT",
        COLUMN_GENDER: "INTEGER",
        COLUMN_WEIGHT: "INTEGER",
    }

    ALL_COLUMNS = (ID, COLUMN_NAME, COLUMN_BREED, COLUMN_GENDER, COLUMN_WEIGHT)

    # Columns a caller may write; ``id`` is assigned by the store.
    WRITABLE_COLUMNS = frozenset({COLUMN_NAME, COLUMN_BREED, COLUMN_GENDER, COLUMN_WEIGHT})

    DEFAULT_WEIGHT = 0
