"""Database schema DDL for the pets store."""

from pet_provider.contract import PetEntry

# Bump when the schema changes, and register the upgrade step in MIGRATIONS.
DATABASE_VERSION = 1

DATABASE_NAME = "shelter.db"

SCHEMA_DDL = f"""
CREATE TABLE IF NOT EXISTS {PetEntry.TABLE_NAME} (
    {PetEntry.ID}            INTEGER PRIMARY KEY AUTOINCREMENT,
    {PetEntry.COLUMN_NAME}   TEXT NOT NULL,
    {PetEntry.COLUMN_BREED}  TEXT,
    {PetEntry.COLUMN_GENDER} INTEGER NOT NULL,
    {PetEntry.COLUMN_WEIGHT} INTEGER NOT NULL DEFAULT {PetEntry.DEFAULT_WEIGHT}
);
"""

# target version -> script upgrading a store from (target version - 1).
# Version 1 is the only schema so far.
MIGRATIONS: dict[int, str] = {}
