"""Database layer — SQLite store handle with schema versioning."""

from pet_provider.db.database import Database, get_db, reset_db
from pet_provider.db.schema import DATABASE_VERSION, SCHEMA_DDL

__all__ = ["Database", "get_db", "reset_db", "DATABASE_VERSION", "SCHEMA_DDL"]
