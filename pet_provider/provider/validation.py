"""Write-boundary validation for pet value maps."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pet_provider.contract import SQLITE_MAX_INTEGER, PetEntry, is_valid_gender
from pet_provider.errors import ValidationError

logger = logging.getLogger(__name__)


def _reject(message: str, field: str) -> ValidationError:
    logger.warning(f"Rejected write: {message} ({field})")
    return ValidationError(message, field=field)


def validate_values(values: Optional[Mapping[str, Any]], creating: bool) -> dict[str, Any]:
    """
    Check a value map and return the columns to write.

    On insert (``creating=True``) ``name`` and ``gender`` are required.  On
    update only the supplied keys are checked.  ``weight``, when supplied,
    must be a non-negative integer; ``breed`` may be anything, including
    ``None``.  ``id`` is never writable.
    """
    values = dict(values or {})

    if PetEntry.ID in values:
        raise _reject("id is assigned by the store", PetEntry.ID)
    unknown = sorted(set(values) - PetEntry.WRITABLE_COLUMNS)
    if unknown:
        raise _reject(f"unknown column {unknown[0]!r}", unknown[0])

    if creating or PetEntry.COLUMN_NAME in values:
        name = values.get(PetEntry.COLUMN_NAME)
        if not isinstance(name, str) or not name.strip():
            raise _reject("name required", PetEntry.COLUMN_NAME)

    if creating or PetEntry.COLUMN_GENDER in values:
        gender = values.get(PetEntry.COLUMN_GENDER)
        if not is_valid_gender(gender):
            raise _reject("invalid gender", PetEntry.COLUMN_GENDER)
        values[PetEntry.COLUMN_GENDER] = int(gender)

    if PetEntry.COLUMN_WEIGHT in values:
        weight = values[PetEntry.COLUMN_WEIGHT]
        is_int = isinstance(weight, int) and not isinstance(weight, bool)
        if not is_int or not 0 <= weight <= SQLITE_MAX_INTEGER:
            raise _reject("invalid weight", PetEntry.COLUMN_WEIGHT)
        values[PetEntry.COLUMN_WEIGHT] = int(weight)

    return values


def validate_projection(projection: Optional[list[str] | tuple[str, ...]]) -> tuple[str, ...]:
    """Return the columns to select; empty or ``None`` means all of them."""
    if not projection:
        return PetEntry.ALL_COLUMNS
    for column in projection:
        if column not in PetEntry.COLUMN_TYPES:
            logger.warning(f"Rejected query: unknown column {column!r}")
            raise ValidationError(f"unknown column {column!r}", field=column)
    return tuple(projection)
