"""Pet domain model — one row of the ``pets`` table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pet_provider.contract import Gender, PetEntry


@dataclass
class Pet:
    """A pet record.  ``id`` stays ``None`` until the store assigns one."""

    name: str
    gender: Gender = Gender.UNKNOWN
    breed: Optional[str] = None
    weight: int = PetEntry.DEFAULT_WEIGHT
    id: Optional[int] = None

    def to_values(self) -> dict[str, Any]:
        """Value map for ``PetProvider.insert`` / ``update`` (never includes ``id``)."""
        return {
            PetEntry.COLUMN_NAME: self.name,
            PetEntry.COLUMN_BREED: self.breed,
            PetEntry.COLUMN_GENDER: int(self.gender),
            PetEntry.COLUMN_WEIGHT: self.weight,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Pet":
        return cls(
            id=row.get(PetEntry.ID),
            name=row[PetEntry.COLUMN_NAME],
            breed=row.get(PetEntry.COLUMN_BREED),
            gender=Gender(row.get(PetEntry.COLUMN_GENDER, Gender.UNKNOWN)),
            weight=row.get(PetEntry.COLUMN_WEIGHT, PetEntry.DEFAULT_WEIGHT),
        )
