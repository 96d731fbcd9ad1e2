#!/usr/bin/env python3
"""Initialize the pets database and optionally seed it with pets."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pet_provider.config import get_settings
from pet_provider.contract import Gender
from pet_provider.db.database import Database
from pet_provider.errors import ProviderError
from pet_provider.models.pet import Pet
from pet_provider.provider import PetProvider

DUMMY_PET = Pet(name="Toto", breed="Terrier", gender=Gender.MALE, weight=7)


def main():
    parser = argparse.ArgumentParser(description="Initialize the pets database")
    parser.add_argument("--seed-pets", type=str, help="YAML file with pet definitions")
    parser.add_argument("--dummy", action="store_true", help="Insert the Toto dummy pet")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    db_path = Path(args.db_path) if args.db_path else None
    db = Database(path=db_path)
    db.init()
    print(f"Database initialized at: {db.path}")

    provider = PetProvider(db=db)
    if args.seed_pets:
        _seed_pets(provider, Path(args.seed_pets))
    if args.dummy:
        uri = provider.insert(provider.content_uri, DUMMY_PET.to_values())
        print(f"  Inserted dummy pet: {uri}")

    db.close()
    print("Done.")


def _seed_pets(provider: PetProvider, path: Path):
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    for p in data.get("pets", []):
        try:
            pet = Pet(
                name=p["name"],
                breed=p.get("breed"),
                gender=Gender[str(p.get("gender", "unknown")).upper()],
                weight=p.get("weight", 0),
            )
            uri = provider.insert(provider.content_uri, pet.to_values())
            print(f"  Created pet: {pet.name} ({uri})")
        except (KeyError, ProviderError) as e:
            print(f"  Skipping {p.get('name', '?')}: {e}")


if __name__ == "__main__":
    main()
