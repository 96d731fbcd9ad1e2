"""Quick check of database state."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pet_provider.models.pet import Pet
from pet_provider.provider import PetProvider

provider = PetProvider()

with provider.query(provider.content_uri, sort_order="id ASC") as cursor:
    pets = [Pet.from_row(row) for row in cursor]

print(f"The pets table contains {len(pets)} pets.")
print("id - name - breed - gender - weight")
for p in pets:
    print(f"  {p.id} - {p.name} - {p.breed or 'N/A'} - {p.gender.name.lower()} - {p.weight}")
