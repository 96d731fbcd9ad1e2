"""Unit tests for the contract and the Pet model."""

from __future__ import annotations

import unittest

from pet_provider.contract import (
    Gender,
    PetEntry,
    base_content_uri,
    content_uri,
    is_valid_gender,
)
from pet_provider.models.pet import Pet


class TestContract(unittest.TestCase):
    def test_gender_values(self):
        self.assertEqual(Gender.UNKNOWN, 0)
        self.assertEqual(Gender.MALE, 1)
        self.assertEqual(Gender.FEMALE, 2)

    def test_is_valid_gender(self):
        for value in (0, 1, 2, Gender.FEMALE):
            self.assertTrue(is_valid_gender(value), value)
        for value in (-1, 3, None, "1", 1.0, True):
            self.assertFalse(is_valid_gender(value), value)

    def test_content_uris(self):
        self.assertEqual(base_content_uri("auth"), "content://auth")
        self.assertEqual(content_uri("auth"), "content://auth/pets")
        self.assertEqual(content_uri(), "content://com.example.android.pets/pets")

    def test_writable_columns_exclude_id(self):
        self.assertNotIn(PetEntry.ID, PetEntry.WRITABLE_COLUMNS)
        self.assertEqual(set(PetEntry.ALL_COLUMNS), set(PetEntry.COLUMN_TYPES))


class TestPetModel(unittest.TestCase):
    def test_to_values_has_no_id(self):
        pet = Pet(name="Toto", breed="Terrier", gender=Gender.MALE, weight=7, id=3)
        values = pet.to_values()
        self.assertNotIn("id", values)
        self.assertEqual(values["gender"], 1)
        self.assertIs(type(values["gender"]), int)

    def test_defaults(self):
        pet = Pet(name="Garfield")
        self.assertEqual(pet.gender, Gender.UNKNOWN)
        self.assertEqual(pet.weight, 0)
        self.assertIsNone(pet.breed)
        self.assertIsNone(pet.id)

    def test_from_row(self):
        row = {"id": 5, "name": "Lady", "breed": None, "gender": 2, "weight": 12}
        pet = Pet.from_row(row)
        self.assertEqual(pet.id, 5)
        self.assertEqual(pet.gender, Gender.FEMALE)
        self.assertIsNone(pet.breed)

    def test_from_partial_row(self):
        pet = Pet.from_row({"name": "Binx"})
        self.assertIsNone(pet.id)
        self.assertEqual(pet.gender, Gender.UNKNOWN)
        self.assertEqual(pet.weight, 0)
