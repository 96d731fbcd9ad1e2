"""Domain models for the pets provider."""

from pet_provider.models.pet import Pet

__all__ = ["Pet"]
