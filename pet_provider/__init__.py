"""Pet content provider — URI-addressed CRUD over a single SQLite table."""

from pet_provider.errors import (
    InvalidResource,
    ProviderError,
    StorageError,
    UnsupportedOperation,
    ValidationError,
)
from pet_provider.provider import PetProvider, ResourceCode, ResourceMatcher

__all__ = [
    "PetProvider", "ResourceCode", "ResourceMatcher",
    "ProviderError", "InvalidResource", "UnsupportedOperation",
    "ValidationError", "StorageError",
]
