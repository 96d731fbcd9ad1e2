"""URI-addressed content provider over the pets table."""

from pet_provider.provider.cursor import PetCursor
from pet_provider.provider.matcher import (
    Registration,
    ResourceCode,
    ResourceMatcher,
    build_pet_matcher,
    parse_id,
    split_uri,
    with_appended_id,
)
from pet_provider.provider.mime import (
    directory_type,
    is_directory_type,
    is_item_type,
    item_type,
    resolve_type,
)
from pet_provider.provider.pet_provider import PetProvider

__all__ = [
    "PetProvider", "PetCursor",
    "ResourceCode", "ResourceMatcher", "Registration", "build_pet_matcher",
    "split_uri", "parse_id", "with_appended_id",
    "resolve_type", "directory_type", "item_type", "is_directory_type", "is_item_type",
]
