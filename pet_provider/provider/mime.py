"""MIME types for the pets resources."""

from __future__ import annotations

from pet_provider.contract import (
    CONTENT_AUTHORITY,
    DIR_BASE_TYPE,
    ITEM_BASE_TYPE,
    PATH_PETS,
)
from pet_provider.errors import InvalidResource
from pet_provider.provider.matcher import ResourceCode


def directory_type(authority: str = CONTENT_AUTHORITY) -> str:
    """MIME type of the collection, e.g. ``vnd.cursor.dir/<authority>/pets``."""
    return f"{DIR_BASE_TYPE}/{authority}/{PATH_PETS}"


def item_type(authority: str = CONTENT_AUTHORITY) -> str:
    """MIME type of a single pet, e.g. ``vnd.cursor.item/<authority>/pets``."""
    return f"{ITEM_BASE_TYPE}/{authority}/{PATH_PETS}"


def resolve_type(code: ResourceCode, authority: str = CONTENT_AUTHORITY, uri: str = "") -> str:
    if code == ResourceCode.COLLECTION:
        return directory_type(authority)
    if code == ResourceCode.ITEM:
        return item_type(authority)
    raise InvalidResource(uri)


def is_directory_type(mime: str) -> bool:
    return mime.startswith(DIR_BASE_TYPE + "/")


def is_item_type(mime: str) -> bool:
    return mime.startswith(ITEM_BASE_TYPE + "/")
