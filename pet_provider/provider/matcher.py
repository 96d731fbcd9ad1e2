"""Resource matcher — classifies a content URI as the pets collection or one pet.

Registrations are fixed when the matcher is built.  Path templates are
split into segments; ``#`` matches a non-negative integer segment and ``*``
matches any single segment.  When several registrations match, literal
segments beat ``#``, ``#`` beats ``*``, and earlier registrations win ties.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional
from urllib.parse import urlsplit

from pet_provider.contract import CONTENT_AUTHORITY, PATH_PETS
from pet_provider.errors import InvalidResource

NUMBER_WILDCARD = "#"
TEXT_WILDCARD = "*"


class ResourceCode(IntEnum):
    NO_MATCH = -1
    COLLECTION = 100
    ITEM = 101


def _is_number(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def split_uri(uri: str) -> tuple[Optional[str], list[str]]:
    """
    Split ``uri`` into ``(authority, path segments)``.

    ``content://auth/pets/3`` gives ``("auth", ["pets", "3"])``.  Without a
    scheme the authority is ``None`` and every non-empty segment is returned,
    so ``auth/pets`` gives ``(None, ["auth", "pets"])``.  Query strings and
    fragments are dropped.
    """
    if "://" in uri:
        parts = urlsplit(uri)
        return parts.netloc or None, [s for s in parts.path.split("/") if s]
    path = uri.split("?", 1)[0].split("#", 1)[0]
    return None, [s for s in path.split("/") if s]


def parse_id(uri: str) -> int:
    """Return the trailing integer id of ``uri``."""
    _, segments = split_uri(uri)
    if not segments or not _is_number(segments[-1]):
        raise InvalidResource(uri)
    return int(segments[-1])


def with_appended_id(uri: str, row_id: int) -> str:
    if row_id < 0:
        raise ValueError(f"Row id must be non-negative, got {row_id}")
    return f"{uri.rstrip('/')}/{row_id}"


@dataclass(frozen=True)
class Registration:
    """One ``(authority, path template) -> code`` entry."""

    authority: str
    segments: tuple[str, ...]
    code: ResourceCode

    @classmethod
    def parse(cls, authority: str, path: str, code: ResourceCode) -> "Registration":
        return cls(authority, tuple(s for s in path.split("/") if s), code)

    def matches(self, segments: list[str]) -> bool:
        if len(segments) != len(self.segments):
            return False
        for pattern, segment in zip(self.segments, segments):
            if pattern == NUMBER_WILDCARD:
                if not _is_number(segment):
                    return False
            elif pattern != TEXT_WILDCARD and pattern != segment:
                return False
        return True

    def specificity(self) -> tuple[int, ...]:
        rank = {TEXT_WILDCARD: 0, NUMBER_WILDCARD: 1}
        return tuple(rank.get(p, 2) for p in self.segments)


@dataclass(frozen=True)
class ResourceMatcher:
    """Immutable ordered set of registrations."""

    registrations: tuple[Registration, ...]

    def match(self, uri: str) -> ResourceCode:
        authority, segments = split_uri(uri)
        best: Optional[Registration] = None
        for reg in self.registrations:
            path = segments
            if authority is None:
                # Schemeless URIs may still lead with the authority.
                if segments and segments[0] == reg.authority:
                    path = segments[1:]
            elif authority != reg.authority:
                continue
            if reg.matches(path) and (best is None or reg.specificity() > best.specificity()):
                best = reg
        return best.code if best else ResourceCode.NO_MATCH


def build_pet_matcher(authority: str = CONTENT_AUTHORITY) -> ResourceMatcher:
    """Matcher for ``<authority>/pets`` and ``<authority>/pets/#``."""
    return ResourceMatcher((
        Registration.parse(authority, PATH_PETS, ResourceCode.COLLECTION),
        Registration.parse(authority, f"{PATH_PETS}/{NUMBER_WILDCARD}", ResourceCode.ITEM),
    ))
