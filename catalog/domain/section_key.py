"""Section key and identity functions.

A section is the set of articles sharing the same set of normalized tag
names. It is never stored: its key, identifier and display name are
recomputed from tag data with the functions below, which are pure and
deterministic across processes and platforms.
"""

import hashlib
from collections.abc import Iterable
from uuid import UUID

from catalog.domain.error import ValidationError
from catalog.domain.value import EMPTY_SECTION_ID, SectionId

SECTION_KEY_SEPARATOR = "|"
SECTION_NAME_SEPARATOR = ", "
SECTION_NAME_MAX_LENGTH = 1024


def build_section_key(normalized_names: Iterable[str] | None) -> str:
    """Build the canonical key for a set of normalized tag names.

    Duplicates are dropped before sorting, so the key depends only on the
    set of distinct names, not on their order or multiplicity.

    Args:
        normalized_names: Normalized tag names (an empty collection is valid)

    Returns:
        Names deduplicated, sorted by code point and joined with '|';
        empty string for an empty collection

    Raises:
        ValidationError: If normalized_names is None
    """
    if normalized_names is None:
        raise ValidationError("Normalized tag names cannot be None")

    return SECTION_KEY_SEPARATOR.join(sorted(set(normalized_names)))


def build_section_id(section_key: str | None) -> SectionId:
    """Derive a stable section identifier from a section key.

    SHA-256 of the UTF-8 encoded key, truncated to the first 16 bytes. The
    bytes are read in GUID byte order (``bytes_le``): the first three fields
    little-endian, the rest as-is, which keeps identifiers compatible with
    section ids already handed out to clients.

    Args:
        section_key: Canonical section key

    Returns:
        Section identifier, or EMPTY_SECTION_ID for an empty or None key
    """
    if not section_key:
        return EMPTY_SECTION_ID

    digest = hashlib.sha256(section_key.encode("utf-8")).digest()
    return SectionId(UUID(bytes_le=digest[:16]))


def build_section_name(tag_names: Iterable[str] | None) -> str:
    """Build a section display name from original-case tag names.

    Does not deduplicate; callers pass an already deduplicated list.

    Args:
        tag_names: Display tag names

    Returns:
        Names sorted by code point, joined with ', ' and truncated to
        SECTION_NAME_MAX_LENGTH characters

    Raises:
        ValidationError: If tag_names is None
    """
    if tag_names is None:
        raise ValidationError("Tag names cannot be None")

    name = SECTION_NAME_SEPARATOR.join(sorted(tag_names))
    return name[:SECTION_NAME_MAX_LENGTH]
