"""Unit tests for section key, id and name functions."""

import hashlib
import itertools
from uuid import UUID

import pytest

from catalog.domain.error import ValidationError
from catalog.domain.section_key import (
    SECTION_NAME_MAX_LENGTH,
    build_section_id,
    build_section_key,
    build_section_name,
)
from catalog.domain.value import EMPTY_SECTION_ID, NIL_UUID


class TestBuildSectionKey:
    """Tests for build_section_key."""

    def test_sorts_and_deduplicates(self):
        """Key is the sorted set of names joined with '|'."""
        assert build_section_key(["tag2", "tag1", "tag2"]) == "tag1|tag2"

    def test_invariant_under_permutation(self):
        """Every ordering of the same names gives the same key."""
        names = ["kafka", "backend", "c#"]
        keys = {build_section_key(p) for p in itertools.permutations(names)}

        assert keys == {"backend|c#|kafka"}

    def test_invariant_under_duplication(self):
        """Repeating names does not change the key."""
        assert build_section_key(["a", "b"]) == build_section_key(["b", "a", "a", "b"])

    def test_single_name(self):
        assert build_section_key(["backend"]) == "backend"

    def test_empty_collection(self):
        """No names means the empty key."""
        assert build_section_key([]) == ""

    def test_none_rejected(self):
        with pytest.raises(ValidationError):
            build_section_key(None)

    def test_ordinal_not_alphabetical(self):
        """Sorting is by code point: '#' < digits < letters."""
        assert build_section_key(["b", "a1", "#x"]) == "#x|a1|b"

    def test_accepts_generator(self):
        assert build_section_key(n for n in ["y", "x"]) == "x|y"


class TestBuildSectionId:
    """Tests for build_section_id."""

    def test_empty_key_gives_nil(self):
        assert build_section_id("") == EMPTY_SECTION_ID
        assert build_section_id("") == NIL_UUID

    def test_none_key_gives_nil(self):
        assert build_section_id(None) == EMPTY_SECTION_ID

    def test_deterministic(self):
        """Equal keys give equal ids."""
        assert build_section_id("backend|c#") == build_section_id("backend|c#")

    def test_different_keys_give_different_ids(self):
        assert build_section_id("backend|c#") != build_section_id("backend|kafka")

    def test_first_16_bytes_of_sha256_in_guid_byte_order(self):
        """Id is the truncated SHA-256 digest read with GUID field order."""
        digest = hashlib.sha256("backend|c#".encode("utf-8")).digest()

        section_id = build_section_id("backend|c#")

        assert section_id == UUID(bytes_le=digest[:16])
        assert section_id.bytes_le == digest[:16]

    def test_non_ascii_key_hashed_as_utf8(self):
        digest = hashlib.sha256("café|日本".encode("utf-8")).digest()

        assert build_section_id("café|日本") == UUID(bytes_le=digest[:16])


class TestBuildSectionName:
    """Tests for build_section_name."""

    def test_sorted_and_joined(self):
        assert build_section_name(["C#", "Backend"]) == "Backend, C#"

    def test_keeps_casing(self):
        """Uppercase sorts before lowercase (code point order)."""
        assert build_section_name(["backend", "Kafka"]) == "Kafka, backend"

    def test_does_not_deduplicate(self):
        assert build_section_name(["a", "a"]) == "a, a"

    def test_empty(self):
        assert build_section_name([]) == ""

    def test_truncated(self):
        """Long names are cut to the maximum length."""
        names = [f"tag{i:04d}" for i in range(300)]

        name = build_section_name(names)

        assert len(name) == SECTION_NAME_MAX_LENGTH
        assert name.startswith("tag0000, tag0001")

    def test_none_rejected(self):
        with pytest.raises(ValidationError):
            build_section_name(None)


class TestSectionScenarios:
    """Section identity across differently ordered tag lists."""

    def test_same_tags_in_any_order_share_section(self):
        """{Backend, C#} and {C#, Backend} land in the same section."""
        first = build_section_id(build_section_key(["backend", "c#"]))
        second = build_section_id(build_section_key(["c#", "backend"]))

        assert first == second
        assert first != EMPTY_SECTION_ID
