"""Unit tests for the Tag entity."""

from uuid import uuid4

import pytest

from catalog.domain.error import ValidationError
from catalog.domain.model import Tag
from catalog.domain.value import NIL_UUID, TagId, TagName


class TestTag:
    """Tests for Tag.create."""

    def test_create_from_tag_name(self):
        tag = Tag.create(id=TagId(uuid4()), name=TagName(" Kafka "))

        assert tag.name == "Kafka"
        assert tag.name_normalized == "kafka"

    def test_nil_id_rejected(self):
        with pytest.raises(ValidationError):
            Tag.create(id=TagId(NIL_UUID), name=TagName("Kafka"))
