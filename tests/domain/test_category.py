"""Unit tests for the Category aggregate."""

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category


class TestCategoryCreate:

    def test_trims_name_and_description(self):
        c = Category.create("  Books  ", "  Reading  ")
        assert c.name == "Books"
        assert c.description == "Reading"
        assert c.id is None

    def test_timestamps_set_to_now_in_utc(self):
        c = Category.create("Books")
        assert c.created_at == c.updated_at
        assert c.created_at.tzinfo is not None

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="cannot be empty"):
            Category.create(name)


class TestCategoryUpdate:

    def test_update_changes_fields_and_refreshes_updated_at(self):
        c = Category.create("Books")
        created = c.created_at
        c.update("Novels", "Fiction")
        assert c.name == "Novels"
        assert c.description == "Fiction"
        assert c.created_at == created
        assert c.updated_at >= created

    def test_blank_name_leaves_state_unchanged(self):
        c = Category.create("Books", "Reading")
        before = (c.name, c.description, c.updated_at)
        with pytest.raises(ValidationError):
            c.update(" ", "Other")
        assert (c.name, c.description, c.updated_at) == before
