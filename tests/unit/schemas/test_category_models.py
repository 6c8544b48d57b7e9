"""
Unit tests for the backend category models.

Tests for lenient validation and coerce_model.
"""

from category_engine.schemas.category import (
    Category,
    CategoryReference,
    ExternalCategoryRecord,
    coerce_model,
)


class TestExternalCategoryRecord:
    """Tests for ExternalCategoryRecord validation."""

    def test_blank_strings_become_none(self):
        """Empty and whitespace-only strings should count as missing."""
        record = ExternalCategoryRecord.model_validate(
            {"slug": "  ", "name": "", "parent_slug": " "}
        )
        assert record.slug is None
        assert record.name is None
        assert record.parent_slug is None

    def test_strings_are_stripped(self):
        """Values should be stripped of surrounding whitespace."""
        record = ExternalCategoryRecord.model_validate({"slug": " tech ", "name": " Tech "})
        assert record.slug == "tech"
        assert record.name == "Tech"

    def test_camel_case_aliases(self):
        """parentSlug and isActive should be accepted."""
        record = ExternalCategoryRecord.model_validate(
            {"slug": "india", "parentSlug": "south-asia", "isActive": False}
        )
        assert record.parent_slug == "south-asia"
        assert record.is_active is False

    def test_non_list_children_ignored(self):
        """A children value that is not a list should be dropped."""
        record = ExternalCategoryRecord.model_validate({"slug": "tech", "children": "nope"})
        assert record.children is None

    def test_extra_fields_ignored(self):
        """Unknown backend fields should not fail validation."""
        record = ExternalCategoryRecord.model_validate({"slug": "tech", "article_count": 12})
        assert record.slug == "tech"


class TestCoerceModel:
    """Tests for coerce_model."""

    def test_none(self):
        """None should coerce to None."""
        assert coerce_model(None, ExternalCategoryRecord) is None

    def test_same_instance_returned(self):
        """An instance of the target model should pass through."""
        record = ExternalCategoryRecord(slug="tech")
        assert coerce_model(record, ExternalCategoryRecord) is record

    def test_other_model_converted(self):
        """A different pydantic model should be re-validated."""
        category = Category(id=3, name="Tech", slug="tech", parent_slug="root")
        record = coerce_model(category, ExternalCategoryRecord)
        assert record.slug == "tech"
        assert record.parent_slug == "root"
        assert record.id == 3

    def test_non_mapping_dropped(self):
        """Strings, numbers and lists should be dropped."""
        for raw in ("tech", 42, ["tech"], object()):
            assert coerce_model(raw, ExternalCategoryRecord) is None

    def test_wrong_field_types_read_as_missing(self):
        """Wrong field types should become None instead of dropping the record."""
        record = coerce_model(
            {"id": 1.5, "slug": "tech", "name": 0, "parent_slug": 7, "is_active": "maybe", "color": 123},
            ExternalCategoryRecord,
        )
        assert record.slug == "tech"
        assert record.id is None
        assert record.name is None
        assert record.parent_slug is None
        assert record.is_active is None
        assert record.color is None

    def test_non_string_slug_reads_as_missing(self):
        """A non-string slug should leave a record without a slug."""
        assert coerce_model({"slug": 123}, ExternalCategoryRecord).slug is None

    def test_valid_values_kept(self):
        """Values of the right type should pass through the lenient fields."""
        record = ExternalCategoryRecord.model_validate(
            {"id": "c-1", "slug": "tech", "is_active": True, "description": "Gadgets", "color": "#00f"}
        )
        assert record.id == "c-1"
        assert record.is_active is True
        assert record.description == "Gadgets"
        assert record.color == "#00f"


class TestCategoryReference:
    """Tests for CategoryReference validation."""

    def test_non_string_hints_ignored(self):
        """Non-string values should be treated as missing."""
        ref = CategoryReference.model_validate({"slug": 5, "name": ["x"], "parent_slug": None})
        assert ref.slug is None
        assert ref.name is None
        assert ref.parent_slug is None

    def test_populate_by_field_name(self):
        """parent_slug should be accepted by field name."""
        ref = CategoryReference(parent_slug="global")
        assert ref.parent_slug == "global"
