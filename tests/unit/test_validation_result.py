"""
Unit tests for ValidationResult: error grouping, merging and path composition.
"""
import pytest

from beancheck.models.field_error import FieldError
from beancheck.models.validation import ValidationResult


class TestAddError:
    """Tests for adding single errors."""

    def test_new_result_is_valid(self):
        result = ValidationResult()
        assert result.is_valid() is True
        assert result.has_errors() is False
        assert result.errors == {}
        assert result.error_count() == 0

    def test_default_separator_is_dot(self):
        assert ValidationResult().separator == "."

    def test_add_error_creates_path(self):
        result = ValidationResult()
        result.add_error("id", "is_not_null")

        assert result.is_valid() is False
        assert result.has_errors() is True
        assert result.errors_for("id") == [FieldError("id", "is_not_null")]

    def test_errors_within_path_keep_insertion_order(self):
        result = ValidationResult()
        result.add_error("id", "is_not_null")
        result.add_error("id", "is_not_empty")
        result.add_error("id", "custom")

        assert result.keys_for("id") == ["is_not_null", "is_not_empty", "custom"]

    def test_paths_keep_insertion_order(self):
        result = ValidationResult()
        result.add_error("b", "k")
        result.add_error("a", "k")
        result.add_error("b", "k2")

        assert result.paths() == ["b", "a"]
        assert result.error_count() == 3
        assert len(result) == 3

    def test_errors_for_unknown_path_is_none(self):
        result = ValidationResult()
        result.add_error("id", "is_null")
        assert result.errors_for("other") is None
        assert result.keys_for("other") == []

    def test_errors_property_is_a_copy(self):
        result = ValidationResult()
        result.add_error("id", "is_null")

        result.errors["id"].append(FieldError("id", "tampered"))
        result.errors["other"] = []

        assert result.keys_for("id") == ["is_null"]
        assert result.paths() == ["id"]


class TestMerge:
    """Tests for merge() without prefixing."""

    def test_merge_keeps_paths(self):
        target = ValidationResult()
        other = ValidationResult(separator="~")
        other.add_error("items", "is_not_null")

        target.merge(other)

        assert target.errors_for("items") == [FieldError("items", "is_not_null")]

    def test_merge_same_path_concatenates(self):
        target = ValidationResult()
        target.add_error("id", "is_not_null")
        other = ValidationResult()
        other.add_error("id", "is_not_empty")
        other.add_error("id", "custom")

        target.merge(other)

        assert target.keys_for("id") == ["is_not_null", "is_not_empty", "custom"]

    def test_merge_valid_result_changes_nothing(self):
        target = ValidationResult()
        target.merge(ValidationResult())
        assert target.is_valid() is True
        assert target.paths() == []


class TestMergeUnder:
    """Tests for merge_under(): prefixing with the merging scope's separator."""

    def test_prefix_uses_own_separator(self):
        target = ValidationResult(separator="#")
        nested = ValidationResult(separator="~")
        nested.add_error("items", "is_not_null")

        target.merge_under("nested", nested)

        assert target.paths() == ["nested#items"]

    def test_errors_are_rehomed(self):
        target = ValidationResult()
        nested = ValidationResult()
        nested.add_error("items", "is_not_null")
        nested.add_error("items", "is_not_empty")

        target.merge_under("property", nested)

        errors = target.errors_for("property.items")
        assert [e.path for e in errors] == ["property.items", "property.items"]
        assert [e.key for e in errors] == ["is_not_null", "is_not_empty"]

    def test_nested_result_is_not_modified(self):
        target = ValidationResult()
        nested = ValidationResult()
        nested.add_error("items", "is_null")

        target.merge_under("property", nested)

        assert nested.errors_for("items") == [FieldError("items", "is_null")]

    def test_repeated_prefixing_composes_bottom_up(self):
        inner = ValidationResult(separator="~")
        leaf = ValidationResult()
        leaf.add_error("items", "is_not_null")
        inner.merge_under("simpleProperty", leaf)

        outer = ValidationResult(separator="#")
        outer.merge_under("nested", inner)

        assert outer.keys_for("nested#simpleProperty~items") == ["is_not_null"]
        assert outer.errors_for("nested#simpleProperty~items")[0].path == "nested#simpleProperty~items"

    def test_merge_under_onto_existing_path_concatenates(self):
        target = ValidationResult()
        target.add_error("a.b", "first")
        nested = ValidationResult()
        nested.add_error("b", "second")

        target.merge_under("a", nested)

        assert target.keys_for("a.b") == ["first", "second"]


class TestSerialization:
    def test_to_dict(self):
        result = ValidationResult()
        result.add_error("id", "is_not_null")
        result.add_error("name", "is_not_empty")

        assert result.to_dict() == {"id": ["is_not_null"], "name": ["is_not_empty"]}

    def test_iter_errors_grouped_by_path(self):
        result = ValidationResult()
        result.add_error("a", "1")
        result.add_error("b", "2")
        result.add_error("a", "3")

        assert [(e.path, e.key) for e in result.iter_errors()] == [("a", "1"), ("a", "3"), ("b", "2")]


class TestFieldError:
    def test_is_immutable(self):
        error = FieldError("id", "is_null")
        with pytest.raises(AttributeError):
            error.path = "other"

    def test_rehome_returns_copy(self):
        error = FieldError("items", "is_null")
        moved = error.rehome("property.items")
        assert moved == FieldError("property.items", "is_null")
        assert error.path == "items"

    def test_to_dict(self):
        assert FieldError("id", "is_null").to_dict() == {"path": "id", "key": "is_null"}
