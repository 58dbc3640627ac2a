"""Unit tests for the Schema module."""

import json

import pytest
from pydantic import ValidationError

from conductor.schema import (
    ColumnSchema,
    dump_schemas,
    export_json_schema,
    load_schemas,
    load_schemas_file,
)


class TestColumnSchema:
    """Tests for the ColumnSchema model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Hide and grow flags default to False."""
        schema = ColumnSchema(key="a", min_width=50, max_width=100, shrink_priority=1)
        assert schema.is_allowed_to_hide is False
        assert schema.is_allowed_to_grow_beyond_max_width is False

    @pytest.mark.unit
    def test_accepts_camel_case_aliases(self):
        """UI-style camelCase keys populate the snake_case fields."""
        schema = ColumnSchema.model_validate(
            {
                "key": "b",
                "minWidth": 100,
                "maxWidth": 200,
                "shrinkPriority": 2,
                "isAllowedToHide": True,
                "isAllowedToGrowBeyondMaxWidth": True,
            }
        )
        assert schema.min_width == 100
        assert schema.max_width == 200
        assert schema.shrink_priority == 2
        assert schema.is_allowed_to_hide
        assert schema.is_allowed_to_grow_beyond_max_width

    @pytest.mark.unit
    def test_is_frozen(self):
        """Schemas are immutable input."""
        schema = ColumnSchema(key="a", min_width=50, max_width=100, shrink_priority=1)
        with pytest.raises(ValidationError):
            schema.min_width = 10

    @pytest.mark.unit
    def test_negative_min_width_rejected(self):
        with pytest.raises(ValidationError):
            ColumnSchema(key="a", min_width=-1, max_width=100, shrink_priority=1)

    @pytest.mark.unit
    def test_min_above_max_is_constructible(self):
        """min > max is left for the validator to report."""
        schema = ColumnSchema(key="a", min_width=200, max_width=100, shrink_priority=1)
        assert schema.flexibility == -100

    @pytest.mark.unit
    def test_missing_key_rejected(self):
        with pytest.raises(ValidationError):
            ColumnSchema.model_validate({"minWidth": 1, "maxWidth": 2, "shrinkPriority": 1})


class TestLoading:
    """Tests for schema list loading and dumping."""

    @pytest.mark.unit
    def test_load_mixed_entries(self):
        """Models and dicts can be mixed, and order is kept."""
        existing = ColumnSchema(key="a", min_width=1, max_width=2, shrink_priority=1)
        schemas = load_schemas(
            [existing, {"key": "b", "min_width": 3, "max_width": 4, "shrink_priority": 2}]
        )
        assert [s.key for s in schemas] == ["a", "b"]
        assert schemas[0] == existing

    @pytest.mark.unit
    def test_load_rejects_bad_types(self):
        with pytest.raises(ValidationError):
            load_schemas([{"key": "a", "minWidth": "wide", "maxWidth": 1, "shrinkPriority": 1}])

    @pytest.mark.unit
    def test_load_file(self, tmp_path):
        """JSON files written with camelCase keys load."""
        path = tmp_path / "schemas.json"
        path.write_text(
            json.dumps([{"key": "a", "minWidth": 50, "maxWidth": 100, "shrinkPriority": 1}])
        )
        schemas = load_schemas_file(path)
        assert len(schemas) == 1
        assert schemas[0].max_width == 100

    @pytest.mark.unit
    def test_dump_uses_aliases(self, sample_schemas):
        data = json.loads(dump_schemas(sample_schemas))
        assert data[0]["minWidth"] == 50
        assert "min_width" not in data[0]
        assert load_schemas(data) == sample_schemas


class TestJsonSchema:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_export_is_array_of_objects(self):
        schema = export_json_schema()
        assert schema["type"] == "array"
        assert "$defs" in schema
        props = schema["$defs"]["ColumnSchema"]["properties"]
        assert "minWidth" in props
        assert "shrinkPriority" in props
