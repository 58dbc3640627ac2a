"""Unit tests for validation module."""

import pytest

from conductor.schema import ColumnSchema
from conductor.validation import (
    DuplicateKeyError,
    DuplicatePriorityError,
    ErrorType,
    MinExceedsMaxError,
    MinWidthOverflowError,
    NonConsecutivePriorityError,
    SchemaConfigurationError,
    check_schemas,
    is_valid,
    validate_schemas,
)


def _schema(key, min_width, max_width, priority, **flags) -> ColumnSchema:
    return ColumnSchema(
        key=key,
        min_width=min_width,
        max_width=max_width,
        shrink_priority=priority,
        **flags,
    )


class TestValidateSchemas:
    """Tests for validate_schemas function."""

    @pytest.mark.unit
    def test_valid_set(self, sample_schemas):
        """Well-formed schema set passes validation."""
        assert validate_schemas(500, sample_schemas) == []
        assert is_valid(500, sample_schemas)

    @pytest.mark.unit
    def test_empty_set_is_valid(self):
        assert validate_schemas(0, []) == []

    @pytest.mark.unit
    def test_priorities_need_not_start_at_one(self):
        """Only consecutiveness matters, not the starting value."""
        schemas = [_schema("a", 10, 20, 5), _schema("b", 10, 20, 6)]
        assert is_valid(100, schemas)

    @pytest.mark.unit
    def test_priority_gap(self):
        """A gap in shrink priorities is detected."""
        schemas = [_schema("a", 10, 20, 1), _schema("b", 10, 20, 3)]
        errors = validate_schemas(100, schemas)
        assert len(errors) == 1
        assert errors[0].error_type == ErrorType.NON_CONSECUTIVE_PRIORITY
        assert errors[0].key == "b"

    @pytest.mark.unit
    def test_duplicate_priority(self):
        """A repeated shrink priority is reported separately from a gap."""
        schemas = [_schema("a", 10, 20, 1), _schema("b", 10, 20, 1)]
        errors = validate_schemas(100, schemas)
        assert [e.error_type for e in errors] == [ErrorType.DUPLICATE_PRIORITY]
        assert "'a'" in errors[0].message and "'b'" in errors[0].message

    @pytest.mark.unit
    def test_min_width_overflow(self):
        """Minimum widths that cannot fit are detected."""
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)]
        errors = validate_schemas(100, schemas)
        assert len(errors) == 1
        assert errors[0].error_type == ErrorType.MIN_WIDTH_OVERFLOW
        assert errors[0].key is None

    @pytest.mark.unit
    def test_min_width_exactly_fits(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 50, 200, 2)]
        assert is_valid(100, schemas)

    @pytest.mark.unit
    def test_min_exceeds_max(self):
        schemas = [_schema("a", 150, 100, 1)]
        errors = validate_schemas(1000, schemas)
        assert len(errors) == 1
        assert errors[0].error_type == ErrorType.MIN_EXCEEDS_MAX
        assert errors[0].key == "a"

    @pytest.mark.unit
    def test_duplicate_key(self):
        schemas = [_schema("dupe", 10, 20, 1), _schema("dupe", 10, 20, 2)]
        errors = validate_schemas(100, schemas)
        assert len(errors) == 1
        assert errors[0].error_type == ErrorType.DUPLICATE_KEY
        assert "dupe" in errors[0].message

    @pytest.mark.unit
    def test_collects_multiple_issues_in_check_order(self):
        schemas = [
            _schema("a", 300, 100, 1),
            _schema("a", 10, 20, 4),
        ]
        errors = validate_schemas(100, schemas)
        assert [e.error_type for e in errors] == [
            ErrorType.NON_CONSECUTIVE_PRIORITY,
            ErrorType.MIN_WIDTH_OVERFLOW,
            ErrorType.MIN_EXCEEDS_MAX,
            ErrorType.DUPLICATE_KEY,
        ]

    @pytest.mark.unit
    def test_does_not_mutate_input(self, sample_schemas):
        before = list(sample_schemas)
        validate_schemas(10, sample_schemas)
        assert sample_schemas == before


class TestCheckSchemas:
    """Tests for the raising entry point."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("schemas", "content_width", "error_class"),
        [
            ([_schema("a", 10, 20, 1), _schema("b", 10, 20, 3)], 100, NonConsecutivePriorityError),
            ([_schema("a", 10, 20, 1), _schema("b", 10, 20, 1)], 100, DuplicatePriorityError),
            ([_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)], 100, MinWidthOverflowError),
            ([_schema("a", 150, 100, 1)], 1000, MinExceedsMaxError),
            ([_schema("a", 10, 20, 1), _schema("a", 10, 20, 2)], 100, DuplicateKeyError),
        ],
    )
    def test_raises_distinct_error_kinds(self, schemas, content_width, error_class):
        with pytest.raises(error_class) as exc_info:
            check_schemas(content_width, schemas)
        assert isinstance(exc_info.value, SchemaConfigurationError)
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.error_type == exc_info.value.issue.error_type

    @pytest.mark.unit
    def test_raises_first_issue(self):
        """With several problems, the priority check is reported first."""
        schemas = [_schema("a", 300, 100, 1), _schema("a", 10, 20, 4)]
        with pytest.raises(NonConsecutivePriorityError):
            check_schemas(100, schemas)

    @pytest.mark.unit
    def test_valid_set_returns_none(self, sample_schemas):
        assert check_schemas(500, sample_schemas) is None

    @pytest.mark.unit
    def test_message_is_prefixed(self):
        with pytest.raises(SchemaConfigurationError, match=r"^\[ResponsiveConductor\]"):
            check_schemas(10, [_schema("a", 50, 100, 1)])
