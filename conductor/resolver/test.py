"""Unit tests for the column width resolver."""

import logging

import pytest

from conductor.resolver import ColumnAllocation, allocate_columns, resolve_column_widths
from conductor.schema import ColumnSchema, load_schemas
from conductor.validation import (
    DuplicateKeyError,
    MinWidthOverflowError,
    NonConsecutivePriorityError,
)


def _schema(key, min_width, max_width, priority, hide=False, grow=False) -> ColumnSchema:
    return ColumnSchema(
        key=key,
        min_width=min_width,
        max_width=max_width,
        shrink_priority=priority,
        is_allowed_to_hide=hide,
        is_allowed_to_grow_beyond_max_width=grow,
    )


class TestScenarios:
    """Worked allocation examples."""

    @pytest.mark.unit
    def test_no_schemas(self):
        assert resolve_column_widths(1000, []) == []

    @pytest.mark.unit
    def test_single_schema_within_width(self):
        assert resolve_column_widths(1000, [_schema("single", 50, 100, 1)]) == [100]

    @pytest.mark.unit
    def test_single_schema_exceeding_width(self):
        assert resolve_column_widths(100, [_schema("single", 50, 200, 1)]) == [100]

    @pytest.mark.unit
    def test_multiple_schemas_within_width(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)]
        assert resolve_column_widths(500, schemas) == [100, 200]

    @pytest.mark.unit
    def test_multiple_schemas_forced_floor_overflow(self):
        """Min widths that cannot fit are returned as-is."""
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)]
        assert resolve_column_widths(100, schemas) == [50, 100]

    @pytest.mark.unit
    def test_hides_when_needed(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2, hide=True)]
        assert resolve_column_widths(60, schemas) == [60, 0]

    @pytest.mark.unit
    def test_reintroduces_hidden_when_space_allows(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2, hide=True)]
        assert resolve_column_widths(300, schemas) == [100, 200]

    @pytest.mark.unit
    def test_growable_takes_extra_space(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2, grow=True)]
        assert resolve_column_widths(400, schemas) == [100, 300]

    @pytest.mark.unit
    def test_no_growth_without_flag(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)]
        assert resolve_column_widths(400, schemas) == [100, 200]

    @pytest.mark.unit
    def test_hiding_and_growing_combined(self, sample_schemas):
        assert resolve_column_widths(500, sample_schemas) == [100, 150, 150, 100]

    @pytest.mark.unit
    def test_skips_hidden_that_do_not_fit(self):
        """Admission is greedy: b is skipped but the smaller c still fits."""
        schemas = [
            _schema("a", 50, 100, 1),
            _schema("b", 100, 200, 2, hide=True),
            _schema("c", 50, 150, 3, hide=True),
        ]
        assert resolve_column_widths(150, schemas) == [100, 0, 50]

    @pytest.mark.unit
    def test_static_size(self):
        schemas = [
            _schema("static", 50, 50, 1),
            _schema("flexible", 100, 200, 2, grow=True),
        ]
        assert resolve_column_widths(500, schemas) == [50, 450]


class TestDistribution:
    """Tests for the individual allocation passes."""

    @pytest.mark.unit
    def test_shrinks_highest_priority_value_first(self):
        """The least protected item gives up width before the others."""
        schemas = [_schema("a", 50, 100, 1), _schema("b", 50, 100, 2)]
        assert resolve_column_widths(170, schemas) == [100, 70]

    @pytest.mark.unit
    def test_priority_not_input_order_drives_shrinking(self):
        schemas = [_schema("b", 50, 100, 2), _schema("a", 50, 100, 1)]
        assert resolve_column_widths(170, schemas) == [70, 100]

    @pytest.mark.unit
    def test_constrained_branch_is_first_come(self):
        """Extra space above min widths goes to earlier items first."""
        schemas = [_schema("a", 10, 100, 1), _schema("b", 10, 100, 2)]
        assert resolve_column_widths(120, schemas) == [100, 20]

    @pytest.mark.unit
    def test_constrained_fill_skips_items_without_flexibility(self):
        """Static items and min > max items stay at their min width."""
        schemas = [
            _schema("static", 30, 30, 1),
            _schema("inverted", 50, 40, 2),
            _schema("flexible", 10, 100, 3),
        ]
        assert resolve_column_widths(150, schemas) == [30, 50, 70]

    @pytest.mark.unit
    def test_admitted_hideable_items_come_last_in_constrained_fill(self):
        schemas = [
            _schema("h", 20, 100, 1, hide=True),
            _schema("a", 20, 100, 2),
        ]
        # a: 100, slack 20 admits h at 20; sum_max 200 > 120 so fill from min
        # with a (fixed) ahead of h (admitted).
        assert resolve_column_widths(120, schemas) == [20, 100]

    @pytest.mark.unit
    def test_equal_split_between_growable_items(self):
        """Growth is split equally regardless of each item's max width."""
        schemas = [
            _schema("small", 10, 20, 1, grow=True),
            _schema("large", 10, 200, 2, grow=True),
            _schema("fixed", 10, 50, 3),
        ]
        assert resolve_column_widths(370, schemas) == [70, 250, 50]

    @pytest.mark.unit
    def test_slack_left_unallocated_without_growable(self):
        schemas = [_schema("a", 10, 20, 1), _schema("b", 10, 30, 2)]
        result = allocate_columns(1000, schemas)
        assert result.widths == [20, 30]
        assert result.visible_width == 50

    @pytest.mark.unit
    def test_hidden_admitted_at_partial_width(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2, hide=True)]
        assert resolve_column_widths(250, schemas) == [100, 150]

    @pytest.mark.unit
    def test_all_hideable_items(self):
        schemas = [
            _schema("a", 40, 60, 1, hide=True),
            _schema("b", 40, 60, 2, hide=True),
        ]
        assert resolve_column_widths(0, schemas) == [0, 0]
        assert resolve_column_widths(50, schemas) == [50, 0]
        assert resolve_column_widths(100, schemas) == [60, 40]

    @pytest.mark.unit
    def test_zero_content_width(self):
        schemas = [_schema("a", 0, 100, 1), _schema("b", 0, 100, 2, hide=True)]
        assert resolve_column_widths(0, schemas) == [0, 0]

    @pytest.mark.unit
    def test_float_widths(self):
        schemas = [
            _schema("a", 10, 20, 1, grow=True),
            _schema("b", 10, 20, 2, grow=True),
            _schema("c", 10, 20, 3, grow=True),
        ]
        widths = resolve_column_widths(100, schemas)
        assert widths == pytest.approx([100 / 3] * 3)

    @pytest.mark.unit
    def test_accepts_loaded_camel_case_schemas(self):
        schemas = load_schemas(
            [
                {"key": "a", "minWidth": 50, "maxWidth": 100, "shrinkPriority": 1},
                {
                    "key": "b",
                    "minWidth": 100,
                    "maxWidth": 200,
                    "shrinkPriority": 2,
                    "isAllowedToGrowBeyondMaxWidth": True,
                },
            ]
        )
        assert resolve_column_widths(400, schemas) == [100, 300]


class TestAllocationResult:
    """Tests for the ColumnAllocation record."""

    @pytest.mark.unit
    def test_empty(self):
        result = allocate_columns(1000, [])
        assert result == ColumnAllocation()
        assert result.visible_width == 0

    @pytest.mark.unit
    def test_reports_hidden_keys(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2, hide=True)]
        result = allocate_columns(60, schemas)
        assert result.hidden_keys == ["b"]
        assert result.overflowed is False

    @pytest.mark.unit
    def test_reports_floor_overflow(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)]
        result = allocate_columns(100, schemas)
        assert result.overflowed is True
        assert result.widths == [50, 100]
        assert result.visible_width > 100

    @pytest.mark.unit
    def test_fallback_logged(self, caplog):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)]
        with caplog.at_level(logging.DEBUG, logger="conductor.resolver.lib"):
            allocate_columns(100, schemas)
        assert "pinning visible items to min width" in caplog.text


class TestValidationToggle:
    """Validation runs only when requested per call."""

    @pytest.mark.unit
    def test_validation_off_by_default(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)]
        assert resolve_column_widths(100, schemas) == [50, 100]

    @pytest.mark.unit
    def test_validation_raises_on_overflow(self):
        schemas = [_schema("a", 50, 100, 1), _schema("b", 100, 200, 2)]
        with pytest.raises(MinWidthOverflowError):
            resolve_column_widths(100, schemas, validate=True)

    @pytest.mark.unit
    def test_validation_raises_on_priority_gap(self):
        schemas = [_schema("a", 10, 100, 1), _schema("b", 10, 200, 3)]
        with pytest.raises(NonConsecutivePriorityError):
            allocate_columns(1000, schemas, validate=True)

    @pytest.mark.unit
    def test_validation_raises_on_duplicate_key(self):
        schemas = [_schema("a", 10, 100, 1), _schema("a", 10, 200, 2)]
        with pytest.raises(DuplicateKeyError):
            allocate_columns(1000, schemas, validate=True)

    @pytest.mark.unit
    def test_empty_input_skips_validation(self):
        assert resolve_column_widths(-1, [], validate=True) == []

    @pytest.mark.unit
    def test_validation_does_not_change_result(self, sample_schemas):
        assert resolve_column_widths(500, sample_schemas, validate=True) == (
            resolve_column_widths(500, sample_schemas)
        )


# =============================================================================
# Invariants across a sweep of container widths
# =============================================================================

SCHEMA_SETS = {
    "toolbar": [
        _schema("a", 50, 100, 1),
        _schema("b", 100, 200, 2, hide=True),
        _schema("c", 50, 150, 3, grow=True),
        _schema("d", 50, 100, 4),
    ],
    "mostly_hideable": [
        _schema("title", 40, 80, 1),
        _schema("status", 60, 120, 2, hide=True),
        _schema("owner", 30, 90, 3, hide=True),
        _schema("updated", 50, 100, 4, hide=True),
        _schema("actions", 20, 60, 5),
    ],
}

SWEEP_WIDTHS = list(range(0, 801, 7))

SWEEP_CASES = [
    pytest.param(name, width, id=f"{name}-{width}")
    for name in SCHEMA_SETS
    for width in SWEEP_WIDTHS
]

FITTING_CASES = [
    pytest.param(name, width, id=f"{name}-{width}")
    for name, schemas in SCHEMA_SETS.items()
    for width in SWEEP_WIDTHS
    if sum(s.min_width for s in schemas) <= width
]


class TestInvariants:
    """Properties that must hold for every content width."""

    @pytest.mark.unit
    @pytest.mark.parametrize(("name", "content_width"), SWEEP_CASES)
    def test_order_and_length(self, name, content_width):
        schemas = SCHEMA_SETS[name]
        widths = resolve_column_widths(content_width, schemas)
        assert len(widths) == len(schemas)
        for schema, width in zip(schemas, widths):
            if not schema.is_allowed_to_hide:
                assert width > 0, schema.key

    @pytest.mark.unit
    @pytest.mark.parametrize(("name", "content_width"), SWEEP_CASES)
    def test_deterministic(self, name, content_width):
        schemas = SCHEMA_SETS[name]
        first = resolve_column_widths(content_width, schemas)
        assert resolve_column_widths(content_width, schemas) == first

    @pytest.mark.unit
    @pytest.mark.parametrize(("name", "content_width"), FITTING_CASES)
    def test_no_overflow_when_min_widths_fit(self, name, content_width):
        result = allocate_columns(content_width, SCHEMA_SETS[name])
        assert not result.overflowed
        assert result.visible_width <= content_width + 1e-9

    @pytest.mark.unit
    @pytest.mark.parametrize(("name", "content_width"), SWEEP_CASES)
    def test_floor_and_ceiling(self, name, content_width):
        schemas = SCHEMA_SETS[name]
        result = allocate_columns(content_width, schemas)
        for schema, width in zip(schemas, result.widths):
            if width == 0:
                continue
            if result.overflowed:
                assert width == schema.min_width
            else:
                assert width >= schema.min_width
            if not schema.is_allowed_to_grow_beyond_max_width:
                assert width <= schema.max_width

    @pytest.mark.unit
    def test_fitting_cases_cover_both_sets(self):
        names = {case.values[0] for case in FITTING_CASES}
        assert names == set(SCHEMA_SETS)

    @pytest.mark.unit
    def test_hidden_item_returns_when_space_grows(self, sample_schemas):
        """b (min 100) is omitted when squeezed and back once space allows."""
        index = [s.key for s in sample_schemas].index("b")
        assert resolve_column_widths(200, sample_schemas)[index] == 0
        widths = resolve_column_widths(450, sample_schemas)
        assert widths[index] >= sample_schemas[index].min_width

    @pytest.mark.unit
    def test_greedy_admission_skips_items_that_do_not_fit(self):
        """A later hideable item fits even while an earlier one stays hidden."""
        result = allocate_columns(175, SCHEMA_SETS["mostly_hideable"])
        assert result.widths == [80, 0, 35, 0, 60]
        assert result.hidden_keys == ["status", "updated"]

    @pytest.mark.unit
    def test_all_hideable_items_shown_once_max_widths_fit(self):
        schemas = SCHEMA_SETS["mostly_hideable"]
        total_max = sum(s.max_width for s in schemas)
        for width in SWEEP_WIDTHS:
            if width >= total_max:
                assert allocate_columns(width, schemas).hidden_keys == [], width

    @pytest.mark.unit
    def test_does_not_mutate_input(self, sample_schemas):
        before = [s.model_copy() for s in sample_schemas]
        resolve_column_widths(123, sample_schemas)
        assert sample_schemas == before
