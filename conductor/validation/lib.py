"""Schema set validation.

This module checks the structural invariants a schema set must satisfy
before width allocation, reporting configuration mistakes instead of
letting them surface as odd layouts. It never corrects or clamps input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from conductor.schema import ColumnSchema


class ErrorType(str, Enum):
    """Kinds of schema configuration errors."""

    NON_CONSECUTIVE_PRIORITY = "non_consecutive_priority"
    DUPLICATE_PRIORITY = "duplicate_priority"
    MIN_WIDTH_OVERFLOW = "min_width_overflow"
    MIN_EXCEEDS_MAX = "min_exceeds_max"
    DUPLICATE_KEY = "duplicate_key"


@dataclass
class ValidationError:
    """Represents a validation error in a schema set.

    Attributes:
        key: Key of the offending schema, or None for set-wide errors.
        message: Human-readable error description.
        error_type: Category of the error.
    """

    key: str | None
    message: str
    error_type: ErrorType


class SchemaConfigurationError(ValueError):
    """Raised when a schema set violates a structural invariant."""

    def __init__(self, issue: ValidationError):
        super().__init__(f"[ResponsiveConductor] {issue.message}")
        self.issue = issue

    @property
    def error_type(self) -> ErrorType:
        return self.issue.error_type


class NonConsecutivePriorityError(SchemaConfigurationError):
    """Shrink priorities leave a gap."""


class DuplicatePriorityError(SchemaConfigurationError):
    """Two schemas share a shrink priority."""


class MinWidthOverflowError(SchemaConfigurationError):
    """Minimum widths alone exceed the content width."""


class MinExceedsMaxError(SchemaConfigurationError):
    """A schema's min width is larger than its max width."""


class DuplicateKeyError(SchemaConfigurationError):
    """Two schemas share a key."""


_ERROR_CLASSES: dict[ErrorType, type[SchemaConfigurationError]] = {
    ErrorType.NON_CONSECUTIVE_PRIORITY: NonConsecutivePriorityError,
    ErrorType.DUPLICATE_PRIORITY: DuplicatePriorityError,
    ErrorType.MIN_WIDTH_OVERFLOW: MinWidthOverflowError,
    ErrorType.MIN_EXCEEDS_MAX: MinExceedsMaxError,
    ErrorType.DUPLICATE_KEY: DuplicateKeyError,
}


def validate_schemas(
    content_width: float, schemas: Sequence[ColumnSchema]
) -> list[ValidationError]:
    """Validate a schema set for structural issues.

    Performs the following checks, in order:
        - Shrink priorities form a consecutive run (no gaps, no duplicates)
        - Sum of min widths fits in the content width
        - min_width <= max_width for every schema
        - Unique key enforcement

    Args:
        content_width: Width available to the schema set.
        schemas: Schemas to check.

    Returns:
        list[ValidationError]: Every issue found (empty if valid).

    Example:
        >>> for issue in validate_schemas(800, schemas):
        ...     print(f"{issue.error_type.value}: {issue.message}")
    """
    errors: list[ValidationError] = []
    errors.extend(_check_priorities(schemas))

    total_min = sum(schema.min_width for schema in schemas)
    if total_min > content_width:
        errors.append(
            ValidationError(
                key=None,
                message=(
                    f"Sum of minWidths ({total_min:g}) is larger than the "
                    f"content width ({content_width:g}), overflow expected"
                ),
                error_type=ErrorType.MIN_WIDTH_OVERFLOW,
            )
        )

    for schema in schemas:
        if schema.min_width > schema.max_width:
            errors.append(
                ValidationError(
                    key=schema.key,
                    message=(
                        f"Schema '{schema.key}' has minWidth {schema.min_width:g} "
                        f"larger than maxWidth {schema.max_width:g}"
                    ),
                    error_type=ErrorType.MIN_EXCEEDS_MAX,
                )
            )

    key_counts: dict[str, int] = {}
    for schema in schemas:
        key_counts[schema.key] = key_counts.get(schema.key, 0) + 1
    for key, count in key_counts.items():
        if count > 1:
            errors.append(
                ValidationError(
                    key=key,
                    message=f"Duplicate key '{key}' appears {count} times",
                    error_type=ErrorType.DUPLICATE_KEY,
                )
            )

    return errors


def is_valid(content_width: float, schemas: Sequence[ColumnSchema]) -> bool:
    """Check if a schema set is valid.

    Convenience function that returns True if no validation errors exist.
    """
    return not validate_schemas(content_width, schemas)


def check_schemas(content_width: float, schemas: Sequence[ColumnSchema]) -> None:
    """Raise for the first invariant a schema set violates.

    Args:
        content_width: Width available to the schema set.
        schemas: Schemas to check.

    Raises:
        SchemaConfigurationError: The subclass matching the first issue found.
    """
    errors = validate_schemas(content_width, schemas)
    if errors:
        issue = errors[0]
        raise _ERROR_CLASSES[issue.error_type](issue)


def _check_priorities(schemas: Sequence[ColumnSchema]) -> list[ValidationError]:
    """Check that sorted shrink priorities step by exactly one.

    Args:
        schemas: Schemas to check.

    Returns:
        list[ValidationError]: Duplicate and gap errors found.
    """
    errors: list[ValidationError] = []
    by_priority = sorted(schemas, key=lambda s: s.shrink_priority)

    for prev, cur in zip(by_priority, by_priority[1:]):
        if cur.shrink_priority == prev.shrink_priority:
            errors.append(
                ValidationError(
                    key=cur.key,
                    message=(
                        f"shrinkPriority {cur.shrink_priority} is shared by "
                        f"'{prev.key}' and '{cur.key}'"
                    ),
                    error_type=ErrorType.DUPLICATE_PRIORITY,
                )
            )
        elif cur.shrink_priority != prev.shrink_priority + 1:
            errors.append(
                ValidationError(
                    key=cur.key,
                    message=(
                        f"shrinkPriorities must be consecutive, got "
                        f"{prev.shrink_priority} followed by {cur.shrink_priority}"
                    ),
                    error_type=ErrorType.NON_CONSECUTIVE_PRIORITY,
                )
            )

    return errors
