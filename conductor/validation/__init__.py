"""Schema set validation utilities."""

from conductor.validation.lib import (
    DuplicateKeyError,
    DuplicatePriorityError,
    ErrorType,
    MinExceedsMaxError,
    MinWidthOverflowError,
    NonConsecutivePriorityError,
    SchemaConfigurationError,
    ValidationError,
    check_schemas,
    is_valid,
    validate_schemas,
)

__all__ = [
    # Records
    "ErrorType",
    "ValidationError",
    # Exceptions
    "SchemaConfigurationError",
    "NonConsecutivePriorityError",
    "DuplicatePriorityError",
    "MinWidthOverflowError",
    "MinExceedsMaxError",
    "DuplicateKeyError",
    # Checks
    "validate_schemas",
    "is_valid",
    "check_schemas",
]
