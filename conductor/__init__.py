"""responsive-conductor: column width allocation for responsive rows."""

from conductor.resolver import ColumnAllocation, allocate_columns, resolve_column_widths
from conductor.schema import ColumnSchema, export_json_schema, load_schemas
from conductor.validation import (
    SchemaConfigurationError,
    ValidationError,
    check_schemas,
    is_valid,
    validate_schemas,
)

__all__ = [
    # Schema
    "ColumnSchema",
    "load_schemas",
    "export_json_schema",
    # Resolver
    "ColumnAllocation",
    "allocate_columns",
    "resolve_column_widths",
    # Validation
    "validate_schemas",
    "check_schemas",
    "is_valid",
    "ValidationError",
    "SchemaConfigurationError",
]
