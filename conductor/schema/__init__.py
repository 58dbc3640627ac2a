"""Schema module - column sizing policies consumed by the resolver.

Example usage:
    >>> from conductor.schema import load_schemas
    >>> schemas = load_schemas([
    ...     {"key": "name", "minWidth": 50, "maxWidth": 100, "shrinkPriority": 1},
    ... ])
"""

from .lib import (
    ColumnSchema,
    dump_schemas,
    export_json_schema,
    load_schemas,
    load_schemas_file,
)

__all__ = [
    # Models
    "ColumnSchema",
    # Loading
    "load_schemas",
    "load_schemas_file",
    "dump_schemas",
    # Schema generation
    "export_json_schema",
]
