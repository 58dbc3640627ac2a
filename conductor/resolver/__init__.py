"""Column width resolver."""

from conductor.resolver.lib import (
    ColumnAllocation,
    allocate_columns,
    resolve_column_widths,
)

__all__ = [
    "ColumnAllocation",
    "allocate_columns",
    "resolve_column_widths",
]
