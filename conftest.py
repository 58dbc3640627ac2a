"""Root pytest configuration and fixtures.

This module provides:
- Shared schema fixtures for resolver, validation and CLI tests
- A schema file fixture for commands that read from disk
"""

from __future__ import annotations

from pathlib import Path

import pytest

from conductor.schema import ColumnSchema, dump_schemas

# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def sample_schemas() -> list[ColumnSchema]:
    """Create a toolbar-style schema set exercising hide and grow.

    Returns:
        Four schemas: a fixed item, a hideable item, a growable item and a
        low-priority fixed item.
    """
    return [
        ColumnSchema(key="a", min_width=50, max_width=100, shrink_priority=1),
        ColumnSchema(
            key="b",
            min_width=100,
            max_width=200,
            shrink_priority=2,
            is_allowed_to_hide=True,
        ),
        ColumnSchema(
            key="c",
            min_width=50,
            max_width=150,
            shrink_priority=3,
            is_allowed_to_grow_beyond_max_width=True,
        ),
        ColumnSchema(key="d", min_width=50, max_width=100, shrink_priority=4),
    ]


@pytest.fixture
def schema_file(tmp_path: Path, sample_schemas: list[ColumnSchema]) -> Path:
    """Write the sample schemas to a camelCase JSON file.

    Returns:
        Path to the JSON file.
    """
    path = tmp_path / "schemas.json"
    path.write_text(dump_schemas(sample_schemas))
    return path
