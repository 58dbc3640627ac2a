"""Column schema definitions for width allocation.

A `ColumnSchema` is the declarative width-and-priority policy for one item
in a responsive row. Schemas are plain data: the resolver reads them, never
mutates them, and the validator reports on them without correcting them.

Field names are snake_case in Python. The camelCase spellings used by UI
configuration (``minWidth``, ``shrinkPriority``, ...) are accepted as
aliases, so schema lists can be loaded straight from JSON written for the
front end.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, Field, TypeAdapter


class ColumnSchema(BaseModel):
    """Sizing policy for a single item.

    ``min_width <= max_width`` is not enforced here.
    Misconfigured schemas stay constructible so that
    `conductor.validation` can report them.
    """

    key: str = Field(
        ...,
        description="Unique identifier for the item within one allocation",
        examples=["title", "status", "actions"],
    )
    min_width: float = Field(
        ...,
        ge=0,
        alias="minWidth",
        description="Floor below which the item holds this width or is omitted",
    )
    max_width: float = Field(
        ...,
        ge=0,
        alias="maxWidth",
        description="Preferred width; exceeded only by growable items",
    )
    shrink_priority: int = Field(
        ...,
        alias="shrinkPriority",
        description="Order of shrink/hide eligibility; higher values give up space first",
    )
    is_allowed_to_hide: bool = Field(
        default=False,
        alias="isAllowedToHide",
        description="Item may be omitted (width 0) when space is insufficient",
    )
    is_allowed_to_grow_beyond_max_width: bool = Field(
        default=False,
        alias="isAllowedToGrowBeyondMaxWidth",
        description="Item may take a share of slack beyond its max width",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def flexibility(self) -> float:
        """Width the item can give up between its max and min widths."""
        return self.max_width - self.min_width


_SCHEMA_LIST = TypeAdapter(list[ColumnSchema])


def load_schemas(data: Iterable[ColumnSchema | dict[str, Any]]) -> list[ColumnSchema]:
    """Build schemas from models or raw dictionaries.

    Args:
        data: Schema models or dicts using either field names or aliases.

    Returns:
        List of ColumnSchema in input order.

    Raises:
        pydantic.ValidationError: If an entry has missing or mistyped fields.
    """
    return _SCHEMA_LIST.validate_python(list(data))


def load_schemas_file(path: Path | str) -> list[ColumnSchema]:
    """Load a JSON array of schema objects from disk.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the content is not a valid schema list.
    """
    return _SCHEMA_LIST.validate_json(Path(path).read_bytes())


def dump_schemas(schemas: Iterable[ColumnSchema], by_alias: bool = True) -> str:
    """Serialize schemas to a JSON array string."""
    return json.dumps(
        [schema.model_dump(by_alias=by_alias) for schema in schemas], indent=2
    )


def export_json_schema() -> dict[str, Any]:
    """Export the JSON Schema for a list of column schemas.

    Returns:
        JSON Schema dict using the camelCase aliases.
    """
    return _SCHEMA_LIST.json_schema(by_alias=True)


__all__ = [
    "ColumnSchema",
    "load_schemas",
    "load_schemas_file",
    "dump_schemas",
    "export_json_schema",
]
