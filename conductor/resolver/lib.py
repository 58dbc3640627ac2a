"""Column width resolver.

Distributes a container's content width among an ordered set of items.
This is a greedy, multi-pass algorithm:

1. Items that may not hide start at their max width and, if the row
   overflows, are shrunk towards their min width starting with the highest
   shrink priority.
2. Hideable items are admitted in ascending priority order while slack
   remains for their min width.
3. If the min widths of the visible items still do not fit, every visible
   item is pinned to its min width (floor-overflow fallback).
4. Otherwise either the slack beyond all max widths is split equally among
   growable items, or the space above the min widths is handed out
   first-come in priority order.

The resolver is pure: it holds no state between calls and never raises for
overflow. Validation is opt-in per call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from conductor.core import get_logger
from conductor.schema import ColumnSchema
from conductor.validation import check_schemas

logger = get_logger(__name__)


@dataclass
class ColumnAllocation:
    """Result of one allocation call.

    Attributes:
        widths: One width per input schema, in input order. 0 means omitted.
        hidden_keys: Keys of hideable items that were not admitted.
        overflowed: True when min widths alone exceeded the content width
            and every visible item was pinned to its min width.
    """

    widths: list[float] = field(default_factory=list)
    hidden_keys: list[str] = field(default_factory=list)
    overflowed: bool = False

    @property
    def visible_width(self) -> float:
        """Total width taken by the visible items."""
        return sum(self.widths)


def allocate_columns(
    content_width: float,
    schemas: Sequence[ColumnSchema],
    *,
    validate: bool = False,
) -> ColumnAllocation:
    """Allocate content width among schemas.

    Args:
        content_width: Available width to distribute.
        schemas: Item schemas in display order.
        validate: Run `check_schemas` before allocating.

    Returns:
        ColumnAllocation with one width per schema in input order.

    Raises:
        SchemaConfigurationError: If validate is set and the schema set is
            misconfigured.

    Example:
        >>> result = allocate_columns(600, schemas)
        >>> result.widths
        [100.0, 200.0, 300.0]
    """
    if not schemas:
        return ColumnAllocation()

    if validate:
        check_schemas(content_width, schemas)

    visible = sorted(
        (s for s in schemas if not s.is_allowed_to_hide),
        key=lambda s: s.shrink_priority,
    )
    hideable = sorted(
        (s for s in schemas if s.is_allowed_to_hide),
        key=lambda s: s.shrink_priority,
    )
    logger.debug(
        f"Allocating {content_width:g} across {len(visible)} fixed "
        f"and {len(hideable)} hideable items"
    )

    # Parallel to `visible`; admitted hideable items are appended to both.
    widths = [s.max_width for s in visible]
    remaining = content_width - sum(widths)

    if remaining < 0:
        _shrink_from_end(visible, widths, -remaining)
        remaining = content_width - sum(widths)

    if remaining > 0:
        for schema in hideable:
            if remaining >= schema.min_width:
                width = min(schema.max_width, remaining)
                visible.append(schema)
                widths.append(width)
                remaining -= width

    sum_min = sum(s.min_width for s in visible)
    if sum_min > content_width:
        logger.debug(
            f"Min widths ({sum_min:g}) exceed content width "
            f"({content_width:g}), pinning visible items to min width"
        )
        widths = [s.min_width for s in visible]
        return _reassemble(schemas, visible, widths, overflowed=True)

    sum_max = sum(s.max_width for s in visible)
    if content_width >= sum_max:
        widths = _grow_into_slack(visible, content_width - sum_max)
    else:
        widths = _fill_from_min(visible, content_width - sum_min)

    return _reassemble(schemas, visible, widths)


def resolve_column_widths(
    content_width: float,
    schemas: Sequence[ColumnSchema],
    *,
    validate: bool = False,
) -> list[float]:
    """Return one width per schema in input order, 0 for omitted items.

    See `allocate_columns` for arguments and errors.
    """
    return allocate_columns(content_width, schemas, validate=validate).widths


def _shrink_from_end(
    schemas: Sequence[ColumnSchema], widths: list[float], deficit: float
) -> None:
    """Shrink widths in place, last schema first, never below min width."""
    for i in range(len(schemas) - 1, -1, -1):
        if deficit <= 0:
            break
        reduce_by = min(deficit, widths[i] - schemas[i].min_width)
        if reduce_by <= 0:
            continue
        widths[i] -= reduce_by
        deficit -= reduce_by


def _grow_into_slack(schemas: Sequence[ColumnSchema], extra: float) -> list[float]:
    """Give every item its max width and split extra among growable items.

    The split is equal regardless of each item's max width. With no
    growable items the extra space stays unallocated.
    """
    growable = sum(1 for s in schemas if s.is_allowed_to_grow_beyond_max_width)
    share = extra / growable if growable else 0
    logger.debug(f"Slack of {extra:g} split across {growable} growable items")
    return [
        s.max_width + share if s.is_allowed_to_grow_beyond_max_width else s.max_width
        for s in schemas
    ]


def _fill_from_min(schemas: Sequence[ColumnSchema], budget: float) -> list[float]:
    """Start every item at min width and hand out budget first-come.

    Items earlier in processing order claim up to their full max width
    before later items receive anything.
    """
    logger.debug(f"Distributing {budget:g} above min widths first-come")
    widths = [s.min_width for s in schemas]
    for i, schema in enumerate(schemas):
        if budget <= 0:
            break
        if schema.flexibility > 0:
            extra = min(schema.flexibility, budget)
            widths[i] += extra
            budget -= extra
    return widths


def _reassemble(
    schemas: Sequence[ColumnSchema],
    visible: Sequence[ColumnSchema],
    widths: Sequence[float],
    overflowed: bool = False,
) -> ColumnAllocation:
    """Map processing-order widths back onto the input order by key."""
    width_by_key = {schema.key: width for schema, width in zip(visible, widths)}
    return ColumnAllocation(
        widths=[width_by_key.get(schema.key, 0) for schema in schemas],
        hidden_keys=[s.key for s in schemas if s.key not in width_by_key],
        overflowed=overflowed,
    )


__all__ = ["ColumnAllocation", "allocate_columns", "resolve_column_widths"]
