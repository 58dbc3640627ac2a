"""Centralized environment configuration management for responsive-conductor.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Only the CLI reads configuration. Library calls such as
`allocate_columns()` take every setting as an explicit argument.

Example:
    >>> from conductor.config import EnvVar, get_environment
    >>>
    >>> validate = get_environment(EnvVar.CONDUCTOR_VALIDATE)  # Returns bool
    >>> step = get_environment(EnvVar.CONDUCTOR_SWEEP_STEP, override=25)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "CONDUCTOR_VALIDATE").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by responsive-conductor.

    Categories:
        - resolver: Defaults the CLI passes to the resolver
        - logging: Log output configuration
    """

    # -------------------------------------------------------------------------
    # Resolver Defaults
    # -------------------------------------------------------------------------
    CONDUCTOR_VALIDATE = EnvConfig(
        name="CONDUCTOR_VALIDATE",
        default=False,
        var_type=bool,
        description="Validate schemas before resolving widths",
        category="resolver",
    )
    CONDUCTOR_SWEEP_STEP = EnvConfig(
        name="CONDUCTOR_SWEEP_STEP",
        default=50,
        var_type=int,
        description="Default width increment for the sweep command",
        category="resolver",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    CONDUCTOR_LOG_LEVEL = EnvConfig(
        name="CONDUCTOR_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ...)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    if var_type is Path:
        return Path(value)

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int, bool, or Path).

    Example:
        >>> get_environment(EnvVar.CONDUCTOR_SWEEP_STEP)
        50
        >>> get_environment(EnvVar.CONDUCTOR_SWEEP_STEP, override=10)
        10
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable."""
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (resolver, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_environment_info",
    "list_environment_variables",
]
