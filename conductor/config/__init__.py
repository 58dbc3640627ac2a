"""Centralized configuration management for responsive-conductor.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from conductor.config import EnvVar, get_environment
    >>>
    >>> level = get_environment(EnvVar.CONDUCTOR_LOG_LEVEL)  # Returns str: "INFO"
    >>> validate = get_environment(EnvVar.CONDUCTOR_VALIDATE, override=True)

Environment Variable Categories:
    resolver: Defaults the CLI hands to the width resolver
    logging: Log output configuration
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Introspection
    "list_environment_variables",
]
