"""CLI entry point for responsive-conductor.

Resolves column widths for a JSON schema file from the command line, which
is handy for checking how a row behaves while its container resizes.
"""

from __future__ import annotations

import argparse
import json
import math
import sys
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv
from pydantic import ValidationError as SchemaTypeError

from conductor.config import (
    EnvVar,
    get_environment,
    get_environment_info,
    list_environment_variables,
)
from conductor.core import get_logger, setup_logging
from conductor.resolver import ColumnAllocation, allocate_columns
from conductor.schema import ColumnSchema, export_json_schema, load_schemas_file
from conductor.validation import SchemaConfigurationError, validate_schemas

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


# =============================================================================
# Helpers
# =============================================================================


def _format_width(width: float) -> int | float:
    """Render integral widths without a trailing .0."""
    return int(width) if float(width).is_integer() else round(width, 3)


def _load(path: Path) -> list[ColumnSchema] | None:
    """Load a schema file, logging instead of raising on bad input."""
    try:
        return load_schemas_file(path)
    except OSError as e:
        logger.error(f"Cannot read schema file {path}: {e}")
    except SchemaTypeError as e:
        logger.error(f"Invalid schema file {path}:\n{e}")
    return None


def _check_width(name: str, value: float) -> bool:
    """Log and reject content widths that are negative or not finite."""
    if math.isfinite(value) and value >= 0:
        return True
    logger.error(f"{name} must be a finite, non-negative width, got: {value}")
    return False


def _render_table(schemas: Sequence[ColumnSchema], result: ColumnAllocation) -> str:
    key_width = max((len(s.key) for s in schemas), default=0)
    lines = []
    for schema, width in zip(schemas, result.widths):
        shown = "hidden" if width == 0 and schema.is_allowed_to_hide else _format_width(width)
        lines.append(f"{schema.key:<{key_width}}  {shown}")
    if result.overflowed:
        lines.append("(overflow: min widths exceed the content width)")
    return "\n".join(lines)


# =============================================================================
# Commands
# =============================================================================


def cmd_resolve(args: argparse.Namespace) -> int:
    """Handle the resolve command."""
    schemas = _load(args.schemas)
    if schemas is None:
        return 1
    if not _check_width("--width", args.width):
        return 1

    validate = get_environment(EnvVar.CONDUCTOR_VALIDATE, override=args.validate)
    try:
        result = allocate_columns(args.width, schemas, validate=validate)
    except SchemaConfigurationError as e:
        logger.error(str(e))
        return 1

    if args.format == "table":
        print(_render_table(schemas, result))
    else:
        print(json.dumps([_format_width(w) for w in result.widths]))
    return 0


def cmd_sweep(args: argparse.Namespace) -> int:
    """Handle the sweep command."""
    schemas = _load(args.schemas)
    if schemas is None:
        return 1

    if not (_check_width("--start", args.start) and _check_width("--stop", args.stop)):
        return 1

    step = get_environment(EnvVar.CONDUCTOR_SWEEP_STEP, override=args.step)
    if not math.isfinite(step) or step <= 0:
        logger.error(f"Step must be positive, got: {step}")
        return 1
    if args.stop < args.start:
        logger.error(f"Stop ({args.stop:g}) is below start ({args.start:g})")
        return 1

    columns = ["width"] + [s.key for s in schemas]
    cell = max(8, *(len(c) for c in columns))
    print("".join(f"{c:>{cell}}" for c in columns))

    # Each width is start + i * step, with stop inclusive.
    count = int((args.stop - args.start) / step + 1e-9) + 1
    for i in range(count):
        width = args.start + i * step
        result = allocate_columns(width, schemas)
        cells = [_format_width(width)] + [
            _format_width(w) if w else "-" for w in result.widths
        ]
        row = "".join(f"{str(c):>{cell}}" for c in cells)
        print(row + ("  *" if result.overflowed else ""))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    schemas = _load(args.schemas)
    if schemas is None:
        return 1
    if not _check_width("--width", args.width):
        return 1

    errors = validate_schemas(args.width, schemas)
    if not errors:
        print(f"OK: {len(schemas)} schemas valid at width {args.width:g}")
        return 0

    for error in errors:
        where = f" [{error.key}]" if error.key else ""
        print(f"{error.error_type.value}{where}: {error.message}")
    return 1


def cmd_schema(_args: argparse.Namespace) -> int:
    """Handle the schema command."""
    print(json.dumps(export_json_schema(), indent=2))
    return 0


def cmd_env(args: argparse.Namespace) -> int:
    """Handle the env command."""
    for var in list_environment_variables(args.category):
        info = get_environment_info(var)
        value = get_environment(var)
        print(f"{info.name}={value!s}  # {info.description} (default: {info.default!s})")
    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="conductor",
        description="Resolve responsive column widths from schema files",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # resolve command
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve widths for one content width",
    )
    resolve_parser.add_argument(
        "schemas",
        type=Path,
        help="JSON file holding an array of column schemas",
    )
    resolve_parser.add_argument(
        "--width",
        "-w",
        type=float,
        required=True,
        help="Content width to distribute",
    )
    resolve_parser.add_argument(
        "--validate",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Validate schemas first (default: CONDUCTOR_VALIDATE)",
    )
    resolve_parser.add_argument(
        "--format",
        "-f",
        type=str,
        default="json",
        choices=["json", "table"],
        help="Output format (default: json)",
    )
    resolve_parser.set_defaults(func=cmd_resolve)

    # sweep command
    sweep_parser = subparsers.add_parser(
        "sweep",
        help="Resolve widths across a range of content widths",
    )
    sweep_parser.add_argument(
        "schemas",
        type=Path,
        help="JSON file holding an array of column schemas",
    )
    sweep_parser.add_argument(
        "--start",
        type=float,
        default=0,
        help="First content width (default: 0)",
    )
    sweep_parser.add_argument(
        "--stop",
        type=float,
        required=True,
        help="Last content width (inclusive)",
    )
    sweep_parser.add_argument(
        "--step",
        type=float,
        default=None,
        help="Width increment (default: CONDUCTOR_SWEEP_STEP)",
    )
    sweep_parser.set_defaults(func=cmd_sweep)

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Report every configuration issue in a schema file",
    )
    validate_parser.add_argument(
        "schemas",
        type=Path,
        help="JSON file holding an array of column schemas",
    )
    validate_parser.add_argument(
        "--width",
        "-w",
        type=float,
        required=True,
        help="Content width the schemas must fit",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # schema command
    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the JSON Schema for schema files",
    )
    schema_parser.set_defaults(func=cmd_schema)

    # env command
    env_parser = subparsers.add_parser(
        "env",
        help="List configuration variables and their values",
    )
    env_parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        help="Only show variables in this category",
    )
    env_parser.set_defaults(func=cmd_env)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(level=get_environment(EnvVar.CONDUCTOR_LOG_LEVEL))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
