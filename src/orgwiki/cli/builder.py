#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction for the orgwiki CLI.

Option flags are generated from the :class:`WikiRendererOptions` dataclass
fields and their metadata (``help``, ``choices``, ``cli_name``). Generated
flags default to ``argparse.SUPPRESS`` so that only options given on the
command line override the configuration file.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, Field, fields
from typing import Any, Dict

from orgwiki.exceptions import FileError, ParsingError, RenderingError, ValidationError
from orgwiki.options.wiki import WikiRendererOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def parse_section_numbers(value: str) -> bool | int:
    """Parse ``true``, ``false`` or a depth for ``--section-numbers``."""
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1", "on"):
        return True
    if lowered in ("false", "no", "0", "off"):
        return False
    try:
        return int(lowered)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected true, false or a level, got {value!r}") from None


def snake_to_kebab(name: str) -> str:
    """Convert snake_case to kebab-case."""
    return name.replace("_", "-")


def _argument_for_field(field: Field) -> tuple[str, Dict[str, Any]]:
    """Return the flag and argparse keyword arguments for an options field."""
    metadata = field.metadata
    cli_name = metadata.get("cli_name") or snake_to_kebab(field.name)
    kwargs: Dict[str, Any] = {
        "dest": field.name,
        "default": argparse.SUPPRESS,
        "help": metadata.get("help"),
    }

    default = field.default if field.default is not MISSING else None
    if isinstance(default, bool) and field.name != "section_numbers":
        if default:
            if not cli_name.startswith("no-"):
                cli_name = f"no-{cli_name}"
            kwargs["action"] = "store_false"
        else:
            kwargs["action"] = "store_true"
    elif field.name == "section_numbers":
        kwargs["type"] = parse_section_numbers
        kwargs["metavar"] = "BOOL|LEVEL"
    else:
        if "choices" in metadata:
            kwargs["choices"] = metadata["choices"]
        kwargs["metavar"] = None if "choices" in metadata else field.name.upper()

    return f"--{cli_name}", kwargs


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``orgwiki`` command.

    Returns
    -------
    argparse.ArgumentParser
        Parser with the input, output, configuration and logging arguments
        plus one flag per rendering option

    """
    parser = argparse.ArgumentParser(
        prog="orgwiki",
        description="Export an Org document tree (JSON) to wiki markup.",
    )
    parser.add_argument("input", help="Path of the JSON document tree")
    parser.add_argument("-o", "--out", dest="output", help="Output file (default: standard output)")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument(
        "--id-locations",
        help="JSON file mapping ids of other documents to the files holding them",
    )

    options_group = parser.add_argument_group("rendering options")
    for field in fields(WikiRendererOptions):
        flag, kwargs = _argument_for_field(field)
        options_group.add_argument(flag, **kwargs)

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    return parser


def collect_option_overrides(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Return the rendering options given explicitly on the command line."""
    names = {field.name for field in fields(WikiRendererOptions)}
    return {name: value for name, value in vars(parsed_args).items() if name in names}
