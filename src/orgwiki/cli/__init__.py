"""Command-line interface for the orgwiki exporter.

This module provides the ``orgwiki`` command, which reads an Org document
tree serialized as JSON and writes it as wiki markup.

Configuration
-------------
Options are read, lowest priority first, from a discovered configuration
file (``.orgwiki.toml``, ``.orgwiki.yaml``, ``.orgwiki.json`` or
``[tool.orgwiki]`` in ``pyproject.toml``), the file named by the
``ORGWIKI_CONFIG`` environment variable or ``--config``, and finally the
command-line flags.

Examples
--------
Export to standard output::

    $ orgwiki notes.json

Creole dialect, written in Latin-1::

    $ orgwiki notes.json --style creole --output-coding latin-1 -o notes.txt

"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from orgwiki.api import WikiExporter, load_document
from orgwiki.cli.builder import (
    EXIT_SUCCESS,
    collect_option_overrides,
    create_parser,
    get_exit_code_for_exception,
)
from orgwiki.cli.config import CONFIG_ENV_VAR, load_config_with_priority, options_from_config
from orgwiki.exceptions import FileError, OrgWikiError, ValidationError
from orgwiki.logging_utils import configure_logging
from orgwiki.options.wiki import WikiRendererOptions

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_id_locations(path: Optional[str]) -> dict[str, str]:
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FileError(f"Could not read id locations: {path}", file_path=path, original_error=e) from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in id locations file {path}: {e}", original_error=e) from e
    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        raise ValidationError(f"Id locations file {path} must map ids to file paths")
    return {str(k): v for k, v in data.items()}


def setup_options(parsed_args: argparse.Namespace) -> WikiRendererOptions:
    """Combine configuration file values and command-line flags.

    Raises
    ------
    ValidationError
        If the configuration or a flag holds an invalid value
    FileError
        If a named configuration file cannot be read

    """
    config: dict = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(
            explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR)
        )
    options = options_from_config(config)
    overrides = collect_option_overrides(parsed_args)
    if overrides:
        options = options_from_config(overrides, base=options)
    return options


def main(args: list[str] | None = None) -> int:
    """Run the ``orgwiki`` command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = setup_options(parsed_args)
    except OrgWikiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    try:
        # Unknown node kinds in the input follow the same policy as the exporter
        document = load_document(Path(parsed_args.input), strict_mode=options.unknown_node_policy == "raise")
        exporter = WikiExporter(options, id_locations=_load_id_locations(parsed_args.id_locations))
        if parsed_args.output:
            exporter.export_to_file(document, parsed_args.output)
            logger.info("Wrote %s", parsed_args.output)
        else:
            exporter.export_to_file(document, getattr(sys.stdout, "buffer", sys.stdout))
            sys.stdout.flush()
    except OrgWikiError as e:
        logger.debug("Export failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
