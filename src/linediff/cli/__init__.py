#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/linediff/cli/__init__.py
"""Command-line interface for linediff.

This module provides a simple CLI for comparing two text files with the
Myers O(ND) algorithm and writing normal or unified diff output.

Example:
-------
Basic usage:
    $ linediff old.txt new.txt
    $ linediff -u --color=always old.txt new.txt
    $ linediff -p -m '#' config.ini

"""

import argparse
import logging
import os
import sys
from typing import TextIO

from linediff.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from linediff.cli.commands import handle_diff, handle_print
from linediff.cli.config import apply_config_to_args, load_config_with_priority
from linediff.cli.validation import validate_arguments
from linediff.constants import ENV_CONFIG_VAR
from linediff.exceptions import LineDiffError
from linediff.lines import INPUT_ENCODING, INPUT_ERRORS
from linediff.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> int | None:
    """Apply configuration file values to ``parsed_args``.

    Returns
    -------
    int or None
        Exit code if the configuration could not be loaded, None on success

    """
    if parsed_args.no_config:
        return None

    try:
        config = load_config_with_priority(
            explicit_path=parsed_args.config,
            env_var_path=os.environ.get(ENV_CONFIG_VAR),
        )
        apply_config_to_args(parsed_args, config)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    return None


def _allow_raw_bytes(stream: TextIO) -> None:
    """Write through ``stream`` with the codec used to read the inputs.

    Input bytes are decoded as UTF-8 with ``surrogateescape``; encoding the
    output the same way reproduces them exactly, whatever the locale.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if callable(reconfigure):
        reconfigure(encoding=INPUT_ENCODING, errors=INPUT_ERRORS)


def main(args: list[str] | None = None) -> int:
    """Execute the linediff command line.

    Parameters
    ----------
    args : list of str, optional
        Arguments without the program name (defaults to sys.argv[1:])

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        # --help and --version exit 0; argparse usage errors become validation errors
        if e.code in (0, None):
            return EXIT_SUCCESS
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    config_error = _load_config(parsed_args)
    if config_error is not None:
        return config_error

    if not validate_arguments(parsed_args, logger=logger):
        parser.print_usage(sys.stderr)
        return EXIT_VALIDATION_ERROR

    _allow_raw_bytes(sys.stdout)

    try:
        if parsed_args.print_only:
            return handle_print(parsed_args)
        return handle_diff(parsed_args)
    except LineDiffError as e:
        if parsed_args.trace:
            logger.exception("linediff failed")
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        if parsed_args.trace:
            logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
