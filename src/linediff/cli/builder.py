#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/linediff/cli/builder.py
"""Argument parser construction and exit codes for the linediff CLI."""

import argparse

from linediff.cli.custom_actions import TrackingStoreAction, TrackingStoreConstAction, TrackingStoreTrueAction
from linediff.constants import (
    COLOR_MODES,
    DEFAULT_COLOR_MODE,
    DEFAULT_CONTEXT_LINES,
    DEFAULT_DIFF_MODE,
    DEFAULT_MAX_LINES,
    DIFF_MODES,
    ENV_CONFIG_VAR,
)
from linediff.exceptions import (
    DependencyError,
    DiffInvariantError,
    FileError,
    RenderingError,
    ValidationError,
)
from linediff.lines import strip_quotes

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7
EXIT_INVARIANT_ERROR = 11


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map

    Returns
    -------
    int
        Exit code for the exception

    """
    if isinstance(exception, DiffInvariantError):
        return EXIT_INVARIANT_ERROR

    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _validate_context_lines(value: str) -> int:
    """Validate context lines is a non-negative integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"context lines must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"context lines must be non-negative, got {ivalue}")

    return ivalue


def _validate_max_lines(value: str) -> int:
    """Validate the line limit is a positive integer."""
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"max lines must be an integer, got '{value}'") from e

    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"max lines must be positive, got {ivalue}")

    return ivalue


def get_version() -> str:
    """Get the version of linediff package."""
    from linediff import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``linediff`` command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="linediff",
        description="Compare two text files line by line (normal or unified diff output)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  linediff old.txt new.txt
  linediff -u old.txt new.txt
  linediff -u -U 1 --color=always old.txt new.txt | less -R
  linediff --marker '#' --skip-empty old.conf new.conf
  linediff -p notes.txt
  linediff -p -m '//' old.c new.c

Exit codes:
  0 success (with or without differences), 1 unexpected error,
  2 missing dependency, 3 invalid arguments, 4 file error,
  7 output error, 11 internal diff error
""",
    )

    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to compare (two), or to print with --print")

    # Output mode
    mode_group = parser.add_argument_group("output mode")
    mode_group.add_argument(
        "--normal",
        dest="mode",
        action=TrackingStoreConstAction,
        const="normal",
        default=DEFAULT_DIFF_MODE,
        choices=DIFF_MODES,
        help="Output a normal diff (default)",
    )
    mode_group.add_argument(
        "-u",
        "--unified",
        dest="mode",
        action=TrackingStoreConstAction,
        const="unified",
        default=DEFAULT_DIFF_MODE,
        choices=DIFF_MODES,
        help="Output a unified diff",
    )
    mode_group.add_argument(
        "-U",
        "--context",
        action=TrackingStoreAction,
        type=_validate_context_lines,
        default=DEFAULT_CONTEXT_LINES,
        metavar="NUM",
        help=f"Lines of unified context (default: {DEFAULT_CONTEXT_LINES})",
    )
    mode_group.add_argument(
        "--file-headers",
        action=TrackingStoreTrueAction,
        help="Write '---'/'+++' file headers before unified hunks",
    )
    mode_group.add_argument(
        "-p",
        "--print",
        dest="print_only",
        action=TrackingStoreTrueAction,
        help="Print the (filtered) file contents instead of diffing; accepts one or two files",
    )

    # Filtering
    filter_group = parser.add_argument_group("filtering")
    filter_group.add_argument(
        "-m",
        "--marker",
        action=TrackingStoreAction,
        type=strip_quotes,
        metavar="PREFIX",
        help="Ignore lines starting with PREFIX after leading whitespace (surrounding quotes are removed)",
    )
    filter_group.add_argument(
        "-s",
        "--skip-empty",
        action=TrackingStoreTrueAction,
        help="Ignore empty and whitespace-only lines",
    )
    filter_group.add_argument(
        "--strip-cr",
        action=TrackingStoreTrueAction,
        help="Strip a trailing carriage return from each line before comparing",
    )
    filter_group.add_argument(
        "--max-lines",
        action=TrackingStoreAction,
        default=DEFAULT_MAX_LINES,
        type=_validate_max_lines,
        metavar="N",
        help="Refuse to diff inputs with more than N lines combined (after filtering)",
    )

    # Presentation
    display_group = parser.add_argument_group("display")
    display_group.add_argument(
        "--color-mode",
        dest="color",
        action=TrackingStoreAction,
        default=DEFAULT_COLOR_MODE,
        choices=COLOR_MODES,
        metavar="WHEN",
        help=f"Colorize output: auto, always or never (default: {DEFAULT_COLOR_MODE}). Also spelled --color=WHEN",
    )
    display_group.add_argument(
        "--color",
        dest="color",
        action=TrackingStoreConstAction,
        const="auto",
        default=DEFAULT_COLOR_MODE,
        choices=COLOR_MODES,
        help="Colorize output when stdout is a terminal (same as --color-mode auto)",
    )
    # Bare --color takes no value so it never swallows a file name; --color=WHEN is matched whole
    for color_mode in COLOR_MODES:
        display_group.add_argument(
            f"--color={color_mode}",
            dest="color",
            action=TrackingStoreConstAction,
            const=color_mode,
            default=DEFAULT_COLOR_MODE,
            choices=COLOR_MODES,
            help=argparse.SUPPRESS,
        )
    display_group.add_argument(
        "--rich",
        action=TrackingStoreTrueAction,
        help="Use rich panels in print mode (requires the 'rich' extra)",
    )

    # Configuration
    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--config",
        help="Path to a configuration file (TOML, YAML or JSON). If not specified, searches for "
        f".linediff.* or a pyproject.toml [tool.linediff] table, then checks ${ENV_CONFIG_VAR}.",
    )
    config_group.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help=f"Disable loading of configuration files, including --config and ${ENV_CONFIG_VAR}",
    )

    # Logging
    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    log_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    log_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with very verbose logging and timestamps",
    )

    parser.add_argument("--version", "-V", action="version", version=f"linediff {get_version()}")

    return parser
