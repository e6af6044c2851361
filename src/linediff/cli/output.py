"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/linediff/cli/output.py
import argparse
import sys
from typing import TextIO

from linediff.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(callable(isatty) and isatty())


def should_use_color(color_mode: str, stream: TextIO | None = None) -> bool:
    """Decide whether ANSI colors are written.

    Parameters
    ----------
    color_mode : {'auto', 'always', 'never'}
        Requested mode; ``auto`` colors only when the stream is a terminal
    stream : TextIO, optional
        Uses sys.stdout unless otherwise specified.

    """
    if color_mode == "always":
        return True
    if color_mode == "never":
        return False
    return _is_terminal(stream or sys.stdout)


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: TextIO | None = None
) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set
    - AND stdout is a TTY, unless --color=always forces it
    - AND Rich library is available

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                feature_name="rich-output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install linediff[rich]",
            )
        return False

    color = getattr(args, "color", "auto")
    if color == "never":
        return False
    if color == "always":
        return True
    return _is_terminal(stream or sys.stdout)
