#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/linediff/cli/commands/diff.py
"""File comparison command.

Reads two files, applies the requested pre-filters, computes the edit script
and writes the normal or unified diff to stdout.
"""
import argparse
import logging
import sys
from typing import TextIO

from linediff.cli.builder import EXIT_SUCCESS
from linediff.cli.output import should_use_color
from linediff.constants import NO_DIFFERENCES_MESSAGE
from linediff.diff.api import compare_files
from linediff.diff.renderers import StreamPrinter

logger = logging.getLogger(__name__)


def handle_diff(parsed_args: argparse.Namespace, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """Compare the two files named on the command line.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Validated arguments with exactly two ``files``
    stdout : TextIO, optional
        Stream receiving the diff (defaults to sys.stdout)
    stderr : TextIO, optional
        Stream receiving the "no differences" notice (defaults to sys.stderr)

    Returns
    -------
    int
        Exit code (0 whether or not the files differ)

    Raises
    ------
    LineDiffError
        Propagated to ``main`` which maps it to an exit code

    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    old_path, new_path = parsed_args.files

    result = compare_files(
        old_path,
        new_path,
        context_lines=parsed_args.context,
        marker=parsed_args.marker,
        skip_empty=parsed_args.skip_empty,
        strip_cr=parsed_args.strip_cr,
        max_lines=parsed_args.max_lines,
    )

    # Finish the search before the first byte is written
    script = result.script
    logger.debug(f"Edit script has {len(script)} operations")

    printer = StreamPrinter(stdout, use_color=should_use_color(parsed_args.color, stdout))
    stats = result.render(printer, mode=parsed_args.mode, file_headers=parsed_args.file_headers)

    if not stats.has_changes:
        print(NO_DIFFERENCES_MESSAGE, file=stderr)
    else:
        logger.info(f"{stats.hunks} hunk(s): +{stats.insertions} -{stats.deletions}")

    return EXIT_SUCCESS
