#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/linediff/cli/commands/print_files.py
"""Print mode: show the (filtered) input files instead of diffing them."""
import argparse
import logging
import sys
from typing import Sequence, TextIO

from linediff.cli.builder import EXIT_SUCCESS
from linediff.cli.output import should_use_color, should_use_rich_output
from linediff.diff.renderers import Printer, StreamPrinter, StyleClass
from linediff.lines import filter_lines, read_lines

logger = logging.getLogger(__name__)

EOF_FOOTER = "EOF"


def file_title(index: int, path: str, processed: bool) -> str:
    """Return the header shown above a printed file, e.g. ``File 1 (a.txt):``."""
    prefix = "Processed " if processed else ""
    return f"{prefix}File {index} ({path}):"


def print_file(printer: Printer, index: int, path: str, lines: Sequence[str], processed: bool) -> None:
    """Write one file framed by its header and the EOF footer."""
    printer.emit(file_title(index, path, processed), StyleClass.HEADER)
    for line in lines:
        printer.emit_raw(line)
    printer.emit(EOF_FOOTER, StyleClass.HEADER)


def _print_rich(files: list[tuple[str, list[str]]], processed: bool, stdout: TextIO) -> None:
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(file=stdout, highlight=False)
    for index, (path, lines) in enumerate(files, start=1):
        console.print(
            Panel(
                Text("\n".join(lines)),
                title=file_title(index, path, processed).rstrip(":"),
                title_align="left",
                subtitle=EOF_FOOTER,
                subtitle_align="left",
                border_style="cyan",
            )
        )


def handle_print(parsed_args: argparse.Namespace, stdout: TextIO | None = None) -> int:
    """Print one or two files after marker and blank-line filtering.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Validated arguments with one or two ``files``
    stdout : TextIO, optional
        Destination stream (defaults to sys.stdout)

    Returns
    -------
    int
        Exit code

    """
    stdout = stdout or sys.stdout
    processed = bool(parsed_args.marker) or parsed_args.skip_empty

    files: list[tuple[str, list[str]]] = []
    for path in parsed_args.files:
        lines = read_lines(path, strip_cr=parsed_args.strip_cr)
        if processed:
            lines = filter_lines(lines, marker=parsed_args.marker, skip_empty=parsed_args.skip_empty)
        files.append((path, lines))

    if should_use_rich_output(parsed_args, raise_on_missing=True, stream=stdout):
        logger.debug("Printing files with rich")
        _print_rich(files, processed, stdout)
        return EXIT_SUCCESS

    printer = StreamPrinter(stdout, use_color=should_use_color(parsed_args.color, stdout))
    for index, (path, lines) in enumerate(files, start=1):
        print_file(printer, index, path, lines, processed)

    return EXIT_SUCCESS
