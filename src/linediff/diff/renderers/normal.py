#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/normal.py
"""Normal (default ``diff``) output renderer.

Each hunk is introduced by a command line such as ``2c2``, ``5,7d4`` or
``0a1``: the original range, a command letter (``a``dd, ``d``elete or
``c``hange) and the new range. Deleted lines follow prefixed with ``< ``,
then a ``---`` separator for changes, then inserted lines prefixed with
``> ``.
"""

from __future__ import annotations

import logging
from typing import Sequence

from linediff.diff.hunks import group_normal_hunks
from linediff.diff.renderers.printer import Printer, StyleClass
from linediff.diff.types import DiffStats, EditOp, Hunk

logger = logging.getLogger(__name__)


def format_range(start: int, end: int) -> str:
    """Format a 1-based inclusive line range, collapsing single lines."""
    if start == end:
        return str(start)
    return f"{start},{end}"


def hunk_command(hunk: Hunk) -> str:
    """Return the command letter for a normal-diff hunk."""
    if hunk.orig_count and hunk.new_count:
        return "c"
    if hunk.orig_count:
        return "d"
    return "a"


def normal_hunk_header(hunk: Hunk) -> str:
    """Return the command line introducing a hunk, e.g. ``2,3c2``."""
    return f"{format_range(hunk.orig_start, hunk.orig_end)}{hunk_command(hunk)}{format_range(hunk.new_start, hunk.new_end)}"


class NormalDiffRenderer:
    """Render an edit script in normal diff syntax.

    Parameters
    ----------
    printer : Printer
        Sink receiving the output lines

    Examples
    --------
        >>> from linediff.diff.renderers import BufferPrinter, NormalDiffRenderer
        >>> printer = BufferPrinter()
        >>> stats = NormalDiffRenderer(printer).render(script, old_lines, new_lines)
        >>> print(printer.getvalue(), end="")
        2c2
        < b
        ---
        > x

    """

    def __init__(self, printer: Printer) -> None:
        self.printer = printer

    def render(self, script: Sequence[EditOp], a: Sequence[str], b: Sequence[str]) -> DiffStats:
        """Write every hunk of ``script`` to the printer.

        Parameters
        ----------
        script : Sequence[EditOp]
            Edit script from :func:`linediff.diff.backtrack.reconstruct_script`
        a : Sequence[str]
            Original lines
        b : Sequence[str]
            New lines

        Returns
        -------
        DiffStats
            Counts of hunks and changed lines; ``has_changes`` is False when
            nothing was written

        """
        stats = DiffStats()

        for hunk in group_normal_hunks(script):
            header = normal_hunk_header(hunk)
            self.printer.emit(header, StyleClass.HEADER)

            deletions = hunk.deletions
            insertions = hunk.insertions

            for op in deletions:
                self.printer.emit(f"< {a[op.orig_line]}", StyleClass.DELETE)

            if deletions and insertions:
                self.printer.emit_raw("---")

            for op in insertions:
                self.printer.emit(f"> {b[op.new_line]}", StyleClass.INSERT)

            stats.hunks += 1
            stats.deletions += len(deletions)
            stats.insertions += len(insertions)
            stats.hunk_headers.append(header)

        logger.debug("Rendered %d normal hunks", stats.hunks)
        return stats
