#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/unified.py
"""Unified diff renderer with optional ANSI colors.

This renderer writes the ``diff -u`` format: optional ``---``/``+++`` file
headers, then for each hunk an ``@@ -start,len +start,len @@`` header
followed by the hunk's lines prefixed with a space (unchanged), ``-``
(deleted) or ``+`` (inserted).
"""

from __future__ import annotations

import logging
from typing import Sequence

from linediff.constants import DEFAULT_CONTEXT_LINES
from linediff.diff.hunks import group_unified_hunks
from linediff.diff.renderers.printer import Printer, StyleClass
from linediff.diff.types import DiffStats, EditOp, Hunk, Operation

logger = logging.getLogger(__name__)


def unified_hunk_header(hunk: Hunk) -> str:
    """Return the ``@@`` line introducing a unified hunk."""
    return f"@@ -{hunk.orig_start},{hunk.orig_count} +{hunk.new_start},{hunk.new_count} @@"


class UnifiedDiffRenderer:
    """Render an edit script in unified diff syntax.

    Colors are delegated to the printer:
    - deleted lines use the delete style
    - inserted lines use the insert style
    - hunk headers and file headers use the header style
    - context lines are written unstyled

    Parameters
    ----------
    printer : Printer
        Sink receiving the output lines
    context_lines : int, default = 3
        Number of unchanged lines shown around each change
    old_label : str, optional
        Label for a ``--- label`` file header
    new_label : str, optional
        Label for a ``+++ label`` file header

    Notes
    -----
    File headers are only written when both labels are given and the script
    contains at least one change.

    """

    def __init__(
        self,
        printer: Printer,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        old_label: str | None = None,
        new_label: str | None = None,
    ):
        """Initialize the unified diff renderer."""
        self.printer = printer
        self.context_lines = context_lines
        self.old_label = old_label
        self.new_label = new_label

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
            Counts of hunks and changed lines

        """
        stats = DiffStats()
        hunks = group_unified_hunks(script, self.context_lines)

        if hunks and self.old_label is not None and self.new_label is not None:
            self.printer.emit(f"--- {self.old_label}", StyleClass.HEADER)
            self.printer.emit(f"+++ {self.new_label}", StyleClass.HEADER)

        for hunk in hunks:
            header = unified_hunk_header(hunk)
            self.printer.emit(header, StyleClass.HEADER)

            for op in hunk.ops:
                if op.op is Operation.KEEP:
                    self.printer.emit_raw(f" {a[op.orig_line]}")
                elif op.op is Operation.DELETE:
                    self.printer.emit(f"-{a[op.orig_line]}", StyleClass.DELETE)
                    stats.deletions += 1
                else:
                    self.printer.emit(f"+{b[op.new_line]}", StyleClass.INSERT)
                    stats.insertions += 1

            stats.hunks += 1
            stats.hunk_headers.append(header)

        logger.debug("Rendered %d unified hunks", stats.hunks)
        return stats
