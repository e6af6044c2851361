#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/hunks.py
"""Grouping of an edit script into hunks.

Normal diffs group every maximal run of inserts and deletes into one hunk.
Unified diffs keep up to ``context`` unchanged lines on each side of a change
and merge neighbouring changes whose separating run of unchanged lines is at
most ``2 * context`` long, as GNU ``diff -u`` does.
"""

from __future__ import annotations

import logging
from typing import Sequence

from linediff.constants import DEFAULT_CONTEXT_LINES
from linediff.diff.types import EditOp, Hunk, Operation
from linediff.exceptions import ValidationError

logger = logging.getLogger(__name__)


def build_hunk(ops: Sequence[EditOp]) -> Hunk:
    """Compute the line ranges covered by a group of operations.

    Keeps count toward both files, inserts toward the new file only and
    deletes toward the original file only. A side without lines takes the
    anchor of the first operation instead, which is ``0`` for changes at the
    very start of a file.

    Parameters
    ----------
    ops : Sequence[EditOp]
        Contiguous operations forming the hunk; must not be empty

    Returns
    -------
    Hunk
        The hunk with 1-based starts and line counts

    """
    if not ops:
        raise ValueError("A hunk needs at least one operation")

    orig_lines = [op.orig_line for op in ops if op.op is not Operation.INSERT]
    new_lines = [op.new_line for op in ops if op.op is not Operation.DELETE]

    if orig_lines:
        orig_start = min(orig_lines) + 1
        orig_count = max(orig_lines) - min(orig_lines) + 1
    else:
        orig_start = ops[0].orig_line
        orig_count = 0

    if new_lines:
        new_start = min(new_lines) + 1
        new_count = max(new_lines) - min(new_lines) + 1
    else:
        new_start = ops[0].new_line
        new_count = 0

    return Hunk(
        ops=list(ops),
        orig_start=orig_start,
        orig_count=orig_count,
        new_start=new_start,
        new_count=new_count,
    )


def group_normal_hunks(script: Sequence[EditOp]) -> list[Hunk]:
    """Split a script into normal-diff hunks.

    Every run of consecutive inserts and deletes is one hunk; a keep closes
    the hunk that is open.
    """
    hunks: list[Hunk] = []
    current: list[EditOp] = []

    for op in script:
        if op.op is Operation.KEEP:
            if current:
                hunks.append(build_hunk(current))
                current = []
        else:
            current.append(op)

    if current:
        hunks.append(build_hunk(current))

    logger.debug("Grouped %d operations into %d normal hunks", len(script), len(hunks))
    return hunks


def group_unified_hunks(script: Sequence[EditOp], context: int = DEFAULT_CONTEXT_LINES) -> list[Hunk]:
    """Split a script into unified-diff hunks.

    Parameters
    ----------
    script : Sequence[EditOp]
        The full edit script, keeps included
    context : int, default = 3
        Number of unchanged lines kept before and after each change

    Returns
    -------
    list of Hunk
        Hunks in script order; empty when the script has no changes

    Raises
    ------
    ValidationError
        If ``context`` is negative

    """
    if context < 0:
        raise ValidationError(
            f"Context lines must be non-negative, got {context}", parameter_name="context", parameter_value=context
        )

    hunks: list[Hunk] = []
    total = len(script)
    i = 0

    while i < total:
        if not script[i].is_change:
            i += 1
            continue

        start = max(i - context, 0)
        end = i + 1
        last_change = i

        while end < total:
            if script[end].is_change:
                last_change = end

            if end > last_change + context:
                # Trailing context is complete; look for the next change
                j = end
                while j < total and not script[j].is_change:
                    j += 1

                if j == total or j - (last_change + 1) > 2 * context:
                    break

                end = j
                continue

            end += 1

        hunks.append(build_hunk(script[start:end]))
        i = end

    logger.debug("Grouped %d operations into %d unified hunks (context=%d)", total, len(hunks), context)
    return hunks
