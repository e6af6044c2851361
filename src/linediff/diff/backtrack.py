#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/backtrack.py
"""Edit script reconstruction from a Myers search trace.

The search in :mod:`linediff.diff.search` only records how far each diagonal
reached at each edit distance. Walking those snapshots backwards from the end
corner of the edit graph recovers the actual path: every diagonal stretch
becomes a run of keeps and every single horizontal or vertical step becomes a
delete or an insert. The walk produces operations from last to first, so the
result is reversed before it is returned.
"""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

from linediff.diff.search import prefers_insert
from linediff.diff.types import EditOp, Operation, Trace
from linediff.exceptions import MalformedScriptError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def reconstruct_script(trace: Trace, a_len: int, b_len: int) -> list[EditOp]:
    """Rebuild the ordered edit script described by a search trace.

    Parameters
    ----------
    trace : Trace
        Snapshots returned by :func:`linediff.diff.search.myers_trace`
    a_len : int
        Number of lines in the original sequence
    b_len : int
        Number of lines in the new sequence

    Returns
    -------
    list of EditOp
        Operations in original order. Applying the inserts and deletes to the
        original sequence yields the new one.

    Raises
    ------
    MalformedScriptError
        If the trace leads to coordinates outside either sequence

    """
    if not trace:
        raise MalformedScriptError("Cannot reconstruct a script from an empty trace")

    offset = a_len + b_len
    ops: list[EditOp] = []

    # Start from the end corner (a_len, b_len); the last lines are a_len - 1 and b_len - 1
    x = a_len
    y = b_len

    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y

        if not -d <= k <= d:
            raise MalformedScriptError(f"Diagonal {k} is unreachable at edit distance {d}")

        prev_k = k + 1 if prefers_insert(v, k, d, offset) else k - 1
        prev_x = v[offset + prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            _check_bounds(x, y, a_len, b_len)
            ops.append(EditOp.keep(x, y))

        if d == 0:
            break

        if x == prev_x:
            y -= 1
            _check_bounds(x, y, a_len + 1, b_len)
            ops.append(EditOp.insert(x, y))
        else:
            x -= 1
            _check_bounds(x, y, a_len, b_len + 1)
            ops.append(EditOp.delete(x, y))

        x = prev_x
        y = prev_y

    if x != 0 or y != 0:
        raise MalformedScriptError(f"Backtracking stopped at ({x}, {y}) instead of the origin")

    ops.reverse()
    logger.debug("Reconstructed %d operations from %d trace snapshots", len(ops), len(trace))
    return ops


def _check_bounds(x: int, y: int, x_limit: int, y_limit: int) -> None:
    # Anchors of inserts and deletes may sit one past the last line, hence the limits
    if not (0 <= x < x_limit and 0 <= y < y_limit):
        raise MalformedScriptError(f"Coordinate ({x}, {y}) outside the edit graph ({x_limit}, {y_limit})")


def apply_script(a: Sequence[T], b: Sequence[T], script: Sequence[EditOp]) -> list[T]:
    """Replay an edit script on ``a`` and return the resulting sequence.

    Keeps copy the original line, inserts take the line from ``b`` and deletes
    drop the original line. For a correct script the result equals ``b``.

    Raises
    ------
    MalformedScriptError
        If the script skips or repeats original lines, or indexes past
        either sequence

    """
    result: list[T] = []
    next_orig = 0

    for op in script:
        if op.op is Operation.INSERT:
            if not 0 <= op.new_line < len(b):
                raise MalformedScriptError(f"Insert references new line {op.new_line} of {len(b)}")
            result.append(b[op.new_line])
            continue

        if op.orig_line != next_orig or op.orig_line >= len(a):
            raise MalformedScriptError(f"Expected original line {next_orig}, got {op.orig_line}")
        next_orig += 1

        if op.op is Operation.KEEP:
            result.append(a[op.orig_line])

    if next_orig != len(a):
        raise MalformedScriptError(f"Script consumed {next_orig} of {len(a)} original lines")

    return result


def count_changes(script: Sequence[EditOp]) -> int:
    """Return the number of inserts and deletes in a script."""
    return sum(1 for op in script if op.is_change)
