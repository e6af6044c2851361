#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/search.py
"""Shortest edit script search using Myers' O(ND) algorithm.

The two inputs are modelled as an edit graph from ``(0, 0)`` to ``(m, n)``
where diagonal moves (matching lines) are free and horizontal or vertical
moves (deletions or insertions) cost one. The search explores increasing edit
distances ``d`` and keeps, for every diagonal ``k = x - y``, the furthest
``x`` reached so far. A copy of that frontier vector is stored before every
round so the path can be rebuilt afterwards by
:func:`linediff.diff.backtrack.reconstruct_script`.

This is the classic variant that keeps the whole trace, not the linear-space
refinement: the trace is what makes exact backtracking possible.

Reference: Myers, Eugene W. "An O(ND) Difference Algorithm and Its
Variations." Algorithmica, 1986.
"""

from __future__ import annotations

import logging

from linediff.diff.types import EqualityPredicate, Trace
from linediff.exceptions import DiffInvariantError, DiffResourceError

logger = logging.getLogger(__name__)


def vector_size(a_len: int, b_len: int) -> int:
    """Return the length of a frontier vector for inputs of the given sizes.

    Diagonals range over ``[-(m+n), m+n]`` and the search seeds diagonal
    ``k = 1``, so the vector always has room for at least two entries.
    """
    return max(2 * (a_len + b_len) + 1, 2)


def prefers_insert(v: list[int], k: int, d: int, offset: int) -> bool:
    """Decide whether diagonal ``k`` at distance ``d`` is reached by an insertion.

    The insertion (coming down from diagonal ``k + 1``) is taken on the lower
    boundary ``k == -d`` and whenever diagonal ``k - 1`` is strictly behind
    diagonal ``k + 1``. Otherwise the deletion (coming right from ``k - 1``)
    wins, which is also the outcome of ties. Both the search and the
    backtracking use this rule so they agree on the chosen path.
    """
    return k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1])


def myers_trace(a_len: int, b_len: int, equals: EqualityPredicate) -> Trace:
    """Compute the Myers search trace for two sequences.

    Parameters
    ----------
    a_len : int
        Number of lines in the original sequence
    b_len : int
        Number of lines in the new sequence
    equals : EqualityPredicate
        Callable ``equals(i, j)`` reporting whether original line ``i`` and
        new line ``j`` are the same

    Returns
    -------
    Trace
        One frontier snapshot per edit distance ``0..D``. Snapshot ``d`` holds
        the frontier as it stood when round ``d`` began.

    Raises
    ------
    DiffResourceError
        If the trace cannot be stored
    DiffInvariantError
        If no path to ``(a_len, b_len)`` is found within ``a_len + b_len``
        edits, which cannot happen for a well-behaved predicate

    """
    max_d = a_len + b_len
    offset = max_d

    try:
        v = [0] * vector_size(a_len, b_len)
    except MemoryError as e:
        raise DiffResourceError(
            f"Cannot allocate frontier vector for {a_len} + {b_len} lines", trace_length=0, original_error=e
        ) from e

    # Seed diagonal 1 so that round 0 starts from x = 0 on diagonal 0
    v[offset + 1] = 0

    trace: Trace = []

    for d in range(max_d + 1):
        try:
            trace.append(list(v))
        except MemoryError as e:
            raise DiffResourceError(
                f"Cannot store search trace at edit distance {d}", trace_length=len(trace), original_error=e
            ) from e

        for k in range(-d, d + 1, 2):
            if prefers_insert(v, k, d, offset):
                x = v[offset + k + 1]
            else:
                x = v[offset + k - 1] + 1

            y = x - k

            while x < a_len and y < b_len and equals(x, y):
                x += 1
                y += 1

            v[offset + k] = x

            if x >= a_len and y >= b_len:
                logger.debug("Myers search finished: m=%d n=%d D=%d", a_len, b_len, d)
                return trace

    raise DiffInvariantError(
        f"No edit path found within {max_d} edits for sequences of {a_len} and {b_len} lines",
        stage="search",
    )


def edit_distance(trace: Trace) -> int:
    """Return the edit distance ``D`` recorded by a trace."""
    if not trace:
        raise DiffInvariantError("Empty search trace", stage="search")
    return len(trace) - 1
