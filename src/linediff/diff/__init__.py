#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/__init__.py
"""Line-level comparison with Myers' O(ND) algorithm.

The pipeline has three stages:

1. :func:`~linediff.diff.search.myers_trace` explores the edit graph and
   records one frontier vector per edit distance.
2. :func:`~linediff.diff.backtrack.reconstruct_script` walks that trace back
   into an ordered list of keep/insert/delete operations.
3. The renderers in :mod:`linediff.diff.renderers` group the script into
   hunks and write normal or unified diff text through a printer.

Examples
--------
Compare two files and print a unified diff:
    >>> from linediff.diff import compare_files
    >>> result = compare_files("old.txt", "new.txt")
    >>> print(result.to_string(mode="unified"), end="")

Get the raw edit script:
    >>> from linediff.diff import compute_script
    >>> compute_script(["a", "b"], ["a", "c"])
    [EditOp(op=<Operation.KEEP: 'keep'>, orig_line=0, new_line=0), ...]

"""

from linediff.diff.api import DiffResult, check_input_limit, compare_files, compare_lines, compute_script
from linediff.diff.backtrack import apply_script, count_changes, reconstruct_script
from linediff.diff.search import edit_distance, myers_trace
from linediff.diff.types import DiffStats, EditOp, EqualityPredicate, Hunk, LineEquality, Operation, Trace

__all__ = [
    "DiffResult",
    "DiffStats",
    "EditOp",
    "EqualityPredicate",
    "Hunk",
    "LineEquality",
    "Operation",
    "Trace",
    "apply_script",
    "check_input_limit",
    "compare_files",
    "compare_lines",
    "compute_script",
    "count_changes",
    "edit_distance",
    "myers_trace",
    "reconstruct_script",
]
