"""linediff - line-level text comparison with GNU-style diff output.

linediff computes the shortest edit script between two sequences of lines
using Myers' O(ND) algorithm and renders it as a classic ("normal") or
unified diff, optionally colored with ANSI escape sequences.

Key Features
------------
- Myers O(ND) search with a recorded trace and exact backtracking
- Normal (``2c2``) and unified (``@@ -1,3 +1,3 @@``) output
- Marker-prefixed and blank-line pre-filtering
- Byte-transparent input handling (undecodable bytes survive unchanged)
- Configuration through TOML, YAML, JSON or pyproject.toml

Requirements
------------
- Python 3.10+
- Optional: rich (for ``--print --rich``)

Examples
--------
Compare two lists of lines:

    >>> from linediff import compare_lines
    >>> result = compare_lines(["a", "b", "c"], ["a", "x", "c"])
    >>> print(result.to_string(), end="")
    2c2
    < b
    ---
    > x

Compare two files and render a unified diff:

    >>> from linediff import compare_files
    >>> print(compare_files("old.txt", "new.txt").to_string(mode="unified"), end="")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "linediff requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from linediff.diff import (  # noqa: E402
    DiffResult,
    DiffStats,
    EditOp,
    Hunk,
    Operation,
    compare_files,
    compare_lines,
    compute_script,
)
from linediff.exceptions import (  # noqa: E402
    DiffInvariantError,
    FileError,
    InputLimitError,
    LineDiffError,
    MalformedScriptError,
    ValidationError,
)

__all__ = [
    "DiffInvariantError",
    "DiffResult",
    "DiffStats",
    "EditOp",
    "FileError",
    "Hunk",
    "InputLimitError",
    "LineDiffError",
    "MalformedScriptError",
    "Operation",
    "ValidationError",
    "__version__",
    "compare_files",
    "compare_lines",
    "compute_script",
]
