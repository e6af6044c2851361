"""Test utilities for the linediff test suite.

This module provides helpers for temporary files and for independent
reference computations that the diff output is checked against.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Sequence

ANSI_PREFIX = "\033["


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_lines(path: Path, lines: Sequence[str]) -> Path:
    """Write ``lines`` to ``path``, each terminated by a newline."""
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def lcs_length(a: Sequence[str], b: Sequence[str]) -> int:
    """Length of the longest common subsequence, by dynamic programming."""
    previous = [0] * (len(b) + 1)
    for item in a:
        current = [0] * (len(b) + 1)
        for j, other in enumerate(b, start=1):
            if item == other:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current
    return previous[-1]


def strip_ansi(text: str) -> str:
    """Remove the SGR escape sequences written by the color printers."""
    result = []
    i = 0
    while i < len(text):
        if text.startswith(ANSI_PREFIX, i):
            end = text.index("m", i)
            i = end + 1
            continue
        result.append(text[i])
        i += 1
    return "".join(result)
