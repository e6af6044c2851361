#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/types.py
"""Data types shared by the search, reconstruction and rendering stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Protocol, Sequence

# One frontier vector per edit distance d = 0..D. Entry ``k + offset`` holds the
# furthest x reached on diagonal k, with ``offset = len(a) + len(b)``.
Trace = List[List[int]]


class Operation(Enum):
    """Kind of edit operation in a script."""

    KEEP = "keep"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class EditOp:
    """Single operation of an edit script.

    For ``KEEP`` both fields are 0-based line indices. For ``INSERT``,
    ``new_line`` indexes the new sequence and ``orig_line`` counts the original
    lines that precede the insertion point. For ``DELETE``, ``orig_line``
    indexes the original sequence and ``new_line`` counts the new lines that
    precede the deletion point.
    """

    op: Operation
    orig_line: int
    new_line: int

    @classmethod
    def keep(cls, orig_line: int, new_line: int) -> EditOp:
        """Create a keep operation."""
        return cls(Operation.KEEP, orig_line, new_line)

    @classmethod
    def insert(cls, after_orig_line: int, new_line: int) -> EditOp:
        """Create an insert operation."""
        return cls(Operation.INSERT, after_orig_line, new_line)

    @classmethod
    def delete(cls, orig_line: int, after_new_line: int) -> EditOp:
        """Create a delete operation."""
        return cls(Operation.DELETE, orig_line, after_new_line)

    @property
    def is_change(self) -> bool:
        """Whether this operation inserts or deletes a line."""
        return self.op is not Operation.KEEP


@dataclass(slots=True)
class Hunk:
    """Contiguous group of operations rendered as one block.

    A start is 1-based when its count is non-zero. When a side has no lines
    in the hunk, its start is the anchor line after which the change sits
    (``0`` meaning "before the first line"), following GNU diff.
    """

    ops: list[EditOp]
    orig_start: int
    orig_count: int
    new_start: int
    new_count: int

    @property
    def orig_end(self) -> int:
        """Last 1-based original line in the hunk (the anchor if empty)."""
        return self.orig_start + self.orig_count - 1 if self.orig_count else self.orig_start

    @property
    def new_end(self) -> int:
        """Last 1-based new line in the hunk (the anchor if empty)."""
        return self.new_start + self.new_count - 1 if self.new_count else self.new_start

    @property
    def deletions(self) -> list[EditOp]:
        return [op for op in self.ops if op.op is Operation.DELETE]

    @property
    def insertions(self) -> list[EditOp]:
        return [op for op in self.ops if op.op is Operation.INSERT]


@dataclass(slots=True)
class DiffStats:
    """Summary returned by a rendering call."""

    hunks: int = 0
    insertions: int = 0
    deletions: int = 0
    hunk_headers: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        """Whether at least one hunk was emitted."""
        return self.hunks > 0


class EqualityPredicate(Protocol):
    """Decides whether line ``i`` of the original equals line ``j`` of the new sequence."""

    def __call__(self, i: int, j: int) -> bool: ...


class LineEquality:
    """Equality predicate comparing two line sequences element by element.

    Parameters
    ----------
    a : Sequence[str]
        Original lines
    b : Sequence[str]
        New lines

    """

    __slots__ = ("a", "b")

    def __init__(self, a: Sequence[str], b: Sequence[str]) -> None:
        self.a = a
        self.b = b

    def __call__(self, i: int, j: int) -> bool:
        if i >= len(self.a) or j >= len(self.b):
            return False
        return self.a[i] == self.b[j]
