#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/api.py
"""Line-based comparison API.

This module wires the pipeline together: optional pre-filtering of the input
lines, the Myers search, reconstruction of the edit script and rendering in
normal or unified style. The search trace only lives inside
:func:`compute_script`; callers get the finished script.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from linediff.constants import DEFAULT_CONTEXT_LINES, DEFAULT_DIFF_MODE
from linediff.diff.backtrack import count_changes, reconstruct_script
from linediff.diff.renderers import BufferPrinter, ColorPalette, Printer, create_renderer
from linediff.diff.search import edit_distance, myers_trace
from linediff.diff.types import DiffStats, EditOp, EqualityPredicate, LineEquality
from linediff.exceptions import InputLimitError, ValidationError
from linediff.lines import filter_lines, read_lines

logger = logging.getLogger(__name__)


def check_input_limit(a_len: int, b_len: int, max_lines: Optional[int]) -> None:
    """Reject inputs whose combined line count exceeds ``max_lines``.

    Raises
    ------
    ValidationError
        If ``max_lines`` is negative
    InputLimitError
        If ``a_len + b_len`` is larger than ``max_lines``

    """
    if max_lines is None:
        return
    if max_lines < 0:
        raise ValidationError(
            f"max_lines must be non-negative, got {max_lines}", parameter_name="max_lines", parameter_value=max_lines
        )
    if a_len + b_len > max_lines:
        raise InputLimitError(a_len + b_len, max_lines)


def compute_script(
    a: Sequence[str],
    b: Sequence[str],
    equals: Optional[EqualityPredicate] = None,
    max_lines: Optional[int] = None,
) -> list[EditOp]:
    """Compute the shortest edit script turning ``a`` into ``b``.

    Parameters
    ----------
    a : Sequence[str]
        Original lines
    b : Sequence[str]
        New lines
    equals : EqualityPredicate, optional
        Line comparison; defaults to plain string equality
    max_lines : int, optional
        Reject the inputs before searching if they hold more lines combined

    Returns
    -------
    list of EditOp
        The edit script in original order

    """
    check_input_limit(len(a), len(b), max_lines)

    if equals is None:
        equals = LineEquality(a, b)

    trace = myers_trace(len(a), len(b), equals)
    logger.debug("Edit distance %d over %d + %d lines", edit_distance(trace), len(a), len(b))
    return reconstruct_script(trace, len(a), len(b))


class DiffResult:
    """Bundle the compared sequences with their edit script.

    The script is computed on first use and cached, so rendering the same
    result several times always produces the same output.
    """

    def __init__(
        self,
        old_lines: list[str],
        new_lines: list[str],
        *,
        old_label: str = "old",
        new_label: str = "new",
        context_lines: int = DEFAULT_CONTEXT_LINES,
        max_lines: Optional[int] = None,
    ) -> None:
        """Store the (already filtered) sequences and metadata.

        Parameters
        ----------
        old_lines : list of str
            Lines of the original input
        new_lines : list of str
            Lines of the updated input
        old_label : str
            Label for the original input in unified file headers
        new_label : str
            Label for the updated input in unified file headers
        context_lines : int
            Number of context lines to include when rendering unified diffs
        max_lines : int, optional
            Combined line limit checked before the search runs

        """
        self.old_lines = old_lines
        self.new_lines = new_lines
        self.old_label = old_label
        self.new_label = new_label
        self.context_lines = context_lines
        self.max_lines = max_lines
        self._script: list[EditOp] | None = None

    @property
    def script(self) -> list[EditOp]:
        """The edit script, computed lazily."""
        if self._script is None:
            self._script = compute_script(self.old_lines, self.new_lines, max_lines=self.max_lines)
        return self._script

    def iter_operations(self) -> Iterator[EditOp]:
        """Yield the operations of the edit script."""
        yield from self.script

    @property
    def edit_distance(self) -> int:
        """Number of inserted plus deleted lines."""
        return count_changes(self.script)

    @property
    def has_changes(self) -> bool:
        """Whether the inputs differ."""
        return self.edit_distance > 0

    def render(
        self,
        printer: Printer,
        mode: str = DEFAULT_DIFF_MODE,
        file_headers: bool = False,
        context_lines: int | None = None,
    ) -> DiffStats:
        """Render the diff through ``printer``.

        Parameters
        ----------
        printer : Printer
            Output sink
        mode : {'normal', 'unified'}, default = 'normal'
            Output style
        file_headers : bool, default = False
            Emit ``---``/``+++`` headers in unified mode
        context_lines : int, optional
            Overrides the context size given at construction

        Returns
        -------
        DiffStats
            What was written; ``has_changes`` is False for identical inputs

        """
        renderer = create_renderer(
            mode,
            printer,
            context_lines=self.context_lines if context_lines is None else context_lines,
            old_label=self.old_label if file_headers else None,
            new_label=self.new_label if file_headers else None,
        )
        return renderer.render(self.script, self.old_lines, self.new_lines)

    def iter_lines(
        self,
        mode: str = DEFAULT_DIFF_MODE,
        use_color: bool = False,
        file_headers: bool = False,
        palette: ColorPalette | None = None,
    ) -> Iterator[str]:
        """Yield the rendered diff line by line."""
        printer = BufferPrinter(use_color=use_color, palette=palette)
        self.render(printer, mode=mode, file_headers=file_headers)
        yield from printer.lines

    def to_string(self, mode: str = DEFAULT_DIFF_MODE, use_color: bool = False, file_headers: bool = False) -> str:
        """Return the rendered diff as one string, each line newline-terminated."""
        return "".join(f"{line}\n" for line in self.iter_lines(mode, use_color=use_color, file_headers=file_headers))

    def __iter__(self) -> Iterator[str]:
        """Iterate over the normal diff output."""
        yield from self.iter_lines()


def compare_lines(
    old_lines: Sequence[str],
    new_lines: Sequence[str],
    old_label: str = "old",
    new_label: str = "new",
    context_lines: int = DEFAULT_CONTEXT_LINES,
    marker: str | None = None,
    skip_empty: bool = False,
    max_lines: Optional[int] = None,
) -> DiffResult:
    """Compare two line sequences.

    Marker and blank-line filtering are applied to each sequence
    independently before diffing, so the edit script never sees removed
    lines.

    Parameters
    ----------
    old_lines : Sequence[str]
        Original lines
    new_lines : Sequence[str]
        New lines
    old_label : str, default = "old"
        Label for the original in unified file headers
    new_label : str, default = "new"
        Label for the new lines in unified file headers
    context_lines : int, default = 3
        Unified context size
    marker : str, optional
        Drop lines starting with this marker after leading whitespace
    skip_empty : bool, default = False
        Drop empty and whitespace-only lines
    max_lines : int, optional
        Reject inputs whose filtered line count exceeds this value

    Returns
    -------
    DiffResult
        Diff result encapsulating sequences and render helpers

    Raises
    ------
    ValidationError
        If ``context_lines`` is negative
    InputLimitError
        If the filtered inputs exceed ``max_lines``

    """
    if context_lines < 0:
        raise ValidationError(
            f"context lines must be non-negative, got {context_lines}",
            parameter_name="context_lines",
            parameter_value=context_lines,
        )

    if marker or skip_empty:
        old = filter_lines(old_lines, marker=marker, skip_empty=skip_empty)
        new = filter_lines(new_lines, marker=marker, skip_empty=skip_empty)
        logger.debug(
            "Filtering kept %d/%d and %d/%d lines", len(old), len(old_lines), len(new), len(new_lines)
        )
    else:
        old = list(old_lines)
        new = list(new_lines)

    check_input_limit(len(old), len(new), max_lines)

    return DiffResult(
        old,
        new,
        old_label=old_label,
        new_label=new_label,
        context_lines=context_lines,
        max_lines=max_lines,
    )


def compare_files(
    old_path: Union[str, Path],
    new_path: Union[str, Path],
    old_label: str | None = None,
    new_label: str | None = None,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    marker: str | None = None,
    skip_empty: bool = False,
    strip_cr: bool = False,
    max_lines: Optional[int] = None,
) -> DiffResult:
    """Compare two text files line by line.

    This is a convenience wrapper that reads both files and compares them
    using :func:`compare_lines`.

    Parameters
    ----------
    old_path : str or Path
        Path to the original file
    new_path : str or Path
        Path to the new file
    old_label : str, optional
        Label for the original (defaults to the path)
    new_label : str, optional
        Label for the new file (defaults to the path)
    context_lines : int, default = 3
        Unified context size
    marker : str, optional
        Drop lines starting with this marker after leading whitespace
    skip_empty : bool, default = False
        Drop empty and whitespace-only lines
    strip_cr : bool, default = False
        Remove trailing carriage returns before comparing
    max_lines : int, optional
        Reject inputs whose filtered line count exceeds this value

    Returns
    -------
    DiffResult
        Diff result encapsulating sequences and render helpers

    """
    old_path = Path(old_path)
    new_path = Path(new_path)

    if old_label is None:
        old_label = str(old_path)
    if new_label is None:
        new_label = str(new_path)

    return compare_lines(
        read_lines(old_path, strip_cr=strip_cr),
        read_lines(new_path, strip_cr=strip_cr),
        old_label=old_label,
        new_label=new_label,
        context_lines=context_lines,
        marker=marker,
        skip_empty=skip_empty,
        max_lines=max_lines,
    )
