#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/__init__.py
"""Diff renderers for the supported output styles.

Available Renderers
-------------------
- NormalDiffRenderer: classic ``diff`` output (``2c2``, ``< old``, ``> new``)
- UnifiedDiffRenderer: ``diff -u`` output with ``@@`` hunk headers

Both renderers write through a printer, which owns coloring.

Examples
--------
Render with colors for a terminal:
    >>> import sys
    >>> from linediff.diff import compute_script
    >>> from linediff.diff.renderers import StreamPrinter, UnifiedDiffRenderer
    >>> script = compute_script(old_lines, new_lines)
    >>> printer = StreamPrinter(sys.stdout, use_color=True)
    >>> UnifiedDiffRenderer(printer).render(script, old_lines, new_lines)

"""

from __future__ import annotations

from linediff.constants import DEFAULT_CONTEXT_LINES
from linediff.diff.renderers.normal import NormalDiffRenderer
from linediff.diff.renderers.printer import (
    BasePrinter,
    BufferPrinter,
    ColorPalette,
    Printer,
    StreamPrinter,
    StyleClass,
)
from linediff.diff.renderers.unified import UnifiedDiffRenderer
from linediff.exceptions import RenderingError


def create_renderer(
    mode: str,
    printer: Printer,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    old_label: str | None = None,
    new_label: str | None = None,
) -> NormalDiffRenderer | UnifiedDiffRenderer:
    """Return the renderer for a diff mode.

    Parameters
    ----------
    mode : str
        ``"normal"`` or ``"unified"``
    printer : Printer
        Sink receiving the output lines
    context_lines : int, default = 3
        Context size for unified mode
    old_label, new_label : str, optional
        File header labels for unified mode

    Raises
    ------
    RenderingError
        If the mode is not supported

    """
    if mode == "normal":
        return NormalDiffRenderer(printer)
    if mode == "unified":
        return UnifiedDiffRenderer(printer, context_lines=context_lines, old_label=old_label, new_label=new_label)
    raise RenderingError(f"Unknown diff mode: {mode!r} (expected 'normal' or 'unified')", rendering_stage="setup")


__all__ = [
    "BasePrinter",
    "BufferPrinter",
    "ColorPalette",
    "NormalDiffRenderer",
    "Printer",
    "StreamPrinter",
    "StyleClass",
    "UnifiedDiffRenderer",
    "create_renderer",
]
