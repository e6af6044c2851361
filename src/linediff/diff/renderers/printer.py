#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/printer.py
"""Output sinks for diff renderers.

Renderers never write to a stream directly. They hand each output line to a
printer together with its style class, and the printer decides whether to
wrap it in ANSI color codes. With color disabled the printed text is exactly
the uncolored diff.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TextIO

from linediff.constants import ANSI_CYAN, ANSI_GREEN, ANSI_RED, ANSI_RESET
from linediff.exceptions import RenderingError


class StyleClass(Enum):
    """Independently colorable classes of diff output."""

    HEADER = "header"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class ColorPalette:
    """Escape sequences used for each style class.

    Parameters
    ----------
    header : str
        Prefix for hunk headers, file headers and print-mode banners
    insert : str
        Prefix for inserted lines
    delete : str
        Prefix for deleted lines
    reset : str
        Sequence written after every styled line

    """

    header: str = ANSI_CYAN
    insert: str = ANSI_GREEN
    delete: str = ANSI_RED
    reset: str = ANSI_RESET

    def start_sequence(self, style: StyleClass) -> str:
        """Return the escape sequence that opens ``style``."""
        if style is StyleClass.HEADER:
            return self.header
        if style is StyleClass.INSERT:
            return self.insert
        return self.delete


class Printer(Protocol):
    """Line sink used by the renderers."""

    def emit(self, text: str, style: StyleClass) -> None:
        """Write one line tagged with a style class."""
        ...

    def emit_raw(self, text: str) -> None:
        """Write one unstyled line."""
        ...


class BasePrinter:
    """Shared coloring logic for concrete printers.

    Parameters
    ----------
    use_color : bool, default = False
        If True, wrap styled lines in the palette's escape sequences
    palette : ColorPalette, optional
        Escape sequences to use; defaults to red/green/cyan ANSI colors

    """

    def __init__(self, use_color: bool = False, palette: ColorPalette | None = None) -> None:
        self.use_color = use_color
        self.palette = palette or ColorPalette()

    def paint(self, text: str, style: StyleClass) -> str:
        """Return ``text`` wrapped for ``style`` when color is enabled."""
        if not self.use_color:
            return text
        return f"{self.palette.start_sequence(style)}{text}{self.palette.reset}"

    def emit(self, text: str, style: StyleClass) -> None:
        self._write_line(self.paint(text, style))

    def emit_raw(self, text: str) -> None:
        self._write_line(text)

    def _write_line(self, line: str) -> None:
        raise NotImplementedError


class StreamPrinter(BasePrinter):
    """Printer writing newline-terminated lines to a text stream.

    Parameters
    ----------
    stream : TextIO
        Destination stream, for example ``sys.stdout``
    use_color : bool, default = False
        If True, add ANSI color codes
    palette : ColorPalette, optional
        Escape sequences to use

    """

    def __init__(self, stream: TextIO, use_color: bool = False, palette: ColorPalette | None = None) -> None:
        super().__init__(use_color=use_color, palette=palette)
        self.stream = stream

    def _write_line(self, line: str) -> None:
        try:
            self.stream.write(line + "\n")
        except OSError as e:
            raise RenderingError(f"Failed to write diff output: {e}", rendering_stage="write", original_error=e) from e


class BufferPrinter(BasePrinter):
    """Printer collecting lines in memory."""

    def __init__(self, use_color: bool = False, palette: ColorPalette | None = None) -> None:
        super().__init__(use_color=use_color, palette=palette)
        self.lines: list[str] = []

    def _write_line(self, line: str) -> None:
        self.lines.append(line)

    def getvalue(self) -> str:
        """Return the collected output with a newline after every line."""
        return "".join(f"{line}\n" for line in self.lines)
