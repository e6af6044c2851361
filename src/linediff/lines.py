#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Reading, splitting and filtering of input lines.

Inputs are treated as opaque bytes. They are decoded as UTF-8 with the
``surrogateescape`` error handler, so undecodable bytes survive the trip
through ``str`` and are written back unchanged by a stream using the same
handler.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from linediff.constants import LINE_TRIM_CHARS
from linediff.exceptions import FileAccessError, FileNotFoundError

logger = logging.getLogger(__name__)

INPUT_ENCODING = "utf-8"
INPUT_ERRORS = "surrogateescape"


def split_lines(data: Union[bytes, str], strip_cr: bool = False) -> list[str]:
    r"""Split raw input into lines on ``\n``.

    A trailing newline terminates the last line rather than starting an empty
    one, so ``b"a\nb\n"`` and ``b"a\nb"`` both give ``["a", "b"]``.

    Parameters
    ----------
    data : bytes or str
        File content
    strip_cr : bool, default = False
        If True, remove one trailing ``\r`` from every line (CRLF input)

    Returns
    -------
    list of str
        Lines without terminators

    """
    text = data.decode(INPUT_ENCODING, errors=INPUT_ERRORS) if isinstance(data, bytes) else data
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    if strip_cr:
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]

    return lines


def read_lines(path: Union[str, Path], strip_cr: bool = False) -> list[str]:
    """Read a file and split it into lines.

    Parameters
    ----------
    path : str or Path
        File to read
    strip_cr : bool, default = False
        If True, remove trailing carriage returns

    Returns
    -------
    list of str
        Lines of the file

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the path is not a regular file or cannot be read

    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(str(path))
    if path.is_dir():
        raise FileAccessError(str(path), message=f"Is a directory: {path}")

    try:
        data = path.read_bytes()
    except PermissionError as e:
        raise FileAccessError(str(path), message=f"Permission denied: {path}", original_error=e) from e
    except OSError as e:
        raise FileAccessError(str(path), message=f"Cannot read {path}: {e}", original_error=e) from e

    lines = split_lines(data, strip_cr=strip_cr)
    logger.debug("Read %d lines (%d bytes) from %s", len(lines), len(data), path)
    return lines


def is_blank(line: str) -> bool:
    """Return True for empty lines and lines made only of spaces and tabs."""
    return not line.strip(LINE_TRIM_CHARS)


def has_marker(line: str, marker: str) -> bool:
    """Return True if ``line`` starts with ``marker`` after leading spaces and tabs."""
    return bool(marker) and line.lstrip(LINE_TRIM_CHARS).startswith(marker)


def filter_lines(lines: Iterable[str], marker: str | None = None, skip_empty: bool = False) -> list[str]:
    """Drop marked and, optionally, blank lines.

    Parameters
    ----------
    lines : Iterable[str]
        Input lines
    marker : str, optional
        Lines whose left-trimmed text starts with this prefix are removed.
        ``None`` or an empty string disables marker filtering.
    skip_empty : bool, default = False
        If True, remove empty and whitespace-only lines

    Returns
    -------
    list of str
        Remaining lines, in their original order

    Examples
    --------
    >>> filter_lines(["a", "  # note", "", "b"], marker="#", skip_empty=True)
    ['a', 'b']

    """
    kept: list[str] = []
    for line in lines:
        if skip_empty and is_blank(line):
            continue
        if marker and has_marker(line, marker):
            continue
        kept.append(line)
    return kept


def strip_quotes(value: str) -> str:
    """Remove one pair of matching single or double quotes around ``value``.

    >>> strip_quotes('"//"')
    '//'
    >>> strip_quotes("'#")
    "'#"

    """
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value
