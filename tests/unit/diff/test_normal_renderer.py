#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for diff/renderers/normal.py NormalDiffRenderer."""

import pytest

from linediff.diff import compute_script
from linediff.diff.renderers import BufferPrinter, NormalDiffRenderer
from linediff.diff.renderers.normal import format_range, hunk_command, normal_hunk_header
from linediff.diff.hunks import build_hunk
from linediff.diff.types import EditOp


def _render(a, b, use_color=False):
    printer = BufferPrinter(use_color=use_color)
    stats = NormalDiffRenderer(printer).render(compute_script(a, b), a, b)
    return printer.lines, stats


@pytest.mark.unit
class TestHeaderHelpers:
    """Tests for range and command formatting."""

    def test_format_single_line(self):
        assert format_range(4, 4) == "4"

    def test_format_range(self):
        assert format_range(2, 5) == "2,5"

    def test_commands(self):
        assert hunk_command(build_hunk([EditOp.delete(0, 0), EditOp.insert(1, 0)])) == "c"
        assert hunk_command(build_hunk([EditOp.delete(0, 0)])) == "d"
        assert hunk_command(build_hunk([EditOp.insert(0, 0)])) == "a"

    def test_header_for_multi_line_change(self):
        hunk = build_hunk([EditOp.delete(1, 1), EditOp.delete(2, 1), EditOp.insert(3, 1)])
        assert normal_hunk_header(hunk) == "2,3c2"


@pytest.mark.unit
class TestNormalDiffRenderer:
    """Tests for the NormalDiffRenderer class."""

    def test_change(self):
        lines, stats = _render(["a", "b", "c"], ["a", "x", "c"])
        assert lines == ["2c2", "< b", "---", "> x"]
        assert stats.hunks == 1
        assert stats.insertions == 1
        assert stats.deletions == 1
        assert stats.hunk_headers == ["2c2"]

    def test_append(self):
        lines, _ = _render(["a", "b"], ["a", "b", "c"])
        assert lines == ["2a3", "> c"]

    def test_insert_at_start(self):
        lines, _ = _render(["a"], ["x", "a"])
        assert lines == ["0a1", "> x"]

    def test_delete_at_start(self):
        lines, _ = _render(["x", "y", "a"], ["a"])
        assert lines == ["1,2d0", "< x", "< y"]

    def test_delete_at_end(self):
        lines, _ = _render(["a", "b", "c"], ["a"])
        assert lines == ["2,3d1", "< b", "< c"]

    def test_everything_from_empty(self):
        lines, _ = _render([], ["x", "y"])
        assert lines == ["0a1,2", "> x", "> y"]

    def test_multiple_hunks(self):
        lines, stats = _render(["a", "b", "c", "d", "e"], ["a", "B", "c", "d", "E"])
        assert lines == ["2c2", "< b", "---", "> B", "5c5", "< e", "---", "> E"]
        assert stats.hunks == 2

    def test_identical_inputs_render_nothing(self):
        lines, stats = _render(["a", "b"], ["a", "b"])
        assert lines == []
        assert stats.has_changes is False

    def test_colored_output(self):
        lines, _ = _render(["a", "b", "c"], ["a", "x", "c"], use_color=True)
        assert lines == [
            "\033[36m2c2\033[0m",
            "\033[31m< b\033[0m",
            "---",
            "\033[32m> x\033[0m",
        ]
