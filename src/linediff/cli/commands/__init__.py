#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command handlers for the linediff CLI."""

from linediff.cli.commands.diff import handle_diff
from linediff.cli.commands.print_files import handle_print

__all__ = ["handle_diff", "handle_print"]
