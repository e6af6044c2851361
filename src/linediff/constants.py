#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the linediff library.

Constants are organized by category:
1. Type Definitions - Literal types shared by the API and the CLI
2. Diff Defaults - Default behaviour of the diff pipeline
3. Output Styling - ANSI sequences used by colored output
4. Configuration - Config file names and environment variable prefixes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DiffMode = Literal["normal", "unified"]
ColorMode = Literal["auto", "always", "never"]

DIFF_MODES: tuple[DiffMode, ...] = ("normal", "unified")
COLOR_MODES: tuple[ColorMode, ...] = ("auto", "always", "never")

# =============================================================================
# Diff Defaults
# =============================================================================

DEFAULT_DIFF_MODE: DiffMode = "normal"
DEFAULT_COLOR_MODE: ColorMode = "auto"

# Lines of unchanged context shown around each change in unified mode
DEFAULT_CONTEXT_LINES = 3

# None means unlimited
DEFAULT_MAX_LINES: int | None = None

# Whitespace trimmed before marker matching and blank-line detection
LINE_TRIM_CHARS = " \t"

NO_DIFFERENCES_MESSAGE = "No differences found."

# =============================================================================
# Output Styling
# =============================================================================

ANSI_RED = "\033[31m"
ANSI_GREEN = "\033[32m"
ANSI_CYAN = "\033[36m"
ANSI_RESET = "\033[0m"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES = [".linediff.toml", ".linediff.yaml", ".linediff.yml", ".linediff.json"]
PYPROJECT_TOOL_SECTION = "linediff"
ENV_PREFIX = "LINEDIFF_"
ENV_CONFIG_VAR = "LINEDIFF_CONFIG"
