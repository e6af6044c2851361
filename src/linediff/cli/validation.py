"""Structured validation helpers for CLI argument checks."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class ValidationSeverity(str, Enum):
    """Severity levels for validation problems."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class ValidationProblem:
    """Represents a validation issue discovered during CLI processing."""

    message: str
    severity: ValidationSeverity

    def log(self, logger: logging.Logger) -> None:
        """Emit the problem using the appropriate log level."""
        if self.severity is ValidationSeverity.ERROR:
            logger.error(self.message)
        else:
            logger.warning(self.message)


def collect_argument_problems(parsed_args: argparse.Namespace) -> list[ValidationProblem]:
    """Collect validation problems for parsed CLI arguments."""
    problems: list[ValidationProblem] = []

    files = getattr(parsed_args, "files", None) or []
    print_only = getattr(parsed_args, "print_only", False)

    if print_only:
        if not 1 <= len(files) <= 2:
            problems.append(
                ValidationProblem(
                    f"--print expects one or two files, got {len(files)}",
                    ValidationSeverity.ERROR,
                )
            )
    elif len(files) != 2:
        problems.append(
            ValidationProblem(
                f"expected exactly two files to compare, got {len(files)}",
                ValidationSeverity.ERROR,
            )
        )

    mode = getattr(parsed_args, "mode", None)
    if not print_only and mode == "normal" and getattr(parsed_args, "file_headers", False):
        problems.append(
            ValidationProblem(
                "--file-headers only applies to unified output and is ignored",
                ValidationSeverity.WARNING,
            )
        )

    if not print_only and getattr(parsed_args, "rich", False):
        problems.append(
            ValidationProblem(
                "--rich only affects --print mode; diff output is written as plain text",
                ValidationSeverity.WARNING,
            )
        )

    return problems


def report_validation_problems(
    problems: Iterable[ValidationProblem],
    *,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Report validation problems via logging.

    Returns True when any errors were encountered.
    """
    logger = logger or logging.getLogger(__name__)
    has_errors = False

    for problem in problems:
        problem.log(logger)
        if problem.severity is ValidationSeverity.ERROR:
            has_errors = True

    return has_errors


def validate_arguments(
    parsed_args: argparse.Namespace,
    *,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Validate parsed arguments, logging any issues."""
    problems = collect_argument_problems(parsed_args)
    return not report_validation_problems(problems, logger=logger)
