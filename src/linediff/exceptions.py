#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the linediff library.

This module defines specialized exception classes for the error conditions
that can occur while reading inputs, computing an edit script and rendering
it. These exceptions provide more specific error information than generic
built-ins.

Exception Hierarchy
-------------------
- LineDiffError (base exception)

  - DiffInvariantError (search or reconstruction invariant violated)
    - MalformedScriptError (edit script outside sequence bounds)

  - DiffResourceError (trace storage could not be allocated)

  - ValidationError (parameter/option validation)
    - InputLimitError (inputs exceed the configured line limit)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, directories, read failures)

  - RenderingError (output generation failures)

  - DependencyError (missing optional packages)

"""

from typing import Any


class LineDiffError(Exception):
    """Base exception class for all linediff-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class DiffInvariantError(LineDiffError):
    """Exception raised when the diff algorithm breaks one of its invariants.

    The shortest edit script always exists within ``len(a) + len(b)`` edit
    steps, so reaching that bound without a solution points at a defect in
    the search or in the equality predicate it was given (for instance a
    predicate that is not reflexive). This error is not recoverable.

    Parameters
    ----------
    message : str
        Description of the violated invariant
    stage : str, optional
        Pipeline stage that detected the violation ("search", "backtrack", ...)
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    stage : str or None
        Where in the pipeline the violation was detected

    """

    def __init__(self, message: str, stage: str | None = None, original_error: Exception | None = None):
        """Initialize the invariant error."""
        super().__init__(message, original_error=original_error)
        self.stage = stage


class MalformedScriptError(DiffInvariantError):
    """Exception raised when an edit script references impossible coordinates.

    Reconstruction produced a coordinate outside the bounds of either
    sequence, or a script does not replay to the expected result. This is
    distinct from a genuine empty diff.

    Parameters
    ----------
    message : str
        Description of the malformed script
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the malformed script error."""
        super().__init__(message, stage="backtrack", original_error=original_error)


class DiffResourceError(LineDiffError):
    """Exception raised when the search trace cannot be stored.

    Parameters
    ----------
    message : str
        Description of the resource failure
    trace_length : int, optional
        Number of snapshots stored when the failure happened
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, trace_length: int | None = None, original_error: Exception | None = None):
        """Initialize the resource error."""
        super().__init__(message, original_error=original_error)
        self.trace_length = trace_length


class ValidationError(LineDiffError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InputLimitError(ValidationError):
    """Exception raised when the inputs are larger than the configured limit.

    The search is quadratic in the edit distance in the worst case, so callers
    that need bounded latency reject oversized inputs before diffing.

    Parameters
    ----------
    total_lines : int
        Combined line count of both inputs
    max_lines : int
        The configured maximum
    message : str, optional
        Custom error message. If not provided, generates one

    """

    def __init__(self, total_lines: int, max_lines: int, message: str | None = None):
        """Initialize the input limit error."""
        if message is None:
            message = f"Inputs have {total_lines} lines combined, which exceeds the limit of {max_lines}"
        super().__init__(message, parameter_name="max_lines", parameter_value=max_lines)
        self.total_lines = total_lines
        self.max_lines = max_lines


class FileError(LineDiffError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a file cannot be found.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file cannot be accessed.

    This includes permission errors, directories given in place of files, etc.

    Parameters
    ----------
    file_path : str
        Path to the file that cannot be accessed
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class RenderingError(LineDiffError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class DependencyError(LineDiffError):
    """Exception raised when an optional dependency is not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring the dependency
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    Attributes
    ----------
    feature_name : str
        The feature that has missing dependencies
    missing_packages : list[tuple[str, str]]
        Packages that need to be installed
    install_command : str
        Command to install missing dependencies

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        install_command: str = "",
        message: str | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}"
            if install_command:
                message += f"\nInstall with: {install_command}"
            elif missing_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.install_command = install_command
