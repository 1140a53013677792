"""
Error taxonomy for the Employee Locator.

The pipeline never recovers from these: the first failure aborts the run and
reaches the caller unchanged. Each error carries the attributes needed to
report it, and an `exit_code` the CLI maps to the process status.
"""

from __future__ import annotations

from typing import Optional


class EmployeeLocatorError(Exception):
    """Base class for every error raised by the package."""

    exit_code: int = 1


class ArgumentError(EmployeeLocatorError):
    """The source identifier was not supplied."""

    exit_code = 2


class FileLoadError(EmployeeLocatorError, IOError):
    """A local source could not be opened, read or decoded."""

    exit_code = 3

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read '{source}': {reason}")


class NetworkError(EmployeeLocatorError):
    """A remote source could not be fetched or answered with a non-2xx status."""

    exit_code = 4

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Cannot fetch '{url}': {reason}")


class ParseError(EmployeeLocatorError, ValueError):
    """A line of employee data is malformed."""

    exit_code = 5

    def __init__(self, line_index: int, line: str, reason: str) -> None:
        self.line_index = line_index
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_index + 1}: {reason}: {line!r}")

    @property
    def line_number(self) -> int:
        """1-based line number, for humans."""
        return self.line_index + 1


__all__ = [
    "ArgumentError",
    "EmployeeLocatorError",
    "FileLoadError",
    "NetworkError",
    "ParseError",
]
