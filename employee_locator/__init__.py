"""
Employee Locator - find employees old enough to be served alcohol.

Loads six-field employee records from a local file or an http(s) URL, parses
them into immutable Employee models and yields those aged 21 or over:

- Loaders: local file and HTTP, selected from the source identifier
- Parser: strict six-field lines, whole-parse abort on the first bad line
- Filter: lazy, restartable sequence of adults in file order
- Pipeline: load, parse, filter; errors propagate unchanged
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from employee_locator.config import Settings, get_settings
from employee_locator.domain.models import ADULT_AGE, Employee
from employee_locator.errors import (
    ArgumentError,
    EmployeeLocatorError,
    FileLoadError,
    NetworkError,
    ParseError,
)
from employee_locator.filters import AdultFilter, AdultSequence, find_adults
from employee_locator.loaders import (
    AbstractDataLoader,
    DataLoader,
    FileLoader,
    NetworkLoader,
    available_loaders,
    resolve_loader,
)
from employee_locator.parser import EmployeeCsvParser, parse_employees
from employee_locator.pipeline import EmployeePipeline, run
from employee_locator.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "ADULT_AGE",
    "Employee",
    # Errors
    "ArgumentError",
    "EmployeeLocatorError",
    "FileLoadError",
    "NetworkError",
    "ParseError",
    # Loaders
    "AbstractDataLoader",
    "DataLoader",
    "FileLoader",
    "NetworkLoader",
    "available_loaders",
    "resolve_loader",
    # Parsing and filtering
    "EmployeeCsvParser",
    "parse_employees",
    "AdultFilter",
    "AdultSequence",
    "find_adults",
    # Orchestration
    "EmployeePipeline",
    "run",
    # Logging
    "configure_logging",
    "get_logger",
]
