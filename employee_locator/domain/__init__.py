"""
Domain package for the Employee Locator.

Exports the core domain model shared by the parser, filter and reporter.
Keep this package focused on data definitions and validation concerns.
"""

from employee_locator.domain.models import ADULT_AGE, Employee

__all__ = [
    "ADULT_AGE",
    "Employee",
]
