"""
Parser for the six-field employee text format.

One record per line:

    id,first_name,last_name,age,email,date_hired

There is no header, no quoting and no escaping; a comma inside a field is a
separator. Empty lines are skipped and a trailing carriage return is dropped,
so CRLF files parse the same as LF files. A line holding only spaces is not
empty and fails the field-count check. Any malformed line aborts the whole
parse with a ParseError.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import List, Optional

from employee_locator.config import get_settings
from employee_locator.domain.models import Employee
from employee_locator.errors import ParseError
from employee_locator.utils.logging import get_logger

log = get_logger(__name__)

FIELD_NAMES = ("id", "first_name", "last_name", "age", "email", "date_hired")
FIELD_COUNT = len(FIELD_NAMES)
DELIMITER = ","
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: str, field: str, index: int, line: str) -> int:
    # ASCII digits only: no "1_000", no non-Latin numerals.
    stripped = token.strip()
    if not INTEGER_PATTERN.fullmatch(stripped):
        raise ParseError(index, line, f"{field} is not an integer ({token!r})")
    return int(stripped)


def _parse_date(token: str, date_format: str, index: int, line: str) -> date:
    try:
        return datetime.strptime(token, date_format).date()
    except ValueError as exc:
        raise ParseError(
            index, line, f"date_hired is not a valid {date_format} date ({token!r})"
        ) from exc


def parse_line(line: str, index: int = 0, date_format: str = "%Y-%m-%d") -> Employee:
    """
    Parse one non-empty line into an Employee.

    Parameters
    ----------
    line : str
        The line without its line terminator.
    index : int
        0-based position of the line in the input, reported on failure.
    date_format : str
        strptime format for the hire date.

    Raises
    ------
    ParseError
        If the line does not split into exactly six fields or a typed field
        cannot be converted.
    """
    tokens = line.split(DELIMITER)
    if len(tokens) != FIELD_COUNT:
        raise ParseError(index, line, f"expected {FIELD_COUNT} fields, found {len(tokens)}")

    emp_id = _parse_int(tokens[0], "id", index, line)
    age = _parse_int(tokens[3], "age", index, line)
    if age < 0:
        raise ParseError(index, line, f"age must be non-negative ({age})")
    hired = _parse_date(tokens[5], date_format, index, line)

    return Employee(
        id=emp_id,
        first_name=tokens[1],
        last_name=tokens[2],
        age=age,
        email=tokens[4],
        date_hired=hired,
    )


def parse_employees(raw_text: str, date_format: Optional[str] = None) -> List[Employee]:
    """
    Parse raw text into employees, preserving line order.
    """
    date_format = date_format or get_settings().date_format
    employees: List[Employee] = []
    for index, line in enumerate(raw_text.split("\n")):
        line = line.removesuffix("\r")
        if not line:
            continue
        employees.append(parse_line(line, index=index, date_format=date_format))

    log.debug("Parsed employees", extra={"records": len(employees)})
    return employees


class EmployeeCsvParser:
    """
    Class wrapper around `parse_employees` for injection into the pipeline.
    """

    def __init__(self, date_format: Optional[str] = None) -> None:
        self.date_format = date_format or get_settings().date_format

    def parse(self, raw_text: str) -> List[Employee]:
        return parse_employees(raw_text, date_format=self.date_format)


__all__ = [
    "DELIMITER",
    "FIELD_COUNT",
    "FIELD_NAMES",
    "EmployeeCsvParser",
    "parse_employees",
    "parse_line",
]
