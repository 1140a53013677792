from __future__ import annotations

import io
from datetime import date

from rich.console import Console

from employee_locator.domain.models import Employee
from employee_locator.reporter import format_employee, print_adults, print_table

JANE = Employee(
    id=1,
    first_name="Jane",
    last_name="Doe",
    age=25,
    email="jane@x.com",
    date_hired=date(2020, 1, 15),
)
LONG_NAME = Employee(
    id=42,
    first_name="Maximiliana-Alexandrina",
    last_name="[bold]von Hohenzollern-Sigmaringen[/bold]",
    age=58,
    email="max@x.com",
    date_hired=date(1999, 9, 9),
)


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=60, color_system=None)


def test_format_employee_line():
    assert format_employee(JANE) == (
        "Employee #1, Jane Doe has reached the age of 21. Can be served alcohol."
    )


def test_print_adults_emits_one_line_each():
    buffer = io.StringIO()

    count = print_adults([JANE, LONG_NAME], console=_console(buffer))

    lines = buffer.getvalue().splitlines()
    assert count == 2
    assert lines == [format_employee(JANE), format_employee(LONG_NAME)]


def test_print_adults_empty_notice():
    buffer = io.StringIO()

    count = print_adults([], console=_console(buffer))

    assert count == 0
    assert "No employees have reached the age of 21." in buffer.getvalue()


def test_print_table_lists_rows():
    buffer = io.StringIO()

    count = print_table([JANE], console=Console(file=buffer, width=120, color_system=None))

    output = buffer.getvalue()
    assert count == 1
    assert "Jane Doe" in output
    assert "jane@x.com" in output
    assert "2020-01-15" in output


def test_print_table_escapes_markup_in_names():
    buffer = io.StringIO()

    print_table([LONG_NAME], console=Console(file=buffer, width=200, color_system=None))

    assert "[bold]von Hohenzollern-Sigmaringen[/bold]" in buffer.getvalue()
