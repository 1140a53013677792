from __future__ import annotations

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from employee_locator.domain.models import ADULT_AGE, Employee

MESSAGE_TEMPLATE = (
    "Employee #{id}, {first_name} {last_name} has reached the age of {age}. "
    "Can be served alcohol."
)


def format_employee(employee: Employee) -> str:
    """Render the one-line notice for an adult employee."""
    return MESSAGE_TEMPLATE.format(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        age=ADULT_AGE,
    )


def print_adults(adults: Iterable[Employee], console: Optional[Console] = None) -> int:
    """
    Print one green line per adult. Returns the number of lines printed.
    """
    console = console or Console()
    count = 0
    for employee in adults:
        # Names and emails are printed as-is, on one line each.
        console.print(
            format_employee(employee),
            style="green",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        count += 1

    if count == 0:
        console.print("[dim]No employees have reached the age of 21.[/dim]")
    return count


def print_table(adults: Iterable[Employee], console: Optional[Console] = None) -> int:
    """
    Render adults as a rich table. Returns the number of rows.
    """
    console = console or Console()

    table = Table(
        title="Employees aged 21 or over",
        box=box.ROUNDED,
        caption="In file order",
    )
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold green")
    table.add_column("Age", justify="right", style="magenta")
    table.add_column("Email", style="blue")
    table.add_column("Hired", justify="right", style="yellow")

    count = 0
    for employee in adults:
        table.add_row(
            str(employee.id),
            escape(employee.full_name),
            str(employee.age),
            escape(employee.email),
            employee.date_hired.isoformat(),
        )
        count += 1

    if count == 0:
        console.print("[yellow]No employees have reached the age of 21.[/yellow]")
        return 0

    console.print(table)
    return count


__all__ = ["MESSAGE_TEMPLATE", "format_employee", "print_adults", "print_table"]
