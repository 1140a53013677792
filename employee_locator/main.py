from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console

from employee_locator.config import get_settings
from employee_locator.errors import ArgumentError, EmployeeLocatorError
from employee_locator.loaders import available_loaders
from employee_locator.pipeline import run as run_pipeline
from employee_locator.reporter import print_adults, print_table
from employee_locator.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Employee Locator CLI.")
log = get_logger(__name__)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"timeout={settings.request_timeout_seconds}s retries={settings.network_retries} | "
        f"encoding={settings.file_encoding} date_format={settings.date_format} | "
        f"loaders={', '.join(available_loaders())}"
    )


@app.command()
def run(
    source: Optional[str] = typer.Argument(
        None,
        help="File path or http(s) URL of the employee data.",
        show_default=False,
    ),
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Render adults as a table instead of one line each.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override the log level (default from settings).",
    ),
    json_logs: Optional[bool] = typer.Option(
        None,
        "--json-logs/--plain-logs",
        help="Emit logs as JSON (default from settings).",
    ),
) -> None:
    """
    Load employees from SOURCE and list the ones aged 21 or over.
    """
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_logs=settings.log_json if json_logs is None else json_logs,
    )
    err_console = Console(stderr=True)

    try:
        if not source:
            raise ArgumentError("Missing SOURCE: pass a file path or an http(s) URL.")
        adults = run_pipeline(source, settings=settings)
    except EmployeeLocatorError as exc:
        log.debug("Run failed", exc_info=True)
        err_console.print(
            f"Error: {exc}", style="bold red", markup=False, highlight=False, soft_wrap=True
        )
        raise typer.Exit(code=exc.exit_code) from exc

    if table:
        print_table(adults)
    else:
        print_adults(adults)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
