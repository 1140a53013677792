"""
Sample data generator for the Employee Locator.

Writes deterministic pseudo-random employees in the six-field line format the
parser reads (no header, LF line endings).
"""

from __future__ import annotations

import random
import sys
import tempfile
import time
from datetime import date, timedelta
from pathlib import Path
from typing import Iterator

import typer

app = typer.Typer(help="Generate synthetic employee data files.")

FIRST_NAMES = ["Jane", "Tom", "Ava", "Liam", "Mia", "Noah", "Zoe", "Omar", "Ines", "Kai"]
LAST_NAMES = ["Doe", "Lee", "Smith", "Garcia", "Okafor", "Novak", "Tanaka", "Silva"]
EMAIL_DOMAIN = "example.com"
HIRE_EPOCH = date(2000, 1, 1)


def _generate_rows(rows: int, seed: int, min_age: int, max_age: int) -> Iterator[str]:
    rng = random.Random(seed)
    span_days = (date(2024, 12, 31) - HIRE_EPOCH).days
    for emp_id in range(1, rows + 1):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        age = rng.randint(min_age, max_age)
        hired = HIRE_EPOCH + timedelta(days=rng.randint(0, span_days))
        email = f"{first.lower()}.{last.lower()}{emp_id}@{EMAIL_DOMAIN}"
        yield ",".join([str(emp_id), first, last, str(age), email, hired.isoformat()])


def _write_rows(path: Path, rows: int, seed: int, min_age: int, max_age: int) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        for position, line in enumerate(_generate_rows(rows, seed, min_age, max_age)):
            f.write(line if position == 0 else "\n" + line)


@app.command()
def main(
    rows: int = typer.Option(
        100,
        "--rows",
        "-r",
        help="Number of employees to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    min_age: int = typer.Option(16, "--min-age", help="Youngest generated age."),
    max_age: int = typer.Option(65, "--max-age", help="Oldest generated age."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (if omitted, a temp file will be used).",
    ),
) -> None:
    """
    Generate a synthetic employee file.
    """
    if min_age < 0 or max_age < min_age:
        raise typer.BadParameter("require 0 <= --min-age <= --max-age")

    start = time.perf_counter()
    if output:
        path = output
        path.parent.mkdir(parents=True, exist_ok=True)
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="employees_"))
        path = tmpdir / "employees.csv"

    typer.echo(f"Generating {rows:,} employees -> {path} (seed={seed})")
    _write_rows(path, rows=rows, seed=seed, min_age=min_age, max_age=max_age)
    typer.echo(f"Done in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
