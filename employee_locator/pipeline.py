"""
Pipeline orchestration: load, parse, then filter.

Usage (example from CLI):
    from employee_locator.pipeline import run

    for adult in run("employees.csv"):
        print(adult.full_name)

There is no retry and no caching here. Whatever a stage raises reaches the
caller unchanged, and no partial result is returned.
"""

from __future__ import annotations

from typing import Optional

from employee_locator.config import Settings, get_settings
from employee_locator.filters import AdultFilter, AdultSequence
from employee_locator.loaders import DataLoader, resolve_loader
from employee_locator.parser import EmployeeCsvParser
from employee_locator.utils.logging import get_logger

log = get_logger(__name__)


class EmployeePipeline:
    """
    Compose a loader, a parser and the adult filter.

    Parameters
    ----------
    loader : DataLoader
        Where the raw text comes from.
    parser : EmployeeCsvParser | None
        Text-to-records converter. Defaults to one built from settings.
    adult_filter : AdultFilter | None
        Record selector. Defaults to AdultFilter().
    """

    def __init__(
        self,
        loader: DataLoader,
        parser: Optional[EmployeeCsvParser] = None,
        adult_filter: Optional[AdultFilter] = None,
    ) -> None:
        self.loader = loader
        self.parser = parser or EmployeeCsvParser()
        self.adult_filter = adult_filter or AdultFilter()

    def find_adults(self) -> AdultSequence:
        source = self.loader.source
        log.info("[LOAD] start", extra={"source": source, "loader": self.loader.kind})
        raw_text = self.loader.load()
        log.info("[LOAD] done", extra={"source": source, "chars": len(raw_text)})

        employees = self.parser.parse(raw_text)
        log.info("[PARSE] done", extra={"source": source, "records": len(employees)})

        return self.adult_filter.filter(employees)


def run(source: str, settings: Optional[Settings] = None) -> AdultSequence:
    """
    Run the whole pipeline for one source identifier.

    Parameters
    ----------
    source : str
        File path or http(s) URL.
    settings : Settings | None
        Overrides for loader and parser behaviour. Defaults to get_settings().

    Returns
    -------
    AdultSequence
        Lazy, restartable sequence of employees aged 21 or over, in file order.
    """
    settings = settings or get_settings()
    loader = resolve_loader(source, settings=settings)
    parser = EmployeeCsvParser(date_format=settings.date_format)
    return EmployeePipeline(loader, parser=parser).find_adults()


__all__ = ["EmployeePipeline", "run"]
