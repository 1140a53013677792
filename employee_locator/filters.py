"""
Adult filtering over a parsed batch of employees.

The result is lazy and restartable: each iteration walks the stored batch again
and re-applies `Employee.is_adult()`. The batch itself is never modified.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from employee_locator.domain.models import ADULT_AGE, Employee


class AdultSequence:
    """
    Restartable, in-order view of the adults in a batch.

    Call `to_list()` to materialize it.
    """

    threshold: int = ADULT_AGE

    def __init__(self, employees: Iterable[Employee]) -> None:
        self._employees: Tuple[Employee, ...] = tuple(employees)

    def __iter__(self) -> Iterator[Employee]:
        for employee in self._employees:
            if employee.is_adult():
                yield employee

    def to_list(self) -> List[Employee]:
        return list(self)

    def __repr__(self) -> str:
        return f"AdultSequence(candidates={len(self._employees)}, threshold={self.threshold})"


class AdultFilter:
    """Select employees aged ADULT_AGE or older."""

    threshold: int = ADULT_AGE

    def filter(self, employees: Iterable[Employee]) -> AdultSequence:
        return AdultSequence(employees)


def find_adults(employees: Iterable[Employee]) -> AdultSequence:
    """Shortcut for `AdultFilter().filter(employees)`."""
    return AdultFilter().filter(employees)


__all__ = ["AdultFilter", "AdultSequence", "find_adults"]
