from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from employee_locator.domain.models import ADULT_AGE, Employee
from employee_locator.filters import AdultFilter, AdultSequence, find_adults
from employee_locator.parser import parse_employees

HIRED = date(2020, 1, 1)


def _employee(emp_id: int, age: int) -> Employee:
    return Employee(
        id=emp_id,
        first_name=f"First{emp_id}",
        last_name=f"Last{emp_id}",
        age=age,
        email=f"e{emp_id}@x.com",
        date_hired=HIRED,
    )


def test_adult_threshold_is_twenty_one():
    assert ADULT_AGE == 21
    assert AdultFilter.threshold == ADULT_AGE


@pytest.mark.parametrize("age", [0, 1, 18, 20, 21, 22, 40, 120])
def test_employee_included_iff_age_at_least_threshold(age: int):
    adults = list(find_adults([_employee(1, age)]))

    assert (len(adults) == 1) == (age >= ADULT_AGE)


def test_filter_preserves_relative_order():
    ages = [30, 12, 21, 20, 55, 19, 22]
    employees = [_employee(i, age) for i, age in enumerate(ages)]

    adults = AdultFilter().filter(employees)

    assert [e.id for e in adults] == [0, 2, 4, 6]


def test_sequence_is_restartable():
    employees = [_employee(1, 25), _employee(2, 10), _employee(3, 40)]
    adults = find_adults(employees)

    first = [e.id for e in adults]
    second = [e.id for e in adults]

    assert first == second == [1, 3]


def test_one_shot_iterator_input_is_still_restartable():
    adults = find_adults(iter([_employee(1, 25), _employee(2, 30)]))

    assert adults.to_list() == adults.to_list()
    assert len(adults.to_list()) == 2


def test_filter_is_lazy_per_iteration():
    adults = find_adults([_employee(1, 25), _employee(2, 30)])
    iterator = iter(adults)

    assert next(iterator).id == 1
    assert next(iterator).id == 2
    with pytest.raises(StopIteration):
        next(iterator)


def test_empty_input_gives_empty_sequence():
    adults = find_adults([])

    assert isinstance(adults, AdultSequence)
    assert adults.to_list() == []


def test_round_trip_jane_and_tom():
    raw = "1,Jane,Doe,25,jane@x.com,2020-01-15\n2,Tom,Lee,19,tom@x.com,2021-03-01"

    adults = find_adults(parse_employees(raw)).to_list()

    assert len(adults) == 1
    assert adults[0].id == 1
    assert adults[0].full_name == "Jane Doe"
    assert adults[0].age == 25


def test_employee_is_immutable():
    employee = _employee(1, 25)

    with pytest.raises(ValidationError):
        employee.age = 10  # type: ignore[misc]


def test_employee_rejects_negative_age():
    with pytest.raises(ValidationError):
        _employee(1, -1)
