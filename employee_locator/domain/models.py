"""
Domain models for the Employee Locator.

Defines the employee record produced by the parser from one line of the
six-field text format. Records are immutable once built.
"""
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

ADULT_AGE = 21


class Employee(BaseModel):
    """
    Representation of a single employee line.
    """

    id: int = Field(..., description="Numeric identifier, unique per batch (not enforced).")
    first_name: str = Field(..., description="Given name, kept verbatim.")
    last_name: str = Field(..., description="Family name, kept verbatim.")
    age: int = Field(..., ge=0, description="Age in whole years.")
    email: str = Field(..., description="Contact address; format is not validated.")
    date_hired: date = Field(..., description="Calendar date the employee was hired.")

    model_config = {"frozen": True}

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_adult(self) -> bool:
        """Whether the employee has reached ADULT_AGE."""
        return self.age >= ADULT_AGE


__all__ = ["ADULT_AGE", "Employee"]
