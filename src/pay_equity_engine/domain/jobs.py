"""Job classification records and their derived, enriched form.

Usage example:
    from pay_equity_engine.domain.jobs import JobRecord

    job = JobRecord(
        job_number=1,
        title="Librarian",
        males=0,
        females=4,
        points=210,
        min_salary=3100.0,
        max_salary=4200.0,
    )
    assert job.total_employees == 4
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Dominance = Literal["Male", "Female", "Balanced"]

MALE: Dominance = "Male"
FEMALE: Dominance = "Female"
BALANCED: Dominance = "Balanced"


@dataclass(frozen=True)
class JobRecord:
    """One job classification within a pay equity report.

    Values are assumed validated (non-negative) before they reach the domain.
    Salaries are monthly; `max_salary` is the value compared for pay equity.
    """

    job_number: int
    title: str
    males: int
    females: int
    points: int
    min_salary: float
    max_salary: float

    @property
    def total_employees(self) -> int:
        return self.males + self.females


@dataclass(frozen=True)
class EnrichedJob:
    """A job record alongside its predicted pay and dominance classification."""

    job: JobRecord
    predicted_pay: float
    pay_difference: float  # max_salary - predicted_pay
    dominance: Dominance
