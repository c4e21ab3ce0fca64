"""Benefits disparity detection between comparable female and male job classes.

Usage example:
    from pay_equity_engine.domain.benefits import detect_benefits_disadvantage
    from pay_equity_engine.domain.jobs import JobRecord

    nurse = JobRecord(1, "Nurse", 0, 6, 100, 3000.0, 4000.0)
    mechanic = JobRecord(2, "Mechanic", 5, 0, 105, 3000.0, 4000.0)
    result = detect_benefits_disadvantage(
        [nurse, mechanic],
        contributions={1: 50.0, 2: 80.0},
        comparable_value_range=10,
    )
    assert result.triggered

The comparable value range is supplied by the caller (see `point_spread`), keeping
detection independent of how the tolerance band is derived.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

from .jobs import JobRecord

DEFAULT_COMPARABLE_VALUE_FRACTION = 0.10
HOURS_PER_YEAR = 2080
HOURS_PER_MONTH = 173.3
MONTHS_PER_YEAR = 12

ContributionBasis = Literal["monthly", "annual", "part_time_annual"]
MONTHLY_BASIS: ContributionBasis = "monthly"
ANNUAL_BASIS: ContributionBasis = "annual"
PART_TIME_ANNUAL_BASIS: ContributionBasis = "part_time_annual"


@dataclass(frozen=True)
class BenefitsEntry:
    """Monthly employer benefit contribution for one job, keyed by job number."""

    job_number: int
    employer_contribution: float


@dataclass(frozen=True)
class DisadvantageInstance:
    """A female-exclusive class receiving less than a comparable male-exclusive class."""

    female_job: JobRecord
    male_job: JobRecord
    female_contribution: float
    male_contribution: float

    @property
    def point_difference(self) -> int:
        return abs(self.female_job.points - self.male_job.points)

    def describe(self) -> str:
        return (
            f"{self.female_job.title} ({self.female_job.points} points, "
            f"${_format_amount(self.female_contribution)}/mo) receives less than "
            f"{self.male_job.title} ({self.male_job.points} points, "
            f"${_format_amount(self.male_contribution)}/mo)."
        )


@dataclass(frozen=True)
class BenefitsDetection:
    """Outcome of a benefits disadvantage scan."""

    triggered: bool
    explanation: str
    instances: tuple[DisadvantageInstance, ...] = ()


@dataclass(frozen=True)
class PointSpread:
    """Point extremes across a job set and the derived comparable value range."""

    lowest_points: int
    highest_points: int
    point_range: int
    comparable_value_range: int


@dataclass(frozen=True)
class BenefitsWorksheetEntry:
    job_number: int
    title: str
    points: int
    males: int
    females: int
    employer_contribution: float


@dataclass(frozen=True)
class BenefitsWorksheet:
    """Worksheet summary handed back to the caller for persistence."""

    lowest_points: int
    highest_points: int
    point_range: int
    comparable_value_range: float
    trigger_detected: bool
    trigger_explanation: str
    entries: tuple[BenefitsWorksheetEntry, ...]


def _format_amount(value: float) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def is_female_exclusive(job: JobRecord) -> bool:
    return job.females > 0 and job.males == 0


def is_male_exclusive(job: JobRecord) -> bool:
    return job.males > 0 and job.females == 0


def contributions_by_job(entries: Sequence[BenefitsEntry]) -> dict[int, float]:
    """Index benefit entries by job number; later entries win."""
    return {entry.job_number: entry.employer_contribution for entry in entries}


def point_spread(
    jobs: Sequence[JobRecord],
    fraction: float = DEFAULT_COMPARABLE_VALUE_FRACTION,
) -> PointSpread:
    """Compute the point spread over all jobs and its comparable value range.

    The range is `fraction` of the spread, rounded to whole points (halves round up).
    """
    if not jobs:
        return PointSpread(0, 0, 0, 0)
    points = [job.points for job in jobs]
    lowest = min(points)
    highest = max(points)
    spread = highest - lowest
    return PointSpread(
        lowest_points=lowest,
        highest_points=highest,
        point_range=spread,
        comparable_value_range=_round_half_up(spread * fraction),
    )


def detect_benefits_disadvantage(
    jobs: Sequence[JobRecord],
    contributions: Mapping[int, float],
    comparable_value_range: float,
) -> BenefitsDetection:
    """Scan every female-exclusive × male-exclusive pair for a benefits disadvantage.

    A pair is a disadvantage when the point difference is within
    `comparable_value_range` and the female class receives a strictly lower
    contribution. Missing contributions count as 0. All instances are reported,
    in female-major order.
    """
    female_jobs = [job for job in jobs if is_female_exclusive(job)]
    male_jobs = [job for job in jobs if is_male_exclusive(job)]

    instances: list[DisadvantageInstance] = []
    for female_job in female_jobs:
        female_contribution = contributions.get(female_job.job_number, 0.0)
        for male_job in male_jobs:
            male_contribution = contributions.get(male_job.job_number, 0.0)
            point_diff = abs(female_job.points - male_job.points)
            if point_diff <= comparable_value_range and female_contribution < male_contribution:
                instances.append(
                    DisadvantageInstance(
                        female_job=female_job,
                        male_job=male_job,
                        female_contribution=female_contribution,
                        male_contribution=male_contribution,
                    )
                )

    return BenefitsDetection(
        triggered=bool(instances),
        explanation=" ".join(instance.describe() for instance in instances),
        instances=tuple(instances),
    )


def build_benefits_worksheet(
    jobs: Sequence[JobRecord],
    contributions: Mapping[int, float],
    comparable_value_range: float | None = None,
    fraction: float = DEFAULT_COMPARABLE_VALUE_FRACTION,
) -> BenefitsWorksheet:
    """Combine the point spread and the detection result into a worksheet summary.

    An explicit `comparable_value_range` takes precedence over the derived one.
    """
    spread = point_spread(jobs, fraction=fraction)
    value_range = (
        spread.comparable_value_range if comparable_value_range is None else comparable_value_range
    )
    detection = detect_benefits_disadvantage(jobs, contributions, value_range)
    entries = tuple(
        BenefitsWorksheetEntry(
            job_number=job.job_number,
            title=job.title,
            points=job.points,
            males=job.males,
            females=job.females,
            employer_contribution=contributions.get(job.job_number, 0.0),
        )
        for job in jobs
    )
    return BenefitsWorksheet(
        lowest_points=spread.lowest_points,
        highest_points=spread.highest_points,
        point_range=spread.point_range,
        comparable_value_range=value_range,
        trigger_detected=detection.triggered,
        trigger_explanation=detection.explanation,
        entries=entries,
    )


def monthly_from_annual(annual_contribution: float) -> float:
    """Convert a full-time annual contribution to a monthly amount."""
    return annual_contribution / MONTHS_PER_YEAR


def monthly_from_hourly_part_time(annual_contribution: float) -> float:
    """Convert a part-time annual contribution to a monthly equivalent via the hourly rate."""
    return (annual_contribution / HOURS_PER_YEAR) * HOURS_PER_MONTH


def to_monthly_contribution(amount: float, basis: ContributionBasis = MONTHLY_BASIS) -> float:
    """Normalise a contribution recorded on `basis` to the monthly amount the detector compares."""
    if basis == ANNUAL_BASIS:
        return monthly_from_annual(amount)
    if basis == PART_TIME_ANNUAL_BASIS:
        return monthly_from_hourly_part_time(amount)
    return amount
