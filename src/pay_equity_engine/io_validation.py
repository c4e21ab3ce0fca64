"""Pydantic-based boundary validation for job and contribution inputs.

Rows arrive as strings (CSV). Each is validated and converted before any
domain object is built; the domain assumes non-negative, well-typed values.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .domain.benefits import (
    MONTHLY_BASIS,
    BenefitsEntry,
    ContributionBasis,
    to_monthly_contribution,
)
from .domain.jobs import JobRecord
from .exceptions import DuplicateContributionError, JobDataValidationError
from .schemas import CONTRIBUTION_REQUIRED_COLUMNS, JOB_REQUIRED_COLUMNS, validate_columns


class _JobRowModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    job_number: int
    title: str
    males: int = Field(ge=0)
    females: int = Field(ge=0)
    points: int = Field(ge=0)
    min_salary: float = Field(ge=0)
    max_salary: float = Field(ge=0)

    @field_validator("title")
    @classmethod
    def _validate_title(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("title must not be empty")
        return text


class _ContributionRowModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    job_number: int
    employer_contribution: float = Field(ge=0)
    contribution_basis: ContributionBasis = MONTHLY_BASIS

    @field_validator("contribution_basis", mode="before")
    @classmethod
    def _default_blank_basis(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return MONTHLY_BASIS
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<row>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def _clean_row(row: Mapping[str, object]) -> dict[str, object]:
    return {
        str(key): value.strip() if isinstance(value, str) else value
        for key, value in row.items()
    }


def _records(df: pd.DataFrame) -> list[dict[str, object]]:
    return [_clean_row(row) for row in df.fillna("").to_dict(orient="records")]


def parse_job_records(df: pd.DataFrame, source: str = "Jobs input") -> list[JobRecord]:
    """Validate job rows and convert them to domain records, preserving order.

    Raises:
        MissingColumnsError: If a required column is absent.
        JobDataValidationError: On the first row that fails validation.
    """
    validate_columns(list(df.columns), JOB_REQUIRED_COLUMNS, source)
    jobs: list[JobRecord] = []
    for position, row in enumerate(_records(df), start=1):
        try:
            model = _JobRowModel.model_validate(row)
        except ValidationError as exc:
            raise JobDataValidationError(source, position, _format_validation_error(exc)) from exc
        jobs.append(
            JobRecord(
                job_number=model.job_number,
                title=model.title,
                males=model.males,
                females=model.females,
                points=model.points,
                min_salary=model.min_salary,
                max_salary=model.max_salary,
            )
        )
    return jobs


def parse_benefits_entries(
    df: pd.DataFrame,
    source: str = "Contributions input",
) -> list[BenefitsEntry]:
    """Validate contribution rows and normalise them to monthly amounts.

    Each job number may appear at most once. The optional `contribution_basis`
    column (`monthly`, `annual` or `part_time_annual`; blank means monthly)
    selects the conversion applied to `employer_contribution`.

    Raises:
        MissingColumnsError: If a required column is absent.
        JobDataValidationError: On the first row that fails validation.
        DuplicateContributionError: If a job number repeats.
    """
    validate_columns(list(df.columns), CONTRIBUTION_REQUIRED_COLUMNS, source)
    entries: list[BenefitsEntry] = []
    seen: set[int] = set()
    for position, row in enumerate(_records(df), start=1):
        try:
            model = _ContributionRowModel.model_validate(row)
        except ValidationError as exc:
            raise JobDataValidationError(source, position, _format_validation_error(exc)) from exc
        if model.job_number in seen:
            raise DuplicateContributionError(model.job_number)
        seen.add(model.job_number)
        entries.append(
            BenefitsEntry(
                job_number=model.job_number,
                employer_contribution=to_monthly_contribution(
                    model.employer_contribution, model.contribution_basis
                ),
            )
        )
    return entries


def find_duplicate_job_number(jobs: Sequence[JobRecord]) -> int | None:
    """Return the first repeated job number, or None when all are unique."""
    seen: set[int] = set()
    for job in jobs:
        if job.job_number in seen:
            return job.job_number
        seen.add(job.job_number)
    return None
