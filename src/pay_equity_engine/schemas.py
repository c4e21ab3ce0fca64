"""Column contracts for analysis inputs and outputs."""

from __future__ import annotations

from .exceptions import MissingColumnsError

# Job classifications for one report
JOB_REQUIRED_COLUMNS = frozenset(
    [
        "job_number",
        "title",
        "males",
        "females",
        "points",
        "min_salary",
        "max_salary",
    ]
)

# Benefits worksheet inputs; an optional contribution_basis column selects the conversion
CONTRIBUTION_REQUIRED_COLUMNS = frozenset(["job_number", "employer_contribution"])

PREDICTED_PAY_OUTPUT_COLUMNS = (
    "job_number",
    "title",
    "males",
    "females",
    "points",
    "min_salary",
    "max_salary",
    "predicted_pay",
    "pay_difference",
    "dominance",  # Male | Female | Balanced
)


def validate_columns(df_columns: list[str], required: frozenset[str], source: str) -> None:
    """Validate that a DataFrame has the required columns.

    Raises:
        MissingColumnsError: If required columns are missing.
    """
    missing = required - set(df_columns)
    if missing:
        raise MissingColumnsError(source, sorted(missing))
