"""Custom exceptions for the pay equity engine.

The domain raises nothing for valid input; these exceptions cover the boundary
(file inputs, configuration and dependency wiring).
"""

from __future__ import annotations


class PayEquityError(Exception):
    """Base exception for all pay equity engine errors."""

    pass


class InputFileNotFoundError(PayEquityError):
    """Raised when an input CSV is missing."""

    def __init__(self, label: str, path: str) -> None:
        self.path = path
        super().__init__(f"{label} not found: {path}")


class MissingColumnsError(PayEquityError):
    """Raised when an input file lacks required columns."""

    def __init__(self, source: str, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"{source}: Missing required columns: {missing}")


class JobDataValidationError(PayEquityError):
    """Raised when an input row fails boundary validation.

    Negative counts, points or money and empty titles are rejected here so the
    domain never has to re-validate.
    """

    def __init__(self, source: str, row_number: int, detail: str) -> None:
        self.row_number = row_number
        super().__init__(f"{source} row {row_number}: {detail}")


class DuplicateContributionError(PayEquityError):
    """Raised when more than one contribution row targets the same job number."""

    def __init__(self, job_number: int) -> None:
        self.job_number = job_number
        super().__init__(f"Duplicate employer contribution for job number {job_number}.")


class DuplicateJobNumberError(PayEquityError):
    """Raised when contributions cannot be joined because job numbers repeat."""

    def __init__(self, job_number: int) -> None:
        self.job_number = job_number
        super().__init__(
            f"Job number {job_number} appears more than once; "
            "benefit contributions cannot be joined unambiguously."
        )


class DependencyMissingError(PayEquityError):
    """Raised when a required dependency was not injected."""

    def __init__(self, dependency: str, *, reason: str = "") -> None:
        message = f"{dependency} is required."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class AnalysisConfigMissingError(PayEquityError):
    """Raised when a use case is invoked without configuration."""

    def __init__(self) -> None:
        super().__init__("AnalysisConfig is required. Load it at the entry point.")


class ConfigFileNotFoundError(PayEquityError):
    """Raised when a config file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(PayEquityError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file could not be parsed ({path}): {detail}")


class ConfigFileValidationError(PayEquityError):
    """Raised when a config file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file is invalid ({path}): {detail}")
