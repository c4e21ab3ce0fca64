"""Centralised, injectable configuration for the pay equity engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import AnalysisConfigFile
from .domain.benefits import DEFAULT_COMPARABLE_VALUE_FRACTION

DEFAULT_JOBS_PATH = "data/jobs.csv"
DEFAULT_CONTRIBUTIONS_PATH = "data/contributions.csv"
DEFAULT_OUTPUT_DIR = "data/processed"


class FractionEnvVarError(ValueError):
    """Raised when an environment variable must be a fraction in (0, 1]."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a number greater than 0 and at most 1.")


class NonNegativeNumberEnvVarError(ValueError):
    """Raised when an environment variable must be a non-negative number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a non-negative number.")


@dataclass(frozen=True)
class AnalysisConfig:
    """Immutable configuration for the analysis use cases.

    Load from environment with `AnalysisConfig.from_env()` or construct directly for testing.
    """

    jobs_path: str = DEFAULT_JOBS_PATH
    contributions_path: str = DEFAULT_CONTRIBUTIONS_PATH
    output_dir: str = DEFAULT_OUTPUT_DIR

    # Benefits worksheet
    comparable_value_fraction: float = DEFAULT_COMPARABLE_VALUE_FRACTION
    comparable_value_range: float | None = None  # overrides the derived range when set

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            AnalysisConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            jobs_path=os.getenv("PAY_EQUITY_JOBS_PATH", "").strip() or DEFAULT_JOBS_PATH,
            contributions_path=os.getenv("PAY_EQUITY_CONTRIBUTIONS_PATH", "").strip()
            or DEFAULT_CONTRIBUTIONS_PATH,
            output_dir=os.getenv("PAY_EQUITY_OUTPUT_DIR", "").strip() or DEFAULT_OUTPUT_DIR,
            comparable_value_fraction=_parse_fraction(
                os.getenv("PAY_EQUITY_COMPARABLE_VALUE_FRACTION", ""),
                env_name="PAY_EQUITY_COMPARABLE_VALUE_FRACTION",
            ),
            comparable_value_range=_parse_optional_non_negative(
                os.getenv("PAY_EQUITY_COMPARABLE_VALUE_RANGE", ""),
                env_name="PAY_EQUITY_COMPARABLE_VALUE_RANGE",
            ),
        )

    def with_overrides(
        self,
        *,
        jobs_path: str | None = None,
        contributions_path: str | None = None,
        output_dir: str | None = None,
        comparable_value_range: float | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            jobs_path=self.jobs_path if jobs_path is None else jobs_path,
            contributions_path=self.contributions_path
            if contributions_path is None
            else contributions_path,
            output_dir=self.output_dir if output_dir is None else output_dir,
            comparable_value_range=self.comparable_value_range
            if comparable_value_range is None
            else comparable_value_range,
        )

    def with_file_overrides(self, file_config: AnalysisConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            jobs_path=self.jobs_path if file_config.jobs_path is None else file_config.jobs_path,
            contributions_path=self.contributions_path
            if file_config.contributions_path is None
            else file_config.contributions_path,
            output_dir=self.output_dir
            if file_config.output_dir is None
            else file_config.output_dir,
            comparable_value_fraction=self.comparable_value_fraction
            if file_config.comparable_value_fraction is None
            else file_config.comparable_value_fraction,
            comparable_value_range=self.comparable_value_range
            if file_config.comparable_value_range is None
            else file_config.comparable_value_range,
        )


def _parse_fraction(value: str, *, env_name: str) -> float:
    """Parse an optional (0, 1] fraction, falling back to the default."""
    text = value.strip()
    if not text:
        return DEFAULT_COMPARABLE_VALUE_FRACTION
    try:
        parsed = float(text)
    except ValueError as exc:
        raise FractionEnvVarError(env_name) from exc
    if not 0.0 < parsed <= 1.0:
        raise FractionEnvVarError(env_name)
    return parsed


def _parse_optional_non_negative(value: str, *, env_name: str) -> float | None:
    """Parse an optional non-negative number from an environment variable."""
    text = value.strip()
    if not text:
        return None
    try:
        parsed = float(text)
    except ValueError as exc:
        raise NonNegativeNumberEnvVarError(env_name) from exc
    if parsed < 0:
        raise NonNegativeNumberEnvVarError(env_name)
    return parsed
