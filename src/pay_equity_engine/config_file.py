"""Typed parsing and validation for analysis config files."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class AnalysisConfigFile:
    """Validated analysis config values loaded from a TOML file."""

    jobs_path: str | None = None
    contributions_path: str | None = None
    output_dir: str | None = None
    comparable_value_fraction: float | None = None
    comparable_value_range: float | None = None


class _AnalysisSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    jobs_path: str | None = None
    contributions_path: str | None = None
    output_dir: str | None = None
    comparable_value_fraction: float | None = None
    comparable_value_range: float | None = None

    @field_validator("jobs_path", "contributions_path", "output_dir")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("comparable_value_fraction")
    @classmethod
    def _validate_fraction(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value <= 0.0 or value > 1.0:
            raise ValueError
        return value

    @field_validator("comparable_value_range")
    @classmethod
    def _validate_non_negative(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value < 0.0:
            raise ValueError
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    analysis: _AnalysisSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_analysis_config_file(*, path: Path, fs: FileSystem) -> AnalysisConfigFile:
    """Load and validate an analysis TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.analysis
    return AnalysisConfigFile(
        jobs_path=section.jobs_path,
        contributions_path=section.contributions_path,
        output_dir=section.output_dir,
        comparable_value_fraction=section.comparable_value_fraction,
        comparable_value_range=section.comparable_value_range,
    )
