"""Benefits check: detect female-class benefit disadvantages from input files.

Usage example:
    >>> from pay_equity_engine.application.benefits import run_benefits_check
    >>> from pay_equity_engine.config import AnalysisConfig
    >>> config = AnalysisConfig.from_env()
    >>> fs = ...  # Injected FileSystem from the CLI/composition root
    >>> run_benefits_check(config=config, fs=fs)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

from ..config import AnalysisConfig
from ..domain.benefits import BenefitsWorksheet, build_benefits_worksheet
from ..exceptions import (
    AnalysisConfigMissingError,
    DependencyMissingError,
    DuplicateJobNumberError,
)
from ..io_validation import find_duplicate_job_number
from ..observability import get_logger
from ..protocols import FileSystem
from .job_inputs import load_contributions, load_jobs

WORKSHEET_FILENAME = "benefits_worksheet.json"


@dataclass(frozen=True)
class BenefitsCheckResult:
    worksheet: BenefitsWorksheet
    worksheet_path: Path


def run_benefits_check(
    jobs_path: str | Path | None = None,
    contributions_path: str | Path | None = None,
    out_dir: str | Path | None = None,
    config: AnalysisConfig | None = None,
    fs: FileSystem | None = None,
) -> BenefitsCheckResult:
    """Build the benefits worksheet for a report and write it as JSON.

    The comparable value range comes from `config.comparable_value_range` when set,
    otherwise it is derived from the job point spread.
    """
    if config is None:
        raise AnalysisConfigMissingError()
    if fs is None:
        raise DependencyMissingError("FileSystem", reason="Inject it at the entry point.")

    logger = get_logger("pay_equity_engine.benefits")
    jobs_in = Path(jobs_path) if jobs_path is not None else Path(config.jobs_path)
    contributions_in = (
        Path(contributions_path)
        if contributions_path is not None
        else Path(config.contributions_path)
    )
    out = Path(out_dir) if out_dir is not None else Path(config.output_dir)

    jobs = load_jobs(jobs_in, fs)
    duplicate = find_duplicate_job_number(jobs)
    if duplicate is not None:
        raise DuplicateJobNumberError(duplicate)
    contributions = load_contributions(contributions_in, fs)

    worksheet = build_benefits_worksheet(
        jobs,
        contributions,
        comparable_value_range=config.comparable_value_range,
        fraction=config.comparable_value_fraction,
    )
    if worksheet.trigger_detected:
        logger.warning("Benefits disadvantage detected: %s", worksheet.trigger_explanation)
    else:
        logger.info(
            "No benefits disadvantage within comparable value range %s",
            worksheet.comparable_value_range,
        )

    fs.mkdir(out, parents=True)
    worksheet_out = out / WORKSHEET_FILENAME
    fs.write_json(asdict(worksheet), worksheet_out)
    logger.info("Wrote benefits worksheet to %s", worksheet_out)
    return BenefitsCheckResult(worksheet=worksheet, worksheet_path=worksheet_out)
