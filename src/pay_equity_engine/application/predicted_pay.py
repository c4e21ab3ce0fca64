"""Predicted-pay report: fit the regression over a jobs file and write artefacts.

Usage example:
    >>> from pay_equity_engine.application.predicted_pay import run_predicted_pay_report
    >>> from pay_equity_engine.config import AnalysisConfig
    >>> config = AnalysisConfig.from_env()
    >>> fs = ...  # Injected FileSystem from the CLI/composition root
    >>> run_predicted_pay_report(
    ...     jobs_path="data/jobs.csv",
    ...     out_dir="data/processed",
    ...     config=config,
    ...     fs=fs,
    ... )
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from pathlib import Path

import pandas as pd

from ..config import AnalysisConfig
from ..domain.chart_series import ChartSeries, build_chart_series
from ..domain.jobs import EnrichedJob, JobRecord
from ..domain.regression import RegressionResult, enrich_jobs, fit_regression
from ..exceptions import AnalysisConfigMissingError, DependencyMissingError
from ..observability import get_logger
from ..protocols import FileSystem
from ..schemas import PREDICTED_PAY_OUTPUT_COLUMNS
from .job_inputs import load_jobs

ENRICHED_JOBS_FILENAME = "predicted_pay_jobs.csv"
REGRESSION_FILENAME = "predicted_pay_regression.json"
CHART_FILENAME = "predicted_pay_chart.json"


@dataclass(frozen=True)
class PredictedPayAnalysis:
    """In-memory outcome of a predicted-pay analysis over one job snapshot."""

    regression: RegressionResult
    enriched_jobs: tuple[EnrichedJob, ...]
    chart: ChartSeries
    total_jobs: int

    @property
    def excluded_jobs(self) -> int:
        return self.total_jobs - self.regression.eligible_count


@dataclass(frozen=True)
class PredictedPayReportResult:
    analysis: PredictedPayAnalysis
    jobs_path: Path
    regression_path: Path
    chart_path: Path


def analyse_predicted_pay(jobs: Sequence[JobRecord]) -> PredictedPayAnalysis:
    """Run classification, regression and chart derivation over a job snapshot."""
    regression = fit_regression(jobs)
    enriched = enrich_jobs(jobs, regression)
    return PredictedPayAnalysis(
        regression=regression,
        enriched_jobs=tuple(enriched),
        chart=build_chart_series(enriched, regression),
        total_jobs=len(jobs),
    )


def enriched_jobs_frame(enriched_jobs: Sequence[EnrichedJob]) -> pd.DataFrame:
    """Tabulate enriched jobs ordered by ascending points (ties keep input order)."""
    ordered = sorted(enriched_jobs, key=lambda item: item.job.points)
    rows = [
        {
            "job_number": item.job.job_number,
            "title": item.job.title,
            "males": item.job.males,
            "females": item.job.females,
            "points": item.job.points,
            "min_salary": item.job.min_salary,
            "max_salary": item.job.max_salary,
            "predicted_pay": item.predicted_pay,
            "pay_difference": item.pay_difference,
            "dominance": item.dominance,
        }
        for item in ordered
    ]
    return pd.DataFrame(rows, columns=list(PREDICTED_PAY_OUTPUT_COLUMNS))


def run_predicted_pay_report(
    jobs_path: str | Path | None = None,
    out_dir: str | Path | None = None,
    config: AnalysisConfig | None = None,
    fs: FileSystem | None = None,
) -> PredictedPayReportResult:
    """Fit the predicted-pay regression for a jobs file and write report artefacts.

    Args:
        jobs_path: Jobs CSV (defaults to `config.jobs_path`).
        out_dir: Directory for output files (defaults to `config.output_dir`).
        config: Analysis configuration (required; load at entry point).
        fs: Filesystem (required; inject at entry point).

    Returns:
        Paths to the written artefacts alongside the analysis itself.
    """
    if config is None:
        raise AnalysisConfigMissingError()
    if fs is None:
        raise DependencyMissingError("FileSystem", reason="Inject it at the entry point.")

    logger = get_logger("pay_equity_engine.predicted_pay")
    jobs_in = Path(jobs_path) if jobs_path is not None else Path(config.jobs_path)
    out = Path(out_dir) if out_dir is not None else Path(config.output_dir)

    jobs = load_jobs(jobs_in, fs)
    analysis = analyse_predicted_pay(jobs)
    regression = analysis.regression
    logger.info(
        "Fitted regression over %s eligible jobs (%s excluded): slope=%.4f intercept=%.4f r2=%.4f",
        regression.eligible_count,
        analysis.excluded_jobs,
        regression.slope,
        regression.intercept,
        regression.r_squared,
    )

    fs.mkdir(out, parents=True)
    jobs_out = out / ENRICHED_JOBS_FILENAME
    regression_out = out / REGRESSION_FILENAME
    chart_out = out / CHART_FILENAME
    fs.write_csv(enriched_jobs_frame(analysis.enriched_jobs), jobs_out)
    fs.write_json(
        {
            **asdict(regression),
            "total_jobs": analysis.total_jobs,
            "excluded_jobs": analysis.excluded_jobs,
        },
        regression_out,
    )
    fs.write_json(analysis.chart.to_dict(), chart_out)
    logger.info("Wrote predicted-pay artefacts to %s", out)

    return PredictedPayReportResult(
        analysis=analysis,
        jobs_path=jobs_out,
        regression_path=regression_out,
        chart_path=chart_out,
    )
