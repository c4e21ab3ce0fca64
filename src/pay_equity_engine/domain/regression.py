"""Predicted-pay regression: ordinary least squares of maximum salary on job points.

Usage example:
    from pay_equity_engine.domain.jobs import JobRecord
    from pay_equity_engine.domain.regression import enrich_jobs, fit_regression

    jobs = [
        JobRecord(1, "Clerk", 3, 1, 100, 2500.0, 3000.0),
        JobRecord(2, "Analyst", 2, 2, 200, 3200.0, 4000.0),
        JobRecord(3, "Manager", 1, 3, 300, 4100.0, 5000.0),
    ]
    regression = fit_regression(jobs)
    assert regression.slope == 10.0
    enriched = enrich_jobs(jobs, regression)
    assert all(item.pay_difference == 0.0 for item in enriched)

The fit is a pure function of the job snapshot. Recompute it whenever the job set changes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .dominance import classify_dominance
from .jobs import EnrichedJob, JobRecord


@dataclass(frozen=True)
class RegressionResult:
    """Fitted points-to-pay line and the extent of the eligible points range.

    `eligible_count` is the number of jobs that took part in the fit.
    """

    slope: float = 0.0
    intercept: float = 0.0
    r_squared: float = 0.0
    min_points: float = 0.0
    max_points: float = 0.0
    min_predicted_pay: float = 0.0
    max_predicted_pay: float = 0.0
    eligible_count: int = 0


def is_eligible(job: JobRecord) -> bool:
    """Return True when a job takes part in the regression fit."""
    return job.points > 0 and job.max_salary > 0


def predict_pay(points: float, regression: RegressionResult) -> float:
    """Evaluate the regression line at `points` (unclamped)."""
    return regression.slope * points + regression.intercept


def fit_regression(jobs: Sequence[JobRecord]) -> RegressionResult:
    """Fit max_salary against points over the eligible jobs.

    Degenerate inputs produce defined values rather than NaN:
    - no eligible jobs: every field is zero;
    - a single distinct points value (zero denominator): slope 0, intercept mean(y);
    - identical salaries (zero total variance): r_squared 1.0.
    """
    eligible = [job for job in jobs if is_eligible(job)]
    n = len(eligible)
    if n == 0:
        return RegressionResult()

    xs = [job.points for job in eligible]
    ys = [float(job.max_salary) for job in eligible]

    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys, strict=True))
    sum_x2 = sum(x * x for x in xs)

    # Integer points keep the denominator exact.
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        slope = 0.0
        intercept = sum_y / n
    else:
        slope = (n * sum_xy - sum_x * sum_y) / denominator
        intercept = (sum_y - slope * sum_x) / n

    mean_y = sum_y / n
    if len(set(ys)) == 1:
        r_squared = 1.0
    else:
        ss_res = sum((y - (slope * x + intercept)) ** 2 for x, y in zip(xs, ys, strict=True))
        ss_tot = sum((y - mean_y) ** 2 for y in ys)
        r_squared = 1.0 - ss_res / ss_tot

    min_points = min(xs)
    max_points = max(xs)
    return RegressionResult(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        min_points=min_points,
        max_points=max_points,
        min_predicted_pay=slope * min_points + intercept,
        max_predicted_pay=slope * max_points + intercept,
        eligible_count=n,
    )


def enrich_jobs(
    jobs: Sequence[JobRecord],
    regression: RegressionResult | None = None,
) -> list[EnrichedJob]:
    """Attach predicted pay, pay difference and dominance to every job.

    Jobs excluded from the fit still receive a predicted value from the line.
    When `regression` is omitted it is fitted over `jobs`.
    """
    fitted = regression if regression is not None else fit_regression(jobs)
    enriched: list[EnrichedJob] = []
    for job in jobs:
        predicted = predict_pay(job.points, fitted)
        enriched.append(
            EnrichedJob(
                job=job,
                predicted_pay=predicted,
                pay_difference=job.max_salary - predicted,
                dominance=classify_dominance(job),
            )
        )
    return enriched
