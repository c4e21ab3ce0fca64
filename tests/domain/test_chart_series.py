"""Tests for scatter chart series and the display extension of the regression line."""

import pytest

from pay_equity_engine.domain.chart_series import (
    DISPLAY_MAX_POINTS,
    DISPLAY_MIN_POINTS,
    ChartPoint,
    build_chart_series,
    extension_bounds,
)
from pay_equity_engine.domain.jobs import JobRecord
from pay_equity_engine.domain.regression import RegressionResult, enrich_jobs, fit_regression
from tests.support.jobs import make_job


def _regression(min_points: float, max_points: float) -> RegressionResult:
    return RegressionResult(
        slope=2.0,
        intercept=100.0,
        r_squared=0.9,
        min_points=min_points,
        max_points=max_points,
        min_predicted_pay=2.0 * min_points + 100.0,
        max_predicted_pay=2.0 * max_points + 100.0,
        eligible_count=2,
    )


def test_series_are_partitioned_by_dominance(perfectly_linear_jobs: list[JobRecord]) -> None:
    regression = fit_regression(perfectly_linear_jobs)

    chart = build_chart_series(enrich_jobs(perfectly_linear_jobs, regression), regression)

    assert chart.male_series == (ChartPoint(x=100, y=3000.0),)
    assert chart.female_series == (ChartPoint(x=200, y=4000.0),)
    assert chart.balanced_series == (ChartPoint(x=300, y=5000.0),)


def test_regression_segment_spans_eligible_points(perfectly_linear_jobs: list[JobRecord]) -> None:
    regression = fit_regression(perfectly_linear_jobs)

    chart = build_chart_series(enrich_jobs(perfectly_linear_jobs, regression), regression)

    start, end = chart.regression_segment
    assert (start.x, end.x) == (100, 300)
    assert start.y == pytest.approx(3000.0)
    assert end.y == pytest.approx(5000.0)


def test_extension_reaches_500_points_beyond_each_end() -> None:
    regression = _regression(600, 1200)

    assert extension_bounds(regression) == (100, 1700)


def test_extension_is_clamped_to_display_domain() -> None:
    regression = _regression(50, 2500)

    chart = build_chart_series([], regression)

    start, end = chart.extension_segment
    assert start.x == DISPLAY_MIN_POINTS
    assert end.x == DISPLAY_MAX_POINTS
    assert start.y == pytest.approx(2.0 * -340 + 100.0)
    assert end.y == pytest.approx(2.0 * 2720 + 100.0)


@pytest.mark.parametrize(
    ("min_points", "max_points"),
    [(1, 1), (10, 3000), (2600, 2700), (3500, 4000), (200, 200)],
)
def test_extension_bounds_stay_within_display_domain(
    min_points: float, max_points: float
) -> None:
    extended_min, extended_max = extension_bounds(_regression(min_points, max_points))

    assert DISPLAY_MIN_POINTS <= extended_min <= extended_max <= DISPLAY_MAX_POINTS


def test_empty_job_set_yields_empty_series_and_flat_segments() -> None:
    regression = fit_regression([])

    chart = build_chart_series(enrich_jobs([], regression), regression)

    assert chart.male_series == ()
    assert chart.female_series == ()
    assert chart.balanced_series == ()
    assert chart.regression_segment == (ChartPoint(0.0, 0.0), ChartPoint(0.0, 0.0))
    assert chart.extension_segment == (ChartPoint(-340, 0.0), ChartPoint(500, 0.0))


def test_all_ineligible_jobs_extend_flat_zero_line() -> None:
    jobs = [
        make_job(points=0, max_salary=3000.0),
        make_job(job_number=2, points=150, max_salary=0.0),
    ]
    regression = fit_regression(jobs)

    chart = build_chart_series(enrich_jobs(jobs, regression), regression)

    assert regression.eligible_count == 0
    assert chart.regression_segment == (ChartPoint(0.0, 0.0), ChartPoint(0.0, 0.0))
    assert chart.extension_segment == (ChartPoint(-340, 0.0), ChartPoint(500, 0.0))
    assert len(chart.male_series) + len(chart.female_series) + len(chart.balanced_series) == 2


def test_to_dict_is_json_ready(perfectly_linear_jobs: list[JobRecord]) -> None:
    regression = fit_regression(perfectly_linear_jobs)
    chart = build_chart_series(enrich_jobs(perfectly_linear_jobs, regression), regression)

    payload = chart.to_dict()

    assert set(payload) == {
        "male_series",
        "female_series",
        "balanced_series",
        "regression_segment",
        "extension_segment",
    }
    assert payload["female_series"] == [{"x": 200, "y": 4000.0}]
    assert len(payload["extension_segment"]) == 2
