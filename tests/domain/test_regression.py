"""Tests for the predicted-pay regression."""

import math
from dataclasses import replace

import pytest

from pay_equity_engine.domain.jobs import JobRecord
from pay_equity_engine.domain.regression import (
    RegressionResult,
    enrich_jobs,
    fit_regression,
    is_eligible,
    predict_pay,
)
from tests.support.jobs import make_job


def _scattered_jobs() -> list[JobRecord]:
    return [
        make_job(job_number=1, points=120, max_salary=3100.0),
        make_job(job_number=2, points=180, max_salary=3900.0),
        make_job(job_number=3, points=260, max_salary=4350.0),
        make_job(job_number=4, points=340, max_salary=5600.0),
        make_job(job_number=5, points=410, max_salary=5800.0),
    ]


class TestFitRegression:
    """Tests for ordinary least squares over eligible jobs."""

    def test_perfectly_linear_jobs(self, perfectly_linear_jobs: list[JobRecord]) -> None:
        result = fit_regression(perfectly_linear_jobs)

        assert result.slope == pytest.approx(10.0)
        assert result.intercept == pytest.approx(2000.0)
        assert result.r_squared == pytest.approx(1.0)
        assert result.min_points == 100
        assert result.max_points == 300
        assert result.min_predicted_pay == pytest.approx(3000.0)
        assert result.max_predicted_pay == pytest.approx(5000.0)
        assert result.eligible_count == 3

    def test_no_jobs_gives_zero_result(self) -> None:
        assert fit_regression([]) == RegressionResult()

    def test_only_ineligible_jobs_gives_zero_result(self) -> None:
        jobs = [
            make_job(points=0, max_salary=3000.0),
            make_job(points=150, max_salary=0.0),
        ]

        result = fit_regression(jobs)

        assert result == RegressionResult()
        assert result.eligible_count == 0

    def test_ineligible_jobs_are_excluded_from_fit(
        self, perfectly_linear_jobs: list[JobRecord]
    ) -> None:
        outlier = make_job(job_number=9, points=0, max_salary=99999.0)

        with_outlier = fit_regression([*perfectly_linear_jobs, outlier])

        assert with_outlier == fit_regression(perfectly_linear_jobs)

    def test_single_eligible_job_falls_back_to_flat_line(self) -> None:
        result = fit_regression([make_job(points=200, max_salary=4200.0)])

        assert result.slope == 0.0
        assert result.intercept == pytest.approx(4200.0)
        assert result.r_squared == 1.0
        assert result.min_points == result.max_points == 200
        assert result.min_predicted_pay == pytest.approx(4200.0)

    def test_identical_points_use_mean_salary(self) -> None:
        jobs = [
            make_job(job_number=1, points=250, max_salary=3000.0),
            make_job(job_number=2, points=250, max_salary=5000.0),
        ]

        result = fit_regression(jobs)

        assert result.slope == 0.0
        assert result.intercept == pytest.approx(4000.0)
        assert not math.isnan(result.r_squared)
        assert result.r_squared == pytest.approx(0.0)

    def test_identical_salaries_have_perfect_r_squared(self) -> None:
        jobs = [
            make_job(job_number=1, points=100, max_salary=0.1),
            make_job(job_number=2, points=200, max_salary=0.1),
            make_job(job_number=3, points=300, max_salary=0.1),
        ]

        result = fit_regression(jobs)

        assert result.r_squared == 1.0
        assert result.slope == pytest.approx(0.0)
        assert result.intercept == pytest.approx(0.1)

    def test_r_squared_for_noisy_data(self) -> None:
        result = fit_regression(_scattered_jobs())

        assert 0.0 < result.r_squared < 1.0
        assert result.slope > 0

    def test_translation_shifts_intercept_only(self) -> None:
        jobs = _scattered_jobs()
        shift = 750.0
        shifted = [replace(job, max_salary=job.max_salary + shift) for job in jobs]

        base = fit_regression(jobs)
        moved = fit_regression(shifted)

        assert moved.slope == pytest.approx(base.slope)
        assert moved.intercept == pytest.approx(base.intercept + shift)
        assert moved.r_squared == pytest.approx(base.r_squared)

    def test_fit_is_deterministic(self) -> None:
        jobs = _scattered_jobs()

        assert fit_regression(jobs) == fit_regression(jobs)


class TestPredictPay:
    """Tests for evaluating the regression line."""

    @pytest.mark.parametrize("points", [-500, 0, 150, 4000])
    def test_prediction_is_linear_and_unclamped(self, points: int) -> None:
        regression = RegressionResult(slope=7.5, intercept=1200.0, min_points=100, max_points=300)

        assert predict_pay(points, regression) == 7.5 * points + 1200.0


class TestEnrichJobs:
    """Tests for per-job predicted pay and pay difference."""

    def test_linear_jobs_have_zero_pay_difference(
        self, perfectly_linear_jobs: list[JobRecord]
    ) -> None:
        enriched = enrich_jobs(perfectly_linear_jobs)

        for item in enriched:
            assert item.predicted_pay == pytest.approx(item.job.max_salary)
            assert item.pay_difference == pytest.approx(0.0)

    def test_ineligible_jobs_still_receive_prediction(
        self, perfectly_linear_jobs: list[JobRecord]
    ) -> None:
        vacant = make_job(job_number=4, title="Vacant", points=0, max_salary=0.0)
        jobs = [*perfectly_linear_jobs, vacant]

        enriched = enrich_jobs(jobs)

        assert len(enriched) == 4
        assert enriched[3].predicted_pay == pytest.approx(2000.0)
        assert enriched[3].pay_difference == pytest.approx(-2000.0)

    def test_enrichment_preserves_order_and_dominance(
        self, perfectly_linear_jobs: list[JobRecord]
    ) -> None:
        enriched = enrich_jobs(perfectly_linear_jobs)

        assert [item.job.job_number for item in enriched] == [1, 2, 3]
        assert [item.dominance for item in enriched] == ["Male", "Female", "Balanced"]

    def test_uses_supplied_regression(self, perfectly_linear_jobs: list[JobRecord]) -> None:
        regression = RegressionResult(slope=0.0, intercept=3500.0)

        enriched = enrich_jobs(perfectly_linear_jobs, regression)

        assert [item.pay_difference for item in enriched] == [-500.0, 500.0, 1500.0]

    def test_input_records_are_not_mutated(self, perfectly_linear_jobs: list[JobRecord]) -> None:
        before = list(perfectly_linear_jobs)

        enriched = enrich_jobs(perfectly_linear_jobs)

        assert perfectly_linear_jobs == before
        assert enriched[0].job is perfectly_linear_jobs[0]


def test_is_eligible_requires_positive_points_and_salary() -> None:
    assert is_eligible(make_job(points=1, max_salary=1.0))
    assert not is_eligible(make_job(points=0, max_salary=1.0))
    assert not is_eligible(make_job(points=1, max_salary=0.0))
