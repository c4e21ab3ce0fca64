"""Plotting series for the predicted-pay scatter chart.

The extension segment is a display aid only; it has no compliance meaning.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .jobs import BALANCED, FEMALE, MALE, EnrichedJob
from .regression import RegressionResult, predict_pay

DISPLAY_MIN_POINTS = -340
DISPLAY_MAX_POINTS = 2720
LINE_EXTENSION_POINTS = 500


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float


@dataclass(frozen=True)
class ChartSeries:
    """Scatter series by dominance plus the regression and extension segments."""

    male_series: tuple[ChartPoint, ...]
    female_series: tuple[ChartPoint, ...]
    balanced_series: tuple[ChartPoint, ...]
    regression_segment: tuple[ChartPoint, ChartPoint]
    extension_segment: tuple[ChartPoint, ChartPoint]

    def to_dict(self) -> dict[str, list[dict[str, float]]]:
        """Return a JSON-ready mapping of series name to points."""

        def _points(points: Sequence[ChartPoint]) -> list[dict[str, float]]:
            return [{"x": point.x, "y": point.y} for point in points]

        return {
            "male_series": _points(self.male_series),
            "female_series": _points(self.female_series),
            "balanced_series": _points(self.balanced_series),
            "regression_segment": _points(self.regression_segment),
            "extension_segment": _points(self.extension_segment),
        }


def _clamp_to_display(value: float) -> float:
    return max(DISPLAY_MIN_POINTS, min(DISPLAY_MAX_POINTS, value))


def _series_for(enriched_jobs: Sequence[EnrichedJob], dominance: str) -> tuple[ChartPoint, ...]:
    return tuple(
        ChartPoint(x=item.job.points, y=item.job.max_salary)
        for item in enriched_jobs
        if item.dominance == dominance
    )


def extension_bounds(regression: RegressionResult) -> tuple[float, float]:
    """Return the display-clamped x-range of the extended regression line.

    An empty fit extends from (0, 0) like any other, giving a flat line at y=0.
    """
    extended_min = _clamp_to_display(regression.min_points - LINE_EXTENSION_POINTS)
    extended_max = _clamp_to_display(regression.max_points + LINE_EXTENSION_POINTS)
    return (extended_min, max(extended_min, extended_max))


def build_chart_series(
    enriched_jobs: Sequence[EnrichedJob],
    regression: RegressionResult,
) -> ChartSeries:
    """Partition enriched jobs by dominance and derive the line segments."""
    regression_segment = (
        ChartPoint(x=regression.min_points, y=regression.min_predicted_pay),
        ChartPoint(x=regression.max_points, y=regression.max_predicted_pay),
    )
    extended_min, extended_max = extension_bounds(regression)
    extension_segment = (
        ChartPoint(x=extended_min, y=predict_pay(extended_min, regression)),
        ChartPoint(x=extended_max, y=predict_pay(extended_max, regression)),
    )
    return ChartSeries(
        male_series=_series_for(enriched_jobs, MALE),
        female_series=_series_for(enriched_jobs, FEMALE),
        balanced_series=_series_for(enriched_jobs, BALANCED),
        regression_segment=regression_segment,
        extension_segment=extension_segment,
    )
