"""Pure pay equity analysis: dominance, regression, chart series and benefits."""

from .benefits import (
    BenefitsDetection,
    BenefitsEntry,
    BenefitsWorksheet,
    PointSpread,
    build_benefits_worksheet,
    detect_benefits_disadvantage,
    point_spread,
)
from .chart_series import ChartPoint, ChartSeries, build_chart_series
from .dominance import classify_dominance
from .jobs import Dominance, EnrichedJob, JobRecord
from .regression import RegressionResult, enrich_jobs, fit_regression, predict_pay

__all__ = [
    "BenefitsDetection",
    "BenefitsEntry",
    "BenefitsWorksheet",
    "ChartPoint",
    "ChartSeries",
    "Dominance",
    "EnrichedJob",
    "JobRecord",
    "PointSpread",
    "RegressionResult",
    "build_benefits_worksheet",
    "build_chart_series",
    "classify_dominance",
    "detect_benefits_disadvantage",
    "enrich_jobs",
    "fit_regression",
    "point_spread",
    "predict_pay",
]
