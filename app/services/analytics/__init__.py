"""Analytics services - query validation, calculators and orchestration."""

from app.services.analytics.cost import CostCalculator
from app.services.analytics.performance import PerformanceCalculator
from app.services.analytics.predictive import PredictiveCalculator
from app.services.analytics.service import SECTIONS, AnalyticsService
from app.services.analytics.trend import TrendCalculator
from app.services.analytics.utilization import UtilizationCalculator
from app.services.analytics.validation import parse_query, parse_report

__all__ = [
    "AnalyticsService",
    "SECTIONS",
    "UtilizationCalculator",
    "CostCalculator",
    "PerformanceCalculator",
    "PredictiveCalculator",
    "TrendCalculator",
    "parse_query",
    "parse_report",
]
