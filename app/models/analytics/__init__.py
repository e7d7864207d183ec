"""Analytics domain models - queries and report configurations."""

from app.models.analytics.query import AnalyticsQuery, AnalyticsType, DateRange, GroupBy
from app.models.analytics.report import ReportConfig, ReportFilters

__all__ = [
    "AnalyticsQuery",
    "AnalyticsType",
    "DateRange",
    "GroupBy",
    "ReportConfig",
    "ReportFilters",
]
