"""Services package - service class exports."""

from app.services.analytics import AnalyticsService
from app.services.auth import permissions
from app.services.reports import ReportGenerator

__all__ = [
    "AnalyticsService",
    "ReportGenerator",
    "permissions",
]
