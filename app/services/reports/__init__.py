"""Report services."""

from app.services.reports.generator import ReportGenerator

__all__ = ["ReportGenerator"]
