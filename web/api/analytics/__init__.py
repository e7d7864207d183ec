"""Analytics API."""

from web.api.analytics.views import create_custom_report, get_analytics, router

__all__ = [
    "router",
    "get_analytics",
    "create_custom_report",
]
