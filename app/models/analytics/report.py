"""Custom report entities."""

from dataclasses import dataclass, field

from app.models.analytics.query import DateRange
from app.models.common import BaseEntity


@dataclass
class ReportFilters(BaseEntity):
    """Record filters of a custom report. Empty lists mean no restriction."""

    date_range: DateRange
    departments: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)


@dataclass
class ReportConfig(BaseEntity):
    """Validated custom report request."""

    name: str
    metrics: list[str]
    filters: ReportFilters
    description: str | None = None
    aggregations: list[str] = field(default_factory=list)
    group_by: list[str] = field(default_factory=list)
