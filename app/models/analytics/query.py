"""Analytics query entities."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from app.models.common import BaseEntity


class AnalyticsType(StrEnum):
    """Built-in analytics types. NONE means all of them."""

    UTILIZATION = "utilization"
    COST = "cost"
    PERFORMANCE = "performance"
    PREDICTIVE = "predictive"
    TREND = "trend"
    NONE = "none"


class GroupBy(StrEnum):
    """Time bucketing granularity."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


@dataclass(frozen=True)
class DateRange:
    """Closed instant interval (naive UTC)."""

    start: datetime
    end: datetime

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


@dataclass
class AnalyticsQuery(BaseEntity):
    """Validated analytics request."""

    type: AnalyticsType = AnalyticsType.NONE
    department: str | None = None
    category: str | None = None
    date_range: DateRange | None = None
    group_by: GroupBy = GroupBy.MONTH
    metrics: list[str] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Public (camelCase) representation, echoed in response metadata."""
        return {
            "type": self.type.value,
            "department": self.department,
            "category": self.category,
            "dateRange": self.date_range.to_dict() if self.date_range else None,
            "groupBy": self.group_by.value,
            "metrics": list(self.metrics) if self.metrics is not None else None,
        }

    def cache_key(self) -> str:
        """Canonical serialization used to address the result cache."""
        return json.dumps(self.to_dict(), sort_keys=True)
