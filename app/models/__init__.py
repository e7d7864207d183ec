"""Models package - DDL and entities for all domains."""

from app.models.analytics import (
    AnalyticsQuery,
    AnalyticsType,
    DateRange,
    GroupBy,
    ReportConfig,
    ReportFilters,
)
from app.models.assets import (
    ASSET_DDL,
    ASSET_EVENT_DDL,
    ASSET_EVENT_INDEXES,
    ASSET_INDEXES,
    ASSET_ISSUE_DDL,
    ASSET_ISSUE_INDEXES,
)
from app.models.auth import STAFF_DDL, Role, Staff
from app.models.common import BaseEntity, CacheEntry

ALL_DDL = [
    # Assets
    ASSET_DDL,
    ASSET_EVENT_DDL,
    ASSET_ISSUE_DDL,
    *ASSET_INDEXES,
    *ASSET_EVENT_INDEXES,
    *ASSET_ISSUE_INDEXES,
    # Auth
    STAFF_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CacheEntry",
    # Assets
    "ASSET_DDL",
    "ASSET_EVENT_DDL",
    "ASSET_ISSUE_DDL",
    # Auth
    "STAFF_DDL",
    "Role",
    "Staff",
    # Analytics
    "AnalyticsQuery",
    "AnalyticsType",
    "DateRange",
    "GroupBy",
    "ReportConfig",
    "ReportFilters",
    # All DDL
    "ALL_DDL",
]
