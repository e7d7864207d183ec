"""Asset domain models - assets, audit events, issues."""

from app.models.assets.asset import ASSET_DDL, ASSET_INDEXES
from app.models.assets.enums import BREAKDOWN, AvailableStatus, Category, Condition, EventType
from app.models.assets.event import ASSET_EVENT_DDL, ASSET_EVENT_INDEXES
from app.models.assets.issue import ASSET_ISSUE_DDL, ASSET_ISSUE_INDEXES

__all__ = [
    "ASSET_DDL",
    "ASSET_EVENT_DDL",
    "ASSET_ISSUE_DDL",
    "ASSET_INDEXES",
    "ASSET_EVENT_INDEXES",
    "ASSET_ISSUE_INDEXES",
    "Category",
    "AvailableStatus",
    "Condition",
    "EventType",
    "BREAKDOWN",
]
