"""Document schemas - assets, asset events, asset issues, staff."""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field


def _naive_utc(v: datetime) -> datetime:
    if v.tzinfo is not None:
        return v.astimezone(UTC).replace(tzinfo=None)
    return v


# Stored timestamps are naive UTC
UtcDatetime = Annotated[datetime, AfterValidator(_naive_utc)]


class AssetDocument(BaseModel):
    """Tracked asset."""

    id: str = Field(alias="$id")
    name: str | None = None
    category: str | None = None
    department: str | None = None
    purchase_price: float | None = Field(alias="purchasePrice", default=None)
    purchase_date: UtcDatetime | None = Field(alias="purchaseDate", default=None)
    available_status: str | None = Field(alias="availableStatus", default=None)
    current_condition: str | None = Field(alias="currentCondition", default=None)
    last_used_at: UtcDatetime | None = Field(alias="lastUsedAt", default=None)
    created_at: UtcDatetime | None = Field(alias="$createdAt", default=None)

    class Config:
        populate_by_name = True


class AssetEventDocument(BaseModel):
    """Asset audit trail entry."""

    id: str = Field(alias="$id")
    asset_id: str = Field(alias="assetId")
    event_type: str = Field(alias="eventType")
    from_value: str | None = Field(alias="fromValue", default=None)
    to_value: str | None = Field(alias="toValue", default=None)
    at: UtcDatetime

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True


class AssetIssueDocument(BaseModel):
    """Reported asset fault."""

    id: str = Field(alias="$id")
    asset_id: str = Field(alias="assetId")
    issue_type: str | None = Field(alias="issueType", default=None)
    reported_at: UtcDatetime = Field(alias="reportedAt")
    resolved_at: UtcDatetime | None = Field(alias="resolvedAt", default=None)

    class Config:
        populate_by_name = True


class StaffDocument(BaseModel):
    """Staff member with roles."""

    id: str = Field(alias="$id")
    name: str | None = None
    email: str | None = None
    roles: list[str] = []
    active: bool = True

    class Config:
        populate_by_name = True
