"""Analytics API response schemas."""

from typing import Any

from pydantic import BaseModel, Field


class AnalyticsMetadata(BaseModel):
    """Response metadata."""

    timestamp: str
    response_time: int = Field(alias="responseTime")
    cached: bool
    parameters: dict[str, Any]

    class Config:
        populate_by_name = True


class AnalyticsResponse(BaseModel):
    """Analytics GET response."""

    success: bool = True
    data: dict[str, Any]
    metadata: AnalyticsMetadata


class ReportData(BaseModel):
    """Generated custom report."""

    name: str
    description: str | None = None
    data: dict[str, Any]
    generated_at: str = Field(alias="generatedAt")

    class Config:
        populate_by_name = True


class ReportMetadata(BaseModel):
    """Custom report metadata."""

    timestamp: str
    generated_by: str = Field(alias="generatedBy")

    class Config:
        populate_by_name = True


class CustomReportResponse(BaseModel):
    """Custom report POST response."""

    success: bool = True
    data: ReportData
    metadata: ReportMetadata
