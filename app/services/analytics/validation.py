"""Query validation - raw request input to typed analytics queries and report configs."""

import json
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic import ValidationError as SchemaError

from app.errors import ValidationError
from app.models.analytics import (
    AnalyticsQuery,
    AnalyticsType,
    DateRange,
    GroupBy,
    ReportConfig,
    ReportFilters,
)
from app.services.analytics.formulas import to_datetime

QUERY_FIELDS = ("type", "department", "category", "dateRange", "groupBy", "metrics")


class DateRangeSchema(BaseModel):
    """ISO-8601 datetime interval."""

    start: datetime
    end: datetime

    @field_validator("start", "end", mode="before")
    @classmethod
    def require_datetime_string(cls, v: Any) -> Any:
        if not isinstance(v, str) or "T" not in v.upper():
            raise ValueError("must be an ISO-8601 datetime string")
        return v

    @model_validator(mode="after")
    def check_order(self) -> "DateRangeSchema":
        if to_datetime(self.start) > to_datetime(self.end):
            raise ValueError("start must not be after end")
        return self

    def to_entity(self) -> DateRange:
        return DateRange(start=to_datetime(self.start), end=to_datetime(self.end))


class AnalyticsQuerySchema(BaseModel):
    """Analytics GET parameters."""

    type: Literal["utilization", "cost", "performance", "predictive", "trend"] | None = None
    department: str | None = None
    category: str | None = None
    date_range: DateRangeSchema = Field(alias="dateRange")
    group_by: Literal["day", "week", "month", "quarter", "year"] = Field(alias="groupBy", default="month")
    metrics: list[str] | None = None

    class Config:
        populate_by_name = True


class ReportFiltersSchema(BaseModel):
    """Custom report filters."""

    departments: list[str] | None = None
    categories: list[str] | None = None
    statuses: list[str] | None = None
    date_range: DateRangeSchema = Field(alias="dateRange")

    class Config:
        populate_by_name = True


class CustomReportSchema(BaseModel):
    """Custom report POST body."""

    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    metrics: list[str] = Field(min_length=1)
    filters: ReportFiltersSchema
    aggregations: list[Literal["sum", "avg", "count", "min", "max"]] | None = None
    group_by: list[str] | None = Field(alias="groupBy", default=None)

    class Config:
        populate_by_name = True


def _problems(exc: SchemaError) -> list[dict[str, str]]:
    """Flatten pydantic errors into field/message pairs."""
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "body"
        message = err["msg"].removeprefix("Value error, ")
        problems.append({"field": field, "message": message})
    return problems


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def split_metrics(value: str | list[str]) -> list[str]:
    """Comma-separated metric names as an ordered set, empty names dropped."""
    items = value.split(",") if isinstance(value, str) else value
    seen: dict[str, None] = {}
    for item in items:
        name = str(item).strip()
        if name:
            seen.setdefault(name, None)
    return list(seen)


def parse_query(params: Mapping[str, Any]) -> AnalyticsQuery:
    """Validate raw query-string values.

    Raises ValidationError listing every violated constraint.
    """
    raw = {k: params.get(k) for k in QUERY_FIELDS if not _blank(params.get(k))}
    problems: list[dict[str, str]] = []

    if "dateRange" in raw and isinstance(raw["dateRange"], str):
        try:
            raw["dateRange"] = json.loads(raw["dateRange"])
        except json.JSONDecodeError:
            problems.append({"field": "dateRange", "message": "must be a JSON object with start and end"})
            raw.pop("dateRange")

    if "dateRange" in raw and not isinstance(raw["dateRange"], dict):
        problems.append({"field": "dateRange", "message": "must be a JSON object with start and end"})
        raw.pop("dateRange")

    if "metrics" in raw:
        raw["metrics"] = split_metrics(raw["metrics"])

    schema = None
    try:
        schema = AnalyticsQuerySchema.model_validate(raw)
    except SchemaError as e:
        flagged = {p["field"] for p in problems}
        problems.extend(p for p in _problems(e) if p["field"] not in flagged)

    if problems:
        raise ValidationError(problems)

    return AnalyticsQuery(
        type=AnalyticsType(schema.type) if schema.type else AnalyticsType.NONE,
        department=schema.department,
        category=schema.category,
        date_range=schema.date_range.to_entity(),
        group_by=GroupBy(schema.group_by),
        metrics=schema.metrics,
    )


def parse_report(body: Any) -> ReportConfig:
    """Validate a custom report request body."""
    if not isinstance(body, dict):
        raise ValidationError(
            [{"field": "body", "message": "must be a JSON object"}],
            message="Invalid report configuration",
        )

    try:
        schema = CustomReportSchema.model_validate(body)
    except SchemaError as e:
        raise ValidationError(_problems(e), message="Invalid report configuration") from e

    return ReportConfig(
        name=schema.name,
        description=schema.description,
        metrics=schema.metrics,
        filters=ReportFilters(
            date_range=schema.filters.date_range.to_entity(),
            departments=schema.filters.departments or [],
            categories=schema.filters.categories or [],
            statuses=schema.filters.statuses or [],
        ),
        aggregations=schema.aggregations or [],
        group_by=schema.group_by or [],
    )
