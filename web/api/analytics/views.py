"""Analytics API views - thin layer over services."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Query, Request
from loguru import logger

from app.container import Container
from app.errors import AuthError, ComputationError, PermissionDeniedError, UpstreamFetchError, ValidationError
from app.models.auth import Staff
from app.services.analytics import parse_query, parse_report
from app.services.auth import permissions
from web.api.deps import get_container, get_current_staff
from web.api.errors import InternalServerError

from .schemas import AnalyticsMetadata, AnalyticsResponse, CustomReportResponse, ReportData, ReportMetadata

router = APIRouter(prefix="/api/admin/dashboard/analytics", tags=["analytics"])


def _now() -> str:
    return datetime.now(UTC).isoformat()


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(
    staff: Staff | None = Depends(get_current_staff),
    container: Container = Depends(get_container),
    type_: str | None = Query(None, alias="type"),
    department: str | None = None,
    category: str | None = None,
    date_range: str | None = Query(None, alias="dateRange"),
    group_by: str | None = Query(None, alias="groupBy"),
    metrics: str | None = None,
) -> AnalyticsResponse:
    """Fetch analytics for the dashboard."""
    started = time.perf_counter()

    if staff is None:
        raise AuthError()
    if not permissions.can_view_reports(staff):
        raise PermissionDeniedError("Insufficient permissions to view analytics")

    query = parse_query(
        {
            "type": type_,
            "department": department,
            "category": category,
            "dateRange": date_range,
            "groupBy": group_by,
            "metrics": metrics,
        }
    )

    try:
        data, cached = await container.analytics.get_analytics(query)
    except (UpstreamFetchError, ComputationError) as e:
        logger.error("Analytics request failed: {}", e)
        raise InternalServerError("Failed to fetch analytics data") from e

    return AnalyticsResponse(
        data=data,
        metadata=AnalyticsMetadata(
            timestamp=_now(),
            response_time=round((time.perf_counter() - started) * 1000),
            cached=cached,
            parameters=query.to_dict(),
        ),
    )


@router.post("", status_code=201, response_model=CustomReportResponse)
async def create_custom_report(
    request: Request,
    staff: Staff | None = Depends(get_current_staff),
    container: Container = Depends(get_container),
) -> CustomReportResponse:
    """Generate a custom analytics report (admins only)."""
    if staff is None:
        raise AuthError()
    if not permissions.is_admin(staff):
        raise PermissionDeniedError("Admin access required")

    try:
        body = await request.json()
    except ValueError as e:
        raise ValidationError(
            [{"field": "body", "message": "must be valid JSON"}],
            message="Invalid report configuration",
        ) from e

    config = parse_report(body)

    try:
        report = await container.reports.generate(config)
    except (UpstreamFetchError, ComputationError) as e:
        logger.error("Custom report '{}' failed: {}", config.name, e)
        raise InternalServerError("Failed to generate custom report") from e

    return CustomReportResponse(
        data=ReportData(
            name=report["name"],
            description=report["description"],
            data=report["data"],
            generated_at=report["generatedAt"],
        ),
        metadata=ReportMetadata(timestamp=_now(), generated_by=staff.id),
    )
