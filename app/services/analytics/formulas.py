"""Pure analytics formulas - no I/O, easily testable."""

import math
from datetime import UTC, datetime, timedelta

import numpy as np

from app.models.analytics import GroupBy
from app.models.assets import Category, Condition

DAY = timedelta(days=1)
HOUR = timedelta(hours=1)
YEAR = timedelta(days=365)


def utc_now() -> datetime:
    """Current instant as naive UTC (the store's timestamp convention)."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_datetime(value: datetime | str | None) -> datetime | None:
    """Normalize a stored or serialized instant to naive UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value


def round2(value: float) -> float:
    return round(float(value), 2)


def round_half_up(value: float) -> int:
    """Nearest integer, halves up; float noise below 1e-9 is ignored."""
    return math.floor(round(float(value), 9) + 0.5)


def percent(part: float, whole: float) -> float:
    """part / whole * 100, 0 when whole is 0."""
    if not whole:
        return 0.0
    return part / whole * 100


def mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


# ========== Assets ==========


def asset_age(purchase_date: datetime | str | None, now: datetime) -> int:
    """Whole years since purchase (365-day years), 0 when unknown."""
    purchased = to_datetime(purchase_date)
    if purchased is None:
        return 0
    return max(0, math.floor((now - purchased) / YEAR))


def depreciation_rate(category: str | None) -> float:
    """Annual declining-balance rate per category."""
    match category:
        case Category.IT_EQUIPMENT:
            return 0.33
        case Category.VEHICLE:
            return 0.20
        case Category.OFFICE_FURNITURE:
            return 0.10
        case Category.BUILDING_INFRA:
            return 0.05
        case _:
            return 0.15


def depreciated_value(price: float, age: int, rate: float) -> float:
    """price * (1 - rate) ** age, never negative."""
    return max(0.0, price * (1 - rate) ** age)


def expected_lifespan(category: str | None) -> int:
    """Expected service life in years per category."""
    match category:
        case Category.IT_EQUIPMENT:
            return 4
        case Category.NETWORK_HARDWARE | Category.TOOLS:
            return 5
        case Category.OFFICE_FURNITURE | Category.POWER_ASSET:
            return 10
        case Category.VEHICLE:
            return 8
        case Category.HEAVY_MACHINERY:
            return 15
        case Category.LAB_EQUIPMENT:
            return 7
        case Category.BUILDING_INFRA:
            return 20
        case _:
            return 7


def condition_factor(condition: str | None) -> float:
    """Remaining-life multiplier per physical condition."""
    match condition:
        case Condition.NEW:
            return 1.2
        case Condition.LIKE_NEW:
            return 1.1
        case Condition.GOOD:
            return 1.0
        case Condition.FAIR:
            return 0.8
        case Condition.POOR:
            return 0.5
        case Condition.DAMAGED:
            return 0.3
        case Condition.SCRAP:
            return 0.1
        case _:
            return 0.7


# ========== Time series ==========


def mean_gap(instants: list[datetime]) -> timedelta | None:
    """Mean interval between consecutive instants (sorted first). None for < 2."""
    if len(instants) < 2:
        return None
    ordered = sorted(instants)
    return (ordered[-1] - ordered[0]) / (len(ordered) - 1)


def week_key(dt: datetime) -> str:
    """ISO week label, e.g. 2024-W07."""
    year, week, _ = dt.isocalendar()
    return f"{year}-W{week:02d}"


def period_key(dt: datetime, group_by: GroupBy) -> str:
    """Sortable period label for an instant."""
    match group_by:
        case GroupBy.DAY:
            return dt.strftime("%Y-%m-%d")
        case GroupBy.WEEK:
            return week_key(dt)
        case GroupBy.QUARTER:
            return f"{dt.year}-Q{(dt.month - 1) // 3 + 1}"
        case GroupBy.YEAR:
            return str(dt.year)
        case _:
            return dt.strftime("%Y-%m")


def add_months(dt: datetime, months: int) -> datetime:
    """Same day-of-month shifted by whole months (clamped to month end)."""
    month_index = dt.month - 1 + months
    year, month = dt.year + month_index // 12, month_index % 12 + 1
    next_month = datetime(year + month // 12, month % 12 + 1, 1)
    last_day = (next_month - DAY).day
    return dt.replace(year=year, month=month, day=min(dt.day, last_day))


def linear_fit(values: list[float]) -> tuple[float, float]:
    """Least-squares (slope, intercept) over the series index."""
    if not values:
        return 0.0, 0.0
    if len(values) < 2:
        return 0.0, float(values[0])
    slope, intercept = np.polyfit(np.arange(len(values), dtype=float), np.asarray(values, dtype=float), 1)
    return float(slope), float(intercept)


def project(values: list[float], steps: int) -> list[float]:
    """Values of the fitted line for the next ``steps`` indices."""
    slope, intercept = linear_fit(values)
    n = len(values)
    return [slope * (n + i) + intercept for i in range(steps)]


# ========== Reliability bands ==========


def interpret_mtbf(days: float | None) -> str:
    if days is None:
        return "No failures recorded"
    if days > 365:
        return "Excellent reliability"
    if days > 180:
        return "Good reliability"
    if days > 90:
        return "Average reliability"
    if days > 30:
        return "Below average reliability"
    return "Poor reliability - frequent failures"


def interpret_mttr(hours: float) -> str:
    if hours < 4:
        return "Excellent repair time"
    if hours < 8:
        return "Good repair time"
    if hours < 24:
        return "Average repair time"
    if hours < 48:
        return "Slow repair time"
    return "Very slow repair time - needs improvement"


def availability(mtbf_days: float | None, mttr_hours: float) -> float:
    """Steady-state availability in percent; 100 without failures."""
    if mtbf_days is None:
        return 100.0
    mtbf_hours = mtbf_days * 24
    if mtbf_hours + mttr_hours == 0:
        return 100.0
    return mtbf_hours / (mtbf_hours + mttr_hours) * 100


def availability_rating(pct: float) -> str:
    if pct >= 99.9:
        return "World-class"
    if pct >= 99:
        return "Excellent"
    if pct >= 95:
        return "Good"
    if pct >= 90:
        return "Fair"
    return "Poor"


def efficiency_label(ratio: float) -> str:
    if ratio > 2:
        return "High"
    if ratio > 1:
        return "Medium"
    return "Low"
