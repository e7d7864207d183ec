"""Cost calculator - asset value, depreciation and ROI."""

from collections import defaultdict
from datetime import datetime

from loguru import logger

from app.models.analytics import AnalyticsQuery
from app.models.assets import AvailableStatus
from app.services.analytics import formulas
from app.services.analytics.base import BaseCalculator


def cost_report(assets: list[dict], now: datetime) -> dict:
    """Total and depreciated value, breakdowns and ROI."""
    total_value = 0.0
    depreciated_value = 0.0
    by_department: dict[str, float] = defaultdict(float)
    by_category: dict[str, float] = defaultdict(float)

    for a in assets:
        price = float(a.get("purchase_price") or 0)
        age = formulas.asset_age(a.get("purchase_date"), now)
        rate = formulas.depreciation_rate(a.get("category"))

        total_value += price
        depreciated_value += formulas.depreciated_value(price, age, rate)

        if a.get("department"):
            by_department[a["department"]] += price
        if a.get("category"):
            by_category[a["category"]] += price

    in_use = sum(1 for a in assets if a.get("available_status") == AvailableStatus.IN_USE)

    return {
        "totalValue": formulas.round2(total_value),
        "depreciatedValue": formulas.round2(depreciated_value),
        "maintenanceCosts": 0.0,
        "costByDepartment": {k: formulas.round2(v) for k, v in by_department.items()},
        "costByCategory": {k: formulas.round2(v) for k, v in by_category.items()},
        "roi": {
            "utilizationROI": formulas.round2(formulas.percent(in_use, len(assets))),
            "valueRetention": formulas.round2(formulas.percent(depreciated_value, total_value)),
        },
    }


class CostCalculator(BaseCalculator):
    """Asset value and depreciation."""

    name = "cost"

    async def calculate(self, query: AnalyticsQuery) -> dict:
        assets = await self._assets(query)
        result = cost_report(assets, self._clock())
        logger.info("Computed cost analytics for {} assets", len(assets))
        return result
