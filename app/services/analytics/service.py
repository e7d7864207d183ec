"""Analytics orchestrator - cache-first dispatch to the metric calculators."""

import asyncio

from loguru import logger

from app.errors import AnalyticsError, ComputationError
from app.models.analytics import AnalyticsQuery, AnalyticsType
from app.repositories.common import ResultCache
from app.services.analytics.base import BaseCalculator

# Section name of each calculator in the all-analytics bundle
SECTIONS = {
    AnalyticsType.UTILIZATION: "utilization",
    AnalyticsType.COST: "cost",
    AnalyticsType.PERFORMANCE: "performance",
    AnalyticsType.PREDICTIVE: "predictive",
    AnalyticsType.TREND: "trends",
}


class AnalyticsService:
    """Computes analytics bundles, consulting the result cache first."""

    def __init__(self, cache: ResultCache, calculators: dict[AnalyticsType, BaseCalculator]):
        missing = set(SECTIONS) - set(calculators)
        if missing:
            raise ValueError(f"Missing calculators: {sorted(missing)}")
        self._cache = cache
        self._calculators = calculators
        logger.debug("AnalyticsService initialized")

    async def get_analytics(self, query: AnalyticsQuery) -> tuple[dict, bool]:
        """Result bundle for a query and whether it came from the cache."""
        key = query.cache_key()
        cached = self._cache.get(key)
        if cached is not None:
            return cached, True

        data = await self.compute(query)
        self._cache.put(key, data)
        return data, False

    async def compute(self, query: AnalyticsQuery) -> dict:
        """Compute without touching the cache."""
        if query.type == AnalyticsType.NONE:
            return await self._compute_all(query)
        return await self._run(query.type, query)

    async def _compute_all(self, query: AnalyticsQuery) -> dict:
        """Run all calculators concurrently; any failure fails the whole bundle."""
        types = list(SECTIONS)
        results = await asyncio.gather(*(self._run(t, query) for t in types), return_exceptions=True)

        failures = [(t, r) for t, r in zip(types, results) if isinstance(r, BaseException)]
        for t, exc in failures:
            logger.error("Analytics section '{}' failed: {}", SECTIONS[t], exc)
        if failures:
            raise failures[0][1]

        logger.info("Computed all analytics sections")
        return {SECTIONS[t]: r for t, r in zip(types, results)}

    async def _run(self, analytics_type: AnalyticsType, query: AnalyticsQuery) -> dict:
        calculator = self._calculators[analytics_type]
        try:
            return await calculator.calculate(query)
        except AnalyticsError:
            raise
        except (ArithmeticError, KeyError, TypeError, ValueError) as e:
            raise ComputationError(f"{calculator.name} calculation failed: {e}") from e
