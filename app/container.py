"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.models.analytics import AnalyticsType
from app.repositories.auth import StaffRepository
from app.repositories.common import ResultCache
from app.repositories.records import RecordStore
from app.services.analytics import (
    AnalyticsService,
    CostCalculator,
    PerformanceCalculator,
    PredictiveCalculator,
    TrendCalculator,
    UtilizationCalculator,
)
from app.services.reports import ReportGenerator


class Container:
    """Application DI container - holds all singleton instances."""

    def __init__(self):
        self._initialized = False

    def init(self, conn: duckdb.DuckDBPyConnection | None = None, cache: ResultCache | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self._records = RecordStore(conn=conn)
        self.staff = StaffRepository(conn=conn)
        self.cache = cache or ResultCache()

        # Services (with injected repos)
        self.analytics = AnalyticsService(
            cache=self.cache,
            calculators={
                AnalyticsType.UTILIZATION: UtilizationCalculator(self._records),
                AnalyticsType.COST: CostCalculator(self._records),
                AnalyticsType.PERFORMANCE: PerformanceCalculator(self._records),
                AnalyticsType.PREDICTIVE: PredictiveCalculator(self._records),
                AnalyticsType.TREND: TrendCalculator(self._records),
            },
        )

        self.reports = ReportGenerator(self._records)

        self._initialized = True


# Global container instance
container = Container()
