"""Analytics error taxonomy."""


class AnalyticsError(Exception):
    """Base class for analytics errors."""

    def __init__(self, message: str = "Analytics error"):
        self.message = message
        super().__init__(self.message)


class ValidationError(AnalyticsError):
    """Malformed or missing query/report parameters."""

    def __init__(self, details: list[dict[str, str]], message: str = "Invalid query parameters"):
        self.details = details
        super().__init__(message)


class AuthError(AnalyticsError):
    """No authenticated identity."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class PermissionDeniedError(AnalyticsError):
    """Identity lacks the required capability."""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)


class UpstreamFetchError(AnalyticsError):
    """Record store failure."""


class ComputationError(AnalyticsError):
    """Unexpected state inside a metric calculator."""
