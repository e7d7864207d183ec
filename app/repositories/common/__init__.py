"""Common repositories."""

from app.repositories.common.cache import ResultCache

__all__ = ["ResultCache"]
