"""Common models - base classes and shared structures."""

from app.models.common.base import BaseEntity
from app.models.common.cache import CacheEntry

__all__ = [
    "BaseEntity",
    "CacheEntry",
]
