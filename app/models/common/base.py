"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


def _dict_factory(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {k: _plain(v) for k, v in items}


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a JSON-ready dictionary (ISO instants, enum values)."""
        return asdict(self, dict_factory=_dict_factory)
