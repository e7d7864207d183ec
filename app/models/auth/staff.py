"""Staff model and entity."""

from dataclasses import dataclass, field
from enum import StrEnum

from app.models.common import BaseEntity

STAFF_DDL = """
CREATE TABLE IF NOT EXISTS staff (
    id VARCHAR PRIMARY KEY,
    name VARCHAR,
    email VARCHAR,
    roles VARCHAR[],
    active BOOLEAN DEFAULT TRUE
)
"""


class Role(StrEnum):
    """Staff roles."""

    SYSTEM_ADMIN = "SYSTEM_ADMIN"
    ASSET_ADMIN = "ASSET_ADMIN"
    SENIOR_MANAGER = "SENIOR_MANAGER"
    STAFF = "STAFF"
    CONSUMABLE_ADMIN = "CONSUMABLE_ADMIN"


@dataclass
class Staff(BaseEntity):
    """Authenticated staff identity."""

    id: str
    name: str | None = None
    email: str | None = None
    roles: list[str] = field(default_factory=list)
    active: bool = True
