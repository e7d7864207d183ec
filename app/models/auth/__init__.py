"""Auth domain models."""

from app.models.auth.staff import STAFF_DDL, Role, Staff

__all__ = [
    "STAFF_DDL",
    "Role",
    "Staff",
]
