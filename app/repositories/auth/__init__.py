"""Auth repositories."""

from app.repositories.auth.staff import StaffRepository

__all__ = ["StaffRepository"]
