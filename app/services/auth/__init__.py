"""Auth services."""

from app.services.auth import permissions

__all__ = ["permissions"]
