"""Staff repository - identity lookup."""

from loguru import logger

from app.models.auth import Staff
from app.repositories.base import BaseRepository


class StaffRepository(BaseRepository):
    """Repository for staff identities."""

    def get(self, staff_id: str) -> Staff | None:
        """Get an active staff member by id."""
        row = self.fetchone("SELECT id, name, email, roles, active FROM staff WHERE id = ?", [staff_id])

        if row is None:
            logger.debug("Staff not found: {}", staff_id)
            return None
        if row[4] is False:
            logger.info("Staff {} is inactive", staff_id)
            return None
        return Staff(id=row[0], name=row[1], email=row[2], roles=list(row[3] or []), active=True)
