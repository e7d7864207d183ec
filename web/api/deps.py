"""Request dependencies - container and current staff."""

from fastapi import Depends, Header, Request

from app.container import Container
from app.models.auth import Staff


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_current_staff(
    x_staff_id: str | None = Header(default=None),
    container: Container = Depends(get_container),
) -> Staff | None:
    """Staff identity from the X-Staff-Id header, None when absent or unknown."""
    if not x_staff_id:
        return None
    return container.staff.get(x_staff_id)
