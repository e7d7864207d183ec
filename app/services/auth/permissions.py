"""Role-based permission checks."""

from collections.abc import Iterable

from app.models.auth import Role, Staff


def has_role(staff: Staff | None, role: Role) -> bool:
    if not staff or not staff.roles:
        return False
    return role in staff.roles


def has_any_role(staff: Staff | None, roles: Iterable[Role]) -> bool:
    if not staff or not staff.roles:
        return False
    return any(role in staff.roles for role in roles)


def is_admin(staff: Staff | None) -> bool:
    return has_any_role(staff, (Role.SYSTEM_ADMIN, Role.ASSET_ADMIN))


def can_view_reports(staff: Staff | None) -> bool:
    return has_any_role(staff, (Role.SYSTEM_ADMIN, Role.ASSET_ADMIN, Role.SENIOR_MANAGER))
