from __future__ import annotations

from uuid import UUID

from src.application.errors import PermissionDenied
from src.domain.value_objects.principal import Principal


def is_admin(principal: Principal) -> bool:
    return principal.is_admin()


def ensure_owner_or_admin(
    owner_id: UUID | None,
    principal: Principal,
    resource: str = "resource",
) -> None:
    if is_admin(principal):
        return
    if owner_id is not None and owner_id == principal.user_id:
        return
    raise PermissionDenied(f"You do not have permission to access this {resource}")


def ensure_admin(principal: Principal, action: str) -> None:
    if not is_admin(principal):
        raise PermissionDenied(f"Admin role required to {action}")


def owner_scope(principal: Principal) -> UUID | None:
    """Owner id to filter list queries by; None means unrestricted."""
    return None if is_admin(principal) else principal.user_id
