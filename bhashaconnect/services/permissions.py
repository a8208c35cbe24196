from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from bhashaconnect.models.enums import Role


@dataclass(frozen=True)
class Caller:
    id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin


@dataclass(frozen=True)
class PermissionDecision:
    allowed: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.allowed


ALLOW = PermissionDecision(allowed=True)


def check_permission(
    caller: Caller,
    owner_id: int | None = None,
    required_roles: Iterable[Role] | None = None,
) -> PermissionDecision:
    """Decide whether ``caller`` may act on a resource.

    - ``required_roles``: when given, the caller's role must be one of them.
    - ``owner_id``: when given, the caller must own the row or be an admin.

    Pure function: no database access, no exceptions.
    """

    if required_roles is not None:
        roles = {Role(r) for r in required_roles}
        if caller.role not in roles:
            return PermissionDecision(allowed=False, reason="role")

    if owner_id is not None and caller.id != owner_id and not caller.is_admin:
        return PermissionDecision(allowed=False, reason="ownership")

    return ALLOW
