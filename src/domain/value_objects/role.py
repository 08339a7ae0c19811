from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"
    SUPER_USER = "SUPER_USER"

    def is_elevated(self) -> bool:
        return self in {Role.ADMIN, Role.SUPER_USER}

    @classmethod
    def parse_many(cls, values) -> frozenset[Role]:
        """Map stored role names onto the closed role set, ignoring unknown names."""
        roles = set()
        for value in values or ():
            try:
                roles.add(cls(str(value).upper().replace("-", "_")))
            except ValueError:
                continue
        return frozenset(roles)
