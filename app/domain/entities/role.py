"""Domain entity representing a user role."""

from dataclasses import dataclass

ADMIN_ROLE_ALIAS = "admin"
MEMBER_ROLE_ALIAS = "member"


@dataclass
class Role:
    """Role assigned to a user; admins moderate submitted content."""

    id: int
    name: str
    alias: str


__all__ = ["Role", "ADMIN_ROLE_ALIAS", "MEMBER_ROLE_ALIAS"]
