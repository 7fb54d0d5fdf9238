"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


from .role import Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    email: str
    password: str
    is_active: bool = True
    created_at: datetime | None = None

    def summary(self) -> "UserSummary":
        return UserSummary(id=self.id, name=self.name, email=self.email)


@dataclass(frozen=True)
class UserSummary:
    """Public fields of a user shown alongside content they triggered."""

    id: int
    name: str
    email: str


__all__ = ["User", "UserSummary"]
