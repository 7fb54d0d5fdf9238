"""Domain entities exposed by the application."""

from .role import ADMIN_ROLE_ALIAS, MEMBER_ROLE_ALIAS, Role
from .user import User, UserSummary
from .notification import (
    Notification,
    NotificationPage,
    NotificationType,
    RelatedEntity,
    RelatedModel,
)

__all__ = [
    "ADMIN_ROLE_ALIAS",
    "MEMBER_ROLE_ALIAS",
    "Role",
    "User",
    "UserSummary",
    "Notification",
    "NotificationPage",
    "NotificationType",
    "RelatedEntity",
    "RelatedModel",
]
