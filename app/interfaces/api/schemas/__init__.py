from .auth import Token
from .notification import (
    MessageResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationResponse,
    PaginationRead,
    SenderRead,
    UnreadCountResponse,
)

__all__ = [
    "MessageResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationResponse",
    "PaginationRead",
    "SenderRead",
    "Token",
    "UnreadCountResponse",
]
