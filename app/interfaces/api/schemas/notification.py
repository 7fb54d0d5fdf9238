"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.entities import NotificationType, RelatedModel


class CamelModel(BaseModel):
    """Base model rendering field names in camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SenderRead(CamelModel):
    id: int
    name: str
    email: str


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: int
    recipient: int
    sender: SenderRead | None = None
    type: NotificationType
    title: str
    message: str
    related_model: RelatedModel | None = None
    related_id: int | None = None
    is_read: bool
    is_email_sent: bool
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class PaginationRead(CamelModel):
    current_page: int
    total_pages: int
    total_notifications: int
    has_next_page: bool


class NotificationListResponse(CamelModel):
    success: bool = True
    notifications: list[NotificationRead]
    pagination: PaginationRead


class NotificationResponse(CamelModel):
    success: bool = True
    notification: NotificationRead


class UnreadCountResponse(CamelModel):
    success: bool = True
    unread_count: int


class MessageResponse(CamelModel):
    success: bool = True
    message: str


__all__ = [
    "CamelModel",
    "MessageResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationResponse",
    "PaginationRead",
    "SenderRead",
    "UnreadCountResponse",
]
