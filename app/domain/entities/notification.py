"""Domain entities describing user notifications."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .user import UserSummary


class NotificationType(str, Enum):
    """Kinds of events a notification can describe."""

    LIKE = "like"
    REPLY = "reply"
    MENTION = "mention"
    ADMIN_APPROVAL = "admin_approval"
    ADMIN_REJECTION = "admin_rejection"
    NEW_FOLLOWER = "new_follower"
    COMMENT = "comment"
    RESOURCE_APPROVED = "resource_approved"
    TUTORIAL_PUBLISHED = "tutorial_published"
    FEATURE_SUGGESTION_APPROVED = "feature_suggestion_approved"
    DISCUSSION = "discussion"
    DISCUSSION_REPLY = "discussion_reply"


class RelatedModel(str, Enum):
    """Entity kinds a notification may point at."""

    TUTORIAL = "Tutorial"
    RESOURCE = "Resource"
    DISCUSSION = "Discussion"
    FEATURE_SUGGESTION = "FeatureSuggestion"
    DOC_IMPROVEMENT = "DocImprovement"
    ISSUE = "Issue"


@dataclass(frozen=True)
class RelatedEntity:
    """Weak reference from a notification to the object it concerns."""

    model: RelatedModel
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.model, RelatedModel):
            object.__setattr__(self, "model", RelatedModel(self.model))

    @classmethod
    def from_columns(
        cls, model: str | None, related_id: int | None
    ) -> "RelatedEntity | None":
        """Build the reference from its persisted columns; an id alone is ignored."""

        if model is None:
            return None
        return cls(model=RelatedModel(model), id=related_id)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    recipient_id: int
    type: NotificationType
    title: str
    message: str
    sender: UserSummary | None = None
    related: RelatedEntity | None = None
    is_read: bool = False
    is_email_sent: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def belongs_to(self, user_id: int) -> bool:
        """Return ``True`` when ``user_id`` is the notification recipient."""

        return self.recipient_id == user_id


@dataclass(frozen=True)
class NotificationPage:
    """A page of notifications together with pagination counters."""

    items: list[Notification]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def has_next_page(self) -> bool:
        return self.page * self.limit < self.total


__all__ = [
    "Notification",
    "NotificationPage",
    "NotificationType",
    "RelatedEntity",
    "RelatedModel",
]
