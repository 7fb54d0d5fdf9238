"""Canned notifications sent when an admin approves submitted content."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationType,
    RelatedEntity,
    RelatedModel,
)
from app.infrastructure.notifications import NotificationPublisher

from .create_notification import create_notification


class ApprovalContentType(str, Enum):
    RESOURCE = "resource"
    TUTORIAL = "tutorial"
    DISCUSSION = "discussion"
    FEATURE = "feature"
    DOC = "doc"


@dataclass(frozen=True)
class ApprovalTemplate:
    title: str
    message: str
    related_model: RelatedModel | None

    def render(self, *, content_title: str, admin_name: str) -> str:
        return self.message.format(title=content_title, admin=admin_name)


APPROVAL_TEMPLATES: dict[ApprovalContentType, ApprovalTemplate] = {
    ApprovalContentType.RESOURCE: ApprovalTemplate(
        title="Resource Approved",
        message='Your resource "{title}" has been approved by {admin}',
        related_model=RelatedModel.RESOURCE,
    ),
    ApprovalContentType.TUTORIAL: ApprovalTemplate(
        title="Tutorial Published",
        message='Your tutorial "{title}" has been published',
        related_model=RelatedModel.TUTORIAL,
    ),
    ApprovalContentType.DISCUSSION: ApprovalTemplate(
        title="Discussion Approved",
        message='Your discussion "{title}" has been approved',
        related_model=RelatedModel.DISCUSSION,
    ),
    ApprovalContentType.FEATURE: ApprovalTemplate(
        title="Feature Suggestion Approved",
        message='Your feature suggestion "{title}" has been approved',
        related_model=RelatedModel.FEATURE_SUGGESTION,
    ),
    ApprovalContentType.DOC: ApprovalTemplate(
        title="Documentation Improvement Approved",
        message='Your documentation improvement "{title}" has been approved',
        related_model=RelatedModel.DOC_IMPROVEMENT,
    ),
}

FALLBACK_APPROVAL_TEMPLATE = ApprovalTemplate(
    title="Content Approved",
    message='Your content "{title}" has been approved',
    related_model=None,
)


def resolve_approval_template(content_type: str) -> ApprovalTemplate:
    """Return the canned texts for ``content_type`` or the generic fallback."""

    try:
        key = ApprovalContentType(str(content_type).lower())
    except ValueError:
        return FALLBACK_APPROVAL_TEMPLATE
    return APPROVAL_TEMPLATES[key]


def notify_content_approved(
    session: Session,
    *,
    recipient_id: int,
    content_type: str,
    content_title: str,
    admin_name: str = "Admin",
    sender_id: int | None = None,
    related_id: int | None = None,
    publisher: NotificationPublisher | None = None,
) -> Notification | None:
    """Tell the author of approved content that it went live."""

    template = resolve_approval_template(content_type)
    related = None
    if template.related_model is not None:
        related = RelatedEntity(model=template.related_model, id=related_id)

    return create_notification(
        session,
        recipient_id=recipient_id,
        type=NotificationType.ADMIN_APPROVAL,
        title=template.title,
        message=template.render(content_title=content_title, admin_name=admin_name),
        sender_id=sender_id,
        related=related,
        publisher=publisher,
    )
