"""The single producer path for new notifications."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationType, RelatedEntity
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.utils import now_local

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    recipient_id: int,
    type: NotificationType | str,
    title: str,
    message: str,
    sender_id: int | None = None,
    related: RelatedEntity | None = None,
    metadata: dict[str, Any] | None = None,
    publisher: NotificationPublisher | None = None,
) -> Notification | None:
    """Persist a notification and push it to the recipient's open channels.

    Meant to run after the triggering business change has been committed.
    Failures are logged and reported as ``None`` so the caller's workflow keeps
    going; a stored notification is never undone because its push failed.
    """

    try:
        sender = None
        if sender_id is not None:
            sender_user = UserRepository(session).get(sender_id)
            if sender_user is None:
                raise ValueError(f"Sender {sender_id} does not exist")
            sender = sender_user.summary()

        notification = Notification(
            id=None,
            recipient_id=recipient_id,
            type=NotificationType(type),
            title=title,
            message=message,
            sender=sender,
            related=related,
            metadata=dict(metadata or {}),
            created_at=now_local(),
        )
        saved = NotificationRepository(session).create(notification)
    except (SQLAlchemyError, ValueError):
        session.rollback()
        logger.exception("Error creating notification for user %s", recipient_id)
        return None

    logger.info(
        "Created %s notification %s for user %s", saved.type.value, saved.id, recipient_id
    )

    if publisher is not None:
        try:
            publisher.dispatch(saved)
        except Exception:
            logger.exception("Realtime push of notification %s failed", saved.id)
    return saved
