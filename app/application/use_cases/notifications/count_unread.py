"""Use case for counting unread notifications."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import NotificationRepository


def count_unread(session: Session, recipient_id: int) -> int:
    return NotificationRepository(session).count_for_recipient(
        recipient_id, unread_only=True
    )
