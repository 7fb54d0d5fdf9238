"""Use cases for marking notifications as read."""

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

from .ownership import get_owned_notification


def mark_as_read(
    session: Session, notification_id: int, *, recipient_id: int
) -> Notification:
    """Mark a single notification owned by ``recipient_id`` as read."""

    get_owned_notification(session, notification_id, recipient_id=recipient_id)
    return NotificationRepository(session).mark_as_read(notification_id)


def mark_all_as_read(session: Session, recipient_id: int) -> int:
    """Mark every unread notification of ``recipient_id`` as read.

    Returns the number of notifications that changed; a second call returns 0.
    """

    return NotificationRepository(session).mark_all_as_read(recipient_id)
