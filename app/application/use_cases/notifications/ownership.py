"""Shared existence and ownership check for single-notification actions."""

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

from .errors import NotificationAccessDeniedError, NotificationNotFoundError


def get_owned_notification(
    session: Session, notification_id: int, *, recipient_id: int
) -> Notification:
    """Return the notification when ``recipient_id`` owns it.

    Existence is checked before ownership so unknown ids always read as
    not found.
    """

    notification = NotificationRepository(session).get(notification_id)
    if notification is None:
        raise NotificationNotFoundError(notification_id)
    if not notification.belongs_to(recipient_id):
        raise NotificationAccessDeniedError(notification_id, recipient_id)
    return notification
