"""Use case for deleting a notification."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import NotificationRepository

from .ownership import get_owned_notification


def delete_notification(
    session: Session, notification_id: int, *, recipient_id: int
) -> None:
    """Permanently remove a notification owned by ``recipient_id``."""

    get_owned_notification(session, notification_id, recipient_id=recipient_id)
    NotificationRepository(session).delete(notification_id)
