"""Use case for listing a recipient's notifications page by page."""

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPage
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    recipient_id: int,
    *,
    page: int = 1,
    limit: int = 20,
    unread_only: bool = False,
) -> NotificationPage:
    """Return one page of the recipient's notifications, newest first."""

    if page < 1:
        raise ValueError("page must be greater than or equal to 1")
    if limit < 1:
        raise ValueError("limit must be greater than or equal to 1")

    repository = NotificationRepository(session)
    items = repository.list_for_recipient(
        recipient_id,
        offset=(page - 1) * limit,
        limit=limit,
        unread_only=unread_only,
    )
    total = repository.count_for_recipient(recipient_id, unread_only=unread_only)
    return NotificationPage(items=list(items), total=total, page=page, limit=limit)
