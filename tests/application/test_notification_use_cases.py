"""Tests for the notification store, query and producer use cases."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import (
    NotificationAccessDeniedError,
    NotificationNotFoundError,
    count_unread,
    create_notification,
    delete_notification,
    list_notifications,
    mark_all_as_read,
    mark_as_read,
    notify_content_approved,
)
from app.domain.entities import NotificationType, RelatedEntity, RelatedModel
from app.infrastructure.repositories import NotificationRepository


class RecordingPublisher:
    """Stand-in publisher remembering what it was asked to push."""

    def __init__(self, *, error: Exception | None = None) -> None:
        self.dispatched = []
        self.error = error

    def dispatch(self, notification) -> bool:
        self.dispatched.append(notification)
        if self.error is not None:
            raise self.error
        return True


def _notify(session, recipient, **overrides):
    values = {
        "recipient_id": recipient.id,
        "type": NotificationType.COMMENT,
        "title": "New comment",
        "message": "Someone commented on your tutorial",
    }
    values.update(overrides)
    return create_notification(session, **values)


def test_create_persists_without_publisher(session, make_user):
    recipient = make_user()

    created = _notify(session, recipient, metadata={"commentId": 12})

    assert created is not None
    stored = NotificationRepository(session).get(created.id)
    assert stored.recipient_id == recipient.id
    assert stored.type is NotificationType.COMMENT
    assert stored.is_read is False
    assert stored.is_email_sent is False
    assert stored.metadata == {"commentId": 12}
    assert stored.sender is None
    assert stored.created_at is not None


def test_create_resolves_sender_and_related_entity(session, make_user):
    recipient = make_user("Author")
    sender = make_user("Reader", email="reader@example.com")

    created = _notify(
        session,
        recipient,
        sender_id=sender.id,
        related=RelatedEntity(model=RelatedModel.TUTORIAL, id=42),
    )

    assert created.sender.id == sender.id
    assert created.sender.name == "Reader"
    assert created.sender.email == "reader@example.com"
    assert created.related == RelatedEntity(RelatedModel.TUTORIAL, 42)


def test_create_hands_the_stored_record_to_the_publisher(session, make_user):
    recipient = make_user()
    publisher = RecordingPublisher()

    created = _notify(session, recipient, publisher=publisher)

    assert [n.id for n in publisher.dispatched] == [created.id]


def test_failed_push_keeps_the_notification(session, make_user):
    recipient = make_user()
    publisher = RecordingPublisher(error=RuntimeError("socket closed"))

    created = _notify(session, recipient, publisher=publisher)

    assert created is not None
    assert count_unread(session, recipient.id) == 1


def test_create_with_unknown_sender_returns_none(session, make_user):
    recipient = make_user()
    publisher = RecordingPublisher()

    assert _notify(session, recipient, sender_id=9999, publisher=publisher) is None
    assert count_unread(session, recipient.id) == 0
    assert publisher.dispatched == []


def test_create_for_missing_recipient_returns_none(session):
    assert create_notification(
        session,
        recipient_id=9999,
        type="like",
        title="Liked",
        message="Someone liked your resource",
    ) is None


def test_create_with_unknown_type_returns_none(session, make_user):
    recipient = make_user()

    assert _notify(session, recipient, type="poke") is None


def test_list_only_returns_the_recipients_notifications(session, make_user):
    first = make_user()
    second = make_user()
    for index in range(3):
        _notify(session, first, title=f"first-{index}")
    _notify(session, second, title="second-0")

    result = list_notifications(session, first.id)

    assert result.total == 3
    assert all(item.recipient_id == first.id for item in result.items)
    assert [item.title for item in result.items] == ["first-2", "first-1", "first-0"]


def test_list_paginates_newest_first(session, make_user):
    recipient = make_user()
    for index in range(5):
        _notify(session, recipient, title=f"n{index}")

    first_page = list_notifications(session, recipient.id, page=1, limit=2)
    last_page = list_notifications(session, recipient.id, page=3, limit=2)

    assert [item.title for item in first_page.items] == ["n4", "n3"]
    assert first_page.total_pages == 3
    assert first_page.has_next_page is True
    assert [item.title for item in last_page.items] == ["n0"]
    assert last_page.has_next_page is False


def test_list_unread_only(session, make_user):
    recipient = make_user()
    read = _notify(session, recipient, title="read")
    _notify(session, recipient, title="unread")
    mark_as_read(session, read.id, recipient_id=recipient.id)

    result = list_notifications(session, recipient.id, unread_only=True)

    assert [item.title for item in result.items] == ["unread"]
    assert result.total == 1


@pytest.mark.parametrize(("page", "limit"), [(0, 10), (1, 0)])
def test_list_rejects_invalid_paging(session, make_user, page, limit):
    recipient = make_user()

    with pytest.raises(ValueError):
        list_notifications(session, recipient.id, page=page, limit=limit)


def test_mark_as_read_updates_the_record(session, make_user):
    recipient = make_user()
    created = _notify(session, recipient)

    updated = mark_as_read(session, created.id, recipient_id=recipient.id)

    assert updated.is_read is True
    assert count_unread(session, recipient.id) == 0
    assert mark_as_read(session, created.id, recipient_id=recipient.id).is_read is True


def test_mark_as_read_of_missing_id_is_not_found(session, make_user):
    recipient = make_user()

    with pytest.raises(NotificationNotFoundError):
        mark_as_read(session, 12345, recipient_id=recipient.id)


def test_mark_as_read_by_another_user_is_forbidden(session, make_user):
    owner = make_user()
    intruder = make_user()
    created = _notify(session, owner)

    with pytest.raises(NotificationAccessDeniedError):
        mark_as_read(session, created.id, recipient_id=intruder.id)

    assert NotificationRepository(session).get(created.id).is_read is False


def test_mark_all_as_read_is_idempotent(session, make_user):
    recipient = make_user()
    other = make_user()
    _notify(session, recipient)
    _notify(session, recipient)
    _notify(session, other)

    assert mark_all_as_read(session, recipient.id) == 2
    assert count_unread(session, recipient.id) == 0
    assert mark_all_as_read(session, recipient.id) == 0
    assert count_unread(session, other.id) == 1


def test_delete_removes_the_notification(session, make_user):
    recipient = make_user()
    created = _notify(session, recipient)

    delete_notification(session, created.id, recipient_id=recipient.id)

    assert list_notifications(session, recipient.id).total == 0
    with pytest.raises(NotificationNotFoundError):
        mark_as_read(session, created.id, recipient_id=recipient.id)


def test_delete_by_another_user_is_forbidden(session, make_user):
    owner = make_user()
    intruder = make_user()
    created = _notify(session, owner)

    with pytest.raises(NotificationAccessDeniedError):
        delete_notification(session, created.id, recipient_id=intruder.id)

    assert list_notifications(session, owner.id).total == 1


def test_resource_approval_scenario(session, make_user):
    author = make_user("Author")

    created = notify_content_approved(
        session,
        recipient_id=author.id,
        content_type="resource",
        content_title="React Guide",
        related_id=17,
    )

    assert created.type is NotificationType.ADMIN_APPROVAL
    assert created.title == "Resource Approved"
    assert "React Guide" in created.message
    assert "approved" in created.message
    assert created.related == RelatedEntity(RelatedModel.RESOURCE, 17)


def test_approval_for_unknown_content_has_no_related_entity(session, make_user):
    author = make_user()

    created = notify_content_approved(
        session,
        recipient_id=author.id,
        content_type="podcast",
        content_title="Ep. 1",
        related_id=3,
    )

    assert created.title == "Content Approved"
    assert created.related is None


def test_approval_without_related_id_keeps_the_related_model(session, make_user):
    author = make_user("Author")

    created = notify_content_approved(
        session,
        recipient_id=author.id,
        content_type="resource",
        content_title="React Guide",
    )

    assert created.related is not None
    assert created.related.model is RelatedModel.RESOURCE
    assert created.related.id is None
    stored = NotificationRepository(session).get(created.id)
    assert stored.related == RelatedEntity(RelatedModel.RESOURCE)
