"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationType,
    RelatedEntity,
    UserSummary,
)
from app.infrastructure.models import NotificationModel, UserModel
from app.utils import from_storage, now_for_storage, to_storage


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_recipient(
        self,
        recipient_id: int,
        *,
        offset: int = 0,
        limit: int | None = 20,
        unread_only: bool = False,
    ) -> Sequence[Notification]:
        query = self._recipient_query(recipient_id, unread_only=unread_only)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_for_recipient(
        self, recipient_id: int, *, unread_only: bool = False
    ) -> int:
        return self._recipient_query(recipient_id, unread_only=unread_only).count()

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        model.created_at = (
            to_storage(notification.created_at)
            or now_for_storage()
        )
        model.updated_at = model.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int) -> Notification:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        if not model.is_read:
            model.is_read = True
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read(self, recipient_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.updated_at: now_for_storage(),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def delete(self, notification_id: int) -> None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _recipient_query(self, recipient_id: int, *, unread_only: bool):
        query = self.session.query(NotificationModel).filter(
            NotificationModel.recipient_id == recipient_id
        )
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        return query

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.recipient_id = notification.recipient_id
        model.sender_id = notification.sender.id if notification.sender else None
        model.type = NotificationType(notification.type).value
        model.title = notification.title
        model.message = notification.message
        if notification.related is not None:
            model.related_model = notification.related.model.value
            model.related_id = notification.related.id
        else:
            model.related_model = None
            model.related_id = None
        model.is_read = notification.is_read
        model.is_email_sent = notification.is_email_sent
        model.extra = dict(notification.metadata or {})

    @staticmethod
    def _sender_to_summary(model: UserModel | None) -> UserSummary | None:
        if model is None:
            return None
        return UserSummary(id=model.id, name=model.name, email=model.email)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            type=NotificationType(model.type),
            title=model.title,
            message=model.message,
            sender=NotificationRepository._sender_to_summary(model.sender),
            related=RelatedEntity.from_columns(model.related_model, model.related_id),
            is_read=bool(model.is_read),
            is_email_sent=bool(model.is_email_sent),
            metadata=dict(model.extra or {}),
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
        )


__all__ = ["NotificationRepository"]
