"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from app.domain.entities import Notification

from .manager import NotificationConnectionManager

logger = logging.getLogger(__name__)

NOTIFICATION_EVENT = "notification"


class NotificationPublisher:
    """Serialize notifications and schedule their delivery to open rooms.

    Delivery is fire and forget: :meth:`dispatch` only schedules the fan-out on
    the event loop and never raises because a push could not happen.
    """

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager
        self._pending: set[asyncio.Task] = set()

    @property
    def manager(self) -> NotificationConnectionManager:
        return self._manager

    def dispatch(self, notification: Notification) -> bool:
        """Schedule ``notification`` for its recipient's room.

        Returns ``True`` when a push was scheduled.
        """

        recipient_id = notification.recipient_id
        if not self._manager.has_room(recipient_id):
            logger.debug("No open channel for user %s; push skipped", recipient_id)
            return False

        message = {"type": NOTIFICATION_EVENT, "data": serialize_notification(notification)}
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._spawn, recipient_id, message)
            except RuntimeError:
                logger.debug(
                    "No event loop reachable from this thread; push to user %s skipped",
                    recipient_id,
                )
                return False
        else:
            self._spawn(recipient_id, message)
        return True

    def _spawn(self, user_id: int, message: dict[str, Any]) -> None:
        task = asyncio.get_running_loop().create_task(
            self._manager.publish(user_id, message)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)


def _isoformat(value) -> str | None:
    return value.isoformat() if value else None


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the wire representation shared by the API and the websocket."""

    sender = notification.sender
    related = notification.related
    return {
        "id": notification.id,
        "recipient": notification.recipient_id,
        "sender": (
            {"id": sender.id, "name": sender.name, "email": sender.email}
            if sender
            else None
        ),
        "type": notification.type.value,
        "title": notification.title,
        "message": notification.message,
        "relatedModel": related.model.value if related else None,
        "relatedId": related.id if related else None,
        "isRead": notification.is_read,
        "isEmailSent": notification.is_email_sent,
        "metadata": dict(notification.metadata or {}),
        "createdAt": _isoformat(notification.created_at),
        "updatedAt": _isoformat(notification.updated_at),
    }


__all__ = ["NOTIFICATION_EVENT", "NotificationPublisher", "serialize_notification"]
