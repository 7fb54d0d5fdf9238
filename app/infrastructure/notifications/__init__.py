"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager
from .publisher import NOTIFICATION_EVENT, NotificationPublisher, serialize_notification

__all__ = [
    "NotificationConnectionManager",
    "NotificationPublisher",
    "NOTIFICATION_EVENT",
    "serialize_notification",
]
