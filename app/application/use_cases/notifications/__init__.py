"""Use cases for reading, updating and producing notifications."""

from .approvals import (
    APPROVAL_TEMPLATES,
    ApprovalContentType,
    ApprovalTemplate,
    notify_content_approved,
    resolve_approval_template,
)
from .count_unread import count_unread
from .create_notification import create_notification
from .delete_notification import delete_notification
from .errors import NotificationAccessDeniedError, NotificationNotFoundError
from .list_notifications import list_notifications
from .mark_as_read import mark_all_as_read, mark_as_read

__all__ = [
    "APPROVAL_TEMPLATES",
    "ApprovalContentType",
    "ApprovalTemplate",
    "NotificationAccessDeniedError",
    "NotificationNotFoundError",
    "count_unread",
    "create_notification",
    "delete_notification",
    "list_notifications",
    "mark_all_as_read",
    "mark_as_read",
    "notify_content_approved",
    "resolve_approval_template",
]
