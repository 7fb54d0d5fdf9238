"""Errors raised by the notification use cases."""


class NotificationNotFoundError(LookupError):
    """The requested notification does not exist."""

    def __init__(self, notification_id: int) -> None:
        super().__init__(f"Notification {notification_id} not found")
        self.notification_id = notification_id


class NotificationAccessDeniedError(PermissionError):
    """The notification exists but belongs to another recipient."""

    def __init__(self, notification_id: int, user_id: int) -> None:
        super().__init__(
            f"User {user_id} is not the recipient of notification {notification_id}"
        )
        self.notification_id = notification_id
        self.user_id = user_id


__all__ = ["NotificationNotFoundError", "NotificationAccessDeniedError"]
