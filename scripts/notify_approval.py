"""Record an admin-approval notification from the command line.

Runs outside the web process, so the notification is only stored; recipients
see it the next time they list their notifications.
"""

from __future__ import annotations

import argparse

from app.application.use_cases.notifications import (
    ApprovalContentType,
    notify_content_approved,
)
from app.config import get_settings
from app.infrastructure.database import SessionLocal, initialize_database
from app.logging_config import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Notify a member that their submission was approved.",
    )
    parser.add_argument("--recipient-id", type=int, required=True)
    parser.add_argument(
        "--content-type",
        required=True,
        help="One of: " + ", ".join(item.value for item in ApprovalContentType),
    )
    parser.add_argument("--title", required=True, help="Title of the approved content")
    parser.add_argument("--admin-name", default="Admin")
    parser.add_argument("--sender-id", type=int, default=None)
    parser.add_argument("--related-id", type=int, default=None)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(get_settings().log_level)
    initialize_database()

    session = SessionLocal()
    try:
        notification = notify_content_approved(
            session,
            recipient_id=args.recipient_id,
            content_type=args.content_type,
            content_title=args.title,
            admin_name=args.admin_name,
            sender_id=args.sender_id,
            related_id=args.related_id,
        )
    finally:
        session.close()

    if notification is None:
        raise SystemExit("The notification could not be stored; see the log for details.")
    print(f"Notification {notification.id} stored: {notification.title}")


if __name__ == "__main__":
    main()
