"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    JSON,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_for_storage


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_recipient_created", "recipient_id", "created_at"),
        Index("ix_notification_recipient_read", "recipient_id", "is_read"),
        CheckConstraint(
            "related_id IS NULL OR related_model IS NOT NULL",
            name="ck_notification_related_pair",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    recipient_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False
    )
    sender_id = Column(
        Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True
    )
    type = Column(String(40), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    related_model = Column(String(40), nullable=True)
    related_id = Column(Integer, nullable=True)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    is_email_sent = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    # ``metadata`` is reserved on declarative classes.
    extra = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_for_storage)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_for_storage,
        onupdate=now_for_storage,
    )

    sender = relationship("UserModel", foreign_keys=[sender_id], lazy="joined")


__all__ = ["NotificationModel"]
