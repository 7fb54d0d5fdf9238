"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationAccessDeniedError,
    NotificationNotFoundError,
    count_unread,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_as_read as mark_all_as_read_uc,
    mark_as_read as mark_as_read_uc,
)
from app.config import get_settings
from app.domain.entities import Notification, User
from app.infrastructure.database import SessionLocal, get_db
from app.infrastructure.notifications import NotificationConnectionManager
from app.interfaces.api.dependencies import get_current_active_user, resolve_current_user
from app.interfaces.api.schemas import (
    MessageResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationResponse,
    PaginationRead,
    SenderRead,
    UnreadCountResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)

_NOT_FOUND_MESSAGE = "Notification not found"
_FORBIDDEN_MESSAGE = "Not authorized"


def _notification_to_schema(notification: Notification) -> NotificationRead:
    sender = notification.sender
    related = notification.related
    return NotificationRead(
        id=notification.id or 0,
        recipient=notification.recipient_id,
        sender=SenderRead(id=sender.id, name=sender.name, email=sender.email)
        if sender
        else None,
        type=notification.type,
        title=notification.title,
        message=notification.message,
        related_model=related.model if related else None,
        related_id=related.id if related else None,
        is_read=notification.is_read,
        is_email_sent=notification.is_email_sent,
        metadata=notification.metadata or {},
        created_at=notification.created_at,
        updated_at=notification.updated_at,
    )


def _lookup_error(exc: Exception) -> HTTPException:
    if isinstance(exc, NotificationNotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND_MESSAGE
        )
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=_FORBIDDEN_MESSAGE)


@router.get("/", response_model=NotificationListResponse)
def list_notifications(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    unread_only: bool = Query(False, alias="unreadOnly"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Return a page of the caller's notifications, newest first."""

    settings = get_settings()
    page_size = min(
        limit or settings.notifications_default_page_size,
        settings.notifications_max_page_size,
    )
    result = list_notifications_uc(
        db, current_user.id, page=page, limit=page_size, unread_only=unread_only
    )
    return NotificationListResponse(
        notifications=[_notification_to_schema(n) for n in result.items],
        pagination=PaginationRead(
            current_page=result.page,
            total_pages=result.total_pages,
            total_notifications=result.total,
            has_next_page=result.has_next_page,
        ),
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountResponse:
    return UnreadCountResponse(unread_count=count_unread(db, current_user.id))


@router.put("/read-all", response_model=MessageResponse)
def mark_all_notifications_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    """Mark every unread notification of the caller as read."""

    updated = mark_all_as_read_uc(db, current_user.id)
    logger.debug("Marked %s notifications as read for user %s", updated, current_user.id)
    return MessageResponse(message="All notifications marked as read")


@router.put("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationResponse:
    """Mark one of the caller's notifications as read."""

    try:
        notification = mark_as_read_uc(db, notification_id, recipient_id=current_user.id)
    except (NotificationNotFoundError, NotificationAccessDeniedError) as exc:
        raise _lookup_error(exc) from exc
    return NotificationResponse(notification=_notification_to_schema(notification))


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    """Delete one of the caller's notifications."""

    try:
        delete_notification_uc(db, notification_id, recipient_id=current_user.id)
    except (NotificationNotFoundError, NotificationAccessDeniedError) as exc:
        raise _lookup_error(exc) from exc
    return MessageResponse(message="Notification deleted")


def _authenticate_websocket(token: str | None) -> int | None:
    """Return the id of the active user owning ``token`` or ``None``."""

    if not token:
        return None
    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
    except HTTPException:
        return None
    finally:
        session.close()
    return user.id if user.is_active else None


def _parse_room(data: Any) -> int | None:
    try:
        return int(str(data).strip())
    except (TypeError, ValueError):
        return None


async def _send_error(websocket: WebSocket, message: str) -> None:
    await websocket.send_json({"type": "error", "data": {"message": message}})


async def _handle_client_message(
    websocket: WebSocket,
    manager: NotificationConnectionManager,
    message: Any,
    *,
    authenticated_user_id: int | None,
) -> None:
    if not isinstance(message, dict):
        await _send_error(websocket, "Messages must be JSON objects")
        return

    message_type = message.get("type")
    if message_type == "ping":
        await websocket.send_json({"type": "pong"})
        return

    if message_type not in ("join", "leave"):
        await _send_error(websocket, f"Unknown event '{message_type}'")
        return

    user_id = _parse_room(message.get("data"))
    if user_id is None:
        await _send_error(websocket, "Invalid user id")
        return

    if message_type == "join":
        if authenticated_user_id is not None and user_id != authenticated_user_id:
            await _send_error(websocket, "Cannot join another user's room")
            return
        manager.join(user_id, websocket)
        await websocket.send_json({"type": "joined", "data": str(user_id)})
        return

    manager.leave(user_id, websocket)
    await websocket.send_json({"type": "left", "data": str(user_id)})


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint implementing the join/leave room protocol."""

    manager: NotificationConnectionManager = websocket.app.state.notification_manager

    authenticated_user_id = None
    if get_settings().realtime_require_token:
        authenticated_user_id = _authenticate_websocket(
            websocket.query_params.get("token")
        )
        if authenticated_user_id is None:
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return

    await websocket.accept()
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except (ValueError, KeyError):
                await _send_error(websocket, "Messages must be valid JSON text")
                continue
            await _handle_client_message(
                websocket,
                manager,
                message,
                authenticated_user_id=authenticated_user_id,
            )
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(websocket)
