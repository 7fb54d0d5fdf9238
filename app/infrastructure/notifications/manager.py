"""Connection management helpers for notification websockets."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Dict, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Track open websocket connections grouped into per-user rooms.

    A connection sits in at most one room at a time; a room may hold any number
    of connections. Rooms only live in this process and start out empty.
    """

    def __init__(self) -> None:
        self._rooms: DefaultDict[int, Set[WebSocket]] = defaultdict(set)
        self._memberships: Dict[WebSocket, int] = {}

    def join(self, user_id: int, connection: WebSocket) -> int | None:
        """Add ``connection`` to the room of ``user_id``.

        Returns the room the connection was moved out of, if any.
        """

        previous = self._memberships.get(connection)
        if previous == user_id:
            return None
        if previous is not None:
            self._discard(previous, connection)
        self._rooms[user_id].add(connection)
        self._memberships[connection] = user_id
        logger.debug("Connection joined room %s", user_id)
        return previous

    def leave(self, user_id: int, connection: WebSocket) -> bool:
        """Remove ``connection`` from the room of ``user_id``."""

        if self._memberships.get(connection) != user_id:
            return False
        self._memberships.pop(connection, None)
        self._discard(user_id, connection)
        logger.debug("Connection left room %s", user_id)
        return True

    def disconnect(self, connection: WebSocket) -> int | None:
        """Forget ``connection`` entirely; returns the room it was in."""

        user_id = self._memberships.pop(connection, None)
        if user_id is not None:
            self._discard(user_id, connection)
            logger.debug("Connection in room %s disconnected", user_id)
        return user_id

    def room_of(self, connection: WebSocket) -> int | None:
        return self._memberships.get(connection)

    def has_room(self, user_id: int) -> bool:
        return bool(self._rooms.get(user_id))

    def room_size(self, user_id: int) -> int:
        return len(self._rooms.get(user_id, ()))

    async def publish(self, user_id: int, message: dict[str, Any]) -> int:
        """Send ``message`` to every connection in the room of ``user_id``.

        Returns how many connections accepted the message. Connections that
        fail to receive it are dropped from the registry.
        """

        delivered = 0
        for connection in list(self._rooms.get(user_id, ())):
            try:
                await connection.send_json(message)
            except Exception as exc:
                logger.warning(
                    "Dropping connection in room %s after failed send: %s", user_id, exc
                )
                self.disconnect(connection)
            else:
                delivered += 1
        return delivered

    def _discard(self, user_id: int, connection: WebSocket) -> None:
        connections = self._rooms.get(user_id)
        if connections is None:
            return
        connections.discard(connection)
        if not connections:
            self._rooms.pop(user_id, None)


__all__ = ["NotificationConnectionManager"]
