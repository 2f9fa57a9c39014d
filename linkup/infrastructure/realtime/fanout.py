"""Deliver realtime events to every connection of a user."""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, Protocol, Set

from .rooms import RoomRegistry

logger = logging.getLogger(__name__)


class RealtimeConnection(Protocol):
    """Anything able to push a JSON document to a client, e.g. a ``WebSocket``."""

    async def send_json(self, data: Any) -> None:  # pragma: no cover - protocol
        ...


def build_envelope(event_name: str, payload: Any) -> dict[str, Any]:
    """Wrap ``payload`` in the ``{"type", "data"}`` envelope sent to clients."""

    return {"type": event_name, "data": copy.deepcopy(payload)}


class EventFanout:
    """Push events to the rooms tracked by a :class:`RoomRegistry`.

    Delivery is best effort: recipients without live connections are skipped
    and a failing connection never prevents delivery to the others.
    """

    def __init__(self, registry: RoomRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> RoomRegistry:
        return self._registry

    async def send(
        self, connection: RealtimeConnection, event_name: str, payload: Any
    ) -> bool:
        """Send one event to ``connection``; return ``False`` when the push failed."""

        try:
            await connection.send_json(build_envelope(event_name, payload))
        except Exception:  # noqa: BLE001
            logger.debug(
                "Dropping %s event for connection %s", event_name, id(connection),
                exc_info=True,
            )
            return False
        return True

    async def emit_to_user(self, user_id: int, event_name: str, payload: Any) -> int:
        """Send ``payload`` to every connection of ``user_id``.

        Returns the number of connections that accepted the event. An offline
        user yields ``0``.
        """

        delivered = 0
        for connection in self._registry.members_of(user_id):
            if await self.send(connection, event_name, payload):
                delivered += 1
        return delivered

    async def emit_to_users(
        self, user_ids: Iterable[int | None], event_name: str, payload: Any
    ) -> int:
        """Broadcast an event to each distinct id in ``user_ids``."""

        delivered = 0
        seen: Set[int] = set()
        for user_id in user_ids:
            if user_id is None or user_id in seen:
                continue
            seen.add(user_id)
            delivered += await self.emit_to_user(user_id, event_name, payload)
        return delivered


__all__ = ["EventFanout", "RealtimeConnection", "build_envelope"]
