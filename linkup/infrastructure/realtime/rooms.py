"""Bookkeeping of live connections grouped into per-user rooms."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Final, Hashable, Set

logger = logging.getLogger(__name__)

ROOM_PREFIX: Final[str] = "user-"


def room_name(user_id: int) -> str:
    """Return the name of the room grouping every connection of ``user_id``."""

    return f"{ROOM_PREFIX}{user_id}"


class RoomRegistry:
    """Map live connections to the rooms they joined.

    All operations are synchronous and total. The registry is meant to be
    driven from a single event loop, so it does not lock.
    """

    def __init__(self) -> None:
        self._rooms: DefaultDict[str, Set[Hashable]] = defaultdict(set)
        self._memberships: DefaultDict[Hashable, Set[str]] = defaultdict(set)
        self._identities: dict[Hashable, int] = {}

    def join(self, connection: Hashable, user_id: int) -> str:
        """Add ``connection`` to the room of ``user_id`` and return the room name."""

        room = room_name(user_id)
        self._rooms[room].add(connection)
        self._memberships[connection].add(room)
        self._identities[connection] = user_id
        logger.info("Connection %s joined room %s", id(connection), room)
        return room

    def leave(self, connection: Hashable) -> None:
        """Remove ``connection`` from every room it belongs to."""

        rooms = self._memberships.pop(connection, set())
        for room in rooms:
            members = self._rooms.get(room)
            if members is None:
                continue
            members.discard(connection)
            if not members:
                self._rooms.pop(room, None)
        self._identities.pop(connection, None)
        if rooms:
            logger.info(
                "Connection %s left rooms %s", id(connection), ", ".join(sorted(rooms))
            )

    def members_of(self, user_id: int) -> frozenset[Any]:
        """Return the connections currently in the room of ``user_id``."""

        return frozenset(self._rooms.get(room_name(user_id), ()))

    def rooms_of(self, connection: Hashable) -> frozenset[str]:
        """Return the names of the rooms ``connection`` joined."""

        return frozenset(self._memberships.get(connection, ()))

    def user_of(self, connection: Hashable) -> int | None:
        """Return the user id most recently announced by ``connection``."""

        return self._identities.get(connection)

    def __len__(self) -> int:
        return len(self._memberships)


__all__ = ["ROOM_PREFIX", "RoomRegistry", "room_name"]
