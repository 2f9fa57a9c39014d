"""Schedule realtime deliveries from synchronous request handlers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from anyio import from_thread

from .fanout import EventFanout

logger = logging.getLogger(__name__)


class RealtimeEventPublisher:
    """Hand events over to the event loop that owns the websocket connections.

    Synchronous FastAPI routes run in anyio worker threads; from there the
    delivery is run on the loop through :mod:`anyio.from_thread`. Inside the
    loop the delivery is scheduled as a task.
    """

    def __init__(self, fanout: EventFanout) -> None:
        self._fanout = fanout

    def dispatch(self, user_id: int | None, event_name: str, payload: Any) -> None:
        """Schedule ``event_name`` for every connection of ``user_id``."""

        if user_id is None:
            return
        self._schedule(self._fanout.emit_to_user, user_id, event_name, payload)

    def dispatch_many(
        self, user_ids: Iterable[int | None], event_name: str, payload: Any
    ) -> None:
        """Schedule ``event_name`` for each distinct id in ``user_ids``."""

        recipients = [user_id for user_id in dict.fromkeys(user_ids) if user_id is not None]
        if not recipients:
            return
        self._schedule(self._fanout.emit_to_users, recipients, event_name, payload)

    def _schedule(self, func, *args: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                if hasattr(from_thread, "start_soon"):
                    from_thread.start_soon(func, *args)
                else:
                    from_thread.run(func, *args)
            except RuntimeError:
                # Outside anyio worker threads no loop holds websocket connections.
                logger.debug("No event loop available to deliver %s", args[1])
        else:
            loop.create_task(func(*args))


__all__ = ["RealtimeEventPublisher"]
