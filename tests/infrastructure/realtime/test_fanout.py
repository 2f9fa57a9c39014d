"""Tests for the event fan-out engine and the thread-safe publisher."""

from __future__ import annotations

import asyncio

import anyio

from linkup.infrastructure.realtime import (
    EventFanout,
    RealtimeEventPublisher,
    RoomRegistry,
)


class FakeConnection:
    """Records every JSON document pushed to it."""

    def __init__(self, *, fail: bool = False) -> None:
        self.sent: list[dict] = []
        self.fail = fail

    async def send_json(self, data) -> None:
        if self.fail:
            raise RuntimeError("Cannot call send once a close message has been sent.")
        self.sent.append(data)


def _fanout() -> tuple[RoomRegistry, EventFanout]:
    registry = RoomRegistry()
    return registry, EventFanout(registry)


def test_emit_after_join_delivers_exactly_once():
    registry, fanout = _fanout()
    connection = FakeConnection()
    registry.join(connection, 1)

    delivered = asyncio.run(fanout.emit_to_user(1, "x", {"value": 1}))

    assert delivered == 1
    assert connection.sent == [{"type": "x", "data": {"value": 1}}]


def test_emit_to_offline_user_is_silent_noop():
    _, fanout = _fanout()

    assert asyncio.run(fanout.emit_to_user(404, "x", {"value": 1})) == 0


def test_emit_after_leave_reaches_nobody():
    registry, fanout = _fanout()
    connection = FakeConnection()
    registry.join(connection, 1)
    registry.leave(connection)

    delivered = asyncio.run(fanout.emit_to_user(1, "x", {"value": 1}))

    assert delivered == 0
    assert connection.sent == []


def test_emit_reaches_every_connection_of_the_user():
    registry, fanout = _fanout()
    laptop, phone = FakeConnection(), FakeConnection()
    registry.join(laptop, 1)
    registry.join(phone, 1)

    delivered = asyncio.run(fanout.emit_to_user(1, "x", {}))

    assert delivered == 2
    assert len(laptop.sent) == len(phone.sent) == 1


def test_failing_connection_does_not_block_others():
    registry, fanout = _fanout()
    broken, healthy = FakeConnection(fail=True), FakeConnection()
    registry.join(broken, 1)
    registry.join(healthy, 1)
    other_user = FakeConnection()
    registry.join(other_user, 2)

    delivered = asyncio.run(fanout.emit_to_users([1, 2], "x", {"value": 2}))

    assert delivered == 2
    assert healthy.sent == [{"type": "x", "data": {"value": 2}}]
    assert other_user.sent == [{"type": "x", "data": {"value": 2}}]


def test_emit_to_users_skips_duplicates_and_missing_ids():
    registry, fanout = _fanout()
    connection = FakeConnection()
    registry.join(connection, 5)

    delivered = asyncio.run(fanout.emit_to_users([5, None, 5], "x", {}))

    assert delivered == 1
    assert len(connection.sent) == 1


def test_payload_is_copied_per_delivery():
    registry, fanout = _fanout()
    connection = FakeConnection()
    registry.join(connection, 1)
    payload = {"nested": {"value": 1}}

    asyncio.run(fanout.emit_to_user(1, "x", payload))
    payload["nested"]["value"] = 2

    assert connection.sent[0]["data"] == {"nested": {"value": 1}}


def test_send_reports_failure_instead_of_raising():
    _, fanout = _fanout()

    assert asyncio.run(fanout.send(FakeConnection(fail=True), "x", {})) is False


def test_publisher_schedules_task_inside_event_loop():
    registry, fanout = _fanout()
    publisher = RealtimeEventPublisher(fanout)
    connection = FakeConnection()
    registry.join(connection, 3)

    async def scenario() -> None:
        publisher.dispatch(3, "notification", {"id": 1})
        await asyncio.sleep(0)
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert connection.sent == [{"type": "notification", "data": {"id": 1}}]


def test_publisher_delivers_from_worker_thread():
    registry, fanout = _fanout()
    publisher = RealtimeEventPublisher(fanout)
    connection = FakeConnection()
    registry.join(connection, 3)

    async def scenario() -> None:
        await anyio.to_thread.run_sync(
            publisher.dispatch_many, [3, 3, None], "notification", {"id": 2}
        )

    asyncio.run(scenario())

    assert connection.sent == [{"type": "notification", "data": {"id": 2}}]


def test_publisher_without_event_loop_is_noop():
    registry, fanout = _fanout()
    publisher = RealtimeEventPublisher(fanout)
    connection = FakeConnection()
    registry.join(connection, 3)

    publisher.dispatch(3, "notification", {"id": 3})
    publisher.dispatch(None, "notification", {"id": 3})

    assert connection.sent == []
