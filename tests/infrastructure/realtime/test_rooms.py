"""Tests for the per-user room registry."""

from linkup.infrastructure.realtime import RoomRegistry, room_name


class _Connection:
    """Stand-in for a websocket; identity is all the registry needs."""


def test_room_name_uses_user_prefix():
    assert room_name(42) == "user-42"


def test_join_adds_connection_to_user_room():
    registry = RoomRegistry()
    connection = _Connection()

    room = registry.join(connection, 7)

    assert room == "user-7"
    assert registry.members_of(7) == {connection}
    assert registry.user_of(connection) == 7


def test_join_is_idempotent():
    registry = RoomRegistry()
    connection = _Connection()

    registry.join(connection, 7)
    registry.join(connection, 7)

    assert registry.members_of(7) == {connection}
    assert registry.rooms_of(connection) == {"user-7"}


def test_rejoining_with_other_id_keeps_previous_membership():
    registry = RoomRegistry()
    connection = _Connection()

    registry.join(connection, 1)
    registry.join(connection, 2)

    assert connection in registry.members_of(1)
    assert connection in registry.members_of(2)
    assert registry.user_of(connection) == 2


def test_leave_removes_connection_from_every_room():
    registry = RoomRegistry()
    connection = _Connection()
    other = _Connection()
    registry.join(connection, 1)
    registry.join(connection, 2)
    registry.join(other, 2)

    registry.leave(connection)

    assert registry.members_of(1) == frozenset()
    assert registry.members_of(2) == {other}
    assert registry.rooms_of(connection) == frozenset()
    assert registry.user_of(connection) is None


def test_members_of_unknown_user_is_empty():
    registry = RoomRegistry()

    assert registry.members_of(99) == frozenset()


def test_leave_unknown_connection_is_noop():
    registry = RoomRegistry()

    registry.leave(_Connection())

    assert len(registry) == 0


def test_multiple_connections_share_a_room():
    registry = RoomRegistry()
    laptop, phone = _Connection(), _Connection()

    registry.join(laptop, 3)
    registry.join(phone, 3)
    registry.leave(laptop)

    assert registry.members_of(3) == {phone}
