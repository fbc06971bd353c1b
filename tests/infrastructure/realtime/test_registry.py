"""Tests for the per-user connection registry."""

from __future__ import annotations

import threading

from lostfound.infrastructure.realtime import ConnectionRegistry


def test_register_groups_connections_by_user():
    registry = ConnectionRegistry()

    registry.register(1, "a")
    registry.register(1, "b")
    registry.register(2, "c")

    assert registry.connections_for(1) == {"a", "b"}
    assert registry.connections_for(2) == {"c"}
    assert registry.connection_count() == 3
    assert registry.user_ids() == {1, 2}


def test_unknown_user_has_no_connections():
    registry = ConnectionRegistry()

    assert registry.connections_for(42) == frozenset()
    assert 42 not in registry


def test_register_same_connection_twice_is_idempotent():
    registry = ConnectionRegistry()

    registry.register(1, "a")
    registry.register(1, "a")

    assert registry.connections_for(1) == {"a"}


def test_unregister_last_connection_drops_the_user():
    registry = ConnectionRegistry()
    registry.register(1, "a")
    registry.register(1, "b")

    registry.unregister(1, "a")
    assert 1 in registry
    assert registry.connections_for(1) == {"b"}

    registry.unregister(1, "b")
    assert 1 not in registry
    assert len(registry) == 0


def test_unregister_unknown_entries_is_a_no_op():
    registry = ConnectionRegistry()
    registry.register(1, "a")

    registry.unregister(1, "missing")
    registry.unregister(7, "a")

    assert registry.connections_for(1) == {"a"}


def test_register_after_user_was_dropped_starts_fresh():
    registry = ConnectionRegistry()
    registry.register(1, "a")
    registry.unregister(1, "a")

    registry.register(1, "b")

    assert registry.connections_for(1) == {"b"}


def test_snapshot_is_not_affected_by_later_changes():
    registry = ConnectionRegistry()
    registry.register(1, "a")

    snapshot = registry.connections_for(1)
    registry.register(1, "b")
    registry.unregister(1, "a")

    assert snapshot == {"a"}


def test_concurrent_connect_and_disconnect_leave_consistent_state():
    registry = ConnectionRegistry()
    barrier = threading.Barrier(8)

    def churn(worker: int) -> None:
        barrier.wait()
        for index in range(200):
            connection_id = f"{worker}-{index}"
            registry.register(1, connection_id)
            registry.unregister(1, connection_id)
        registry.register(1, f"{worker}-kept")

    threads = [threading.Thread(target=churn, args=(worker,)) for worker in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert registry.connections_for(1) == {f"{worker}-kept" for worker in range(8)}
    assert registry.user_ids() == {1}


def test_concurrent_updates_across_users_are_never_lost():
    registry = ConnectionRegistry()
    workers, operations, users = 16, 300, 25
    barrier = threading.Barrier(workers)

    def plan(worker: int) -> list[tuple[str, int, str]]:
        steps = []
        for index in range(operations):
            user_id = (worker * 7 + index) % users + 1
            connection_id = f"{worker}-{index}"
            steps.append(("register", user_id, connection_id))
            if index % 3:
                steps.append(("unregister", user_id, connection_id))
        return steps

    plans = [plan(worker) for worker in range(workers)]

    def run(steps: list[tuple[str, int, str]]) -> None:
        barrier.wait()
        for action, user_id, connection_id in steps:
            getattr(registry, action)(user_id, connection_id)

    threads = [threading.Thread(target=run, args=(steps,)) for steps in plans]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    expected: dict[int, set[str]] = {}
    for steps in plans:
        for action, user_id, connection_id in steps:
            if action == "register":
                expected.setdefault(user_id, set()).add(connection_id)
            else:
                expected[user_id].discard(connection_id)
    expected = {user_id: ids for user_id, ids in expected.items() if ids}

    for user_id in range(1, users + 1):
        assert registry.connections_for(user_id) == expected.get(user_id, set())
    assert registry.user_ids() == set(expected)
    assert registry.connection_count() == sum(len(ids) for ids in expected.values())
