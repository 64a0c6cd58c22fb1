import asyncio

import pytest

from principles.examples.temporal_decoupling.correct import (
    AccountStore,
    ConcurrentModification,
    DataProcessor,
    FakeScheduler,
    InsufficientFunds,
    NotificationService,
    SessionManager,
    TransferResult,
    VectorClock,
    Versioned,
    VersionedCache,
    fetch_in_order,
    start_services,
    transfer,
)


def test_transfer_commits_with_version_bump():
    store = AccountStore({"alice": 100, "bob": 0})

    result = asyncio.run(transfer(store, "alice", "bob", 30))

    assert result == TransferResult(1, {"alice": 70, "bob": 30})
    assert store.read("alice") == (70, 1)
    assert store.read("bob") == (30, 1)


def test_concurrent_transfers_never_overdraw():
    store = AccountStore({"alice": 100, "bob": 0})

    async def _run():
        return await asyncio.gather(
            transfer(store, "alice", "bob", 80),
            transfer(store, "alice", "bob", 80),
            return_exceptions=True,
        )

    first, second = asyncio.run(_run())

    assert isinstance(first, TransferResult)
    assert first.attempts == 1
    assert isinstance(second, InsufficientFunds)
    assert store.read("alice")[0] == 20
    assert store.read("bob")[0] == 80


def test_insufficient_funds_is_not_retried():
    store = AccountStore({"alice": 10, "bob": 0})

    with pytest.raises(InsufficientFunds):
        asyncio.run(transfer(store, "alice", "bob", 50))

    assert store.read("alice") == (10, 0)


def test_transfer_gives_up_after_max_attempts():
    store = AccountStore({"alice": 100, "bob": 0})
    conflicts = []

    def always_conflicting(updates):
        conflicts.append(updates)
        return False

    store.compare_and_swap = always_conflicting

    with pytest.raises(ConcurrentModification):
        asyncio.run(transfer(store, "alice", "bob", 10, max_attempts=3))

    assert len(conflicts) == 3
    assert store.read("alice") == (100, 0)


def test_transfer_retries_after_a_lost_race():
    store = AccountStore({"alice": 100, "bob": 0})
    real_cas = store.compare_and_swap
    calls = []

    def lose_once(updates):
        calls.append(updates)
        if len(calls) == 1:
            # someone else deposits into bob between read and commit
            store.accounts["bob"].balance += 5
            store.accounts["bob"].version += 1
            return False
        return real_cas(updates)

    store.compare_and_swap = lose_once

    result = asyncio.run(transfer(store, "alice", "bob", 10))

    assert result.attempts == 2
    assert store.read("bob")[0] == 15
    assert store.read("alice")[0] == 90


def test_compare_and_swap_is_all_or_nothing():
    store = AccountStore({"a": 1, "b": 2})

    assert store.compare_and_swap({"a": (0, 5), "b": (7, 5)}) is False
    assert store.read("a") == (1, 0)
    assert store.read("b") == (2, 0)


def test_vector_clock_increment_and_merge():
    a = VectorClock("A")
    b = VectorClock("B", {"B": 2})

    t1 = a.increment()
    t2 = b.merge(t1)

    assert t1 == {"A": 1}
    assert t2 == {"B": 3, "A": 1}
    assert b.merge({"A": 5, "C": 1}) == {"A": 5, "B": 4, "C": 1}


def test_vector_clock_merge_keeps_local_when_larger():
    clock = VectorClock("A", {"A": 4, "B": 9})

    assert clock.merge({"A": 2, "B": 3}) == {"A": 5, "B": 9}


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ({"A": 1}, {"A": 1, "B": 1}, "before"),
        ({"A": 2, "B": 1}, {"A": 1, "B": 1}, "after"),
        ({"A": 1, "B": 0}, {"A": 1}, "equal"),
        ({"A": 1}, {"B": 1}, "concurrent"),
        ({}, {}, "equal"),
    ],
)
def test_vector_clock_compare(a, b, expected):
    assert VectorClock.compare(a, b) == expected


def test_versioned_cache_keeps_highest_version():
    cache = VersionedCache()
    cache.offer("price", Versioned(10, 2))

    assert cache.offer("price", Versioned(9, 1)).value == 10
    assert cache.offer("price", Versioned(11, 3)).value == 11


def test_data_processor_waits_for_start():
    async def _run():
        processor = DataProcessor()
        with pytest.raises(RuntimeError):
            await processor.process([1])

        init = processor.start(delay=0.001)
        result = await processor.process([1, 2, 3, 4])
        await init
        return result

    assert asyncio.run(_run()) == [1, 2, 3]


def test_fetch_in_order_ignores_completion_order():
    async def fetch(key):
        await asyncio.sleep({"a": 0.01, "b": 0.0, "c": 0.005}[key])
        return {"id": key}

    result = asyncio.run(fetch_in_order(["a", "b", "c"], fetch))

    assert [r["id"] for r in result] == ["a", "b", "c"]


def test_start_services_respects_dependencies():
    order = asyncio.run(start_services())

    assert order.index("database") < order.index("cache") < order.index("http_server")
    assert order.index("message_queue") < order.index("http_server")
    assert sorted(order) == ["cache", "database", "http_server", "message_queue"]


def test_fake_scheduler_runs_nothing_until_advanced():
    async def _run():
        scheduler = FakeScheduler()
        service = NotificationService(scheduler, latency=5)
        first = service.send("u1", "hi")
        second = service.send("u2", "there")

        assert service.sent == []
        scheduler.advance(4)
        assert service.sent == []
        scheduler.advance(1)
        return service.sent, first.done() and second.done()

    sent, resolved = asyncio.run(_run())

    assert sent == [("u1", "hi"), ("u2", "there")]
    assert resolved is True


def test_session_manager_uses_injected_clock():
    now = [100.0]
    sessions = SessionManager(clock=lambda: now[0])

    assert sessions.create("user", ttl=10) == 110.0
    assert sessions.is_valid("user") is True
    now[0] = 110.0
    assert sessions.is_valid("user") is False
    assert sessions.is_valid("nobody") is False


@pytest.mark.parametrize("source, target, amount", [("alice", "alice", 30), ("alice", "bob", 0), ("alice", "bob", -20)])
def test_transfer_rejects_self_and_non_positive_amounts(source, target, amount):
    store = AccountStore({"alice": 100, "bob": 0})

    with pytest.raises(ValueError):
        asyncio.run(transfer(store, source, target, amount))

    assert store.read("alice") == (100, 0)
    assert store.read("bob") == (0, 0)


def test_start_services_rejects_unknown_dependency():
    with pytest.raises(ValueError, match="metrics"):
        asyncio.run(start_services({"http_server": ("metrics",)}))


def test_start_services_rejects_cycles():
    with pytest.raises(ValueError):
        asyncio.run(start_services({"a": ("b",), "b": ("a",)}))
