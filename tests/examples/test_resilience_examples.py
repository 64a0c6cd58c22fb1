"""
Behaviour of the resilience examples: backpressure, circuit breakers,
idempotency keys and checkpointed work.
"""

import asyncio

import pytest

from principles.examples.backpressure_first.correct import TokenBucket, Worker, accept_request
from principles.examples.blast_radius_containment.correct import (
    CircuitBreaker,
    CircuitOpenError,
    TenantIsolatedPool,
    TenantPoolExhaustedError,
)
from principles.examples.idempotency.correct import (
    IdempotencyConflict,
    PaymentProcessor,
    UserProfileManager,
)
from principles.examples.incremental_validity.correct import (
    CheckpointBatchProcessor,
    CheckpointStore,
    Crash,
    IncrementalMigration,
    OffsetTrackedStreamProcessor,
    ResumableUploader,
    crash_on,
)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_token_bucket_allows_burst_then_refills():
    clock = FakeClock()
    bucket = TokenBucket(rate_per_sec=1, burst=2, clock=clock)

    assert [bucket.allow() for _ in range(3)] == [True, True, False]

    clock.now = 0.5
    assert bucket.allow() is False

    clock.now = 1.0
    assert bucket.allow() is True
    assert bucket.allow() is False

    clock.now = 10.0
    assert [bucket.allow() for _ in range(3)] == [True, True, False]


def test_accept_request_sheds_with_explicit_status():
    async def _run():
        queue = asyncio.Queue(maxsize=1)
        limiter = TokenBucket(rate_per_sec=0, burst=2, clock=FakeClock())

        async def job():
            return None

        return [accept_request(queue, limiter, job) for _ in range(3)], queue.qsize()

    admissions, size = asyncio.run(_run())

    assert [(a.ok, a.code) for a in admissions] == [(True, 202), (False, 503), (False, 429)]
    assert size == 1


def test_worker_times_out_slow_jobs():
    async def _run():
        queue = asyncio.Queue(maxsize=10)
        worker = Worker(queue, max_concurrency=2, task_timeout=0.05)
        worker.start()

        async def quick():
            await asyncio.sleep(0)

        async def slow():
            await asyncio.sleep(1)

        async def broken():
            raise RuntimeError("nope")

        for job in (quick, slow, broken, quick):
            queue.put_nowait(job)
        await asyncio.wait_for(queue.join(), timeout=2)
        await worker.stop()
        return worker

    worker = asyncio.run(_run())

    assert worker.completed == 2
    assert worker.timed_out == 1
    assert worker.failed == 2
    assert worker.in_flight == 0


def test_circuit_breaker_opens_and_recovers():
    clock = FakeClock()
    breaker = CircuitBreaker("deps", failure_threshold=2, recovery_timeout=10, clock=clock)

    async def boom():
        raise RuntimeError("down")

    async def fine():
        return "ok"

    async def _run():
        for _ in range(2):
            with pytest.raises(RuntimeError):
                await breaker.call(boom)
        assert breaker.state == "OPEN"

        with pytest.raises(CircuitOpenError):
            await breaker.call(fine)
        degraded = await breaker.call(fine, fallback=lambda: "cached")
        assert degraded == {"result": "cached", "degraded": True}
        assert breaker.rejected == 2

        clock.now = 10
        recovered = await breaker.call(fine)
        assert recovered == {"result": "ok", "degraded": False}
        assert breaker.state == "CLOSED"

    asyncio.run(_run())


def test_circuit_breaker_half_open_failure_reopens():
    clock = FakeClock()
    breaker = CircuitBreaker("deps", failure_threshold=1, recovery_timeout=5, clock=clock)

    async def boom():
        raise RuntimeError("still down")

    async def _run():
        result = await breaker.call(boom, fallback=lambda: None)
        assert result["degraded"] is True
        assert breaker.state == "OPEN"

        clock.now = 5
        await breaker.call(boom, fallback=lambda: None)
        assert breaker.state == "OPEN"
        assert breaker.last_failure == 5

    asyncio.run(_run())


def test_tenant_pool_limits_each_tenant():
    pool = TenantIsolatedPool(per_tenant_max=2, global_max=10)
    held = [pool.get_connection("noisy"), pool.get_connection("noisy")]

    with pytest.raises(TenantPoolExhaustedError):
        pool.get_connection("noisy")
    quiet = pool.get_connection("quiet")

    assert pool.metrics()["tenants"] == {"noisy": 2, "quiet": 1}
    held[0].release()
    quiet.release()
    assert pool.metrics()["globalActive"] == 1
    assert len(pool.rejections) == 1


def test_payment_retry_with_same_key_is_replayed():
    processor = PaymentProcessor()

    first = processor.charge("key-1", "cust", 25.0)
    retry = processor.charge("key-1", "cust", 25.0)

    assert first["replayed"] is False
    assert retry["replayed"] is True
    assert retry["charge_id"] == first["charge_id"] == "ch_0001"
    assert len(processor.charges) == 1


def test_payment_key_reuse_with_other_parameters_is_rejected():
    processor = PaymentProcessor()
    processor.charge("key-1", "cust", 25.0)

    with pytest.raises(IdempotencyConflict):
        processor.charge("key-1", "cust", 30.0)
    assert processor.charge("key-2", "cust", 30.0)["charge_id"] == "ch_0002"


def test_profile_operations_are_idempotent():
    manager = UserProfileManager()

    created = manager.create_user_profile("u1", name="Ann")
    assert manager.create_user_profile("u1", name="Other") is created

    manager.activate_user_account("u1")
    stamp = created["activated_at"]
    manager.activate_user_account("u1")
    assert created["activated_at"] == stamp

    manager.record_activity("u1", "evt-1", kind="login")
    manager.record_activity("u1", "evt-1", kind="login")
    assert list(created["activities"]) == ["evt-1"]

    manager.set_user_preferences("u1", {"theme": "dark"})
    updated_at = created["updated_at"]
    manager.set_user_preferences("u1", {"theme": "dark"})
    assert created["updated_at"] == updated_at


def test_batch_processing_resumes_from_checkpoint():
    store = CheckpointStore()
    records = [{"id": f"r{i}", "data": f"item {i}"} for i in range(25)]

    crashing = CheckpointBatchProcessor(store, "import", batch_size=10, before_record=crash_on(15, "power cut"))
    with pytest.raises(Crash):
        crashing.process_records(records)

    assert store.checkpoint("import") == {"last_index": 9, "total": 25}

    result = CheckpointBatchProcessor(store, "import", batch_size=10).process_records(records)

    assert result == {"success": True, "processed": 25, "resumed_from": 10}
    assert store.count("processed") == 25
    assert store.records["processed"]["r24"]["data"] == "ITEM 24"
    assert store.checkpoint("import") is None


def test_upload_resumes_after_last_chunk():
    store = CheckpointStore()
    data = bytes(range(120))

    uploader = ResumableUploader(store, chunk_size=50, before_chunk=crash_on(3, "connection reset"))
    with pytest.raises(Crash):
        uploader.upload(data, "file-1")

    uploader.before_chunk = lambda: None
    result = uploader.upload(data, "file-1")

    assert result == {"success": True, "bytes": 120, "resumed_from": 100}
    assert bytes(uploader.received["file-1"]) == data


def test_migration_resumes_after_the_failed_table():
    store = CheckpointStore()
    tables = ["users", "orders", "products", "reviews", "inventory"]

    def fail_on_products(table):
        if table == "products":
            raise Crash("lock timeout")

    with pytest.raises(Crash):
        IncrementalMigration(store, "v2", migrate_table=fail_on_products).run(tables)

    state = store.checkpoint("v2")
    assert state["completed_tables"] == ["users", "orders"]
    assert state["status"] == "failed"
    assert state["error"] == "lock timeout"

    migrated = []
    result = IncrementalMigration(store, "v2", migrate_table=migrated.append).run(tables)

    assert migrated == ["products", "reviews", "inventory"]
    assert result == {"success": True, "migrated_tables": tables, "total_tables": 5}
    assert store.checkpoint("v2")["status"] == "completed"
    assert store.count("migration_log") == 5


def test_stream_replays_nothing_after_restart():
    store = CheckpointStore()
    events = [{"event_id": f"evt-{i}"} for i in range(25)]

    consumer = OffsetTrackedStreamProcessor(store, "clicks", before_item=crash_on(18, "consumer killed"))
    with pytest.raises(Crash):
        consumer.process(events)

    assert consumer.committed_offset() == 17
    assert store.count("stream_results") == 17

    result = OffsetTrackedStreamProcessor(store, "clicks").process(events)

    assert result == {"success": True, "processed": 25, "resumed_from": 17}
    assert store.count("stream_results") == 25
    assert store.records["stream_results"]["clicks-24"] == {"event_id": "evt-24", "processed": True, "offset": 24}
