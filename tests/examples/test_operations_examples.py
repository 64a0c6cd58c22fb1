"""
Behaviour of the operational examples: reversible changes, quality gates,
structured logging and honest status reporting.
"""

import asyncio
import io
import json
import sqlite3
import warnings
from datetime import date

import pytest

from principles.examples.feedback_integrity.correct import (
    CachingProfileService,
    Dependency,
    HealthChecker,
    Inventory,
    OperationTracker,
    OrderService as TrackedOrderService,
    PaymentService as HonestPaymentService,
    ScriptedGateway,
)
from principles.examples.observability_first.correct import (
    InventoryService,
    Metrics,
    PaymentService,
    configure_logging,
    process_order,
)
from principles.examples.recoverable_change.correct import (
    ExpandContractMigration,
    ExternalServices,
    FeatureFlag,
    FeatureFlags,
    RecoverableOrderProcessor,
    ReversibilityDebtTracker,
    SelfServiceDeployment,
    VersionedApi,
)
from principles.examples.virtuous_intolerance.correct import (
    CLEAN,
    PROBLEMATIC,
    QualityError,
    QualityGate,
    call_strictly,
    legacy_total,
)


# recoverable change

@pytest.fixture
def users_db():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, email TEXT)")
    conn.executemany("INSERT INTO users (id, email) VALUES (?, ?)",
                     [(1, "a@x.io"), (2, "b@x.io"), (3, "c@x.io")])
    yield conn
    conn.close()


def test_expand_contract_keeps_old_readers_working(users_db):
    migration = ExpandContractMigration(users_db, batch_size=2)

    migration.expand()
    migration.expand()
    migration.enable_dual_write()
    migration.save_user(1, "new@x.io")

    assert migration.can_contract(old_readers_running=0) is False
    assert migration.backfill() == 2
    assert users_db.execute("SELECT email, contact_email FROM users WHERE id = 1").fetchone() == (
        "new@x.io", "new@x.io")
    assert migration.verify_rollback_safety() == {
        "previous_version_compatible": True, "rows_out_of_sync": 0, "can_rollback": True}
    assert migration.can_contract(old_readers_running=1) is False
    assert migration.can_contract(old_readers_running=0) is True


def test_feature_flags_expire_and_switch_off_without_deploy():
    today = [date(2024, 6, 1)]
    flags = FeatureFlags(
        [FeatureFlag("new_checkout", "payments-team", date(2024, 6, 10), "PAY-1"),
         FeatureFlag("dark_mode", "web-team", date(2024, 12, 1), "WEB-2")],
        today=lambda: today[0],
    )

    assert flags.is_enabled("new_checkout") is True
    assert flags.is_enabled("nope") is False
    assert flags.expiring(within_days=14) == ["new_checkout"]

    assert flags.disable("new_checkout", "error spike")["no_deployment_required"] is True
    assert flags.is_enabled("new_checkout") is False
    assert flags.can_remove("new_checkout") is False
    assert flags.can_remove("dark_mode") is False

    today[0] = date(2024, 7, 15)
    assert flags.can_remove("new_checkout") is True


def test_failed_step_compensates_in_reverse():
    services = ExternalServices(fail_at="send_confirmation")
    processor = RecoverableOrderProcessor(services)

    result = processor.process_order("o-1")

    assert result["success"] is False
    assert result["failed_step"] == "send_confirmation"
    assert result["compensated"] == ["save_order", "charge_payment", "reserve_inventory"]
    assert [e.split(":")[0] for e in services.effects[3:]] == [
        "undo-save_order", "undo-charge_payment", "undo-reserve_inventory"]


def test_successful_order_runs_every_step():
    result = RecoverableOrderProcessor(ExternalServices()).process_order("o-2")

    assert result == {"success": True, "steps": list(RecoverableOrderProcessor.STEPS)}


def test_unhealthy_deploy_rolls_back_by_itself():
    deployment = SelfServiceDeployment("1.0")

    result = deployment.deploy("1.1", healthy=lambda version: False)

    assert result["deployed"] is False
    assert result["rolled_back_to"] == "1.0"
    assert result["approval_required"] is False
    assert deployment.current == "1.0"
    assert deployment.rollback("again")["success"] is False

    assert deployment.deploy("1.2", healthy=lambda version: True) == {"deployed": True, "version": "1.2"}
    assert deployment.history == ["1.0", "1.1", "1.0", "1.2"]


def test_deprecated_api_version_announces_sunset():
    today = [date(2025, 6, 1)]
    api = VersionedApi(today=lambda: today[0])

    v1 = api.handle({"Accept-Version": "v1"})
    v2 = api.handle({})

    assert v1["headers"]["Deprecation"] == "true"
    assert v1["headers"]["Sunset"] == "2025-07-01"
    assert v1["body"]["email"] == "john@example.com"
    assert v2["headers"] == {}
    assert v2["body"]["data"]["attributes"]["email_address"] == "john@example.com"
    assert api.handle({"Accept-Version": "v9"})["status"] == 400

    assert api.can_remove("v1") is False
    today[0] = date(2025, 8, 1)
    assert api.can_remove("v1") is True


def test_reversibility_debt_tracker():
    tracker = ReversibilityDebtTracker()
    debt_id = tracker.record("billing", "dropped legacy column", "ann", "restore from backup", priority="high")

    assert debt_id == "debt-001"
    assert tracker.can_recover("billing")["can_recover"] is False
    assert tracker.audit() == {"total": 1, "open": 1, "high_priority_open": 1}

    tracker.resolve(debt_id, "backup verified")
    assert tracker.can_recover("billing")["can_recover"] is True
    with pytest.raises(KeyError):
        tracker.resolve("debt-999", "nothing")


# virtuous intolerance

def test_quality_gate_passes_clean_source():
    assert QualityGate().check("clean.py", CLEAN) is None


def test_quality_gate_lists_every_finding():
    with pytest.raises(QualityError) as exc_info:
        QualityGate().check("problematic.py", PROBLEMATIC)

    error = exc_info.value
    assert error.file_name == "problematic.py"
    assert {f.kind for f in error.findings} == {"DEPRECATED_API", "UNUSED_NAME", "MAGIC_NUMBER", "TECHNICAL_DEBT"}
    assert [f.line for f in error.findings] == sorted(f.line for f in error.findings)
    assert "unused_variable" in str(error)
    assert "250" in str(error)


def test_quality_gate_build_stops_at_first_failure(capsys):
    files = {"a.py": CLEAN, "b.py": PROBLEMATIC, "c.py": CLEAN}

    with pytest.raises(QualityError) as exc_info:
        QualityGate().build(files)

    out = capsys.readouterr().out
    assert exc_info.value.file_name == "b.py"
    assert "PASS a.py" in out
    assert "PASS c.py" not in out


def test_deprecations_become_errors_when_called_strictly():
    with pytest.warns(DeprecationWarning):
        assert legacy_total([1, 2]) == 3

    with pytest.raises(DeprecationWarning):
        call_strictly(legacy_total, [1, 2])

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert call_strictly(sum, [1, 2]) == 3


# observability first

def test_every_log_line_carries_its_correlation_id():
    stream = io.StringIO()
    configure_logging(stream)
    metrics = Metrics()
    inventory, payment = InventoryService(metrics), PaymentService(metrics)

    async def _run():
        return await asyncio.gather(
            process_order(inventory, payment, metrics, "u1", "SKU-1", 1, 100, request_id="req_a"),
            process_order(inventory, payment, metrics, "u2", "SKU-2", 1, 60_000, request_id="req_b"),
        )

    ok, failed = asyncio.run(_run())

    assert ok["ok"] is True and ok["correlation_id"] == "req_a"
    assert failed == {"ok": False, "correlation_id": "req_b",
                      "error": {"code": "CREDIT_LIMIT", "message": "Unable to process order at this time."}}

    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert {e["correlation_id"] for e in events} == {"req_a", "req_b"}
    fail_events = [e for e in events if e["msg"] == "charge.fail"]
    assert [e["correlation_id"] for e in fail_events] == ["req_b"]

    snapshot = metrics.snapshot()
    assert snapshot["counters"]["order_success_total"] == 1
    assert snapshot["counters"]['order_error_total{"code": "CREDIT_LIMIT"}'] == 1
    assert snapshot["timings_ms"]["process_order_ms"] == 2


# feedback integrity

def _submit(script, stock=None):
    async def _run():
        service = TrackedOrderService(OperationTracker(clock=lambda: 0.0),
                                      HonestPaymentService(ScriptedGateway(script)),
                                      Inventory(stock or {"book": 5}))
        accepted = await service.submit_order({"customer_id": "c1", "total_cents": 1500,
                                               "items": [{"sku": "book", "qty": 1}]})
        await asyncio.gather(*service.background)
        return accepted, service.order_status(accepted["order_id"])

    return asyncio.run(_run())


def test_order_acceptance_promises_only_what_happened():
    accepted, status = _submit(["ok"])

    assert accepted["status"] == "accepted"
    assert accepted["guarantees"] == {"received": True, "persisted": True, "processed": False}
    assert status["current_status"] == "completed"
    assert status["steps"] == ["pending", "checking_inventory", "processing_payment",
                               "reserving_inventory", "completed"]
    assert status["result"]["payment_id"] == "txn_001"


def test_timeout_is_reported_as_uncertain():
    _, status = _submit(["timeout"])

    assert status["current_status"] == "failed"
    assert status["error"]["code"] == "PAYMENT_UNCERTAIN"
    assert status["error"]["certainty"] == "uncertain"


def test_missing_inventory_fails_before_payment():
    _, status = _submit(["ok"], stock={"book": 0})

    assert status["error"] == {"code": "INSUFFICIENT_INVENTORY", "items": ["book"]}


def test_health_distinguishes_degraded_from_unhealthy():
    async def ok():
        return {"ok": True}

    async def down():
        return {"ok": False}

    async def hangs():
        await asyncio.sleep(1)

    degraded = asyncio.run(HealthChecker({"db": Dependency(ok), "recs": Dependency(down, critical=False)}).check())
    unhealthy = asyncio.run(HealthChecker({"db": Dependency(hangs)}, timeout=0.01).check())

    assert degraded["status"] == "degraded"
    assert degraded["capabilities"] == {"can_accept_requests": True, "full_functionality": False}
    assert unhealthy["status"] == "unhealthy"
    assert unhealthy["checks"]["db"]["certainty"] == "uncertain"


def test_cached_reads_report_their_age():
    now = [0.0]
    service = CachingProfileService({"u1": {"name": "Ann"}}, clock=lambda: now[0])

    assert service.profile("u1")["source"] == "database"
    now[0] = 90.0
    cached = service.profile("u1")
    assert cached["source"] == "cache"
    assert cached["freshness"] == {"age_seconds": 90.0, "is_stale": True}
    assert service.profile("ghost")["status"] == "failed"
