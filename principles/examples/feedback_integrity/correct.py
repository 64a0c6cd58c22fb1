"""
Feedback Integrity - correct implementation

Every answer states exactly what is known. Submitting an order returns
"accepted" with explicit guarantees and a status to poll; the tracker records
each step. Health checks distinguish healthy, degraded and unhealthy. Payment
failures carry a certainty, so a timeout is reported as unknown rather than
as a decline. Cached reads say where the data came from and how old it is,
and metrics count unknown outcomes separately from successes.
"""

import asyncio
import json
import time
from collections import Counter
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable, Dict, Iterable, List, Optional


def completed(data: dict) -> dict:
    return {"status": "completed", "certainty": "confirmed", "data": data}


def failed(error: dict, certainty: str = "confirmed") -> dict:
    return {"status": "failed", "certainty": certainty, "error": error}


class OperationTracker:
    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self.operations: Dict[str, dict] = {}

    def create(self, operation_id: str, **metadata) -> dict:
        now = self.clock()
        operation = {
            "id": operation_id,
            "status": "pending",
            "created_at": now,
            "updated_at": now,
            "history": [{"status": "pending"}],
            "metadata": metadata,
        }
        self.operations[operation_id] = operation
        return operation

    def update(self, operation_id: str, status: str, **details) -> Optional[dict]:
        operation = self.operations.get(operation_id)
        if operation is None:
            return None
        operation["status"] = status
        operation["updated_at"] = self.clock()
        operation["history"].append({"status": status, **details})
        operation.update(details)
        return operation

    def get(self, operation_id: str) -> Optional[dict]:
        return self.operations.get(operation_id)


class GatewayError(Exception):
    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code


class ScriptedGateway:
    """Payment gateway replaying a fixed list of outcomes: "ok", "timeout" or "declined"."""

    def __init__(self, script: Iterable[str]):
        self.script = list(script)
        self.calls = 0

    async def call(self, customer_id: str, amount_cents: int) -> dict:
        self.calls += 1
        outcome = self.script[(self.calls - 1) % len(self.script)] if self.script else "ok"
        if outcome == "timeout":
            raise GatewayError("Connection timeout", "ETIMEDOUT")
        if outcome == "declined":
            raise GatewayError("Card declined", "CARD_DECLINED")
        return {"id": f"txn_{self.calls:03d}"}


ERROR_CLASSES = {
    "CARD_DECLINED": ("PAYMENT_DECLINED", "The payment was declined by the card issuer", "confirmed",
                      "Please try a different payment method"),
    "INVALID_CARD": ("INVALID_PAYMENT_METHOD", "The card number is invalid", "confirmed",
                     "Please check the card number and try again"),
    "ETIMEDOUT": ("PAYMENT_UNCERTAIN", "The payment request timed out", "uncertain",
                  "Please check your payment history before retrying"),
}


class PaymentService:
    def __init__(self, gateway: ScriptedGateway, log: Callable[[str, dict], None] = lambda *_: None):
        self.gateway = gateway
        self.log = log
        self._ids = count(1)

    async def charge(self, customer_id: str, amount_cents: int) -> dict:
        correlation_id = f"pay_{next(self._ids):04d}"
        try:
            response = await self.gateway.call(customer_id, amount_cents)
        except GatewayError as e:
            self.log("payment.failed", {"correlation_id": correlation_id, "code": e.code, "message": str(e)})
            code, message, certainty, suggestion = ERROR_CLASSES.get(
                e.code,
                ("PAYMENT_ERROR", "An error occurred while processing the payment", "uncertain",
                 "Please try again or contact support with the correlation ID"),
            )
            return failed({
                "code": code,
                "message": message,
                "certainty": certainty,
                "suggestion": suggestion,
                "correlation_id": correlation_id,
            }, certainty)
        return completed({"transaction_id": response["id"], "amount_cents": amount_cents,
                          "correlation_id": correlation_id})

    async def health_check(self) -> dict:
        return {"ok": True}


class Inventory:
    def __init__(self, stock: Dict[str, int]):
        self.stock = dict(stock)

    async def check_availability(self, items: List[dict]) -> dict:
        missing = [item["sku"] for item in items if self.stock.get(item["sku"], 0) < item["qty"]]
        return {"available": not missing, "unavailable": missing}

    async def reserve(self, items: List[dict]) -> str:
        for item in items:
            self.stock[item["sku"]] -= item["qty"]
        return "res_" + "_".join(item["sku"] for item in items)


class OrderService:
    def __init__(self, tracker: OperationTracker, payments: PaymentService, inventory: Inventory):
        self.tracker = tracker
        self.payments = payments
        self.inventory = inventory
        self.orders: Dict[str, dict] = {}
        self.background: List[asyncio.Task] = []
        self._ids = count(1)

    async def submit_order(self, order: dict) -> dict:
        order_id = f"order_{next(self._ids):04d}"
        self.tracker.create(order_id, type="order", customer_id=order["customer_id"])
        self.orders[order_id] = dict(order, id=order_id)
        self.background.append(asyncio.create_task(self._process(order_id)))
        return {
            "status": "accepted",
            "message": "Order received and queued for processing",
            "guarantees": {"received": True, "persisted": True, "processed": False},
            "order_id": order_id,
            "status_url": f"/orders/{order_id}/status",
        }

    def order_status(self, order_id: str) -> dict:
        tracked = self.tracker.get(order_id)
        if tracked is None:
            return failed({"code": "ORDER_NOT_FOUND", "message": "No order found with this ID"})
        return {
            "order_id": order_id,
            "current_status": tracked["status"],
            "steps": [entry.get("step", entry["status"]) for entry in tracked["history"]],
            "result": tracked.get("completion"),
            "error": tracked.get("error"),
        }

    async def _process(self, order_id: str) -> None:
        order = self.orders[order_id]
        try:
            self.tracker.update(order_id, "processing", step="checking_inventory")
            availability = await self.inventory.check_availability(order["items"])
            if not availability["available"]:
                self.tracker.update(order_id, "failed", error={
                    "code": "INSUFFICIENT_INVENTORY", "items": availability["unavailable"]})
                return

            self.tracker.update(order_id, "processing", step="processing_payment")
            payment = await self.payments.charge(order["customer_id"], order["total_cents"])
            if payment["status"] == "failed":
                self.tracker.update(order_id, "failed", error=payment["error"])
                return

            self.tracker.update(order_id, "processing", step="reserving_inventory")
            reservation = await self.inventory.reserve(order["items"])
            self.tracker.update(order_id, "completed", completion={
                "payment_id": payment["data"]["transaction_id"], "reservation_id": reservation})
        except Exception as e:
            self.tracker.update(order_id, "failed", error={"code": "PROCESSING_ERROR", "message": str(e)})


@dataclass
class Dependency:
    check: Callable[[], Any]
    critical: bool = True


class HealthChecker:
    def __init__(self, dependencies: Dict[str, Dependency], timeout: float = 0.5):
        self.dependencies = dependencies
        self.timeout = timeout

    async def check(self) -> dict:
        checks = {}
        healthy, degraded = True, False
        for name, dependency in self.dependencies.items():
            try:
                result = await asyncio.wait_for(dependency.check(), self.timeout)
                checks[name] = {"status": "healthy" if result["ok"] else "unhealthy",
                                "details": result.get("details")}
                ok = result["ok"]
            except asyncio.TimeoutError:
                checks[name] = {"status": "unhealthy", "error": "Health check timeout", "certainty": "uncertain"}
                ok = False
            if not ok:
                if dependency.critical:
                    healthy = False
                else:
                    degraded = True

        status = "unhealthy" if not healthy else "degraded" if degraded else "healthy"
        return {
            "status": status,
            "capabilities": {
                "can_accept_requests": healthy,
                "full_functionality": healthy and not degraded,
            },
            "checks": checks,
        }


class CachingProfileService:
    STALE_AFTER = 60.0

    def __init__(self, database: Dict[str, dict], clock: Callable[[], float] = time.time):
        self.database = database
        self.cache: Dict[str, tuple] = {}
        self.clock = clock

    def profile(self, user_id: str) -> dict:
        if user_id in self.cache:
            data, cached_at = self.cache[user_id]
            age = self.clock() - cached_at
            return {"data": data, "source": "cache",
                    "freshness": {"age_seconds": round(age, 1), "is_stale": age > self.STALE_AFTER}}
        data = self.database.get(user_id)
        if data is None:
            return failed({"code": "USER_NOT_FOUND", "message": f"No user found with ID: {user_id}"})
        self.cache[user_id] = (data, self.clock())
        return {"data": data, "source": "database", "freshness": {"age_seconds": 0.0, "is_stale": False}}


class HonestMetrics:
    def __init__(self):
        self.counters: Counter = Counter()

    def record(self, name: str, outcome: str) -> None:
        self.counters[f"{name}_started"] += 1
        self.counters[f"{name}_{outcome}"] += 1

    def stats(self, name: str) -> dict:
        started = self.counters[f"{name}_started"]
        succeeded = self.counters[f"{name}_succeeded"]
        failed_count = self.counters[f"{name}_failed"]
        unknown = self.counters[f"{name}_unknown"]
        finished = succeeded + failed_count
        return {
            "started": started,
            "succeeded": succeeded,
            "failed": failed_count,
            "unknown": unknown,
            "success_rate": round(succeeded / finished * 100, 1) if finished else None,
            "has_uncertainty": unknown > 0,
        }


@dataclass
class NotificationService:
    tracker: OperationTracker
    send: Callable[[str, str], Any]
    dead_letters: List[dict] = field(default_factory=list)
    background: List[asyncio.Task] = field(default_factory=list)
    _ids: count = field(default_factory=lambda: count(1))

    def notify(self, user_id: str, message: str) -> dict:
        notification_id = f"notif_{next(self._ids):04d}"
        self.tracker.create(notification_id, user_id=user_id, type="notification")
        self.background.append(asyncio.create_task(self._deliver(notification_id, user_id, message)))
        return {"status": "accepted", "notification_id": notification_id,
                "guarantees": {"queued": True, "delivered": False}}

    async def _deliver(self, notification_id: str, user_id: str, message: str) -> None:
        self.tracker.update(notification_id, "sending")
        try:
            delivery_id = await self.send(user_id, message)
            self.tracker.update(notification_id, "delivered", delivery_id=delivery_id)
        except ConnectionError as e:
            self.tracker.update(notification_id, "failed", error=str(e))
            self.dead_letters.append({"notification_id": notification_id, "user_id": user_id, "error": str(e)})

    def bulk(self, user_ids: List[str], message: str) -> dict:
        results = [dict(self.notify(user_id, message), user_id=user_id) for user_id in user_ids]
        return {"summary": {"total": len(user_ids),
                            "accepted": sum(1 for r in results if r["status"] == "accepted")},
                "results": results}


async def flaky_email(user_id: str, message: str) -> str:
    await asyncio.sleep(0)
    if user_id.endswith("2"):
        raise ConnectionError("Email service unavailable")
    return f"email_{user_id}"


def show(label: str, value) -> None:
    print(f"{label}: {json.dumps(value, indent=2, default=str)}")


async def main():
    tracker = OperationTracker(clock=lambda: 1_700_000_000.0)
    logs = []

    print("--- 1. Honest order acknowledgment ---")
    orders = OrderService(tracker, PaymentService(ScriptedGateway(["ok"]), lambda *a: logs.append(a)),
                          Inventory({"WIDGET-1": 10}))
    receipt = await orders.submit_order({"customer_id": "cust_123",
                                         "items": [{"sku": "WIDGET-1", "qty": 2}], "total_cents": 4999})
    show("Order response", receipt)
    print(f"Status right away: {orders.order_status(receipt['order_id'])['current_status']}")
    await asyncio.gather(*orders.background)
    show("Status after processing", orders.order_status(receipt["order_id"]))

    print("\n--- 2. Honest health check ---")

    async def ok():
        return {"ok": True}

    async def refused():
        return {"ok": False, "details": "Connection refused"}

    checker = HealthChecker({"database": Dependency(ok), "cache": Dependency(refused, critical=False)})
    health = await checker.check()
    show("Health", health)

    print("\n--- 3. Payment errors with certainty ---")
    metrics = HonestMetrics()
    payments = PaymentService(ScriptedGateway(["ok", "timeout", "declined"]), lambda *a: logs.append(a))
    for _ in range(3):
        result = await payments.charge("cust_123", 2999)
        if result["status"] == "completed":
            metrics.record("payment", "succeeded")
            print(f"Payment succeeded: {result['data']['transaction_id']}")
        elif result["certainty"] == "uncertain":
            metrics.record("payment", "unknown")
            print(f"Payment outcome unknown: {result['error']['message']}")
        else:
            metrics.record("payment", "failed")
            print(f"Payment failed: {result['error']['message']}")
    show("Payment metrics", metrics.stats("payment"))

    print("\n--- 4. Cache with freshness ---")
    now = [1000.0]
    profiles = CachingProfileService({"user_123": {"name": "Test User"}}, clock=lambda: now[0])
    show("First fetch", profiles.profile("user_123"))
    now[0] += 90
    show("Second fetch", profiles.profile("user_123"))

    print("\n--- 5. Bulk notification with per-item status ---")
    notifications = NotificationService(tracker, flaky_email)
    bulk = notifications.bulk(["user_1", "user_2", "user_3"], "Hello!")
    show("Bulk response", bulk["summary"])
    await asyncio.gather(*notifications.background)
    for item in bulk["results"]:
        print(f"{item['user_id']}: {tracker.get(item['notification_id'])['status']}")
    print(f"Dead letters: {len(notifications.dead_letters)}")


if __name__ == "__main__":
    asyncio.run(main())
