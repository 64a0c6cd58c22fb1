"""
Observability-First - correct implementation

Every log line is one JSON object carrying the correlation id of the
request it belongs to. The id lives in a ContextVar so it follows the
request across awaits without being threaded through every call, and a
logging.Filter stamps it on each record. Each step records a counter and
a timing, failures carry a stable error code and the caller gets a safe
message plus the correlation id to quote to support.
"""

import asyncio
import contextvars
import json
import logging
import sys
import time
import uuid
from collections import Counter, defaultdict
from contextlib import contextmanager
from typing import Dict, List

correlation_id: contextvars.ContextVar = contextvars.ContextVar("correlation_id", default="-")

LOGGER_NAME = "checkout"


class CorrelationFilter(logging.Filter):
    def filter(self, record):
        record.correlation_id = correlation_id.get()
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record):
        event = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", "-"),
        }
        event.update(getattr(record, "fields", {}))
        return json.dumps(event)


def configure_logging(stream=None) -> logging.Logger:
    """Send the checkout loggers to ``stream`` as JSON, one event per line."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())
    handler.addFilter(CorrelationFilter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


class Metrics:
    def __init__(self):
        self.counters: Counter = Counter()
        self.timings: Dict[str, List[float]] = defaultdict(list)

    def inc(self, name: str, **labels) -> None:
        key = name + (json.dumps(labels, sort_keys=True) if labels else "")
        self.counters[key] += 1

    @contextmanager
    def timer(self, name: str):
        started = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name].append(round((time.perf_counter() - started) * 1000, 2))

    def snapshot(self) -> dict:
        return {"counters": dict(self.counters), "timings_ms": {k: len(v) for k, v in self.timings.items()}}


class CheckoutError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class PaymentService:
    CREDIT_LIMIT_CENTS = 50_000

    def __init__(self, metrics: Metrics):
        self.log = logging.getLogger(f"{LOGGER_NAME}.payment")
        self.metrics = metrics

    async def charge(self, user_id: str, amount_cents: int) -> dict:
        with self.metrics.timer("payment_charge_ms"):
            self.log.info("charge.start", extra={"fields": {"user_id": user_id, "amount_cents": amount_cents}})
            await asyncio.sleep(0.005)
            if amount_cents > self.CREDIT_LIMIT_CENTS:
                self.metrics.inc("payment_charge_error_total", code="CREDIT_LIMIT")
                self.log.error("charge.fail", extra={"fields": {"user_id": user_id, "code": "CREDIT_LIMIT"}})
                raise CheckoutError("CREDIT_LIMIT", "Credit limit exceeded")
        self.metrics.inc("payment_charge_success_total")
        tx_id = f"tx_{uuid.uuid4().hex[:6]}"
        self.log.info("charge.ok", extra={"fields": {"user_id": user_id, "tx_id": tx_id}})
        return {"tx_id": tx_id}


class InventoryService:
    def __init__(self, metrics: Metrics):
        self.log = logging.getLogger(f"{LOGGER_NAME}.inventory")
        self.metrics = metrics

    async def reserve(self, sku: str, qty: int) -> dict:
        with self.metrics.timer("inventory_reserve_ms"):
            self.log.info("reserve.start", extra={"fields": {"sku": sku, "qty": qty}})
            await asyncio.sleep(0.002)
        self.metrics.inc("inventory_reserve_success_total")
        reservation_id = f"res_{uuid.uuid4().hex[:6]}"
        self.log.info("reserve.ok", extra={"fields": {"sku": sku, "reservation_id": reservation_id}})
        return {"reservation_id": reservation_id}


async def process_order(inventory: InventoryService, payment: PaymentService, metrics: Metrics,
                        user_id: str, sku: str, qty: int, amount_cents: int,
                        request_id: str = "") -> dict:
    token = correlation_id.set(request_id or f"req_{uuid.uuid4().hex[:8]}")
    log = logging.getLogger(f"{LOGGER_NAME}.order")
    try:
        log.info("order.start", extra={"fields": {"user_id": user_id, "sku": sku, "qty": qty}})
        try:
            with metrics.timer("process_order_ms"):
                reservation = await inventory.reserve(sku, qty)
                payment_result = await payment.charge(user_id, amount_cents)
        except CheckoutError as e:
            metrics.inc("order_error_total", code=e.code)
            log.error("order.fail", extra={"fields": {"code": e.code, "error": str(e)}})
            return {"ok": False, "error": {"code": e.code, "message": "Unable to process order at this time."},
                    "correlation_id": correlation_id.get()}
        metrics.inc("order_success_total")
        log.info("order.ok", extra={"fields": {**reservation, **payment_result}})
        return {"ok": True, **reservation, **payment_result, "correlation_id": correlation_id.get()}
    finally:
        correlation_id.reset(token)


async def main():
    configure_logging()
    metrics = Metrics()
    inventory, payment = InventoryService(metrics), PaymentService(metrics)

    ok, failed = await asyncio.gather(
        process_order(inventory, payment, metrics, "u1", "SKU-1", 1, 2999, request_id="req_first"),
        process_order(inventory, payment, metrics, "u2", "SKU-2", 2, 99999, request_id="req_second"),
    )
    print("RESULT", json.dumps(ok))
    print("RESULT", json.dumps(failed))
    print("METRICS", json.dumps(metrics.snapshot()))


if __name__ == "__main__":
    asyncio.run(main())
