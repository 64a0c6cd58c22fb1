"""
Explicit Dependencies - correct implementation

OrderService declares every collaborator in its constructor: repositories,
email, payments, inventory, a frozen config and an infrastructure context
holding logger, cache, clock and id generator. Nothing below the
composition root looks at globals or the environment, so the demo swaps in
fakes and checks exact order ids, timestamps, totals and interactions.

build_production_service is that composition root: it reads OrderConfig
from the environment and wires sqlite repositories, SMTP email and a JSON
structured logger into the same OrderService.
"""

import io
import json
import os
import sqlite3
import sys
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.message import EmailMessage
from typing import Any, Dict, List, Mapping, Optional, TextIO


class OrderError(Exception):
    pass


# Ports


class UserRepository(ABC):
    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[dict]: ...


class OrderRepository(ABC):
    @abstractmethod
    def save(self, order: dict) -> None: ...

    @abstractmethod
    def find_by_id(self, order_id: str) -> Optional[dict]: ...

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> List[dict]: ...


class EmailService(ABC):
    @abstractmethod
    def send_order_confirmation(self, to: str, order_id: str, total: float) -> None: ...

    @abstractmethod
    def send_order_cancellation(self, to: str, order_id: str) -> None: ...


class PaymentGateway(ABC):
    @abstractmethod
    def charge(self, amount: float, token: str) -> dict: ...

    @abstractmethod
    def refund(self, transaction_id: str, amount: float) -> None: ...


class InventoryService(ABC):
    @abstractmethod
    def check_stock(self, product_id: int) -> int: ...

    @abstractmethod
    def reserve(self, product_id: int, quantity: int) -> str: ...

    @abstractmethod
    def release(self, reservation_id: str) -> None: ...


class Logger(ABC):
    @abstractmethod
    def log(self, level: str, message: str, **context) -> None: ...

    def info(self, message: str, **context) -> None:
        self.log("info", message, **context)

    def error(self, message: str, **context) -> None:
        self.log("error", message, **context)


class Cache(ABC):
    @abstractmethod
    def get(self, key: str) -> Any: ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: float) -> None: ...


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...

    def iso_timestamp(self) -> str:
        return self.now().isoformat()


class IdGenerator(ABC):
    @abstractmethod
    def order_id(self) -> str: ...


@dataclass(frozen=True)
class OrderConfig:
    tax_rate: float = 0.1
    cache_ttl: float = 60.0
    max_items_per_order: int = 100
    enable_email_notifications: bool = True

    def __post_init__(self):
        if not 0 <= self.tax_rate <= 1:
            raise ValueError("Tax rate must be between 0 and 1")
        if self.max_items_per_order < 1:
            raise ValueError("Max items per order must be at least 1")


@dataclass(frozen=True)
class InfrastructureContext:
    logger: Logger
    cache: Cache
    clock: Clock
    ids: IdGenerator


class OrderService:
    def __init__(
        self,
        users: UserRepository,
        orders: OrderRepository,
        email: EmailService,
        payments: PaymentGateway,
        inventory: InventoryService,
        config: OrderConfig,
        infra: InfrastructureContext,
    ):
        self.users = users
        self.orders = orders
        self.email = email
        self.payments = payments
        self.inventory = inventory
        self.config = config
        self.infra = infra

    def create_order(self, user_id: str, items: List[dict]) -> dict:
        logger = self.infra.logger
        order_id = self.infra.ids.order_id()
        logger.info("Creating order", order_id=order_id, user_id=user_id, item_count=len(items))

        if not items:
            raise OrderError("Order must contain at least one item")
        if len(items) > self.config.max_items_per_order:
            raise OrderError(f"Order cannot exceed {self.config.max_items_per_order} items")

        user = self._user(user_id)
        reservations = self._reserve(items, order_id)

        subtotal = round(sum(item["price"] * item["quantity"] for item in items), 2)
        tax = round(subtotal * self.config.tax_rate, 2)
        total = round(subtotal + tax, 2)

        try:
            payment = self.payments.charge(total, user["payment_token"])
        except Exception:
            self._release(reservations)
            raise
        if not payment["success"]:
            self._release(reservations)
            raise OrderError("Payment declined")

        order = {
            "order_id": order_id,
            "user_id": user_id,
            "items": [dict(item) for item in items],
            "subtotal": subtotal,
            "tax": tax,
            "total": total,
            "status": "confirmed",
            "transaction_id": payment["transaction_id"],
            "reservation_ids": reservations,
            "created_at": self.infra.clock.iso_timestamp(),
        }
        self.orders.save(order)
        logger.info("Order created successfully", order_id=order_id, total=total)

        if self.config.enable_email_notifications:
            try:
                self.email.send_order_confirmation(user["email"], order_id, total)
            except Exception as e:
                logger.error("Failed to send confirmation email", order_id=order_id, error=str(e))
        return order

    def _user(self, user_id: str) -> dict:
        key = f"user:{user_id}"
        cached = self.infra.cache.get(key)
        if cached is not None:
            self.infra.logger.info("User found in cache", user_id=user_id)
            return cached
        user = self.users.find_by_id(user_id)
        if user is None:
            raise OrderError(f"User not found: {user_id}")
        self.infra.cache.set(key, user, self.config.cache_ttl)
        return user

    def _reserve(self, items: List[dict], order_id: str) -> List[str]:
        reservations: List[str] = []
        for item in items:
            available = self.inventory.check_stock(item["product_id"])
            if available < item["quantity"]:
                self._release(reservations)
                raise OrderError(
                    f"Insufficient stock for product {item['product_id']}: "
                    f"need {item['quantity']}, have {available}"
                )
            reservation = self.inventory.reserve(item["product_id"], item["quantity"])
            reservations.append(reservation)
            self.infra.logger.info("Inventory reserved", order_id=order_id, reservation_id=reservation)
        return reservations

    def _release(self, reservations: List[str]) -> None:
        for reservation in reservations:
            try:
                self.inventory.release(reservation)
                self.infra.logger.info("Reservation released", reservation_id=reservation)
            except Exception as e:
                self.infra.logger.error("Failed to release reservation", reservation_id=reservation, error=str(e))

    def order_history(self, user_id: str) -> List[dict]:
        self.infra.logger.info("Fetching order history", user_id=user_id)
        return self.orders.find_by_user_id(user_id)

    def cancel_order(self, order_id: str) -> dict:
        self.infra.logger.info("Cancelling order", order_id=order_id)
        order = self.orders.find_by_id(order_id)
        if order is None:
            raise OrderError(f"Order not found: {order_id}")
        if order["status"] == "cancelled":
            raise OrderError("Order is already cancelled")

        self.payments.refund(order["transaction_id"], order["total"])
        for reservation in order["reservation_ids"]:
            self.inventory.release(reservation)
        order["status"] = "cancelled"
        order["cancelled_at"] = self.infra.clock.iso_timestamp()
        self.orders.save(order)

        if self.config.enable_email_notifications:
            user = self.users.find_by_id(order["user_id"])
            if user is not None:
                self.email.send_order_cancellation(user["email"], order_id)
        self.infra.logger.info("Order cancelled successfully", order_id=order_id)
        return {"success": True, "order_id": order_id}


# Production adapters


ORDER_COLUMNS = ("order_id", "user_id", "items", "subtotal", "tax", "total", "status",
                 "transaction_id", "reservation_ids", "created_at", "cancelled_at")


def create_schema(conn: sqlite3.Connection) -> None:
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY, name TEXT, email TEXT, payment_token TEXT
        );
        CREATE TABLE IF NOT EXISTS orders (
            order_id TEXT PRIMARY KEY, user_id TEXT NOT NULL, items TEXT, subtotal REAL,
            tax REAL, total REAL, status TEXT, transaction_id TEXT, reservation_ids TEXT,
            created_at TEXT, cancelled_at TEXT
        );
    """)


class SqliteUserRepository(UserRepository):
    def __init__(self, conn: sqlite3.Connection):
        if conn is None:
            raise ValueError("conn is required")
        self.conn = conn

    def find_by_id(self, user_id):
        row = self.conn.execute(
            "SELECT id, name, email, payment_token FROM users WHERE id = ?", (user_id,)
        ).fetchone()
        if row is None:
            return None
        return dict(zip(("id", "name", "email", "payment_token"), row))


class SqliteOrderRepository(OrderRepository):
    def __init__(self, conn: sqlite3.Connection):
        if conn is None:
            raise ValueError("conn is required")
        self.conn = conn

    def save(self, order):
        # only status and cancellation change once an order exists
        self.conn.execute(
            f"INSERT INTO orders ({', '.join(ORDER_COLUMNS)}) "
            f"VALUES ({', '.join('?' * len(ORDER_COLUMNS))}) "
            "ON CONFLICT (order_id) DO UPDATE SET "
            "status = excluded.status, cancelled_at = excluded.cancelled_at",
            (
                order["order_id"], order["user_id"], json.dumps(order["items"]),
                order["subtotal"], order["tax"], order["total"], order["status"],
                order["transaction_id"], json.dumps(order["reservation_ids"]),
                order["created_at"], order.get("cancelled_at"),
            ),
        )
        self.conn.commit()

    def find_by_id(self, order_id):
        row = self.conn.execute(
            f"SELECT {', '.join(ORDER_COLUMNS)} FROM orders WHERE order_id = ?", (order_id,)
        ).fetchone()
        return None if row is None else self._to_order(row)

    def find_by_user_id(self, user_id):
        rows = self.conn.execute(
            f"SELECT {', '.join(ORDER_COLUMNS)} FROM orders WHERE user_id = ? ORDER BY created_at DESC",
            (user_id,),
        ).fetchall()
        return [self._to_order(row) for row in rows]

    @staticmethod
    def _to_order(row) -> dict:
        order = dict(zip(ORDER_COLUMNS, row))
        order["items"] = json.loads(order["items"])
        order["reservation_ids"] = json.loads(order["reservation_ids"])
        if order["cancelled_at"] is None:
            del order["cancelled_at"]
        return order


class SmtpEmailService(EmailService):
    """Sends through anything with smtplib.SMTP's send_message()."""

    def __init__(self, smtp_client, sender: str = "orders@example.com"):
        if smtp_client is None:
            raise ValueError("smtp_client is required")
        self.smtp = smtp_client
        self.sender = sender

    def send_order_confirmation(self, to, order_id, total):
        self._send(to, "Order Confirmed", f"Your order {order_id} for ${total:.2f} has been confirmed!")

    def send_order_cancellation(self, to, order_id):
        self._send(to, "Order Cancelled", f"Your order {order_id} has been cancelled.")

    def _send(self, to: str, subject: str, body: str) -> None:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)
        self.smtp.send_message(message)


class StructuredLogger(Logger):
    """One JSON object per line, tagged with the service name."""

    def __init__(self, service_name: str, stream: Optional[TextIO] = None, clock: Optional[Clock] = None):
        self.service_name = service_name
        self.stream = stream if stream is not None else sys.stderr
        self.clock = clock or SystemClock()

    def log(self, level, message, **context):
        entry = {
            "timestamp": self.clock.iso_timestamp(),
            "level": level,
            "service": self.service_name,
            "message": message,
            "context": context,
        }
        self.stream.write(json.dumps(entry, default=str) + "\n")


class SandboxPaymentGateway(PaymentGateway):
    def __init__(self, logger: Logger):
        self.logger = logger

    def charge(self, amount, token):
        self.logger.info("Charging card", amount=amount, token=token)
        return {"success": True, "transaction_id": f"txn-{uuid.uuid4().hex[:12]}"}

    def refund(self, transaction_id, amount):
        self.logger.info("Refunding charge", transaction_id=transaction_id, amount=amount)


class SandboxInventoryService(InventoryService):
    def __init__(self, logger: Logger, available: int = 100):
        self.logger = logger
        self.available = available

    def check_stock(self, product_id):
        return self.available

    def reserve(self, product_id, quantity):
        return f"res-{uuid.uuid4().hex[:12]}"

    def release(self, reservation_id):
        self.logger.info("Released reservation", reservation_id=reservation_id)


class InMemoryCache(Cache):
    def __init__(self, clock: Clock):
        self.clock = clock
        self.entries: Dict[str, tuple] = {}

    def get(self, key):
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires = entry
        if self.clock.now().timestamp() >= expires:
            del self.entries[key]
            return None
        return value

    def set(self, key, value, ttl):
        self.entries[key] = (value, self.clock.now().timestamp() + ttl)


class SystemClock(Clock):
    def now(self):
        return datetime.now(timezone.utc)


class UuidIdGenerator(IdGenerator):
    def order_id(self):
        return f"ORD-{uuid.uuid4().hex[:12].upper()}"


def load_order_config(environ: Mapping[str, str]) -> OrderConfig:
    return OrderConfig(
        tax_rate=float(environ.get("TAX_RATE", "0.1")),
        cache_ttl=int(environ.get("CACHE_TTL_MS", "60000")) / 1000,
        max_items_per_order=int(environ.get("MAX_ITEMS_PER_ORDER", "100")),
        enable_email_notifications=environ.get("ENABLE_EMAILS", "true").lower() != "false",
    )


def build_production_service(conn: sqlite3.Connection, smtp_client,
                             environ: Optional[Mapping[str, str]] = None,
                             stream: Optional[TextIO] = None) -> OrderService:
    """
    Composition root: the one place that reads the environment and picks
    concrete adapters. Everything below it receives its collaborators.
    """
    if environ is None:
        environ = os.environ
    config = load_order_config(environ)
    clock = SystemClock()
    logger = StructuredLogger("order-service", stream=stream, clock=clock)
    infra = InfrastructureContext(logger=logger, cache=InMemoryCache(clock), clock=clock,
                                  ids=UuidIdGenerator())
    create_schema(conn)
    return OrderService(
        users=SqliteUserRepository(conn),
        orders=SqliteOrderRepository(conn),
        email=SmtpEmailService(smtp_client),
        payments=SandboxPaymentGateway(logger),
        inventory=SandboxInventoryService(logger),
        config=config,
        infra=infra,
    )


# Test doubles


class OutboxSmtpClient:
    """Stands in for smtplib.SMTP; keeps every message it is handed."""

    def __init__(self):
        self.outbox: List[EmailMessage] = []

    def send_message(self, message: EmailMessage) -> None:
        self.outbox.append(message)


class FakeUserRepository(UserRepository):
    def __init__(self, users: Optional[List[dict]] = None):
        if users is None:
            users = [{"id": "user-1", "name": "John Doe", "email": "john@example.com",
                      "payment_token": "tok-visa"}]
        self.users = {user["id"]: user for user in users}
        self.lookups = 0

    def find_by_id(self, user_id):
        self.lookups += 1
        return self.users.get(user_id)


class FakeOrderRepository(OrderRepository):
    def __init__(self):
        self.saved: Dict[str, dict] = {}

    def save(self, order):
        self.saved[order["order_id"]] = order

    def find_by_id(self, order_id):
        return self.saved.get(order_id)

    def find_by_user_id(self, user_id):
        return [order for order in self.saved.values() if order["user_id"] == user_id]


class FakeEmailService(EmailService):
    def __init__(self):
        self.sent: List[dict] = []

    def send_order_confirmation(self, to, order_id, total):
        self.sent.append({"to": to, "type": "confirmation", "order_id": order_id, "total": total})

    def send_order_cancellation(self, to, order_id):
        self.sent.append({"to": to, "type": "cancellation", "order_id": order_id})


class FakePaymentGateway(PaymentGateway):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.charges: List[dict] = []
        self.refunds: List[dict] = []

    def charge(self, amount, token):
        self.charges.append({"amount": amount, "token": token})
        if self.fail:
            return {"success": False}
        return {"success": True, "transaction_id": f"txn-{len(self.charges):03d}"}

    def refund(self, transaction_id, amount):
        self.refunds.append({"transaction_id": transaction_id, "amount": amount})


class FakeInventoryService(InventoryService):
    def __init__(self, stock: Optional[Dict[int, int]] = None):
        self.stock = dict(stock or {})
        self.reservations: List[str] = []
        self.released: List[str] = []

    def check_stock(self, product_id):
        return self.stock.get(product_id, 100)

    def reserve(self, product_id, quantity):
        reservation = f"res-{len(self.reservations) + 1:03d}"
        self.reservations.append(reservation)
        return reservation

    def release(self, reservation_id):
        self.released.append(reservation_id)


@dataclass
class RecordingLogger(Logger):
    records: List[dict] = field(default_factory=list)

    def log(self, level, message, **context):
        self.records.append({"level": level, "message": message, "context": context})

    def with_message(self, text: str) -> List[dict]:
        return [r for r in self.records if text in r["message"]]


class FixedClock(Clock):
    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self):
        return self.moment


class SequenceIdGenerator(IdGenerator):
    def __init__(self, prefix: str = "ORD-TEST"):
        self.prefix = prefix
        self.count = 0

    def order_id(self):
        self.count += 1
        return f"{self.prefix}-{self.count:03d}"


def build_test_service(**overrides) -> OrderService:
    clock = overrides.pop("clock", None) or FixedClock(datetime(2024, 1, 15, 10, tzinfo=timezone.utc))
    infra = overrides.pop("infra", None) or InfrastructureContext(
        logger=overrides.pop("logger", None) or RecordingLogger(),
        cache=InMemoryCache(clock),
        clock=clock,
        ids=SequenceIdGenerator(),
    )
    parts = {
        "users": FakeUserRepository(),
        "orders": FakeOrderRepository(),
        "email": FakeEmailService(),
        "payments": FakePaymentGateway(),
        "inventory": FakeInventoryService(),
        "config": OrderConfig(),
    }
    parts.update(overrides)
    return OrderService(infra=infra, **parts)


WIDGET = {"product_id": 101, "name": "Widget", "price": 29.99, "quantity": 2}


def main():
    passed = failed = 0

    def check(condition, message):
        nonlocal passed, failed
        if condition:
            passed += 1
            print(f"  PASS: {message}")
        else:
            failed += 1
            print(f"  FAIL: {message}")

    print("Scenario 1: create an order")
    orders, email, payments = FakeOrderRepository(), FakeEmailService(), FakePaymentGateway()
    service = build_test_service(orders=orders, email=email, payments=payments)
    order = service.create_order("user-1", [WIDGET])
    check(order["order_id"] == "ORD-TEST-001", "order id is deterministic")
    check(order["created_at"] == "2024-01-15T10:00:00+00:00", "timestamp is controlled")
    check(order["total"] == 65.98, "total is subtotal plus 10% tax")
    check(len(orders.saved) == 1, "order was saved")
    check(payments.charges[0]["amount"] == 65.98, "correct amount charged")
    check(email.sent[0]["to"] == "john@example.com", "confirmation emailed")

    print("\nScenario 2: declined payment releases inventory")
    inventory = FakeInventoryService()
    service = build_test_service(payments=FakePaymentGateway(fail=True), inventory=inventory)
    try:
        service.create_order("user-1", [WIDGET])
        check(False, "should have raised")
    except OrderError as e:
        check(str(e) == "Payment declined", "payment declined")
        check(inventory.released == inventory.reservations == ["res-001"], "reservation released")

    print("\nScenario 3: insufficient stock")
    service = build_test_service(inventory=FakeInventoryService({101: 1}))
    try:
        service.create_order("user-1", [WIDGET])
        check(False, "should have raised")
    except OrderError as e:
        check("Insufficient stock" in str(e), "stock error raised")

    print("\nScenario 4: unknown user")
    service = build_test_service(users=FakeUserRepository([]))
    try:
        service.create_order("ghost", [WIDGET])
        check(False, "should have raised")
    except OrderError as e:
        check("User not found" in str(e), "missing user reported")

    print("\nScenario 5: email switched off by config")
    email = FakeEmailService()
    build_test_service(email=email, config=OrderConfig(enable_email_notifications=False)).create_order(
        "user-1", [WIDGET])
    check(not email.sent, "no email sent")

    print("\nScenario 6: logging and caching")
    logger, users = RecordingLogger(), FakeUserRepository()
    service = build_test_service(logger=logger, users=users)
    service.create_order("user-1", [WIDGET])
    service.create_order("user-1", [dict(WIDGET, product_id=102)])
    check(len(logger.with_message("Creating order")) == 2, "creation logged")
    check(users.lookups == 1, "second lookup served from cache")

    print("\nScenario 7: cancel and refund")
    orders, payments, email = FakeOrderRepository(), FakePaymentGateway(), FakeEmailService()
    service = build_test_service(orders=orders, payments=payments, email=email)
    created = service.create_order("user-1", [WIDGET])
    service.cancel_order(created["order_id"])
    check(orders.saved[created["order_id"]]["status"] == "cancelled", "order cancelled")
    check(payments.refunds[0]["amount"] == created["total"], "payment refunded")
    check(email.sent[-1]["type"] == "cancellation", "cancellation emailed")

    print("\nScenario 8: production wiring from the composition root")
    conn, smtp, log_stream = sqlite3.connect(":memory:"), OutboxSmtpClient(), io.StringIO()
    service = build_production_service(conn, smtp, environ={"TAX_RATE": "0.2"}, stream=log_stream)
    conn.execute("INSERT INTO users VALUES (?, ?, ?, ?)",
                 ("user-1", "John Doe", "john@example.com", "tok-visa"))
    created = service.create_order("user-1", [WIDGET])
    check(created["total"] == 71.98, "tax rate read from the environment")
    check(service.order_history("user-1")[0]["items"] == [WIDGET], "order stored in sqlite")
    check(smtp.outbox[0]["Subject"] == "Order Confirmed", "confirmation sent over SMTP")
    first_line = json.loads(log_stream.getvalue().splitlines()[0])
    check(first_line["service"] == "order-service", "structured log line carries the service")
    conn.close()

    print(f"\nRESULTS: {passed} passed, {failed} failed")


if __name__ == "__main__":
    main()
