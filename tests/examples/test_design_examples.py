"""
Behaviour of the design examples that carry real rules: pricing, phase
gates, injected collaborators, strategies and substitutable shapes.
"""

import io
import json
import sqlite3
from datetime import date, datetime, timezone

import pytest

from principles.examples.design_for_testability.correct import (
    AuthenticationService,
    FrozenClock,
    InMemoryDatabase,
    RecordingLogger as AuthRecordingLogger,
    TokenGenerator,
    UserRepository as AuthUserRepository,
    sample_users,
)
from principles.examples.dry.correct import ShoppingCart as DryCart
from principles.examples.dynamic_systems_development_method.correct import (
    DSDMProject,
    GateNotMet,
    Phase,
    Priority,
    Requirement,
)
from principles.examples.explicit_dependencies.correct import (
    WIDGET,
    FakeInventoryService,
    FakePaymentGateway,
    FakeUserRepository,
    FixedClock,
    OrderConfig,
    OrderError,
    OutboxSmtpClient,
    SqliteOrderRepository,
    StructuredLogger,
    build_production_service,
    build_test_service,
    create_schema,
    load_order_config,
)
from principles.examples.graceful_degradation.correct import (
    AnalyticsService,
    CacheService,
    ProductNotFound,
    ProductService,
    RecommendationEngine,
)
from principles.examples.liskov_substitution.correct import Rectangle, Square, stretch, total_area
from principles.examples.open_closed.correct import (
    Customer,
    GoldCustomerDiscount,
    Order as DiscountOrder,
    default_calculator,
)
from principles.examples.principle_of_least_astonishment.correct import (
    capitalize,
    doubled,
    first,
    format_date,
    last,
    pad_left,
    positives,
    truncate,
)
from principles.examples.tell_dont_ask.correct import Item, OrderProcessor, ShoppingCart as TellCart


# dry

def test_dry_cart_summary():
    cart = DryCart()
    cart.add_item("Widget", 2, 10.0)
    cart.add_item("Gadget", 1, 30.0)
    cart.apply_discount("SAVE10")

    assert cart.summary() == {"subtotal": 50.0, "discount": 5.0, "tax": 5.0, "shipping": 9.99, "total": 59.99}
    assert cart.delivery_date(date(2024, 1, 1)) == date(2024, 1, 3)


@pytest.mark.parametrize(
    "quantity, shipping, days",
    [(1, 5.99, 1), (2, 9.99, 2), (10, 19.99, 3), (40, 39.99, 5)],
)
def test_dry_weight_tiers_drive_cost_and_date(quantity, shipping, days):
    cart = DryCart()
    cart.add_item("Box", quantity, 1.0)

    assert cart.shipping_cost() == shipping
    assert cart.delivery_date(date(2024, 1, 1)) == date(2024, 1, 1 + days)


def test_dry_unknown_discount_code_is_ignored():
    cart = DryCart()
    cart.add_item("Widget", 1, 100.0)
    cart.apply_discount("BOGUS")

    assert cart.discount() == 0


# dsdm

def test_timebox_cannot_close_with_open_must_have():
    project = DSDMProject("Portal", "Customer portal")
    timebox = project.create_timebox("TB1", 10, date(2024, 1, 1))
    must = Requirement("R1", "Login", Priority.MUST)
    could = Requirement("R2", "Dark mode", Priority.COULD)
    timebox.add(must, could)

    with pytest.raises(GateNotMet, match="R1"):
        timebox.close()

    must.complete()
    timebox.close()
    assert timebox.status == "Completed"
    assert timebox.completion() == 50


def test_project_phase_gates():
    project = DSDMProject("Portal", "Customer portal")
    project.to_feasibility()

    with pytest.raises(GateNotMet):
        project.to_foundations()
    project.add_stakeholder("Ann", "Ambassador User")
    project.to_foundations()

    with pytest.raises(GateNotMet):
        project.to_evolutionary_development()
    requirement = Requirement("R1", "Login", Priority.MUST)
    project.add_requirement(requirement)
    timebox = project.create_timebox("TB1", 10, date(2024, 1, 1))
    timebox.add(requirement)
    project.to_evolutionary_development()

    with pytest.raises(GateNotMet):
        project.to_deployment()
    with pytest.raises(GateNotMet):
        project.complete()

    requirement.complete()
    timebox.close()
    project.to_deployment()
    project.complete()

    assert project.phase is Phase.POST_PROJECT
    assert project.status()["must_haves"] == "1/1"


# design for testability

def test_token_expiry_with_frozen_clock():
    clock = FrozenClock(1_000.0)
    logger = AuthRecordingLogger()
    service = AuthenticationService(
        AuthUserRepository(InMemoryDatabase(sample_users())),
        TokenGenerator("secret", clock=clock, lifetime=60),
        logger,
    )

    login = service.login("john_doe", "password123")
    assert login["success"] is True
    assert service.validate_token(login["token"])["valid"] is True

    clock.advance(61)
    assert service.validate_token(login["token"]) == {"valid": False}
    assert ("warning", "Invalid or expired token") in logger.records


def test_failed_login_is_logged():
    logger = AuthRecordingLogger()
    service = AuthenticationService(
        AuthUserRepository(InMemoryDatabase(sample_users())),
        TokenGenerator("secret", clock=FrozenClock(0)),
        logger,
    )

    assert service.login("john_doe", "wrong")["success"] is False
    assert service.login("", "")["message"] == "Username and password are required"
    assert logger.records == [
        ("warning", "Failed login attempt for user: john_doe"),
        ("warning", "Login attempt with missing credentials"),
    ]


# explicit dependencies

def test_order_is_fully_determined_by_injected_fakes():
    service = build_test_service()

    order = service.create_order("user-1", [WIDGET])

    assert order["order_id"] == "ORD-TEST-001"
    assert order["subtotal"] == 59.98
    assert order["tax"] == 6.0
    assert order["total"] == 65.98
    assert order["created_at"] == "2024-01-15T10:00:00+00:00"
    assert order["transaction_id"] == "txn-001"
    assert service.email.sent == [
        {"to": "john@example.com", "type": "confirmation", "order_id": "ORD-TEST-001", "total": 65.98}]


def test_declined_payment_releases_reservations():
    inventory = FakeInventoryService()
    service = build_test_service(payments=FakePaymentGateway(fail=True), inventory=inventory)

    with pytest.raises(OrderError, match="Payment declined"):
        service.create_order("user-1", [WIDGET, dict(WIDGET, product_id=102)])

    assert inventory.released == ["res-001", "res-002"]
    assert service.orders.saved == {}


def test_insufficient_stock_and_cached_user_lookup():
    users = FakeUserRepository()
    service = build_test_service(users=users, inventory=FakeInventoryService({101: 1}))

    with pytest.raises(OrderError, match="Insufficient stock"):
        service.create_order("user-1", [WIDGET])

    service.inventory.stock[101] = 10
    service.create_order("user-1", [WIDGET])
    service.create_order("user-1", [WIDGET])
    assert users.lookups == 1


def test_config_is_validated_and_used():
    with pytest.raises(ValueError):
        OrderConfig(tax_rate=1.5)

    service = build_test_service(config=OrderConfig(tax_rate=0, enable_email_notifications=False),
                                 clock=FixedClock(datetime(2030, 1, 1, tzinfo=timezone.utc)))
    order = service.create_order("user-1", [WIDGET])

    assert order["total"] == 59.98
    assert order["created_at"].startswith("2030-01-01")
    assert service.email.sent == []

    service.cancel_order(order["order_id"])
    with pytest.raises(OrderError, match="already cancelled"):
        service.cancel_order(order["order_id"])


def test_order_config_comes_from_the_environment():
    assert load_order_config({}) == OrderConfig()

    config = load_order_config({"TAX_RATE": "0.2", "CACHE_TTL_MS": "5000",
                                "MAX_ITEMS_PER_ORDER": "3", "ENABLE_EMAILS": "False"})
    assert config == OrderConfig(tax_rate=0.2, cache_ttl=5.0, max_items_per_order=3,
                                 enable_email_notifications=False)

    with pytest.raises(ValueError):
        load_order_config({"TAX_RATE": "2"})


def test_sqlite_order_repository_upserts_status_only():
    conn = sqlite3.connect(":memory:")
    create_schema(conn)
    orders = SqliteOrderRepository(conn)
    order = {"order_id": "ORD-1", "user_id": "user-1", "items": [WIDGET], "subtotal": 59.98,
             "tax": 6.0, "total": 65.98, "status": "confirmed", "transaction_id": "txn-1",
             "reservation_ids": ["res-1"], "created_at": "2024-01-15T10:00:00+00:00"}

    orders.save(order)
    assert orders.find_by_id("ORD-1") == order

    orders.save(dict(order, status="cancelled", total=0, cancelled_at="2024-01-16T10:00:00+00:00"))
    stored = orders.find_by_id("ORD-1")
    assert stored["status"] == "cancelled"
    assert stored["cancelled_at"] == "2024-01-16T10:00:00+00:00"
    assert stored["total"] == 65.98
    assert [o["order_id"] for o in orders.find_by_user_id("user-1")] == ["ORD-1"]
    assert orders.find_by_id("ORD-2") is None

    with pytest.raises(ValueError, match="conn"):
        SqliteOrderRepository(None)


def test_structured_logger_writes_json_lines():
    stream = io.StringIO()
    clock = FixedClock(datetime(2024, 1, 15, 10, tzinfo=timezone.utc))
    logger = StructuredLogger("billing", stream=stream, clock=clock)

    logger.info("Charged", amount=12.5)
    logger.error("Refund failed", transaction_id="txn-9")

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert lines[0] == {"timestamp": "2024-01-15T10:00:00+00:00", "level": "info",
                        "service": "billing", "message": "Charged", "context": {"amount": 12.5}}
    assert lines[1]["level"] == "error"
    assert lines[1]["context"] == {"transaction_id": "txn-9"}


def test_production_service_round_trip():
    conn, smtp, stream = sqlite3.connect(":memory:"), OutboxSmtpClient(), io.StringIO()
    service = build_production_service(conn, smtp, environ={"TAX_RATE": "0.2"}, stream=stream)
    conn.execute("INSERT INTO users VALUES (?, ?, ?, ?)",
                 ("user-1", "John Doe", "john@example.com", "tok-visa"))

    order = service.create_order("user-1", [WIDGET])
    assert order["order_id"].startswith("ORD-")
    assert order["total"] == 71.98
    assert service.order_history("user-1")[0]["items"] == [WIDGET]

    service.cancel_order(order["order_id"])
    assert service.orders.find_by_id(order["order_id"])["status"] == "cancelled"

    assert [m["Subject"] for m in smtp.outbox] == ["Order Confirmed", "Order Cancelled"]
    assert smtp.outbox[0]["To"] == "john@example.com"
    assert f"Your order {order['order_id']} for $71.98 has been confirmed!" in smtp.outbox[0].get_content()

    entries = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert {e["service"] for e in entries} == {"order-service"}
    assert "Order cancelled successfully" in [e["message"] for e in entries]


def test_production_service_respects_email_switch():
    smtp = OutboxSmtpClient()
    service = build_production_service(sqlite3.connect(":memory:"), smtp,
                                       environ={"ENABLE_EMAILS": "false"}, stream=io.StringIO())
    service.users.conn.execute("INSERT INTO users VALUES ('u', 'U', 'u@example.com', 'tok')")

    service.create_order("u", [WIDGET])

    assert smtp.outbox == []


# graceful degradation

def test_product_page_survives_optional_failures():
    service = ProductService(AnalyticsService(available=False), CacheService(fail=True),
                             RecommendationEngine(available=False))

    page = service.product_page(1, user_id=7)

    assert page.product["name"] == "Laptop"
    assert page.recommendations == ["Mouse", "Keyboard"]
    assert page.recommendations_type == "fallback"
    assert page.degraded == ["recommendations", "analytics"]
    assert [p["name"] for p in service.search_products("key")] == ["Keyboard"]


def test_product_page_when_everything_works():
    service = ProductService(AnalyticsService(), CacheService(), RecommendationEngine())

    page = service.product_page(2, user_id=7)

    assert page.recommendations == ["Product 7-1", "Product 7-2", "Product 7-3"]
    assert page.degraded == []
    service.search_products("mouse")
    assert service.cache.entries["search:mouse"][0]["id"] == 2


def test_missing_product_is_still_an_error():
    service = ProductService(AnalyticsService(), CacheService(), RecommendationEngine())

    with pytest.raises(ProductNotFound):
        service.get_product(99)


# liskov substitution

def test_shapes_keep_their_contracts():
    rectangle = Rectangle(2, 3)
    square = Square(4)

    assert stretch(rectangle) == 200
    assert square.resized(5).area() == 25
    assert square.area() == 16
    assert total_area([rectangle, square]) == 22
    with pytest.raises(Exception):
        square.side = 9


# open/closed

def test_discounts_by_customer_type():
    calculator = default_calculator()

    def discount(kind, total=200.0):
        return calculator.discount(DiscountOrder(Customer("x", kind), total))

    assert discount("regular") == 2.0
    assert discount("premium") == 20.0
    assert discount("vip") == 40.0
    assert discount("gold") == 0.0

    calculator.register("gold", GoldCustomerDiscount())
    assert discount("gold") == 30.0


# tell, don't ask

def test_cart_owns_its_checkout_rules():
    cart = TellCart()
    cart.add_item(Item("Book", 20.0))
    cart.add_item(Item("Pen", 5.0))
    cart.apply_discount(0.2)

    assert cart.remove_item("Pen") is True
    assert cart.remove_item("Pen") is False
    assert OrderProcessor().process_order(cart) == {"status": "success", "total": 16.0}
    assert cart.total() == 0

    with pytest.raises(ValueError):
        cart.checkout()
    with pytest.raises(ValueError):
        cart.apply_discount(1.5)


# least astonishment

def test_string_helpers_do_one_obvious_thing():
    assert capitalize("hello world") == "Hello world"
    assert capitalize("") == ""
    assert truncate("abcdef", 3) == "abc..."
    assert truncate("abc", 3) == "abc"
    assert pad_left("7", 3, "0") == "007"
    with pytest.raises(TypeError):
        capitalize(None)


def test_list_helpers_do_not_mutate():
    numbers = [3, -1, 2]

    assert first(numbers) == 3
    assert last(numbers) == 2
    assert first([]) is None
    assert positives(numbers) == [3, 2]
    assert doubled(numbers) == [6, -2, 4]
    assert numbers == [3, -1, 2]


def test_format_date_rejects_unknown_formats():
    day = date(2024, 3, 9)

    assert format_date(day) == "03/09/2024"
    assert format_date(day, "YYYY-MM-DD") == "2024-03-09"
    with pytest.raises(ValueError):
        format_date(day, "YY")
