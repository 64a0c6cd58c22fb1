"""
Locality of Behavior - violation

OrderService.place_order looks like four lines: build an order, save it, emit
"order.created". Inventory, payment, notifications, audit and analytics all
happen in listeners registered elsewhere; logging, validation and retries
are wrapped around the method after the class is defined; and the base
entity emits its own events on save. None of it is visible where the order
is placed, and a declined payment still returns success.
"""

import functools
import json
import random
from collections import defaultdict


class EventBus:
    def __init__(self):
        self.listeners = defaultdict(list)

    def on(self, event, handler):
        self.listeners[event].append(handler)

    def emit(self, event, **data):
        for handler in self.listeners[event]:
            handler(**data)

    def clear(self):
        self.listeners.clear()


event_bus = EventBus()


class BaseEntity:
    version = 0

    def save(self):
        self.version += 1
        event_bus.emit("entity.saving", entity=type(self).__name__, id=self.id)
        event_bus.emit("entity.saved", entity=type(self).__name__, id=self.id)
        return self


class Order(BaseEntity):
    def __init__(self, id, customer_id, items):
        self.id = id
        self.customer_id = customer_id
        self.items = items
        self.total = round(sum(item["price"] * item["quantity"] for item in items), 2)


def with_logging(method):
    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        print(f"[LOG] Entering {method.__name__}")
        result = method(*args, **kwargs)
        print(f"[LOG] Exiting {method.__name__}")
        return result
    return wrapper


def with_validation(validator):
    def decorate(method):
        @functools.wraps(method)
        def wrapper(self, *args):
            errors = validator(*args)
            if errors:
                event_bus.emit("validation.failed", method=method.__name__, errors=errors)
                raise ValueError(f"Validation failed: {', '.join(errors)}")
            return method(self, *args)
        return wrapper
    return decorate


def with_retry(attempts):
    def decorate(method):
        @functools.wraps(method)
        def wrapper(*args):
            for attempt in range(1, attempts + 1):
                try:
                    return method(*args)
                except RuntimeError:
                    print(f"[RETRY] Attempt {attempt} failed for {method.__name__}")
            raise RuntimeError(f"{method.__name__} failed after {attempts} attempts")
        return wrapper
    return decorate


class OrderService:
    def __init__(self):
        self.next_id = 1

    def place_order(self, customer_id, items):
        order = Order(f"ORD-{self.next_id:04d}", customer_id, items)
        self.next_id += 1
        order.save()
        event_bus.emit("order.created", order=order)
        return order


# applied far away from the method they change
OrderService.place_order = with_logging(
    with_retry(3)(
        with_validation(lambda customer_id, items: [] if customer_id and items else ["customer and items required"])(
            OrderService.place_order)))


def initialize_listeners(rng):
    event_bus.clear()
    event_bus.on("order.created", lambda order: print(f"[InventoryListener] Reserving inventory for {order.id}"))

    def charge(order):
        print(f"[PaymentListener] Processing payment for {order.id}")
        if rng.random() < 0.5:
            event_bus.emit("payment.failed", order_id=order.id, reason="Card declined")
        else:
            event_bus.emit("payment.processed", order_id=order.id, amount=order.total)

    event_bus.on("order.created", charge)
    event_bus.on("order.created", lambda order: print(f"[NotificationListener] Confirmation to {order.customer_id}"))
    event_bus.on("payment.failed", lambda **data: print(f"[NotificationListener] Payment failure notice {data}"))
    for name in ("payment.processed", "payment.failed", "entity.saving", "entity.saved"):
        event_bus.on(name, functools.partial(
            lambda action, **data: print(f"[AUDIT] {action}: {json.dumps(data)}"), name.upper()))
    event_bus.on("order.created", lambda order: print(f"[Analytics] Order {order.id} worth {order.total}"))


def main():
    initialize_listeners(random.Random(4))
    service = OrderService()
    items = [
        {"id": "ITEM-1", "name": "Widget", "price": 29.99, "quantity": 2},
        {"id": "ITEM-2", "name": "Gadget", "price": 49.99, "quantity": 1},
    ]
    for customer in ("CUST-123", "CUST-456"):
        print(f"\nCalling place_order for {customer}; watch what else happens:")
        order = service.place_order(customer, items)
        print(f"RESULT: success=True, order_id={order.id}")

    print("\nInvalid input:")
    try:
        service.place_order("", [])
    except ValueError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
