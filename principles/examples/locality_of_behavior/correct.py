"""
Locality of Behavior - correct implementation

OrderService.place_order spells out every step in order: validate, price,
reserve stock, charge, compensate on a decline, save, notify and finally
publish an event for analytics. Reading that one method answers "what
happens when an order is placed?". Events are only used for the
fire-and-forget analytics hop at the end.
"""

import json
from dataclasses import dataclass, field
from itertools import count
from typing import List, Optional


@dataclass
class Order:
    id: str
    customer_id: str
    items: List[dict]
    status: str = "pending"
    total: float = 0.0
    payment_id: Optional[str] = None
    reservation_id: Optional[str] = None
    failure_reason: Optional[str] = None

    def calculate_total(self) -> float:
        self.total = round(sum(item["price"] * item["quantity"] for item in self.items), 2)
        return self.total


class InventoryService:
    def __init__(self):
        self._ids = count(1)

    def reserve_items(self, order_id: str, items: List[dict]) -> str:
        print(f"  [Inventory] Reserving {len(items)} items for order {order_id}")
        return f"RES-{next(self._ids):03d}"

    def release_items(self, reservation_id: str) -> None:
        print(f"  [Inventory] Releasing reservation {reservation_id}")


class PaymentDeclined(Exception):
    pass


class PaymentService:
    def __init__(self, decline: bool = False):
        self.decline = decline
        self._ids = count(1)

    def charge(self, order_id: str, amount: float) -> str:
        print(f"  [Payment] Charging ${amount:.2f} for order {order_id}")
        if self.decline:
            raise PaymentDeclined("Card declined")
        return f"PAY-{next(self._ids):03d}"


class NotificationService:
    def order_confirmation(self, customer_id: str, order: Order) -> None:
        print(f"  [Notification] Order confirmation to {customer_id}")

    def payment_receipt(self, customer_id: str, order: Order) -> None:
        print(f"  [Notification] Payment receipt to {customer_id}")

    def order_failure(self, customer_id: str, order: Order) -> None:
        print(f"  [Notification] Failure notice to {customer_id}: {order.failure_reason}")


class OrderRepository:
    def __init__(self):
        self.orders = {}

    def save(self, order: Order) -> None:
        print(f"  [Repository] Saving order {order.id} ({order.status})")
        self.orders[order.id] = order


class EventPublisher:
    def publish(self, event: str, **data) -> None:
        print(f"  [Events] {event} {json.dumps(data)}")


class Logger:
    def log(self, level: str, message: str, **data) -> None:
        print(f"[{level.upper()}] {message} {json.dumps(data)}")


def validate_order_input(customer_id, items) -> List[str]:
    errors = []
    if not customer_id or not isinstance(customer_id, str):
        errors.append("Valid customer_id is required")
    if not items:
        errors.append("At least one item is required")
    for index, item in enumerate(items or []):
        if not item.get("id"):
            errors.append(f"Item {index}: id is required")
        if not item.get("price", 0) > 0:
            errors.append(f"Item {index}: valid price is required")
        if not item.get("quantity", 0) > 0:
            errors.append(f"Item {index}: valid quantity is required")
    return errors


class OrderService:
    def __init__(self, inventory: InventoryService, payments: PaymentService,
                 notifications: NotificationService, repository: OrderRepository,
                 events: EventPublisher, logger: Logger):
        self.inventory = inventory
        self.payments = payments
        self.notifications = notifications
        self.repository = repository
        self.events = events
        self.logger = logger
        self._ids = count(1)

    def place_order(self, customer_id: str, items: List[dict]) -> dict:
        # 1. validate
        errors = validate_order_input(customer_id, items)
        if errors:
            self.logger.log("warn", "Order validation failed", errors=errors)
            return {"success": False, "errors": errors}

        # 2. build and price
        order = Order(f"ORD-{next(self._ids):04d}", customer_id, items)
        order.calculate_total()
        self.logger.log("info", "Order created", order_id=order.id, total=order.total)

        # 3. reserve stock
        order.reservation_id = self.inventory.reserve_items(order.id, items)

        # 4. charge, releasing stock on a decline
        try:
            order.payment_id = self.payments.charge(order.id, order.total)
        except PaymentDeclined as e:
            self.inventory.release_items(order.reservation_id)
            order.status, order.failure_reason = "failed", str(e)
            self.repository.save(order)
            self.notifications.order_failure(customer_id, order)
            return {"success": False, "error": str(e), "order_id": order.id}

        # 5. save and notify
        order.status = "confirmed"
        self.repository.save(order)
        self.notifications.order_confirmation(customer_id, order)
        self.notifications.payment_receipt(customer_id, order)

        # 6. analytics; nothing above depends on it
        self.events.publish("order.completed", order_id=order.id, total=order.total)
        return {"success": True, "order_id": order.id, "total": order.total, "status": order.status}


def create_order_service(decline: bool = False) -> OrderService:
    return OrderService(InventoryService(), PaymentService(decline), NotificationService(),
                        OrderRepository(), EventPublisher(), Logger())


def main():
    items = [
        {"id": "ITEM-1", "name": "Widget", "price": 29.99, "quantity": 2},
        {"id": "ITEM-2", "name": "Gadget", "price": 49.99, "quantity": 1},
    ]
    print("--- Successful order ---")
    print(f"RESULT: {create_order_service().place_order('CUST-123', items)}")

    print("\n--- Declined card ---")
    print(f"RESULT: {create_order_service(decline=True).place_order('CUST-456', items[:1])}")

    print("\n--- Invalid input ---")
    print(f"RESULT: {create_order_service().place_order('', [{'id': 'ITEM-1', 'price': 0, 'quantity': 1}])}")


if __name__ == "__main__":
    main()
