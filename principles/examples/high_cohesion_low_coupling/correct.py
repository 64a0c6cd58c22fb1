"""
High Cohesion, Low Coupling - correct implementation

Product, ShoppingCart, OrderProcessor, PaymentService and NotificationService
each do one job. OrderProcessor receives the payment and notification
services through its constructor and only relies on the one method it calls
on each, so either can be replaced without touching the others.
"""

from dataclasses import dataclass, field
from datetime import date
from itertools import count
from typing import List, Protocol


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float

    def description(self) -> str:
        return f"{self.name} - ${self.price:.2f}"


@dataclass
class CartItem:
    product: Product
    quantity: int


class ShoppingCart:
    def __init__(self):
        self._items: List[CartItem] = []

    def add_item(self, product: Product, quantity: int = 1) -> None:
        self._items.append(CartItem(product, quantity))

    def remove_item(self, product_id: int) -> None:
        self._items = [item for item in self._items if item.product.id != product_id]

    def update_quantity(self, product_id: int, quantity: int) -> None:
        for item in self._items:
            if item.product.id == product_id:
                item.quantity = quantity

    def items(self) -> List[CartItem]:
        return list(self._items)

    def total_price(self) -> float:
        return round(sum(item.product.price * item.quantity for item in self._items), 2)

    def clear(self) -> None:
        self._items = []


@dataclass(frozen=True)
class Customer:
    name: str
    email: str
    address: str
    payment_method: str


@dataclass
class Order:
    id: str
    items: List[CartItem]
    total: float
    customer: Customer
    placed_on: date = field(default_factory=lambda: date(2024, 1, 1))


@dataclass
class PaymentResult:
    success: bool
    message: str
    transaction_id: str = ""


class PaymentGateway(Protocol):
    def process_payment(self, customer: Customer, amount: float) -> PaymentResult: ...


class Notifier(Protocol):
    def send_order_confirmation(self, email: str, order: Order) -> None: ...


class PaymentService:
    def __init__(self):
        self._ids = count(1)

    def process_payment(self, customer: Customer, amount: float) -> PaymentResult:
        print(f"Processing payment of ${amount:.2f} for {customer.name}")
        if customer.payment_method != "credit-card":
            return PaymentResult(False, "Unsupported payment method")
        return PaymentResult(True, "Payment processed successfully", f"TX-{next(self._ids):04d}")


class NotificationService:
    def send_order_confirmation(self, email: str, order: Order) -> None:
        print(f"Sending order confirmation to {email}")
        print(f"Order ID: {order.id}")
        print(f"Total: ${order.total:.2f}")
        print("Items:")
        for item in order.items:
            print(f"- {item.product.name} x{item.quantity}")


class OrderProcessor:
    def __init__(self, payments: PaymentGateway, notifier: Notifier):
        self.payments = payments
        self.notifier = notifier
        self._ids = count(1)

    def process_order(self, cart: ShoppingCart, customer: Customer) -> dict:
        if not cart.items():
            raise ValueError("Cannot process an empty cart")
        if not customer.email:
            raise ValueError("Customer email is required")

        order = Order(f"ORD-{next(self._ids):04d}", cart.items(), cart.total_price(), customer)
        payment = self.payments.process_payment(customer, order.total)
        if not payment.success:
            return {"success": False, "message": payment.message}

        self.notifier.send_order_confirmation(customer.email, order)
        cart.clear()
        return {"success": True, "order": order, "message": "Order processed successfully"}


def main():
    processor = OrderProcessor(PaymentService(), NotificationService())
    cart = ShoppingCart()
    cart.add_item(Product(1, "Laptop", 1299.99))
    cart.add_item(Product(2, "Headphones", 99.99), 2)
    cart.add_item(Product(3, "Wireless Mouse", 29.99))

    customer = Customer("John Doe", "john@example.com", "123 Main St, Anytown, USA", "credit-card")
    try:
        print(processor.process_order(cart, customer)["message"])
    except ValueError as e:
        print(f"Error: {e}")

    print("\nA second checkout with the now empty cart:")
    try:
        processor.process_order(cart, customer)
    except ValueError as e:
        print(f"Error: {e}")

    print("\nPaying by invoice:")
    cart.add_item(Product(3, "Wireless Mouse", 29.99))
    invoice_customer = Customer("Jane Roe", "jane@example.com", "1 Side St", "invoice")
    print(processor.process_order(cart, invoice_customer)["message"])


if __name__ == "__main__":
    main()
