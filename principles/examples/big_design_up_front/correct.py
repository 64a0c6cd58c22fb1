"""
Big Design Up Front - correct implementation

The domain model (Product, User, Order) and the services that work on it are
designed before anything is built. Services receive their collaborators
through the constructor and talk to them through small, planned interfaces.
"""

import itertools
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional


@dataclass
class Product:
    id: str
    name: str
    price: float
    description: str
    category: str


@dataclass
class CartItem:
    product: Product
    quantity: int = 1

    @property
    def subtotal(self) -> float:
        return self.product.price * self.quantity


@dataclass
class User:
    id: str
    name: str
    email: str
    address: str
    cart: List[CartItem] = field(default_factory=list)

    def add_to_cart(self, product: Product, quantity: int = 1) -> None:
        self.cart.append(CartItem(product, quantity))

    def remove_from_cart(self, product_id: str) -> None:
        self.cart = [item for item in self.cart if item.product.id != product_id]

    def cart_total(self) -> float:
        return sum(item.subtotal for item in self.cart)


@dataclass
class Order:
    id: str
    user: User
    items: List[CartItem]
    status: str = "pending"
    created_at: datetime = field(default_factory=datetime.now)

    def total(self) -> float:
        return sum(item.subtotal for item in self.items)

    def mark_as_shipped(self) -> None:
        self.status = "shipped"

    def mark_as_delivered(self) -> None:
        self.status = "delivered"


class OrderError(Exception):
    pass


@dataclass
class PaymentResult:
    success: bool
    message: str = ""


class ProductRepository:
    def __init__(self, products: List[Product]):
        self._products = list(products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def search(self, query: str) -> List[Product]:
        q = query.lower()
        return [p for p in self._products if q in p.name.lower() or q in p.description.lower()]

    def find_by_category(self, category: str) -> List[Product]:
        return [p for p in self._products if p.category == category]


class InventoryService:
    def __init__(self, stock: Dict[str, int]):
        self._stock = dict(stock)

    def check_availability(self, product_id: str, quantity: int) -> bool:
        return self._stock.get(product_id, 0) >= quantity

    def reduce_stock(self, product_id: str, quantity: int) -> None:
        self._stock[product_id] -= quantity

    def stock_of(self, product_id: str) -> int:
        return self._stock.get(product_id, 0)


class PaymentService:
    def process_payment(self, user: User, amount: float) -> PaymentResult:
        print(f"Processing payment of ${amount} for user {user.name}")
        return PaymentResult(True)


class OrderRepository:
    def __init__(self):
        self._orders: List[Order] = []

    def save(self, order: Order) -> Order:
        self._orders.append(order)
        return order

    def find_by_id(self, order_id: str) -> Optional[Order]:
        return next((o for o in self._orders if o.id == order_id), None)

    def find_by_user_id(self, user_id: str) -> List[Order]:
        return [o for o in self._orders if o.user.id == user_id]


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.repository.find_by_id(product_id)

    def search_products(self, query: str) -> List[Product]:
        return self.repository.search(query)

    def products_in(self, category: str) -> List[Product]:
        return self.repository.find_by_category(category)


class OrderService:
    def __init__(self, orders: OrderRepository, inventory: InventoryService, payments: PaymentService):
        self.orders = orders
        self.inventory = inventory
        self.payments = payments
        self._ids = itertools.count(1001)

    def create_order(self, user: User, items: List[CartItem]) -> Order:
        for item in items:
            if not self.inventory.check_availability(item.product.id, item.quantity):
                raise OrderError(f"Product {item.product.name} is not available in the requested quantity")

        total = sum(item.subtotal for item in items)
        payment = self.payments.process_payment(user, total)
        if not payment.success:
            raise OrderError(f"Payment failed: {payment.message}")

        order = self.orders.save(Order(str(next(self._ids)), user, list(items)))
        for item in items:
            self.inventory.reduce_stock(item.product.id, item.quantity)
        return order

    def user_orders(self, user_id: str) -> List[Order]:
        return self.orders.find_by_user_id(user_id)


def build_store():
    """Wire the planned components together."""
    products = ProductRepository([
        Product("1", "Laptop", 1200, "Powerful laptop for developers", "Electronics"),
        Product("2", "Smartphone", 800, "Latest smartphone model", "Electronics"),
        Product("3", "Headphones", 200, "Noise-cancelling headphones", "Audio"),
    ])
    inventory = InventoryService({"1": 10, "2": 15, "3": 20})
    product_service = ProductService(products)
    order_service = OrderService(OrderRepository(), inventory, PaymentService())
    return product_service, order_service, inventory


def main():
    product_service, order_service, inventory = build_store()
    user = User("u1", "John Doe", "john@example.com", "123 Main St")

    laptops = product_service.search_products("laptop")
    print("Search results:", [p.name for p in laptops])

    user.add_to_cart(laptops[0], 1)
    user.add_to_cart(product_service.get_product("3"), 2)
    print("Cart total:", user.cart_total())

    try:
        order = order_service.create_order(user, user.cart)
        print("Order created:", order.id)
        print("Order total:", order.total())
        order.mark_as_shipped()
        print("Order status:", order.status)
    except OrderError as e:
        print("Error creating order:", e)

    print("Laptops left in stock:", inventory.stock_of("1"))

    print("\nOrdering more than is in stock:")
    try:
        order_service.create_order(user, [CartItem(product_service.get_product("2"), 50)])
    except OrderError as e:
        print("Error creating order:", e)


if __name__ == "__main__":
    main()
