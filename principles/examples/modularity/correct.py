"""
Modularity - correct implementation

The shop is split into a ProductCatalog, a Cart and an OrderDesk. Each owns
its data privately and hands out copies, and the dependencies point one
way: the cart asks the catalog for prices, the order desk asks the cart
for items and the catalog for stock. Any of them can be built and tested
on its own.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from itertools import count
from typing import Dict, List, Optional, Tuple


class ShopError(Exception):
    pass


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    stock: int


@dataclass(frozen=True)
class CartItem:
    product_id: int
    name: str
    price: float
    quantity: int

    @property
    def subtotal(self) -> float:
        return round(self.price * self.quantity, 2)


@dataclass(frozen=True)
class Order:
    id: int
    customer: Tuple[Tuple[str, str], ...]
    items: Tuple[CartItem, ...]
    total: float
    placed_at: datetime


class ProductCatalog:
    def __init__(self, products: List[Product]):
        self._products: Dict[int, Product] = {product.id: product for product in products}

    def all_products(self) -> List[Product]:
        return list(self._products.values())

    def product(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def take_stock(self, product_id: int, quantity: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise ShopError(f"Product with ID {product_id} not found")
        if product.stock < quantity:
            raise ShopError(f"Insufficient stock for product {product.name}")
        self._products[product_id] = replace(product, stock=product.stock - quantity)
        return self._products[product_id]


class Cart:
    def __init__(self, catalog: ProductCatalog):
        self._catalog = catalog
        self._items: Dict[int, CartItem] = {}

    def add_item(self, product_id: int, quantity: int = 1) -> List[CartItem]:
        product = self._catalog.product(product_id)
        if product is None:
            raise ShopError(f"Product with ID {product_id} not found")
        existing = self._items.get(product_id)
        if existing:
            self._items[product_id] = replace(existing, quantity=existing.quantity + quantity)
        else:
            self._items[product_id] = CartItem(product_id, product.name, product.price, quantity)
        return self.items()

    def remove_item(self, product_id: int) -> List[CartItem]:
        self._items.pop(product_id, None)
        return self.items()

    def items(self) -> List[CartItem]:
        return list(self._items.values())

    def total(self) -> float:
        return round(sum(item.subtotal for item in self._items.values()), 2)

    def clear(self) -> None:
        self._items.clear()


class OrderDesk:
    def __init__(self, catalog: ProductCatalog, cart: Cart, clock=lambda: datetime.now(timezone.utc)):
        self._catalog = catalog
        self._cart = cart
        self._clock = clock
        self._orders: Dict[int, Order] = {}
        self._ids = count(1000)

    def create_order(self, customer: Dict[str, str]) -> Order:
        if not customer.get("name") or not customer.get("address"):
            raise ShopError("Customer information is incomplete")
        items = self._cart.items()
        if not items:
            raise ShopError("Cannot create order with empty cart")

        # check everything before touching stock
        for item in items:
            product = self._catalog.product(item.product_id)
            if product is None or product.stock < item.quantity:
                raise ShopError(f"Order failed: insufficient stock for {item.name}")
        for item in items:
            self._catalog.take_stock(item.product_id, item.quantity)

        order = Order(next(self._ids), tuple(sorted(customer.items())), tuple(items),
                      self._cart.total(), self._clock())
        self._orders[order.id] = order
        self._cart.clear()
        return order

    def order(self, order_id: int) -> Optional[Order]:
        return self._orders.get(order_id)

    def all_orders(self) -> List[Order]:
        return list(self._orders.values())


def default_catalog() -> ProductCatalog:
    return ProductCatalog([
        Product(1, "Laptop", 999.99, 15),
        Product(2, "Smartphone", 699.99, 25),
        Product(3, "Headphones", 149.99, 30),
    ])


def main():
    catalog = default_catalog()
    cart = Cart(catalog)
    desk = OrderDesk(catalog, cart, clock=lambda: datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc))

    print("Available products:")
    for product in catalog.all_products():
        print(f"{product.name}: ${product.price} ({product.stock} in stock)")

    cart.add_item(1, 2)
    cart.add_item(3, 1)
    print("\nCart contents:")
    for item in cart.items():
        print(f"{item.name} x{item.quantity}: ${item.subtotal:.2f}")
    print(f"Total: ${cart.total():.2f}")

    order = desk.create_order({"name": "John Doe", "address": "123 Main St", "email": "john@example.com"})
    print(f"\nOrder {order.id} placed at {order.placed_at.isoformat()} for ${order.total:.2f}")

    print("\nUpdated inventory:")
    for product in catalog.all_products():
        print(f"{product.name}: {product.stock} in stock")

    print("\nTrying to change a product from outside:")
    try:
        catalog.all_products()[0].price = 1  # type: ignore[misc]
    except AttributeError as e:
        print(f"Rejected: {type(e).__name__}")

    print("\nOrdering with an empty cart:")
    try:
        desk.create_order({"name": "Jane", "address": "1 Side St"})
    except ShopError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
