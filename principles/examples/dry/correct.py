"""
DRY - correct implementation

Subtotal, discount rates and weight tiers each live in one place. Shipping
cost and delivery time read the same tier table, and the order summary is
assembled from the same methods the individual lines use.
"""

import bisect
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

ITEM_WEIGHT_KG = 0.5
DISCOUNT_RATES = {"SAVE10": 0.1, "SAVE20": 0.2, "SAVE30": 0.3}

# upper weight bound (exclusive) -> (shipping cost, delivery days)
WEIGHT_LIMITS = [1, 5, 20]
WEIGHT_TIERS = [(5.99, 1), (9.99, 2), (19.99, 3), (39.99, 5)]


@dataclass
class CartItem:
    product: str
    quantity: int
    price: float


class ShoppingCart:
    def __init__(self, tax_rate: float = 0.1):
        self.items: List[CartItem] = []
        self.discount_code = None
        self.tax_rate = tax_rate

    def add_item(self, product: str, quantity: int, price: float) -> None:
        self.items.append(CartItem(product, quantity, price))

    def subtotal(self) -> float:
        return sum(item.quantity * item.price for item in self.items)

    def tax(self) -> float:
        return self.subtotal() * self.tax_rate

    def apply_discount(self, code: str) -> None:
        self.discount_code = code

    def discount(self) -> float:
        return self.subtotal() * DISCOUNT_RATES.get(self.discount_code, 0)

    def total_weight(self) -> float:
        return sum(item.quantity * ITEM_WEIGHT_KG for item in self.items)

    def _tier(self):
        return WEIGHT_TIERS[bisect.bisect_right(WEIGHT_LIMITS, self.total_weight())]

    def shipping_cost(self) -> float:
        return self._tier()[0]

    def delivery_date(self, today: date = None) -> date:
        return (today or date.today()) + timedelta(days=self._tier()[1])

    def summary(self) -> dict:
        total = self.subtotal() - self.discount() + self.tax() + self.shipping_cost()
        return {
            "subtotal": round(self.subtotal(), 2),
            "discount": round(self.discount(), 2),
            "tax": round(self.tax(), 2),
            "shipping": self.shipping_cost(),
            "total": round(total, 2),
        }


def main():
    cart = ShoppingCart()
    cart.add_item("Laptop", 1, 999.99)
    cart.add_item("Mouse", 2, 24.99)
    cart.add_item("Keyboard", 1, 59.99)

    cart.apply_discount("SAVE20")
    print(f"Subtotal: ${cart.subtotal():.2f}")
    print(f"Tax: ${cart.tax():.2f}")
    print(f"Discount: ${cart.discount():.2f}")
    print(f"Shipping: ${cart.shipping_cost():.2f}")
    print(f"Estimated Delivery: {cart.delivery_date(date(2024, 1, 1)):%a %b %d %Y}")
    print("Order Summary:", cart.summary())

    print("\nChanging the tax rate in one place changes every figure that uses it:")
    cart.tax_rate = 0.08
    print(f"Tax line: ${cart.tax():.2f}, summary tax: ${cart.summary()['tax']:.2f}")


if __name__ == "__main__":
    main()
