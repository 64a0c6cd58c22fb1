"""
Tell, Don't Ask - correct implementation

OrderProcessor tells the cart to check out and gets a total back. The
cart owns its items and discount rate, validates the rate and resets
itself, so the rules about totals live in exactly one place.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Item:
    name: str
    price: float


class ShoppingCart:
    def __init__(self):
        self._items: List[Item] = []
        self._discount_rate = 0.0

    def add_item(self, item: Item) -> None:
        self._items.append(item)
        print(f"Added {item.name} to cart")

    def remove_item(self, name: str) -> bool:
        for index, item in enumerate(self._items):
            if item.name == name:
                del self._items[index]
                print(f"Removed {name} from cart")
                return True
        return False

    def apply_discount(self, rate: float) -> None:
        if not 0 <= rate <= 1:
            raise ValueError("Discount rate must be between 0 and 1")
        self._discount_rate = rate
        print(f"Applied {rate:.0%} discount to cart")

    def total(self) -> float:
        subtotal = sum(item.price for item in self._items)
        return round(subtotal * (1 - self._discount_rate), 2)

    def checkout(self) -> float:
        if not self._items:
            raise ValueError("Cannot check out an empty cart")
        total = self.total()
        print(f"Checking out. Total after discount: ${total:.2f}")
        self._items.clear()
        self._discount_rate = 0.0
        return total


class OrderProcessor:
    def process_order(self, cart: ShoppingCart) -> dict:
        total = cart.checkout()
        print(f"Order processed successfully. Amount: ${total:.2f}")
        return {"status": "success", "total": total}


def main():
    cart = ShoppingCart()
    cart.add_item(Item("Laptop", 1200))
    cart.add_item(Item("Mouse", 25))
    cart.apply_discount(0.1)
    print(OrderProcessor().process_order(cart))

    try:
        cart.apply_discount(1.5)
    except ValueError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
