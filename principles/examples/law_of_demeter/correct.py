"""
Law of Demeter - correct implementation

OrderProcessor only calls methods on the objects it is handed. A customer
pays and formats their own shipping address, so the processor never learns
that a wallet or an address object exists and their internals can change
freely.
"""

from dataclasses import dataclass, field
from typing import List


class Wallet:
    def __init__(self, amount: float):
        self._amount = amount

    def remove_money(self, amount: float) -> bool:
        if amount > self._amount:
            return False
        self._amount -= amount
        return True

    @property
    def balance(self) -> float:
        return self._amount


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    zip_code: str

    def formatted(self) -> str:
        return f"{self.street}, {self.city}, {self.zip_code}"


class Customer:
    def __init__(self, name: str, funds: float = 100):
        self.name = name
        self._wallet = Wallet(funds)
        self._address = Address("123 Main St", "Anytown", "12345")

    def shipping_label(self) -> str:
        return self._address.formatted()

    def make_payment(self, amount: float) -> bool:
        return self._wallet.remove_money(amount)


@dataclass
class Item:
    name: str
    price: float


@dataclass
class Order:
    items: List[Item] = field(default_factory=list)
    status: str = "New"

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def total(self) -> float:
        return round(sum(item.price for item in self.items), 2)


class OrderProcessor:
    def process_order(self, customer: Customer, order: Order) -> bool:
        print(f"Processing order for {customer.name}")
        print(f"Shipping to: {customer.shipping_label()}")
        total = order.total()
        print(f"Order total: ${total:.2f}")
        if customer.make_payment(total):
            print("Payment successful")
            order.status = "Paid"
            return True
        print("Payment failed")
        order.status = "Payment Failed"
        return False


def main():
    customer = Customer("John Doe")
    order = Order()
    order.add_item(Item("Book", 15.99))
    order.add_item(Item("Coffee Mug", 8.99))

    processor = OrderProcessor()
    processor.process_order(customer, order)
    print(f"Order status: {order.status}")

    print()
    big_order = Order([Item("Espresso Machine", 249.00)])
    processor.process_order(customer, big_order)
    print(f"Order status: {big_order.status}")


if __name__ == "__main__":
    main()
