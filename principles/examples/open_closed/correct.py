"""
Open/Closed - correct implementation

DiscountCalculator looks a strategy up by customer type and never changes
when a tier is added. New tiers are new DiscountStrategy subclasses
registered with the calculator; the gold tier below is added after the
calculator is already in use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Customer:
    name: str
    type: str


@dataclass(frozen=True)
class Order:
    customer: Customer
    total: float


class DiscountStrategy(ABC):
    @abstractmethod
    def discount(self, order: Order) -> float: ...


class PercentageDiscount(DiscountStrategy):
    rate = 0.0

    def discount(self, order: Order) -> float:
        return round(order.total * self.rate, 2)


class RegularCustomerDiscount(PercentageDiscount):
    rate = 0.01


class PremiumCustomerDiscount(PercentageDiscount):
    rate = 0.10


class VIPCustomerDiscount(PercentageDiscount):
    rate = 0.20


class DiscountCalculator:
    def __init__(self):
        self._strategies: Dict[str, DiscountStrategy] = {}

    def register(self, customer_type: str, strategy: DiscountStrategy) -> None:
        self._strategies[customer_type] = strategy

    def discount(self, order: Order) -> float:
        strategy = self._strategies.get(order.customer.type)
        return strategy.discount(order) if strategy else 0.0


def default_calculator() -> DiscountCalculator:
    calculator = DiscountCalculator()
    calculator.register("regular", RegularCustomerDiscount())
    calculator.register("premium", PremiumCustomerDiscount())
    calculator.register("vip", VIPCustomerDiscount())
    return calculator


class GoldCustomerDiscount(PercentageDiscount):
    rate = 0.15


def main():
    calculator = default_calculator()
    customers = [Customer("John", "regular"), Customer("Alice", "premium"), Customer("Bob", "vip")]
    for customer in customers:
        print(f"{customer.type.capitalize()} customer discount: ${calculator.discount(Order(customer, 100)):.2f}")

    print("\nAdding a gold tier without touching DiscountCalculator:")
    calculator.register("gold", GoldCustomerDiscount())
    print(f"Gold customer discount: ${calculator.discount(Order(Customer('Emma', 'gold'), 100)):.2f}")
    print(f"Unknown tier discount: ${calculator.discount(Order(Customer('Sam', 'trial'), 100)):.2f}")


if __name__ == "__main__":
    main()
