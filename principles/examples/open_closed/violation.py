"""
Open/Closed - violation

All discount rules live in one if/elif chain inside DiscountCalculator.
Supporting a gold tier means editing that method, and until someone does,
gold customers silently get no discount.
"""


class Customer:
    def __init__(self, name, type):
        self.name = name
        self.type = type


class Order:
    def __init__(self, customer, total):
        self.customer = customer
        self.total = total


class DiscountCalculator:
    def discount(self, order):
        customer_type = order.customer.type
        if customer_type == "regular":
            return order.total * 0.01
        elif customer_type == "premium":
            return order.total * 0.10
        elif customer_type == "vip":
            return order.total * 0.20
        # every new tier means another branch here
        return 0


def main():
    calculator = DiscountCalculator()
    for name, kind in (("John", "regular"), ("Alice", "premium"), ("Bob", "vip")):
        print(f"{kind.capitalize()} customer discount: ${calculator.discount(Order(Customer(name, kind), 100)):.2f}")

    gold = calculator.discount(Order(Customer("Emma", "gold"), 100))
    print(f"\nGold customer discount: ${gold:.2f} (expected $15.00 until the method is edited)")


if __name__ == "__main__":
    main()
