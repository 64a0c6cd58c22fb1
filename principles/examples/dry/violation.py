"""
DRY - violation

The subtotal loop is written five times, the discount table twice, the
weight tiers twice and the tax rate is both a parameter and a literal. When
one copy changes the others quietly disagree.
"""

from datetime import date, timedelta


class ShoppingCart:
    def __init__(self):
        self.items = []
        self.discount_code = None

    def add_item(self, product, quantity, price):
        self.items.append({"product": product, "quantity": quantity, "price": price})

    def calculate_subtotal(self):
        subtotal = 0
        for item in self.items:
            subtotal += item["quantity"] * item["price"]
        return subtotal

    def calculate_tax(self, tax_rate=0.1):
        subtotal = 0
        for item in self.items:
            subtotal += item["quantity"] * item["price"]
        return subtotal * tax_rate

    def apply_discount(self, discount_code):
        self.discount_code = discount_code
        subtotal = 0
        for item in self.items:
            subtotal += item["quantity"] * item["price"]
        if discount_code == "SAVE10":
            return subtotal * 0.1
        elif discount_code == "SAVE20":
            return subtotal * 0.2
        elif discount_code == "SAVE30":
            return subtotal * 0.3
        return 0

    def calculate_shipping_cost(self):
        total_weight = 0
        for item in self.items:
            total_weight += item["quantity"] * 0.5
        if total_weight < 1:
            return 5.99
        elif total_weight < 5:
            return 9.99
        elif total_weight < 20:
            return 19.99
        return 39.99

    def estimate_delivery_date(self, today=None):
        total_weight = 0
        for item in self.items:
            total_weight += item["quantity"] * 0.5
        if total_weight < 1:
            days = 1
        elif total_weight < 5:
            days = 2
        elif total_weight < 20:
            days = 3
        else:
            days = 5
        return (today or date.today()) + timedelta(days=days)

    def generate_order_summary(self):
        subtotal = 0
        for item in self.items:
            subtotal += item["quantity"] * item["price"]
        discount = 0
        if self.discount_code:
            if self.discount_code == "SAVE10":
                discount = subtotal * 0.1
            elif self.discount_code == "SAVE20":
                discount = subtotal * 0.2
            elif self.discount_code == "SAVE30":
                discount = subtotal * 0.3
        tax = subtotal * 0.1
        total_weight = 0
        for item in self.items:
            total_weight += item["quantity"] * 0.5
        if total_weight < 1:
            shipping = 5.99
        elif total_weight < 5:
            shipping = 9.99
        elif total_weight < 20:
            shipping = 19.99
        else:
            shipping = 39.99
        total = subtotal - discount + tax + shipping
        return {"subtotal": round(subtotal, 2), "discount": round(discount, 2), "tax": round(tax, 2),
                "shipping": shipping, "total": round(total, 2)}


def main():
    cart = ShoppingCart()
    cart.add_item("Laptop", 1, 999.99)
    cart.add_item("Mouse", 2, 24.99)
    cart.add_item("Keyboard", 1, 59.99)

    print(f"Subtotal: ${cart.calculate_subtotal():.2f}")
    print(f"Tax: ${cart.calculate_tax():.2f}")
    print(f"Discount: ${cart.apply_discount('SAVE20'):.2f}")
    print(f"Shipping: ${cart.calculate_shipping_cost():.2f}")
    print(f"Estimated Delivery: {cart.estimate_delivery_date(date(2024, 1, 1)):%a %b %d %Y}")
    print("Order Summary:", cart.generate_order_summary())

    print("\nThe tax rate changes to 8%, but only one copy knows:")
    print(f"Tax line: ${cart.calculate_tax(0.08):.2f}, summary tax: ${cart.generate_order_summary()['tax']:.2f}")


if __name__ == "__main__":
    main()
