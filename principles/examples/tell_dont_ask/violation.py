"""
Tell, Don't Ask - violation

The cart is a bag of getters and setters. OrderProcessor asks for the
items and the discount rate, computes the total itself and then empties
the cart by popping from the list it was handed. Nothing stops a caller
setting a 150% discount, and every other place that needs a total has to
repeat the arithmetic.
"""


class Item:
    def __init__(self, name, price):
        self.name = name
        self.price = price


class ShoppingCart:
    def __init__(self):
        self.items = []
        self.discount_rate = 0

    def get_items(self):
        return self.items

    def get_discount_rate(self):
        return self.discount_rate

    def set_discount_rate(self, rate):
        self.discount_rate = rate

    def add_item(self, item):
        self.items.append(item)


class OrderProcessor:
    def process_order(self, cart):
        subtotal = 0
        for item in cart.get_items():
            subtotal += item.price
            print(f"Processing item: {item.name} - ${item.price}")
        discount = subtotal * cart.get_discount_rate()
        total = subtotal - discount
        print(f"Subtotal ${subtotal:.2f}, discount ${discount:.2f}, total ${total:.2f}")

        while cart.get_items():
            cart.get_items().pop()
        cart.set_discount_rate(0)
        return {"status": "success", "total": total}


def main():
    processor = OrderProcessor()
    cart = ShoppingCart()
    cart.add_item(Item("Laptop", 1200))
    cart.add_item(Item("Mouse", 25))
    cart.set_discount_rate(0.1)
    print(processor.process_order(cart))

    cart.add_item(Item("Monitor", 300))
    cart.set_discount_rate(1.5)
    print(processor.process_order(cart))


if __name__ == "__main__":
    main()
