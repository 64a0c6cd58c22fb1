"""
Modularity - violation

One ECommerceApp object holds products, cart, orders and the console
output. Every method reaches into the shared lists, callers can edit
prices or append orders directly and stock is decremented item by item,
so a shortage halfway through leaves the inventory half updated.
"""


class ECommerceApp:
    def __init__(self):
        self.products = [
            {"id": 1, "name": "Laptop", "price": 999.99, "stock": 15},
            {"id": 2, "name": "Smartphone", "price": 699.99, "stock": 25},
            {"id": 3, "name": "Headphones", "price": 149.99, "stock": 1},
        ]
        self.cart_items = []
        self.orders = []
        self.next_order_id = 1000

    def get_product_by_id(self, product_id):
        return next((p for p in self.products if p["id"] == product_id), None)

    def add_to_cart(self, product_id, quantity=1):
        product = self.get_product_by_id(product_id)
        if product is None:
            raise ValueError(f"Product with ID {product_id} not found")
        for item in self.cart_items:
            if item["product_id"] == product_id:
                item["quantity"] += quantity
                break
        else:
            self.cart_items.append({"product_id": product_id, "name": product["name"],
                                    "price": product["price"], "quantity": quantity})
        return self.cart_items

    def cart_total(self):
        return sum(item["price"] * item["quantity"] for item in self.cart_items)

    def create_order(self, customer):
        if not customer.get("name") or not customer.get("address"):
            raise ValueError("Customer information is incomplete")
        if not self.cart_items:
            raise ValueError("Cannot create order with empty cart")
        for item in self.cart_items:
            product = self.get_product_by_id(item["product_id"])
            if product["stock"] < item["quantity"]:
                raise ValueError(f"Insufficient stock for product {product['name']}")
            product["stock"] -= item["quantity"]
        order = {"id": self.next_order_id, "customer": customer,
                 "items": list(self.cart_items), "total": self.cart_total()}
        self.next_order_id += 1
        self.orders.append(order)
        self.cart_items = []
        return order

    def display_products(self):
        for product in self.products:
            print(f"{product['name']}: ${product['price']} ({product['stock']} in stock)")

    def display_cart(self):
        for item in self.cart_items:
            print(f"{item['name']} x{item['quantity']}: ${item['price'] * item['quantity']:.2f}")
        print(f"Total: ${self.cart_total():.2f}")


def main():
    app = ECommerceApp()
    app.display_products()

    app.add_to_cart(1, 2)
    app.add_to_cart(3, 2)
    print("\nCart:")
    app.display_cart()

    try:
        app.create_order({"name": "John Doe", "address": "123 Main St"})
    except ValueError as e:
        print(f"\nError: {e}")
    print("Inventory after the failed order (laptops already taken):")
    app.display_products()

    print("\nDirect manipulation of internal data:")
    app.products[0]["price"] = 0.01
    app.orders.append({"id": 9999, "customer": {"name": "Fake Customer"}, "items": [], "total": 0.01})
    print(f"Laptop price now ${app.products[0]['price']}, fake order {app.orders[-1]['id']} accepted")


if __name__ == "__main__":
    main()
