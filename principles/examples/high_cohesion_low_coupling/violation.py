"""
High Cohesion, Low Coupling - violation

ECommerceSystem owns products, stock, the cart, customers, payment, email and
order history. Cart lines copy product names and prices, stock is changed
when items are added to the cart, and checkout reaches into every part of
the class. Changing any one concern means editing this one class.
"""

from datetime import datetime


class ECommerceSystem:
    def __init__(self):
        self.products = []
        self.cart_items = []
        self.orders = []
        self.customers = []
        self.next_order_id = 1000

    def add_product(self, id, name, price, description, stock_level):
        product = {"id": id, "name": name, "price": price, "description": description,
                   "stock_level": stock_level, "created_at": datetime.now()}
        self.products.append(product)
        print(f"Product added: {name}")
        return product

    def update_product_stock(self, product_id, stock_level):
        for product in self.products:
            if product["id"] == product_id:
                product["stock_level"] = stock_level
                print(f"Updated stock for {product['name']} to {stock_level}")
                return
        print(f"Product with ID {product_id} not found")

    def add_to_cart(self, product_id, quantity=1):
        product = next((p for p in self.products if p["id"] == product_id), None)
        if product is None:
            print(f"Product with ID {product_id} not found")
            return False
        if product["stock_level"] < quantity:
            print(f"Not enough stock for {product['name']}")
            return False
        product["stock_level"] -= quantity
        for item in self.cart_items:
            if item["product_id"] == product_id:
                item["quantity"] += quantity
                break
        else:
            self.cart_items.append({"product_id": product_id, "product_name": product["name"],
                                    "price": product["price"], "quantity": quantity})
        print(f"Added {quantity} {product['name']} to cart")
        return True

    def cart_total(self):
        return sum(item["price"] * item["quantity"] for item in self.cart_items)

    def register_customer(self, name, email, address, payment_info):
        if "@" not in email:
            print("Invalid email address")
            return None
        customer = {"name": name, "email": email, "address": address, "payment_info": payment_info}
        self.customers.append(customer)
        print(f"Customer registered: {name}")
        self.send_welcome_email(customer)
        return customer

    def send_welcome_email(self, customer):
        print(f"Sending welcome email to {customer['email']}")
        print(f"Subject: Welcome to our store, {customer['name']}!")

    def checkout(self, email):
        if not self.cart_items:
            print("Cannot checkout with empty cart")
            return None
        customer = next((c for c in self.customers if c["email"] == email), None)
        if customer is None:
            print(f"Customer with email {email} not found")
            return None
        total = self.cart_total()
        payment = self.process_payment(customer, total)
        if not payment["success"]:
            print(f"Payment failed: {payment['message']}")
            return None
        order = {"id": self.next_order_id, "customer_email": email, "items": list(self.cart_items),
                 "total": total, "payment_id": payment["transaction_id"]}
        self.next_order_id += 1
        self.orders.append(order)
        self.send_order_confirmation(customer, order)
        self.cart_items = []
        print(f"Order #{order['id']} processed successfully")
        return order

    def process_payment(self, customer, amount):
        print(f"Processing payment of ${amount:.2f} for {customer['name']}")
        if customer["payment_info"].get("type") == "credit-card":
            return {"success": True, "transaction_id": f"TX-{self.next_order_id}"}
        return {"success": False, "message": "Invalid payment method"}

    def send_order_confirmation(self, customer, order):
        print(f"Sending order confirmation to {customer['email']}")
        print(f"Total: ${order['total']:.2f}")
        for item in order["items"]:
            print(f"- {item['product_name']} x{item['quantity']}")

    def customer_orders(self, email):
        return [order for order in self.orders if order["customer_email"] == email]


def main():
    shop = ECommerceSystem()
    shop.add_product(1, "Laptop", 1299.99, "Powerful laptop", 10)
    shop.add_product(2, "Headphones", 99.99, "Noise-cancelling headphones", 20)
    shop.add_product(3, "Wireless Mouse", 29.99, "Ergonomic mouse", 30)
    shop.register_customer("John Doe", "john@example.com", "123 Main St, Anytown, USA",
                           {"type": "credit-card", "number": "1234-5678-9012-3456", "expiry": "12/25"})

    shop.add_to_cart(1)
    shop.add_to_cart(2, 2)
    shop.add_to_cart(3)

    print("\nA price change does not reach the cart, which copied the old price:")
    shop.products[0]["price"] = 1199.99
    shop.checkout("john@example.com")
    print(f"Customer has {len(shop.customer_orders('john@example.com'))} orders")


if __name__ == "__main__":
    main()
