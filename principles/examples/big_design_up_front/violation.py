"""
Big Design Up Front - violation

The store grows one feature at a time with no plan: global lists, a cart
that stores one entry per unit, user accounts bolted on, then inventory
bolted on through a second addToCart and a second placeOrder. The old and
new paths coexist and disagree about stock.
"""

from datetime import datetime

products = []
cart = []
users = []
current_user = None
orders = []
inventory = {}


def reset_store():
    global products, cart, users, current_user, orders, inventory
    products = [
        {"id": 1, "name": "Laptop", "price": 1200},
        {"id": 2, "name": "Smartphone", "price": 800},
        {"id": 3, "name": "Headphones", "price": 200},
    ]
    cart = []
    users = []
    current_user = None
    orders = []
    inventory = {1: 10, 2: 15, 3: 20}


def display_products():
    print("Available Products:")
    for product in products:
        print(f"{product['id']}. {product['name']} - ${product['price']}")


def add_to_cart(product_id, quantity=1):
    product = next((p for p in products if p["id"] == product_id), None)
    if product:
        # quantities weren't planned, so push one entry per unit
        for _ in range(quantity):
            cart.append(product)
        print(f"Added {quantity} {product['name']} to cart")
    else:
        print("Product not found")


def display_cart():
    print("Shopping Cart:")
    counts = {}
    for item in cart:
        counts[item["id"]] = counts.get(item["id"], 0) + 1

    total = 0
    for product_id, quantity in counts.items():
        product = next(p for p in products if p["id"] == product_id)
        subtotal = product["price"] * quantity
        print(f"{product['name']} x {quantity} - ${subtotal}")
        total += subtotal
    print(f"Total: ${total}")


def create_user(name, email):
    # ids are whatever the list length happens to be
    user = {"id": len(users) + 1, "name": name, "email": email}
    users.append(user)
    print(f"User created: {name}")
    return user


def login(email):
    global current_user, cart
    current_user = next((u for u in users if u["email"] == email), None)
    if current_user:
        print(f"Logged in as {current_user['name']}")
        # no per-user carts, so logging in wipes the global one
        cart = []
    else:
        print("User not found")


def place_order():
    global cart
    if not current_user:
        print("Please log in to place an order")
        return None
    if not cart:
        print("Your cart is empty")
        return None
    order = {
        "id": len(orders) + 1,
        "userId": current_user["id"],
        "items": list(cart),
        "total": sum(item["price"] for item in cart),
        "status": "pending",
        "createdAt": datetime.now(),
    }
    orders.append(order)
    print(f"Order placed: #{order['id']}")
    cart = []
    return order


def add_to_cart_with_inventory_check(product_id, quantity=1):
    product = next((p for p in products if p["id"] == product_id), None)
    if not product:
        print("Product not found")
        return
    if inventory[product_id] < quantity:
        print(f"Sorry, only {inventory[product_id]} {product['name']} available")
        return
    inventory[product_id] -= quantity
    for _ in range(quantity):
        cart.append(product)
    print(f"Added {quantity} {product['name']} to cart")


def place_order_with_inventory_check():
    global cart
    if not current_user:
        print("Please log in to place an order")
        return None
    if not cart:
        print("Your cart is empty")
        return None

    # counting logic copied from display_cart
    counts = {}
    for item in cart:
        counts[item["id"]] = counts.get(item["id"], 0) + 1

    ok = True
    for product_id, quantity in counts.items():
        if inventory[product_id] < quantity:
            product = next(p for p in products if p["id"] == product_id)
            print(f"Sorry, only {inventory[product_id]} {product['name']} available")
            ok = False
    if not ok:
        return None

    # order building copied from place_order
    order = {
        "id": len(orders) + 1,
        "userId": current_user["id"],
        "items": list(cart),
        "total": sum(item["price"] for item in cart),
        "status": "pending",
        "createdAt": datetime.now(),
    }
    orders.append(order)
    print(f"Order placed: #{order['id']}")
    cart = []
    return order


def process_payment(order_id, payment_method):
    order = next((o for o in orders if o["id"] == order_id), None)
    if not order:
        print("Order not found")
        return
    if payment_method == "credit":
        print(f"Processing credit card payment of ${order['total']}")
        order["status"] = "paid"
    elif payment_method == "paypal":
        print(f"Processing PayPal payment of ${order['total']}")
        order["status"] = "paid"
    else:
        print("Unsupported payment method")


def main():
    reset_store()
    display_products()

    create_user("John Doe", "john@example.com")
    login("john@example.com")

    # two ways to add to the cart, only one of them touches inventory
    add_to_cart(1)
    add_to_cart_with_inventory_check(3, 2)
    display_cart()

    order = place_order_with_inventory_check()
    if order:
        process_payment(order["id"], "credit")

    print("Inventory afterwards:", inventory, "(the laptop in the order was never taken out of stock)")


if __name__ == "__main__":
    main()
