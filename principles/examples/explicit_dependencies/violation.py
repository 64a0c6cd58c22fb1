"""
Explicit Dependencies - violation

OrderService takes no constructor arguments and reaches for its
collaborators itself: a Database singleton, a service locator, a global
cache and counters, environment variables, the wall clock and random ids.
The constructor tells callers nothing, and every run produces different ids,
timestamps and leftover global state.
"""

import os
import random
import string
from datetime import datetime

request_count = 0
global_cache = {}
global_config = {"tax_rate": 0.1, "max_retries": 3}


class Database:
    _instance = None

    @classmethod
    def instance(cls):
        if cls._instance is None:
            print("[Database] Creating singleton instance...")
            cls._instance = cls()
        return cls._instance

    def __init__(self):
        self.query_count = 0

    def query(self, sql):
        self.query_count += 1
        print(f"[Database] Executing: {sql}")
        if sql.startswith("SELECT * FROM users"):
            return [{"id": "user-1", "name": "John Doe", "email": "john@example.com"}]
        return []


class ServiceLocator:
    services = {}

    @classmethod
    def register(cls, name, service):
        cls.services[name] = service

    @classmethod
    def get(cls, name):
        try:
            return cls.services[name]
        except KeyError:
            raise LookupError(f"Service not found: {name}")


class ConsoleLogger:
    def info(self, message, **context):
        print(f"[INFO] {message} {context}")


class ConsoleEmail:
    def send(self, to, subject, body):
        print(f"[Email] To: {to}, Subject: {subject}")


class ConsolePayments:
    def charge(self, amount, token):
        print(f"[Payment] Charging {amount:.2f} to {token}")
        return {"success": True, "transaction_id": f"txn-{datetime.now().timestamp():.0f}"}


class ConsoleInventory:
    def check_stock(self, product_id):
        return 100

    def reserve(self, product_id, quantity):
        print(f"[Inventory] Reserving {quantity} of product {product_id}")
        return f"res-{random.randrange(10**6)}"


def register_services():
    ServiceLocator.register("logger", ConsoleLogger())
    ServiceLocator.register("email", ConsoleEmail())
    ServiceLocator.register("payments", ConsolePayments())
    ServiceLocator.register("inventory", ConsoleInventory())


class OrderService:
    def __init__(self):
        # looks like it needs nothing
        pass

    def create_order(self, user_id, items):
        global request_count
        request_count += 1

        db = Database.instance()
        logger = ServiceLocator.get("logger")
        email = ServiceLocator.get("email")
        payments = ServiceLocator.get("payments")
        inventory = ServiceLocator.get("inventory")

        tax_rate = float(os.environ.get("TAX_RATE", global_config["tax_rate"]))
        send_emails = os.environ.get("ENABLE_EMAILS") != "false"

        user = global_cache.get(f"user_{user_id}")
        if user is None:
            rows = db.query(f"SELECT * FROM users WHERE id = '{user_id}'")
            if not rows:
                raise LookupError("User not found")
            user = global_cache[f"user_{user_id}"] = rows[0]

        order_id = "ORD-" + "".join(random.choices(string.ascii_uppercase + string.digits, k=9))
        logger.info("Creating order", order_id=order_id, user_id=user_id)

        for item in items:
            if inventory.check_stock(item["product_id"]) < item["quantity"]:
                raise RuntimeError(f"Insufficient stock for product {item['product_id']}")
        reservations = [inventory.reserve(item["product_id"], item["quantity"]) for item in items]

        subtotal = sum(item["price"] * item["quantity"] for item in items)
        total = subtotal + subtotal * tax_rate
        payment = payments.charge(total, user.get("payment_token", "default-token"))

        order = {
            "order_id": order_id,
            "user_id": user_id,
            "total": round(total, 2),
            "transaction_id": payment["transaction_id"],
            "reservations": reservations,
            "created_at": datetime.now().isoformat(),
        }
        db.query("INSERT INTO orders VALUES (...)")
        if send_emails:
            email.send(user["email"], "Order Confirmed", f"Your order {order_id} is confirmed")
        return order


def main():
    print("Creating OrderService... the constructor reveals no dependencies.")
    service = OrderService()

    print("\nCalling it before the service locator is populated:")
    try:
        service.create_order("user-1", [{"product_id": 101, "price": 29.99, "quantity": 2}])
    except LookupError as e:
        print(f"Error: {e}")

    register_services()
    print("\nAfter registering services by hand:")
    first = service.create_order("user-1", [{"product_id": 101, "price": 29.99, "quantity": 2}])
    second = service.create_order("user-1", [{"product_id": 101, "price": 29.99, "quantity": 2}])

    print("\nWhat a test would have to live with:")
    print(f"Order ids differ for identical input: {first['order_id'] != second['order_id']}")
    print(f"Timestamp comes from the wall clock: {first['created_at'][:4]}...")
    print(f"TAX_RATE from env: {os.environ.get('TAX_RATE', 'not set')}")
    print(f"Global request count is now: {request_count}")
    print(f"Global cache entries: {len(global_cache)}")
    print(f"Singleton query count carried across calls: {Database.instance().query_count}")


if __name__ == "__main__":
    main()
