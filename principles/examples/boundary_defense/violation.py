"""
Boundary Defense - violation

Data from clients, databases, external services, files and queues is used as
it arrives. The client picks its own admin flag, extra fields are copied onto
objects wholesale, negative amounts are imported, and SQL and shell commands
are built by string formatting.
"""

import json
import sqlite3


class User:
    def __init__(self, **fields):
        # whatever the caller sends becomes an attribute
        self.__dict__.update(fields)

    def __repr__(self):
        return f"User({self.__dict__})"


class UserService:
    def __init__(self):
        self.users = {}

    def create_user(self, user_data):
        user = User(**user_data)
        self.users[user_data.get("id")] = user
        return user

    def sync_external(self, response):
        user = User(**response)
        self.users[response.get("id")] = user
        return user


class OrderService:
    def __init__(self):
        self.orders = []

    def import_orders(self, file_content):
        for order in json.loads(file_content):
            self.orders.append({
                "id": order["id"],
                "amount": order["amount"],
                "items": order["items"],
                "userId": order["userId"],
            })

    def process_message(self, message):
        data = message["payload"]
        self.orders.append({"id": data["id"], "total": data["total"], "status": data["status"]})


class PaymentService:
    def __init__(self, db):
        self.db = db

    def process_payment(self, user_id, amount, card_number):
        query = f"INSERT INTO payments (user_id, amount, card) VALUES ('{user_id}', {amount}, '{card_number}');"
        print("Executing SQL:", query)
        self.db.executescript(query)

    def receipt_command(self, order_id, email):
        command = f"generate-pdf --order={order_id} --email={email}"
        print("Would run through the shell:", command)
        return command


def main():
    print("=== Boundary Defense - violation ===\n")
    users = UserService()
    orders = OrderService()
    db = sqlite3.connect(":memory:")
    db.execute("CREATE TABLE payments (id INTEGER PRIMARY KEY, user_id TEXT, amount REAL, card TEXT)")
    payments = PaymentService(db)

    print("1. Creating user with malicious input:")
    user = users.create_user({"id": 1, "email": "admin@example.com'; DROP TABLE users; --",
                              "age": -5, "role": "user", "is_admin": True})
    print("  ", user)
    print("   Security issue: the client set is_admin=True")

    print("\n2. Syncing with a compromised external service:")
    synced = users.sync_external({"id": 999, "email": "attacker@evil.com", "age": "not-a-number",
                                  "role": "admin"})
    print("  ", synced, "| age + 1 would raise:", type(synced.age).__name__)

    print("\n3. Importing orders from an untrusted file:")
    orders.import_orders(json.dumps([
        {"id": 1, "amount": -1000, "items": [], "userId": "../../../etc/passwd"},
        {"id": 2, "amount": "invalid", "items": None, "userId": "<script>alert('xss')</script>"},
    ]))
    print("   Imported:", orders.orders)
    print("   Negative and non-numeric amounts accepted")

    print("\n4. Queue message with an invented status:")
    orders.process_message({"payload": {"id": 9, "total": -1, "status": "hacked"}})
    print("   Stored:", orders.orders[-1])

    print("\n5. Payment with SQL injection:")
    try:
        payments.process_payment("1', 0, 'x'); DROP TABLE payments; --", 100, "1234567890123456")
        db.execute("SELECT COUNT(*) FROM payments")
    except sqlite3.OperationalError as e:
        print("   Database error afterwards:", e, "(the payments table is gone)")

    print("\n6. Receipt generation with command injection:")
    payments.receipt_command(123, "user@test.com; cat /etc/passwd")
    print("   A shell would run `cat /etc/passwd` too")
    db.close()


if __name__ == "__main__":
    main()
