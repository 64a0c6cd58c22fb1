"""
Boundary Defense - correct implementation

Everything that crosses a boundary (API payloads, database rows, external
service responses, imported files, queue messages) is validated and turned
into a trusted domain object before the rest of the system sees it. Roles
are decided server side, SQL is parameterised and commands are built as
argument lists.
"""

import json
import re
import shlex
import sqlite3
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UNSAFE_CHARS = re.compile(r"[<>'\";&|`$()]")
VALID_ROLES = ("admin", "user")
VALID_STATUSES = ("pending", "processing", "completed", "cancelled")


class ValidationError(ValueError):
    pass


@dataclass
class User:
    id: int
    email: str
    age: int
    role: str
    created_at: datetime = field(default_factory=datetime.now, repr=False)


@dataclass
class Order:
    id: int
    amount: float
    items: List[str]
    user_id: int
    status: str = "pending"


def require_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValidationError(f"Invalid ID: {value!r}")
    text = str(value).strip()
    if not text.isdigit() or int(text) <= 0:
        raise ValidationError(f"Invalid ID: {value!r}")
    return int(text)


def require_email(value: Any) -> str:
    if not isinstance(value, str) or not EMAIL_RE.match(value) or UNSAFE_CHARS.search(value):
        raise ValidationError(f"Invalid email: {value!r}")
    return value.strip().lower()


def require_age(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        age = value
    elif isinstance(value, str) and re.fullmatch(r"-?\d+", value.strip()):
        age = int(value)
    else:
        raise ValidationError(f"Invalid age: {value!r}")
    if not 0 <= age <= 150:
        raise ValidationError(f"Invalid age: {value!r}")
    return age


def require_positive_number(value: Any, what: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{what} must be a positive number") from None
    if number <= 0:
        raise ValidationError(f"{what} must be a positive number")
    return number


class UserService:
    def __init__(self):
        self.users = {}

    def create_user(self, payload: Any) -> User:
        """API boundary. Unknown fields such as is_admin are ignored."""
        if not isinstance(payload, dict):
            raise ValidationError("Invalid user data: must be an object")
        user = User(
            id=require_id(payload.get("id")),
            email=require_email(payload.get("email")),
            age=require_age(payload.get("age")),
            role="user",  # least privilege, never taken from the client
        )
        self.users[user.id] = user
        return user

    def load_from_row(self, row: dict) -> User:
        """Database boundary. Stored data can be corrupt too."""
        try:
            role = row.get("role")
            if role not in VALID_ROLES:
                raise ValidationError(f"Invalid role in database: {role!r}")
            return User(require_id(row.get("id")), require_email(row.get("email")),
                        require_age(row.get("age")), role)
        except ValidationError as e:
            print(f"Database validation error: {e}")
            raise ValidationError("Failed to load user: data integrity issue") from e

    def sync_external(self, response: dict) -> User:
        """External service boundary. Only known fields are copied out."""
        try:
            user = User(require_id(response.get("id")), require_email(response.get("email")),
                        require_age(response.get("age")), "user")
        except ValidationError as e:
            print(f"External service validation error: {e}")
            raise ValidationError("Failed to sync: external data validation failed") from e
        self.users[user.id] = user
        return user


class OrderService:
    def __init__(self):
        self.orders: List[Order] = []

    def import_orders(self, file_content: str) -> int:
        """File boundary: keep valid orders, report and skip the rest."""
        try:
            raw = json.loads(file_content)
        except json.JSONDecodeError:
            raise ValidationError("Invalid JSON in file") from None
        if not isinstance(raw, list):
            raise ValidationError("File must contain an array of orders")

        imported = 0
        for index, item in enumerate(raw):
            try:
                if not isinstance(item, dict):
                    raise ValidationError("order must be an object")
                items = item.get("items")
                if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
                    raise ValidationError("items must be a list of strings")
                order = Order(require_id(item.get("id")),
                              require_positive_number(item.get("amount"), "amount"),
                              items, require_id(item.get("userId")))
            except ValidationError as e:
                print(f"Skipping invalid order at index {index}: {e}")
                continue
            self.orders.append(order)
            imported += 1
        return imported

    def process_message(self, message: Any) -> Order:
        """Queue boundary."""
        if not isinstance(message, dict) or not isinstance(message.get("payload"), dict):
            raise ValidationError("Invalid message format")
        data = message["payload"]
        status = data.get("status")
        if status not in VALID_STATUSES:
            raise ValidationError(f"Invalid status: {status!r}")
        user_id = require_id(data["userId"]) if "userId" in data else 0
        order = Order(require_id(data.get("id")), require_positive_number(data.get("total"), "total"),
                      [], user_id, status)
        self.orders.append(order)
        return order


class PaymentService:
    def __init__(self, db: sqlite3.Connection):
        self.db = db

    def process_payment(self, user_id: Any, amount: Any, card_number: Any) -> int:
        uid = require_id(user_id)
        value = require_positive_number(amount, "amount")
        card = re.sub(r"\D", "", str(card_number))
        if not 13 <= len(card) <= 19:
            raise ValidationError("Invalid card number")
        cursor = self.db.execute(
            "INSERT INTO payments (user_id, amount, card) VALUES (?, ?, ?)",
            (uid, value, card[-4:]),
        )
        print("Executed parameterised insert with", (uid, value, f"****{card[-4:]}"))
        return cursor.lastrowid

    def receipt_command(self, order_id: Any, email: Any) -> List[str]:
        """Return the command as an argument list; no shell ever parses it."""
        args = ["generate-pdf", "--order", str(require_id(order_id)), "--email", require_email(email)]
        print("Safe command:", shlex.join(args))
        return args


def main():
    print("=== Boundary Defense - correct ===\n")
    users = UserService()
    orders = OrderService()
    db = sqlite3.connect(":memory:")
    db.execute("CREATE TABLE payments (id INTEGER PRIMARY KEY, user_id INTEGER, amount REAL, card TEXT)")
    payments = PaymentService(db)

    print("1. Malicious API input:")
    try:
        users.create_user({"id": 1, "email": "admin@example.com'; DROP TABLE users; --",
                           "age": -5, "is_admin": True})
    except ValidationError as e:
        print("   Rejected:", e)

    print("\n2. Valid API input with a privilege escalation attempt:")
    user = users.create_user({"id": 2, "email": "User@Example.com", "age": "30", "is_admin": True})
    print("   Created:", user)
    print("   Role is", user.role, "(the client cannot choose it)")

    print("\n3. Corrupt database row:")
    try:
        users.load_from_row({"id": 3, "email": "x@example.com", "age": 40, "role": "superuser"})
    except ValidationError as e:
        print("   Rejected:", e)

    print("\n4. External service response with extra fields:")
    synced = users.sync_external({"id": 999, "email": "valid@example.com", "age": 25,
                                  "is_admin": True, "__class__": "Admin"})
    print("   Synced:", synced, "| has is_admin:", hasattr(synced, "is_admin"))

    print("\n5. Importing orders from a file with bad rows:")
    content = json.dumps([
        {"id": 1, "amount": 100, "items": ["item1"], "userId": 5},
        {"id": 2, "amount": -50, "items": [], "userId": 6},
        {"id": 3, "amount": 200, "items": ["item2"], "userId": 7},
        {"id": "bad", "amount": 50, "items": [], "userId": 8},
    ])
    imported = orders.import_orders(content)
    print(f"   Imported {imported} valid orders (skipped {4 - imported} invalid)")

    print("\n6. Queue message with an unknown status:")
    try:
        orders.process_message({"payload": {"id": 9, "total": 10, "status": "hacked"}})
    except ValidationError as e:
        print("   Rejected:", e)

    print("\n7. Payment with an injection attempt in the user id:")
    try:
        payments.process_payment("1'); DROP TABLE payments; --", 100, "4111 1111 1111 1111")
    except ValidationError as e:
        print("   Rejected:", e)
    payments.process_payment(1, "100", "4111-1111-1111-1111")
    count = db.execute("SELECT COUNT(*) FROM payments").fetchone()[0]
    print(f"   payments table intact, {count} row(s)")

    print("\n8. Receipt command:")
    try:
        payments.receipt_command(123, "user@test.com; cat /etc/passwd")
    except ValidationError as e:
        print("   Rejected:", e)
    payments.receipt_command(123, "user@example.com")
    db.close()


if __name__ == "__main__":
    main()
