"""
Exceptions Should Be Exceptional - correct implementation

A missing user, an absent id or malformed data are expected outcomes and come
back as a Result. Only a genuinely unexpected failure, such as the database
connection dropping, is raised, and it is caught once at the edge.
"""

import random
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class Result:
    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data=None) -> "Result":
        return cls(True, data=data)

    @classmethod
    def fail(cls, error: str) -> "Result":
        return cls(False, error=error)


class DatabaseConnectionError(Exception):
    pass


class UserDatabase:
    def __init__(self, failure_rate: float = 0.1, rng: Optional[random.Random] = None):
        self.users: Dict[str, dict] = {
            "1": {"id": "1", "name": "John Doe", "email": "john@example.com", "age": 32},
            "2": {"id": "2", "name": "Jane Smith", "email": "jane@example.com", "age": 28},
        }
        self.reports: Dict[str, dict] = {}
        self.failure_rate = failure_rate
        self.rng = rng or random.Random(1)

    def get_user(self, user_id: str) -> Optional[dict]:
        return self.users.get(user_id)

    def save_user_report(self, user_id: str, report: dict) -> Optional[str]:
        if user_id not in self.users:
            return None
        path = f"/reports/user_{user_id}_{len(self.reports) + 1}.json"
        self.reports[path] = {"user_id": user_id, "data": report}
        return path

    def connect(self) -> None:
        if self.rng.random() < self.failure_rate:
            raise DatabaseConnectionError("Database connection failed")


def age_group(age: int) -> str:
    if age < 18:
        return "minor"
    if age < 65:
        return "adult"
    return "senior"


def is_valid_user(user: dict) -> bool:
    return bool(user.get("name")) and bool(user.get("email")) and isinstance(user.get("age"), int)


class UserDataProcessor:
    def __init__(self, database: UserDatabase):
        self.database = database

    def process_user_data(self, user_id: Optional[str] = None) -> Result:
        if not user_id:
            return Result.fail("User ID is required")
        user = self.database.get_user(user_id)
        if user is None:
            return Result.fail("User not found")
        if not is_valid_user(user):
            return Result.fail("Invalid user data")
        return Result.ok({
            "display_name": user["name"],
            "contact_email": user["email"],
            "age_group": age_group(user["age"]),
            "last_processed": datetime(2024, 1, 1).isoformat(),
        })

    def save_user_report(self, user_id: Optional[str], report: Optional[dict]) -> Result:
        if not user_id or not report:
            return Result.fail("Missing required parameters")
        path = self.database.save_user_report(user_id, report)
        if path is None:
            return Result.fail("User not found")
        return Result.ok(path)


def main():
    database = UserDatabase()
    processor = UserDataProcessor(database)

    print("Processing existing user:")
    print(processor.process_user_data("1"))
    print("\nProcessing non-existent user:")
    print(processor.process_user_data("999"))
    print("\nProcessing with missing user ID:")
    print(processor.process_user_data())

    print("\nSaving user report:")
    print(processor.save_user_report("1", {"content": "User activity report"}))
    print("\nSaving report for non-existent user:")
    print(processor.save_user_report("999", {"content": "Invalid user report"}))

    print("\nProcessing all users:")
    for user in database.users.values():
        print(f"Processing user: {user['name']}")

    print("\nAttempting database connection (forced outage):")
    outage = UserDatabase(failure_rate=1.0)
    try:
        outage.connect()
        print("Database connection successful")
    except DatabaseConnectionError as e:
        print(f"Database connection failed: {e}")


if __name__ == "__main__":
    main()
