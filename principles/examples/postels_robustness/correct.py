"""
Postel's Robustness - correct implementation

UserProfileService accepts untidy input: padded names, numbers as names,
uppercase emails, ages as strings and preferences as a JSON string. It
normalises all of it to one stored form. What it sends back is always a
Response with the same fields, for success and failure alike. Only input
that cannot mean anything sensible, such as a missing or malformed email,
is refused.
"""

import json
import math
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, Optional

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class Response:
    success: bool
    user: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


def normalize_name(name) -> str:
    if name is None or str(name).strip() == "":
        return "Anonymous User"
    return " ".join(str(name).split())


def normalize_email(email) -> str:
    """Return the canonical email or raise ValueError."""
    if not email:
        raise ValueError("Email is required")
    value = str(email).strip().lower()
    if not EMAIL_RE.match(value):
        raise ValueError("Invalid email format")
    return value


def normalize_age(age) -> Optional[int]:
    if age is None or isinstance(age, bool):
        return None
    try:
        value = float(age)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return int(value + 0.5)


def normalize_preferences(preferences) -> Dict[str, Any]:
    if isinstance(preferences, str):
        try:
            preferences = json.loads(preferences)
        except json.JSONDecodeError:
            return {}
    return dict(preferences) if isinstance(preferences, dict) else {}


@dataclass
class StoredUser:
    id: str
    name: str
    email: str
    age: Optional[int]
    preferences: Dict[str, Any] = field(default_factory=dict)
    created_at: str = ""


class UserProfileService:
    def __init__(self, clock=lambda: datetime.now(timezone.utc)):
        self.users: Dict[str, StoredUser] = {}
        self.clock = clock
        self._ids = count(1)

    def create_user(self, user_data: Optional[dict]) -> Response:
        if not user_data:
            return Response(False, error="User data is required")
        try:
            email = normalize_email(user_data.get("email"))
        except ValueError as e:
            return Response(False, error=str(e))

        user = StoredUser(
            id=str(user_data.get("id") or f"user_{next(self._ids):04d}"),
            name=normalize_name(user_data.get("name")),
            email=email,
            age=normalize_age(user_data.get("age")),
            preferences=normalize_preferences(user_data.get("preferences")),
            created_at=self.clock().isoformat(),
        )
        self.users[user.id] = user
        return Response(True, user={"id": user.id, "name": user.name, "email": user.email})

    def get_user_profile(self, user_id: Optional[str]) -> Response:
        if not user_id:
            return Response(False, error="User ID is required")
        user = self.users.get(user_id)
        if user is None:
            return Response(False, error="User not found")
        return Response(True, user=asdict(user))

    def update_email(self, user_id: str, new_email) -> Response:
        user = self.users.get(user_id)
        if user is None:
            return Response(False, error="User not found")
        try:
            user.email = normalize_email(new_email)
        except ValueError as e:
            return Response(False, error=str(e))
        return Response(True, user={"id": user.id, "name": user.name, "email": user.email})


def main():
    service = UserProfileService(clock=lambda: datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc))

    print("Complete data:")
    john = service.create_user({"name": "John Doe", "email": "john.doe@example.com", "age": 32,
                                "preferences": {"theme": "dark", "notifications": True}})
    print(john)

    print("\nPadded name and uppercase email:")
    print(service.create_user({"name": "  Jane   Smith  ", "email": "JANE.SMITH@EXAMPLE.COM"}))

    print("\nNumber as name, age as text, preferences as JSON:")
    print(service.create_user({"name": 123, "email": "bob@example.com", "age": "45.7",
                               "preferences": json.dumps({"theme": "light"})}))

    print("\nNothing usable for an email:")
    print(service.create_user({"name": "No Mail"}))

    print("\nProfile lookup and update:")
    print(service.get_user_profile(john.user["id"]))
    print(service.update_email(john.user["id"], " John@Example.org "))
    print(service.get_user_profile("missing"))


if __name__ == "__main__":
    main()
