"""
Fail Fast - correct implementation

register_user validates the whole payload before generating an id or
touching storage, and raises on the first problem it finds. Nothing is saved
and no half-built user exists when the input is wrong.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from itertools import count
from typing import Dict, List

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]{3,20}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class RegistrationError(ValueError):
    pass


def validate_user_data(data: Dict[str, str]) -> None:
    if not data:
        raise RegistrationError("User data is required")
    for name in ("username", "email", "password"):
        if not data.get(name):
            raise RegistrationError(f"{name.capitalize()} is required")

    username, email, password = data["username"], data["email"], data["password"]
    if not 3 <= len(username) <= 20:
        raise RegistrationError("Username must be between 3 and 20 characters")
    if not USERNAME_PATTERN.fullmatch(username):
        raise RegistrationError("Username can only contain letters, numbers, and underscores")
    if not EMAIL_PATTERN.fullmatch(email):
        raise RegistrationError("Invalid email format")
    if len(password) < 8:
        raise RegistrationError("Password must be at least 8 characters long")
    if not re.search(r"[A-Z]", password):
        raise RegistrationError("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        raise RegistrationError("Password must contain at least one lowercase letter")
    if not re.search(r"[0-9]", password):
        raise RegistrationError("Password must contain at least one number")


@dataclass
class UserRegistration:
    saved: List[dict] = field(default_factory=list)
    _ids: count = field(default_factory=lambda: count(1))

    def register_user(self, data: Dict[str, str]) -> dict:
        validate_user_data(data)
        user = {
            "id": f"user_{next(self._ids):04d}",
            "username": data["username"],
            "email": data["email"],
            "created_at": datetime(2024, 1, 1).isoformat(),
        }
        self.saved.append(user)
        print(f"User saved to database: {user}")
        return user


def main():
    registration = UserRegistration()

    try:
        registration.register_user({"username": "jo", "email": "not-an-email", "password": "weak"})
    except RegistrationError as e:
        print(f"Registration failed: {e}")
    print(f"Users stored after the failed attempt: {len(registration.saved)}")

    try:
        user = registration.register_user(
            {"username": "john_doe", "email": "john@example.com", "password": "StrongPass123"}
        )
        print(f"User registered successfully: {user['id']}")
    except RegistrationError as e:
        print(f"Registration failed: {e}")


if __name__ == "__main__":
    main()
