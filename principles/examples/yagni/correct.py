"""
YAGNI - correct implementation

Today's requirement: register with a name, email and password, then log
in. UserProfile has a name and an email. AuthenticationService stores a
salted password hash and checks it. That is the whole feature; pictures,
addresses and two-factor auth can be added when someone needs them.
"""

import hashlib
import hmac
import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class UserProfile:
    name: str
    email: str


def _hash(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode(), salt, 100_000)


class AuthenticationService:
    def __init__(self):
        self._accounts: Dict[str, Tuple[UserProfile, bytes, bytes]] = {}

    def register_user(self, name: str, email: str, password: str) -> UserProfile:
        if not name or not email or not password:
            raise ValueError("All fields are required")
        if email in self._accounts:
            raise ValueError("Email already registered")
        salt = os.urandom(16)
        profile = UserProfile(name, email)
        self._accounts[email] = (profile, salt, _hash(password, salt))
        return profile

    def login(self, email: str, password: str) -> Optional[UserProfile]:
        account = self._accounts.get(email)
        if account is None:
            return None
        profile, salt, digest = account
        return profile if hmac.compare_digest(digest, _hash(password, salt)) else None


def main():
    auth = AuthenticationService()
    user = auth.register_user("John Doe", "john@example.com", "password123")
    print(f"User registered: {user.name}")

    logged_in = auth.login("john@example.com", "password123")
    print(f"Login successful: {logged_in.name}" if logged_in else "Login failed")
    print(f"Wrong password: {'Login failed' if auth.login('john@example.com', 'nope') is None else 'unexpected'}")


if __name__ == "__main__":
    main()
