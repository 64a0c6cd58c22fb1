"""
Design for Testability - correct implementation

AuthenticationService receives its user repository, token generator and
logger; the token generator receives its clock. The demo finishes by doing
what a unit test would: swapping in an in-memory database, a frozen clock
and a recording logger to check expiry and logging without any real time
passing.
"""

import json
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
import time

TOKEN_LIFETIME = 3600


@dataclass
class UserRecord:
    id: int
    username: str
    email: str
    password: str
    roles: List[str]
    active: bool = True


class InMemoryDatabase:
    def __init__(self, users: List[UserRecord]):
        self.users = {u.id: u for u in users}

    def find_user(self, *, id: Optional[int] = None, username: Optional[str] = None) -> Optional[UserRecord]:
        for user in self.users.values():
            if (id is not None and user.id == id) or (username is not None and user.username == username):
                return user
        return None


class UserRepository:
    def __init__(self, database):
        self.database = database

    def find_by_username(self, username: str) -> Optional[UserRecord]:
        return self.database.find_user(username=username)

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        return self.database.find_user(id=user_id)

    def verify_password(self, user_id: int, password: str) -> bool:
        user = self.find_by_id(user_id)
        return user is not None and user.password == password


class TokenGenerator:
    def __init__(self, secret_key: str, clock: Callable[[], float] = time.time, lifetime: int = TOKEN_LIFETIME):
        self.secret_key = secret_key
        self.clock = clock
        self.lifetime = lifetime

    def generate(self, payload: dict) -> str:
        return json.dumps(dict(payload, exp=self.clock() + self.lifetime))

    def verify(self, token: str) -> Optional[dict]:
        try:
            payload = json.loads(token)
        except (TypeError, ValueError):
            return None
        if payload.get("exp", 0) < self.clock():
            return None
        return payload


class ConsoleLogger:
    def info(self, message):
        print(f"[INFO] {message}")

    def warning(self, message):
        print(f"[WARN] {message}")


@dataclass
class RecordingLogger:
    records: List[tuple] = field(default_factory=list)

    def info(self, message):
        self.records.append(("info", message))

    def warning(self, message):
        self.records.append(("warning", message))


class AuthenticationService:
    def __init__(self, users: UserRepository, tokens: TokenGenerator, logger):
        self.users = users
        self.tokens = tokens
        self.logger = logger

    def login(self, username: str, password: str) -> Dict:
        if not username or not password:
            self.logger.warning("Login attempt with missing credentials")
            return {"success": False, "message": "Username and password are required"}

        user = self.users.find_by_username(username)
        if user is None or not self.users.verify_password(user.id, password):
            self.logger.warning(f"Failed login attempt for user: {username}")
            return {"success": False, "message": "Invalid username or password"}

        token = self.tokens.generate({"userId": user.id, "username": user.username, "roles": user.roles})
        self.logger.info(f"Successful login for user: {username}")
        return {
            "success": True,
            "user": {"id": user.id, "username": user.username, "email": user.email, "roles": user.roles},
            "token": token,
        }

    def validate_token(self, token: str) -> Dict:
        payload = self.tokens.verify(token)
        if payload is None:
            self.logger.warning("Invalid or expired token")
            return {"valid": False}
        user = self.users.find_by_id(payload["userId"])
        if user is None or not user.active:
            self.logger.warning(f"Token validation for inactive/deleted user: {payload['userId']}")
            return {"valid": False}
        self.logger.info(f"Token validated for user: {user.username}")
        return {"valid": True, "userId": user.id, "username": user.username, "roles": user.roles}


def sample_users() -> List[UserRecord]:
    return [
        UserRecord(1, "john_doe", "john@example.com", "password123", ["user"]),
        UserRecord(2, "admin", "admin@example.com", "admin123", ["user", "admin"]),
    ]


class FrozenClock:
    def __init__(self, now: float):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def main():
    auth = AuthenticationService(
        UserRepository(InMemoryDatabase(sample_users())),
        TokenGenerator("secret-key"),
        ConsoleLogger(),
    )

    print("Attempting login with valid credentials:")
    result = auth.login("john_doe", "password123")
    print({k: v for k, v in result.items() if k != "token"})

    print("\nValidating token:")
    print(auth.validate_token(result["token"]))

    print("\nAttempting login with invalid credentials:")
    print(auth.login("john_doe", "wrong_password"))

    print("\nThe same service under test conditions:")
    clock = FrozenClock(1_000_000.0)
    db = InMemoryDatabase(sample_users())
    log = RecordingLogger()
    test_auth = AuthenticationService(UserRepository(db), TokenGenerator("test", clock=clock), log)

    token = test_auth.login("admin", "admin123")["token"]
    clock.advance(TOKEN_LIFETIME + 1)
    print("Token valid after an hour and a second:", test_auth.validate_token(token)["valid"])

    clock.now = 1_000_000.0
    db.users[2].active = False
    print("Token valid for a deactivated user:", test_auth.validate_token(token)["valid"])
    print("Recorded log calls:", log.records)


if __name__ == "__main__":
    main()
