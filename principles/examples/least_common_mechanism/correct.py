"""
Least Common Mechanism - correct implementation

Each kind of user has its own class, its own credential check and its own
session store. A bug or a leak in the guest path cannot reach admin
sessions, and admin-only actions only exist on AdminUser.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple


class SessionStore:
    """One per user kind; nothing is shared between kinds."""

    def __init__(self, kind: str):
        self.kind = kind
        self._sessions: Dict[str, str] = {}

    def open(self, username: str) -> str:
        token = f"{self.kind}-{len(self._sessions) + 1:03d}"
        self._sessions[token] = username
        return token

    def lookup(self, token: str) -> Optional[str]:
        return self._sessions.get(token)


class User(ABC):
    role = ""
    permissions: Tuple[str, ...] = ()

    def __init__(self, username: str, sessions: SessionStore):
        self.username = username
        self.sessions = sessions
        self.token: Optional[str] = None

    @abstractmethod
    def _verify(self, credentials: dict) -> bool: ...

    def authenticate(self, credentials: Optional[dict] = None) -> bool:
        if not self._verify(credentials or {}):
            print(f"{self.role.title()} {self.username} authentication failed")
            return False
        self.token = self.sessions.open(self.username)
        return True


class AdminUser(User):
    role = "admin"
    permissions = ("read", "write", "delete", "manage-users")

    def _verify(self, credentials):
        ok = credentials.get("password") == "admin-password" and credentials.get("two_factor_code") == "123456"
        if ok:
            print(f"Admin {self.username} authenticated with 2FA")
        return ok

    def manage_users(self) -> None:
        print(f"Admin {self.username} is managing users")


class RegularUser(User):
    role = "user"
    permissions = ("read", "write")

    def _verify(self, credentials):
        ok = credentials.get("password") == "user-password"
        if ok:
            print(f"User {self.username} authenticated with password")
        return ok

    def update_profile(self, **profile) -> None:
        print(f"User {self.username} is updating their profile: {profile}")


class GuestUser(User):
    role = "guest"
    permissions = ("read",)

    def __init__(self, session_id: str, sessions: SessionStore):
        super().__init__(f"guest-{session_id}", sessions)
        self.session_id = session_id

    def _verify(self, credentials):
        print(f"Guest {self.session_id} session validated")
        return True

    def browse_content(self) -> None:
        print(f"Guest {self.session_id} is browsing content")


class UserFactory:
    def __init__(self):
        self.stores = {kind: SessionStore(kind) for kind in ("admin", "user", "guest")}

    def create(self, kind: str, identifier: str) -> User:
        classes = {"admin": AdminUser, "user": RegularUser, "guest": GuestUser}
        if kind not in classes:
            raise ValueError(f"Unknown user type: {kind}")
        return classes[kind](identifier, self.stores[kind])


def main():
    factory = UserFactory()
    admin = factory.create("admin", "admin1")
    regular = factory.create("user", "user1")
    guest = factory.create("guest", "12345")

    results = {
        "Admin": admin.authenticate({"password": "admin-password", "two_factor_code": "123456"}),
        "Regular user": regular.authenticate({"password": "user-password"}),
        "Guest": guest.authenticate(),
    }
    print("\nAuthentication results:")
    for label, ok in results.items():
        print(f"{label} authenticated: {ok}")

    admin.manage_users()
    regular.update_profile(name="Updated Name")
    guest.browse_content()

    print("\nA guest token cannot be used against the admin session store:")
    print(f"admin store lookup of {guest.token!r}: {factory.stores['admin'].lookup(guest.token)}")
    print(f"Guest has manage_users: {hasattr(guest, 'manage_users')}")

    print("\nUser information:")
    for user in (admin, regular, guest):
        print(f"Username: {user.username} | Role: {user.role} | Permissions: {', '.join(user.permissions)}")


if __name__ == "__main__":
    main()
