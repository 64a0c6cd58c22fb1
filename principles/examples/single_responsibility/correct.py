"""
Single Responsibility - correct implementation

User holds data. UserValidator knows the rules. UserRepository stores
users and refuses invalid ones. UserReport formats them. A new email rule,
a new database or a new report layout each change one class.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str


class UserValidator:
    @staticmethod
    def valid_email(email: str) -> bool:
        return bool(EMAIL_RE.match(email or ""))

    @staticmethod
    def valid_name(name: str) -> bool:
        return bool(name and name.strip())

    @classmethod
    def errors(cls, user: User) -> List[str]:
        problems = []
        if not cls.valid_name(user.name):
            problems.append("name is required")
        if not cls.valid_email(user.email):
            problems.append("email is invalid")
        return problems


class UserRepository:
    def __init__(self, validator: UserValidator = UserValidator()):
        self.validator = validator
        self._users: Dict[int, User] = {}

    def save(self, user: User) -> User:
        problems = self.validator.errors(user)
        if problems:
            raise ValueError(f"Cannot save invalid user: {', '.join(problems)}")
        self._users[user.id] = user
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)


class UserReport:
    def render(self, user: User) -> str:
        return f"User report\n  ID: {user.id}\n  Name: {user.name}\n  Email: {user.email}"


def main():
    repository = UserRepository()
    john = repository.save(User(1, "John Doe", "john.doe@example.com"))
    print(f"User {john.name} saved")
    print(UserReport().render(repository.find_by_id(1)))

    try:
        repository.save(User(2, " ", "not-an-email"))
    except ValueError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
