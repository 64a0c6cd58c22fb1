"""
Separation of Concerns - correct implementation

User is plain data. UserRepository only stores and finds. UserService
owns the business rules and raises UserError when they fail. UserView is
the only thing that prints. Swapping the storage or the output format
touches exactly one class.
"""

from dataclasses import dataclass
from typing import Dict, List


class UserError(ValueError):
    pass


@dataclass(frozen=True)
class User:
    id: int
    username: str
    email: str
    age: int


class UserRepository:
    def __init__(self):
        self._users: Dict[int, User] = {}

    def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    def find_by_id(self, user_id: int):
        return self._users.get(user_id)

    def find_all(self) -> List[User]:
        return list(self._users.values())

    def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create_user(self, user_id: int, username: str, email: str, age: int) -> User:
        self.validate(username, email, age)
        return self.repository.save(User(user_id, username, email, age))

    @staticmethod
    def validate(username: str, email: str, age: int) -> None:
        if not username or len(username) < 3:
            raise UserError("Username must be at least 3 characters long")
        if not email or "@" not in email:
            raise UserError("Email must be valid")
        if not age or age < 18:
            raise UserError("User must be at least 18 years old")

    def get_user(self, user_id: int) -> User:
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise UserError(f"User with ID {user_id} not found")
        return user

    def all_users(self) -> List[User]:
        return self.repository.find_all()


class UserView:
    def show_user(self, user: User) -> None:
        print("User information:")
        print(f"  ID: {user.id}\n  Username: {user.username}\n  Email: {user.email}\n  Age: {user.age}")

    def show_users(self, users: List[User]) -> None:
        print("User list:")
        for user in users:
            print(f"- {user.id}: {user.username} ({user.email})")

    def show_error(self, message: str) -> None:
        print(f"Error: {message}")


def main():
    service = UserService(UserRepository())
    view = UserView()

    service.create_user(1, "johndoe", "john@example.com", 30)
    service.create_user(2, "janedoe", "jane@example.com", 25)
    view.show_user(service.get_user(1))
    view.show_users(service.all_users())

    for attempt in (lambda: service.create_user(3, "kid", "kid@example.com", 12),
                    lambda: service.get_user(99)):
        try:
            attempt()
        except UserError as e:
            view.show_error(str(e))


if __name__ == "__main__":
    main()
