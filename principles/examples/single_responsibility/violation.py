"""
Single Responsibility - violation

User validates itself, keeps a list of users inside each instance, saves
itself and renders its own report. Every one of those concerns is a
reason to edit this class, and because storage is per instance,
find_by_id on another user object cannot see anyone.
"""

import re


class User:
    def __init__(self, id, name, email):
        self.id = id
        self.name = name
        self.email = email
        self.users = []

    def validate_email(self):
        return bool(re.match(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", self.email))

    def validate_name(self):
        return bool(self.name and self.name.strip())

    def is_valid(self):
        return self.validate_name() and self.validate_email()

    def save(self):
        if not self.is_valid():
            raise ValueError("Cannot save invalid user")
        self.users.append(self)
        print(f"User {self.name} saved successfully")
        return True

    def find_by_id(self, user_id):
        return next((u for u in self.users if u.id == user_id), None)

    def generate_user_report(self):
        return (f"User report\n  ID: {self.id}\n  Name: {self.name}\n"
                f"  Email: {self.email}\n  Valid: {self.is_valid()}")


def main():
    john = User(1, "John Doe", "john.doe@example.com")
    if john.is_valid():
        john.save()
        print(john.generate_user_report())

    jane = User(2, "Jane Doe", "jane@example.com")
    print(f"Jane looks up John: {jane.find_by_id(1)}")


if __name__ == "__main__":
    main()
