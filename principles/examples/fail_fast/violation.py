"""
Fail Fast - violation

The user object is built and enriched before anything is checked. Enrichment
swallows its own errors, validation only collects messages into shared
state, and the caller gets None and has to go back to the registration
object to find out what went wrong.
"""

import random
import re
import string
from datetime import datetime


class UserRegistration:
    def __init__(self):
        self.validation_errors = []
        self.user_database = []

    def register_user(self, user_data):
        self.validation_errors = []
        user = {"id": self.generate_user_id(), **user_data, "created_at": datetime.now()}
        return user if self.process_user(user) else None

    def process_user(self, user):
        self.enrich_user_data(user)
        if self.validate_user_data(user):
            self.user_database.append(user)
            print(f"User saved to database: {user['id']}")
            return True
        print(f"Validation errors: {self.validation_errors}")
        return False

    def enrich_user_data(self, user):
        try:
            user["display_name"] = user["username"].capitalize() if user.get("username") else "Anonymous"
            user["email_domain"] = user["email"].split("@")[1]
            user["password_strength"] = self.password_strength(user.get("password", ""))
        except (KeyError, IndexError) as e:
            print(f"Error during data enrichment: {e!r}")

    def validate_user_data(self, user):
        valid = True
        if not user.get("username"):
            self.validation_errors.append("Username is required")
            valid = False
        else:
            if not 3 <= len(user["username"]) <= 20:
                self.validation_errors.append("Username must be between 3 and 20 characters")
                valid = False
            if not re.fullmatch(r"[A-Za-z0-9_]+", user["username"]):
                self.validation_errors.append("Username can only contain letters, numbers, and underscores")
                valid = False
        if not user.get("email"):
            self.validation_errors.append("Email is required")
            valid = False
        elif not re.fullmatch(r"[^\s@]+@[^\s@]+\.[^\s@]+", user["email"]):
            self.validation_errors.append("Invalid email format")
            valid = False
        password = user.get("password", "")
        if len(password) < 8:
            self.validation_errors.append("Password must be at least 8 characters long")
            valid = False
        if not re.search(r"[A-Z]", password):
            self.validation_errors.append("Password must contain at least one uppercase letter")
            valid = False
        if not re.search(r"[0-9]", password):
            self.validation_errors.append("Password must contain at least one number")
            valid = False
        return valid

    def password_strength(self, password):
        if not password:
            return "none"
        score = min(len(password), 10)
        score += 2 if re.search(r"[A-Z]", password) else 0
        score += 2 if re.search(r"[a-z]", password) else 0
        score += 2 if re.search(r"[0-9]", password) else 0
        score += 3 if re.search(r"[^A-Za-z0-9]", password) else 0
        return "strong" if score >= 15 else "medium" if score >= 10 else "weak"

    def generate_user_id(self):
        return "user_" + "".join(random.choices(string.ascii_lowercase + string.digits, k=9))


def main():
    registration = UserRegistration()

    invalid = registration.register_user({"username": "jo", "email": "not-an-email", "password": "weak"})
    if invalid is None:
        print(f"Registration failed with errors: {registration.validation_errors}")

    valid = registration.register_user(
        {"username": "john_doe", "email": "john@example.com", "password": "StrongPass123"}
    )
    if valid is not None:
        print(f"User registered successfully: {valid['display_name']} ({valid['password_strength']})")


if __name__ == "__main__":
    main()
