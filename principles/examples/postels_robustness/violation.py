"""
Postel's Robustness - violation

The service is strict about trivia on the way in: it demands a caller
supplied id, a lowercase email, an integer age between 18 and 100 and a
preferences dict. On the way out it is sloppy: create returns a bare id,
the profile shape depends on whether preferences are empty and update
returns None for an unknown user but raises for a bad email.
"""

import re
from datetime import date

EMAIL_RE = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


class UserProfileService:
    def __init__(self):
        self.users = {}

    def create_user(self, user_data):
        if not user_data:
            raise ValueError("User data is required")
        if not user_data.get("id"):
            raise ValueError("User ID is required")
        if not isinstance(user_data.get("name"), str) or not user_data["name"].strip():
            raise ValueError("Name must be a non-empty string")
        email = user_data.get("email")
        if not isinstance(email, str) or email != email.lower():
            raise ValueError("Email must be a lowercase string")
        if not EMAIL_RE.match(email):
            raise ValueError("Invalid email format")
        age = user_data.get("age")
        if not isinstance(age, int) or not 18 <= age <= 100:
            raise ValueError("Age must be an integer between 18 and 100")
        if not isinstance(user_data.get("preferences"), dict):
            raise ValueError("Preferences must be an object")
        self.users[user_data["id"]] = dict(user_data)
        return user_data["id"]

    def get_user_profile(self, user_id):
        if not user_id:
            raise ValueError("User ID is required")
        user = self.users.get(user_id)
        if user is None:
            raise KeyError("User not found")
        if user["preferences"]:
            return {"userData": {"identifier": user["id"],
                                 "personalInfo": {"fullName": user["name"], "contactEmail": user["email"],
                                                  "yearOfBirth": date(2024, 1, 1).year - user["age"]},
                                 "settings": user["preferences"]}}
        return {"id": user["id"], "basic_info": f"{user['name']} ({user['email']})", "age_data": user["age"]}

    def update_user_email(self, user_id, new_email):
        user = self.users.get(user_id)
        if user is None:
            return None
        if new_email != new_email.lower() or not EMAIL_RE.match(new_email):
            raise ValueError("Email must be a lowercase, valid address")
        user["email"] = new_email
        return True


def attempt(label, action):
    try:
        print(f"{label}: {action()}")
    except (ValueError, KeyError) as e:
        print(f"{label}: rejected ({e})")


def main():
    service = UserProfileService()
    attempt("Valid data", lambda: service.create_user({
        "id": "user123", "name": "John Doe", "email": "john.doe@example.com",
        "age": 32, "preferences": {"theme": "dark"}}))
    attempt("Uppercase email", lambda: service.create_user({
        "id": "user456", "name": "Jane Smith", "email": "JANE.SMITH@EXAMPLE.COM",
        "age": 28, "preferences": {}}))
    attempt("Age as text", lambda: service.create_user({
        "id": "user789", "name": "Bob", "email": "bob@example.com", "age": "45", "preferences": {}}))
    attempt("No id", lambda: service.create_user({
        "name": "Ann", "email": "ann@example.com", "age": 40, "preferences": {}}))
    service.create_user({"id": "user000", "name": "Eve", "email": "eve@example.com", "age": 50, "preferences": {}})

    print("\nTwo profiles, two shapes:")
    attempt("user123", lambda: service.get_user_profile("user123"))
    attempt("user000", lambda: service.get_user_profile("user000"))

    print("\nUpdating emails:")
    attempt("Unknown user", lambda: service.update_user_email("nobody", "x@example.com"))
    attempt("Mixed case", lambda: service.update_user_email("user123", "John@Example.com"))


if __name__ == "__main__":
    main()
