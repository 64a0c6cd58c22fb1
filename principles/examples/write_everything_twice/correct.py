"""
Write Everything Twice - correct implementation

Registration and profile updates both check usernames and emails, and
the checks look alike today. They are written twice on purpose: only
registration bans disposable email domains and requires a strong
password, only updates check the bio. Each validator can change for its
own reasons; if a third caller shows up needing the exact same rules,
that is the time to extract them.
"""

import re
from dataclasses import dataclass, field
from itertools import count
from typing import Dict, Optional

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_RE = re.compile(r"^\w{5,20}$", re.ASCII)


class ValidationError(ValueError):
    pass


class RegistrationValidator:
    DISPOSABLE_DOMAINS = {"tempmail.com", "throwaway.com", "fakeemail.com"}

    def validate_username(self, username: str) -> None:
        if not username:
            raise ValidationError("Username is required")
        if not USERNAME_RE.match(username):
            raise ValidationError("Username must be 5-20 letters, numbers or underscores")

    def validate_email(self, email: str) -> None:
        if not email:
            raise ValidationError("Email is required")
        if not EMAIL_RE.match(email):
            raise ValidationError("Invalid email format")
        if email.rsplit("@", 1)[1].lower() in self.DISPOSABLE_DOMAINS:
            raise ValidationError("Disposable email addresses are not allowed for registration")

    def validate_password(self, password: str) -> None:
        if not password or len(password) < 8:
            raise ValidationError("Password must be at least 8 characters long")
        for pattern, what in ((r"[A-Z]", "an uppercase letter"), (r"[a-z]", "a lowercase letter"),
                              (r"[0-9]", "a number"), (r"[^A-Za-z0-9]", "a special character")):
            if not re.search(pattern, password):
                raise ValidationError(f"Password must contain {what}")

    def validate(self, data: Dict[str, str]) -> None:
        self.validate_username(data.get("username", ""))
        self.validate_email(data.get("email", ""))
        self.validate_password(data.get("password", ""))


class ProfileUpdateValidator:
    MAX_BIO = 500
    BLOCKED_WORDS = ("badword1", "badword2", "badword3")

    def validate_username(self, username: str) -> None:
        if not username:
            raise ValidationError("Username is required")
        if not USERNAME_RE.match(username):
            raise ValidationError("Username must be 5-20 letters, numbers or underscores")

    def validate_email(self, email: str) -> None:
        if not email:
            raise ValidationError("Email is required")
        if not EMAIL_RE.match(email):
            raise ValidationError("Invalid email format")

    def validate_bio(self, bio: Optional[str]) -> None:
        if not bio:
            return
        if len(bio) > self.MAX_BIO:
            raise ValidationError(f"Bio cannot exceed {self.MAX_BIO} characters")
        if any(word in bio.lower() for word in self.BLOCKED_WORDS):
            raise ValidationError("Bio contains inappropriate content")

    def validate(self, data: Dict[str, str]) -> None:
        self.validate_username(data.get("username", ""))
        self.validate_email(data.get("email", ""))
        self.validate_bio(data.get("bio"))


@dataclass
class UserService:
    users: Dict[int, dict] = field(default_factory=dict)
    registration: RegistrationValidator = field(default_factory=RegistrationValidator)
    profile_update: ProfileUpdateValidator = field(default_factory=ProfileUpdateValidator)
    _ids: count = field(default_factory=lambda: count(1), repr=False)

    def register(self, data: Dict[str, str]) -> dict:
        try:
            self.registration.validate(data)
        except ValidationError as e:
            return {"success": False, "error": str(e)}
        user_id = next(self._ids)
        self.users[user_id] = {"username": data["username"], "email": data["email"]}
        return {"success": True, "user_id": user_id}

    def update_profile(self, user_id: int, data: Dict[str, str]) -> dict:
        if user_id not in self.users:
            return {"success": False, "error": "User not found"}
        try:
            self.profile_update.validate(data)
        except ValidationError as e:
            return {"success": False, "error": str(e)}
        self.users[user_id].update({k: v for k, v in data.items() if k in ("username", "email", "bio")})
        return {"success": True}


def main():
    service = UserService()
    registered = service.register({"username": "johndoe123", "email": "john@example.com",
                                   "password": "P@ssw0rd123"})
    print(f"Register: {registered}")
    user_id = registered["user_id"]

    print(f"Update: {service.update_profile(user_id, {'username': 'johndoe_updated', 'email': 'john_new@example.com', 'bio': 'Developer'})}")
    print(f"Bad username: {service.update_profile(user_id, {'username': 'j@', 'email': 'john_new@example.com'})}")
    print(f"Register with disposable email: {service.register({'username': 'tempuser', 'email': 'user@tempmail.com', 'password': 'Temp@123456'})}")
    print(f"Update to disposable email: {service.update_profile(user_id, {'username': 'johndoe_updated', 'email': 'john@tempmail.com'})}")
    print("Registration and updates disagree about disposable domains, as the business wants.")


if __name__ == "__main__":
    main()
