"""
YAGNI - violation

The requirement was register and log in. The profile also carries a
picture URL, preferences, social links, an address, a phone number,
verification state and a login history. The service adds sessions,
email verification, password resets and two-factor setup. None of it is
used by the demo, all of it has to be read, tested and kept working, and
the login that was actually needed is buried among it.
"""

import hashlib
import random
from datetime import datetime


class UserProfile:
    def __init__(self, name, email):
        self.name = name
        self.email = email
        self.profile_picture = None
        self.preferences = {"theme": "light", "notifications": True, "language": "en", "timezone": "UTC"}
        self.social_links = {}
        self.address = None
        self.phone_number = None
        self.is_verified = False
        self.login_history = []
        self.created_at = datetime(2024, 1, 1)

    def update_profile_picture(self, url):
        self.profile_picture = url

    def set_preference(self, key, value):
        if key not in self.preferences:
            raise KeyError(f"Unknown preference: {key}")
        self.preferences[key] = value

    def add_social_media_link(self, platform, url):
        self.social_links[platform] = url

    def update_address(self, street, city, state, zip_code, country):
        self.address = {"street": street, "city": city, "state": state, "zip": zip_code, "country": country}

    def update_phone_number(self, phone_number):
        self.phone_number = phone_number

    def record_login(self, when):
        self.login_history.append(when)

    def account_age_days(self, today):
        return (today - self.created_at).days


class AuthenticationService:
    def __init__(self, rng=None):
        self.users = {}
        self.sessions = {}
        self.verification_codes = {}
        self.reset_tokens = {}
        self.two_factor = {}
        self.rng = rng or random.Random(0)

    def hash_password(self, password):
        return hashlib.sha256(password.encode()).hexdigest()

    def register_user(self, name, email, password):
        if not name or not email or not password:
            raise ValueError("All fields are required")
        profile = UserProfile(name, email)
        self.users[email] = {"profile": profile, "password": self.hash_password(password),
                             "failed_attempts": 0, "locked": False}
        self.send_verification_email(email)
        return profile

    def login(self, email, password):
        account = self.users.get(email)
        if account is None or account["locked"]:
            return None
        if account["password"] != self.hash_password(password):
            account["failed_attempts"] += 1
            account["locked"] = account["failed_attempts"] >= 5
            return None
        account["profile"].record_login(datetime(2024, 1, 2))
        session_id = f"{self.rng.getrandbits(64):016x}"
        self.sessions[session_id] = email
        return account["profile"]

    def send_verification_email(self, email):
        self.verification_codes[email] = f"{self.rng.randint(0, 999999):06d}"

    def verify_email(self, email, code):
        if self.verification_codes.get(email) == code:
            self.users[email]["profile"].is_verified = True
            return True
        return False

    def request_password_reset(self, email):
        self.reset_tokens[email] = f"{self.rng.getrandbits(32):08x}"

    def reset_password(self, email, token, new_password):
        if self.reset_tokens.pop(email, None) != token:
            return False
        self.users[email]["password"] = self.hash_password(new_password)
        return True

    def enable_two_factor_auth(self, email):
        self.two_factor[email] = f"{self.rng.getrandbits(80):020x}"
        return self.two_factor[email]

    def logout(self, session_id):
        return self.sessions.pop(session_id, None) is not None


def main():
    auth = AuthenticationService()
    user = auth.register_user("John Doe", "john@example.com", "password123")
    print(f"User registered: {user.name}")
    logged_in = auth.login("john@example.com", "password123")
    print(f"Login successful: {logged_in.name}" if logged_in else "Login failed")

    unused = [name for name in vars(AuthenticationService) if not name.startswith("_")
              and name not in ("register_user", "login", "hash_password", "send_verification_email")]
    print(f"Service methods never called by the feature: {len(unused)}")


if __name__ == "__main__":
    main()
