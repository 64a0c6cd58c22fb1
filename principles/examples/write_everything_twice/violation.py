"""
Write Everything Twice - violation

After seeing two similar validators once, someone merged them into a
single "universal" validator steered by a context string and option
flags. Registration's ban on disposable domains is now an option that
the shared email rule reads, and when the ban was tightened for
registration it quietly started rejecting profile updates too. Every new
caller adds another flag to a function everyone depends on.
"""

import re

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UniversalValidator:
    DISPOSABLE_DOMAINS = {"tempmail.com", "throwaway.com", "fakeemail.com"}

    def validate(self, data, context, check_password=None, check_bio=None,
                 block_disposable=True, max_bio=500):
        check_password = context == "registration" if check_password is None else check_password
        check_bio = context == "profile" if check_bio is None else check_bio

        username = data.get("username") or ""
        if not re.match(r"^\w{5,20}$", username, re.ASCII):
            raise ValueError("Username must be 5-20 letters, numbers or underscores")

        email = data.get("email") or ""
        if not EMAIL_RE.match(email):
            raise ValueError("Invalid email format")
        # was "context == 'registration' and ..." until the default flipped
        if block_disposable and email.rsplit("@", 1)[1] in self.DISPOSABLE_DOMAINS:
            raise ValueError("Disposable email addresses are not allowed")

        if check_password:
            password = data.get("password") or ""
            if len(password) < 8 or not re.search(r"[^A-Za-z0-9]", password):
                raise ValueError("Password too weak")

        if check_bio and len(data.get("bio") or "") > max_bio:
            raise ValueError("Bio too long")


def attempt(label, data, context, **options):
    try:
        UniversalValidator().validate(data, context, **options)
        print(f"{label}: ok")
    except ValueError as e:
        print(f"{label}: rejected ({e})")


def main():
    attempt("Register", {"username": "johndoe123", "email": "john@example.com", "password": "P@ssw0rd123"},
            "registration")
    attempt("Register with disposable email", {"username": "tempuser", "email": "user@tempmail.com",
                                               "password": "Temp@123456"}, "registration")
    attempt("Existing user updates to a disposable email",
            {"username": "johndoe_updated", "email": "john@tempmail.com"}, "profile")
    attempt("Same update with the flag someone has to remember",
            {"username": "johndoe_updated", "email": "john@tempmail.com"}, "profile", block_disposable=False)


if __name__ == "__main__":
    main()
