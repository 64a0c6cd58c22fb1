"""
Least Common Mechanism - violation

One User class serves admins, regular users and guests, switching on a type
string in every method, and all of them share one module-level session
table. Guest tokens are sequential numbers in the same table admins use, so
a guest who guesses the next token is treated as the admin.
"""

SESSIONS = {}


def open_session(username):
    token = str(len(SESSIONS) + 1)
    SESSIONS[token] = username
    return token


class User:
    def __init__(self, username, user_type):
        self.username = username
        self.user_type = user_type
        self.permissions = {
            "admin": ["read", "write", "delete", "manage-users"],
            "regular": ["read", "write"],
            "guest": ["read"],
        }[user_type]

    def authenticate(self, credentials=None):
        credentials = credentials or {}
        if self.user_type == "admin":
            ok = credentials.get("password") == "admin-password" and credentials.get("two_factor_code") == "123456"
        elif self.user_type == "regular":
            ok = credentials.get("password") == "user-password"
        elif self.user_type == "guest":
            ok = True
        else:
            ok = False
        if ok:
            self.token = open_session(self.username)
            print(f"{self.user_type} {self.username} authenticated")
        return ok

    def perform_action(self, action, token, **data):
        acting_as = SESSIONS.get(token)
        if action == "manage-users" and acting_as == "admin1":
            print(f"{acting_as} is managing users (requested by {self.username})")
            return True
        if action == "update-profile" and self.user_type == "regular":
            print(f"User {self.username} is updating their profile: {data}")
            return True
        if action == "browse-content":
            print(f"{self.username} is browsing content")
            return True
        print(f"User {self.username} does not have permission for action: {action}")
        return False


def main():
    SESSIONS.clear()
    admin = User("admin1", "admin")
    regular = User("user1", "regular")
    guest = User("guest", "guest")

    admin.authenticate({"password": "admin-password", "two_factor_code": "123456"})
    regular.authenticate({"password": "user-password"})
    guest.authenticate()

    admin.perform_action("manage-users", admin.token)
    regular.perform_action("update-profile", regular.token, name="Updated Name")
    guest.perform_action("browse-content", guest.token)

    print("\nThe guest tries token '1' from the shared table:")
    guest.perform_action("manage-users", "1")


if __name__ == "__main__":
    main()
