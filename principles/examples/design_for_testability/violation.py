"""
Design for Testability - violation

AuthService owns a hard-coded user table and secret, reads the real clock,
prints instead of logging through something replaceable, and mixes side
effects (stats, notifications, audit) into its queries. Testing expiry or
a deactivated account means waiting an hour or editing its internals.
"""

import json
import time
from datetime import datetime


class AuthService:
    def __init__(self):
        self.database = {
            "users": [
                {"id": 1, "username": "john_doe", "email": "john@example.com",
                 "password": "password123", "roles": ["user"], "active": True},
                {"id": 2, "username": "admin", "email": "admin@example.com",
                 "password": "admin123", "roles": ["user", "admin"], "active": True},
            ]
        }
        self.secret_key = "hard-coded-secret-key"

    def login(self, username, password):
        if not username or not password:
            print("[WARN] Login attempt with missing credentials")
            return {"success": False, "message": "Username and password are required"}

        user = next((u for u in self.database["users"] if u["username"] == username), None)
        if not user or user["password"] != password:
            print(f"[WARN] Failed login attempt for user: {username}")
            return {"success": False, "message": "Invalid username or password"}

        token = json.dumps({"userId": user["id"], "username": user["username"],
                            "roles": user["roles"], "exp": time.time() + 3600})
        print(f"[INFO] Successful login for user: {username}")
        user["lastLogin"] = datetime.now()  # hidden write
        return {"success": True, "user": {"id": user["id"], "username": user["username"]}, "token": token}

    def validate_token(self, token):
        try:
            payload = json.loads(token)
        except ValueError as e:
            print(f"[ERROR] Token validation error: {e}")
            return {"valid": False}
        if payload["exp"] < time.time():
            print("[WARN] Expired token validation attempt")
            return {"valid": False}
        user = next((u for u in self.database["users"] if u["id"] == payload["userId"]), None)
        if not user or not user["active"]:
            print(f"[WARN] Token validation for inactive/deleted user: {payload['userId']}")
            return {"valid": False}
        print(f"[INFO] Token validated for user: {user['username']}")
        user["lastActivity"] = datetime.now()
        return {"valid": True, "userId": user["id"], "username": user["username"]}

    def get_user_and_update_stats(self, username):
        user = next((u for u in self.database["users"] if u["username"] == username), None)
        if user:
            user["accessCount"] = user.get("accessCount", 0) + 1
            user["lastAccess"] = datetime.now()
            print(f"[INFO] Notification sent to {user['email']}")
            return {"id": user["id"], "username": user["username"], "accessCount": user["accessCount"]}
        return None

    def logout(self, user_id):
        user = next((u for u in self.database["users"] if u["id"] == user_id), None)
        if user:
            user["lastLogout"] = datetime.now()
            user["isLoggedIn"] = False
            print(f"[INFO] User {user['username']} logged out")
            print(f"[INFO] Session data cleared for {user['username']}")
            print(f"[INFO] Audit log updated for {user['username']}")
            return True
        return False


def main():
    auth = AuthService()

    print("Attempting login with valid credentials:")
    result = auth.login("john_doe", "password123")
    print({k: v for k, v in result.items() if k != "token"})

    print("\nValidating token:")
    print(auth.validate_token(result["token"]))

    print("\nGetting user info and updating stats:")
    print(auth.get_user_and_update_stats("john_doe"))
    print("Asking again gives a different answer:", auth.get_user_and_update_stats("john_doe"))

    print("\nLogging out:")
    print(f"Logout successful: {auth.logout(result['user']['id'])}")

    print("\nAttempting login with invalid credentials:")
    print(auth.login("john_doe", "wrong_password"))

    print("\nDifficulties in testing:")
    print("1. Token expiry can only be tested by waiting an hour (time.time() is called directly)")
    print("2. The user table cannot be replaced, only mutated in place")
    print("3. Output goes straight to print, nothing can capture it per test")
    print("4. Queries write timestamps, so repeated calls are not comparable")


if __name__ == "__main__":
    main()
