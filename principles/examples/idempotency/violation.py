"""
Idempotency - violation

Every call is treated as a new event. Re-creating a profile gives it a new
profile id and timestamp, preference updates bump a counter, status is
toggled instead of set, activities are appended on every delivery and a
retried charge bills the customer again.
"""

from datetime import datetime
import json


class UserProfileManager:
    def __init__(self):
        self.profiles = {}
        self.operation_counter = 0

    def create_user_profile(self, user_id, **data):
        self.operation_counter += 1
        previous = self.profiles.get(user_id, {})
        profile = {
            "user_id": user_id,
            "profile_id": f"profile_{user_id}_{self.operation_counter}",
            **data,
            "created_at": datetime.now().isoformat(),
            "operation_count": previous.get("operation_count", 0) + 1,
        }
        self.profiles[user_id] = profile
        print(f"Created/Updated user profile for {user_id} (Operation #{self.operation_counter})")
        return profile

    def update_user_preferences(self, user_id, preferences):
        self.operation_counter += 1
        profile = self.profiles.get(user_id) or self.create_user_profile(user_id)
        current = profile.setdefault("preferences", {})
        current.update(preferences)
        current["update_count"] = current.get("update_count", 0) + 1
        print(f"Updated preferences for user {user_id} (Update #{current['update_count']})")
        return profile

    def toggle_user_account_status(self, user_id):
        self.operation_counter += 1
        profile = self.profiles.get(user_id) or self.create_user_profile(user_id)
        profile["is_active"] = not profile.get("is_active", False)
        state = "active" if profile["is_active"] else "inactive"
        profile.setdefault("status_changes", []).append(state)
        print(f"Toggled user {user_id} status to {state} (Operation #{self.operation_counter})")
        return profile

    def add_user_activity(self, user_id, activity):
        self.operation_counter += 1
        profile = self.profiles.get(user_id) or self.create_user_profile(user_id)
        activities = profile.setdefault("activities", [])
        activities.append({**activity, "activity_id": f"activity_{self.operation_counter}"})
        print(f"Added activity for user {user_id} (Activity #{len(activities)})")
        return profile


class PaymentProcessor:
    def __init__(self):
        self.charges = []

    def charge(self, customer_id, amount):
        self.charges.append({"customer_id": customer_id, "amount": amount})
        return {"status": "succeeded", "charge_id": f"ch_{len(self.charges):04d}"}


def main():
    manager = UserProfileManager()

    print("1. Creating a user profile twice:")
    first = manager.create_user_profile("user1", name="John Doe", email="john@example.com")
    second = manager.create_user_profile("user1", name="John Doe", email="john@example.com")
    print(f"Profile id changed: {first['profile_id']} -> {second['profile_id']}")

    print("\n2. Updating the same preferences twice:")
    manager.update_user_preferences("user1", {"theme": "dark"})
    manager.update_user_preferences("user1", {"theme": "dark"})

    print("\n3. Toggling the account status three times:")
    for _ in range(3):
        manager.toggle_user_account_status("user1")

    print("\n4. Adding the same activity twice:")
    manager.add_user_activity("user1", {"type": "login", "device": "mobile"})
    manager.add_user_activity("user1", {"type": "login", "device": "mobile"})

    print("\nFinal user profile:")
    print(json.dumps(manager.profiles["user1"], indent=2))

    print("\n5. Retrying a charge after a dropped response:")
    payments = PaymentProcessor()
    payments.charge("cust_1", 49.99)
    payments.charge("cust_1", 49.99)
    print(f"Customer was charged {len(payments.charges)} times, "
          f"${sum(c['amount'] for c in payments.charges):.2f} in total")


if __name__ == "__main__":
    main()
