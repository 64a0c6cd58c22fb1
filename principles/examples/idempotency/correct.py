"""
Idempotency - correct implementation

Each operation describes a target state rather than a change: creating an
existing profile returns it, preferences are replaced instead of merged with
counters, activation checks the current status, and activities are upserted
by id. Payments take a client supplied idempotency key; a retry with the
same key returns the stored result and a reused key with different
parameters is rejected.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from itertools import count
from typing import Callable, Dict, Optional


class FixedStepClock:
    """Returns a new ISO timestamp one second later on every call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self) -> str:
        self.current += timedelta(seconds=1)
        return self.current.isoformat()


class UserProfileManager:
    def __init__(self, clock: Optional[Callable[[], str]] = None):
        self.clock = clock or FixedStepClock()
        self.profiles: Dict[str, dict] = {}

    def create_user_profile(self, user_id: str, **initial) -> dict:
        if user_id in self.profiles:
            print(f"User profile {user_id} already exists, returning existing profile")
            return self.profiles[user_id]
        now = self.clock()
        profile = {"user_id": user_id, **initial, "created_at": now, "updated_at": now}
        self.profiles[user_id] = profile
        print(f"Created new user profile for {user_id}")
        return profile

    def _profile(self, user_id: str) -> dict:
        return self.profiles.get(user_id) or self.create_user_profile(user_id)

    def set_user_preferences(self, user_id: str, preferences: dict) -> dict:
        profile = self._profile(user_id)
        if profile.get("preferences") == preferences:
            print(f"Preferences for {user_id} unchanged")
            return profile
        profile["preferences"] = dict(preferences)
        profile["updated_at"] = self.clock()
        print(f"Set preferences for user {user_id}")
        return profile

    def _set_active(self, user_id: str, active: bool) -> dict:
        profile = self._profile(user_id)
        word = "active" if active else "inactive"
        if profile.get("is_active") is active:
            print(f"User account {user_id} is already {word}")
            return profile
        profile["is_active"] = active
        profile["activated_at" if active else "deactivated_at"] = profile["updated_at"] = self.clock()
        print(f"{'Activated' if active else 'Deactivated'} user account {user_id}")
        return profile

    def activate_user_account(self, user_id: str) -> dict:
        return self._set_active(user_id, True)

    def deactivate_user_account(self, user_id: str) -> dict:
        return self._set_active(user_id, False)

    def record_activity(self, user_id: str, activity_id: str, **activity) -> dict:
        """Upsert keyed by the caller's activity id; a redelivered event is a no-op."""
        profile = self._profile(user_id)
        activities = profile.setdefault("activities", {})
        if activity_id in activities:
            print(f"Activity {activity_id} already recorded")
        else:
            activities[activity_id] = {**activity, "recorded_at": self.clock()}
            print(f"Recorded activity {activity_id} for {user_id}")
        return profile

    def get_user_profile(self, user_id: str) -> Optional[dict]:
        return self.profiles.get(user_id)


class IdempotencyConflict(Exception):
    pass


@dataclass
class PaymentProcessor:
    charges: list = field(default_factory=list)
    responses: Dict[str, tuple] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1))

    def charge(self, idempotency_key: str, customer_id: str, amount: float) -> dict:
        request = (customer_id, amount)
        if idempotency_key in self.responses:
            stored_request, response = self.responses[idempotency_key]
            if stored_request != request:
                raise IdempotencyConflict(
                    f"Idempotency key {idempotency_key} was already used with different parameters"
                )
            return dict(response, replayed=True)

        transaction = {"id": f"ch_{next(self._ids):04d}", "customer_id": customer_id, "amount": amount}
        self.charges.append(transaction)
        response = {"status": "succeeded", "charge_id": transaction["id"], "amount": amount}
        self.responses[idempotency_key] = (request, response)
        return dict(response, replayed=False)


def main():
    manager = UserProfileManager(FixedStepClock())

    print("1. Creating a user profile twice:")
    manager.create_user_profile("user1", name="John Doe", email="john@example.com")
    again = manager.create_user_profile("user1", name="Different Name", email="different@example.com")
    print(f"Name after second create: {again['name']}")

    print("\n2. Setting the same preferences twice:")
    preferences = {"theme": "dark", "notifications": True}
    manager.set_user_preferences("user1", preferences)
    manager.set_user_preferences("user1", preferences)

    print("\n3. Activating twice, then deactivating twice:")
    manager.activate_user_account("user1")
    manager.activate_user_account("user1")
    manager.deactivate_user_account("user1")
    manager.deactivate_user_account("user1")

    print("\n4. Redelivered activity event:")
    manager.record_activity("user1", "evt-42", type="login", device="mobile")
    manager.record_activity("user1", "evt-42", type="login", device="mobile")

    print("\nFinal user profile:")
    print(manager.get_user_profile("user1"))

    print("\n5. Retrying a charge after a dropped response:")
    payments = PaymentProcessor()
    first = payments.charge("order-1001-attempt", "cust_1", 49.99)
    retry = payments.charge("order-1001-attempt", "cust_1", 49.99)
    print(f"First: {first}")
    print(f"Retry: {retry}")
    print(f"Charges actually made: {len(payments.charges)}")
    try:
        payments.charge("order-1001-attempt", "cust_1", 99.99)
    except IdempotencyConflict as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
