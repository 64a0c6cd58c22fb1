"""
Exceptions Should Be Exceptional - violation

Every ordinary outcome is raised: a missing id, an unknown user, even the end
of a loop. Each layer catches, logs and re-raises, so one lookup prints a
stack of "errors" and the loop over users ends by tripping an IndexError.
"""

from datetime import datetime


class UserDatabase:
    def __init__(self):
        self.users = {
            "1": {"id": "1", "name": "John Doe", "email": "john@example.com", "age": 32},
            "2": {"id": "2", "name": "Jane Smith", "email": "jane@example.com", "age": 28},
        }
        self.reports = {}

    def get_user(self, user_id):
        try:
            return self.users[user_id]
        except KeyError:
            raise LookupError(f"User with ID {user_id} not found")

    def save_user_report(self, user_id, report):
        if user_id not in self.users:
            raise LookupError(f"Cannot save report: User with ID {user_id} not found")
        path = f"/reports/user_{user_id}_{len(self.reports) + 1}.json"
        self.reports[path] = {"user_id": user_id, "data": report}
        return path

    def process_all_users(self, callback):
        ids = list(self.users)
        index = 0
        try:
            while True:
                callback(self.users[ids[index]])  # the IndexError ends the loop
                index += 1
        except IndexError:
            print("Finished processing all users")


class UserDataProcessor:
    def __init__(self, database):
        self.database = database

    def process_user_data(self, user_id=None):
        try:
            if not user_id:
                raise ValueError("User ID is required")
            user = self.database.get_user(user_id)
            return {"success": True, "data": self.transform_user_data(user)}
        except Exception as e:
            print(f"Error processing user data: {e}")
            return {"success": False, "error": str(e)}

    def transform_user_data(self, user):
        try:
            if not user.get("name"):
                raise ValueError("User name is missing")
            if not user.get("email"):
                raise ValueError("User email is missing")
            if not isinstance(user.get("age"), int):
                raise ValueError("User age is invalid")
            return {
                "display_name": user["name"],
                "contact_email": user["email"],
                "age_group": self.calculate_age_group(user["age"]),
                "last_processed": datetime(2024, 1, 1).isoformat(),
            }
        except ValueError as e:
            print(f"Error transforming user data: {e}")
            raise

    def calculate_age_group(self, age):
        try:
            if age < 0:
                raise ValueError("Age cannot be negative")
            if age < 18:
                return "minor"
            if age < 65:
                return "adult"
            return "senior"
        except ValueError as e:
            print(f"Error calculating age group: {e}")
            return "unknown"

    def save_user_report(self, user_id, report):
        try:
            if not user_id:
                raise ValueError("User ID is required")
            if not report:
                raise ValueError("Report data is required")
            return {"success": True, "file_path": self.database.save_user_report(user_id, report)}
        except Exception as e:
            print(f"Error saving user report: {e}")
            return {"success": False, "error": str(e)}


def main():
    database = UserDatabase()
    processor = UserDataProcessor(database)

    print("Processing existing user:")
    print(processor.process_user_data("1"))
    print("\nProcessing non-existent user:")
    print(processor.process_user_data("999"))
    print("\nProcessing with missing user ID:")
    print(processor.process_user_data())

    print("\nSaving user report:")
    print(processor.save_user_report("1", {"content": "User activity report"}))
    print("\nSaving report for non-existent user:")
    print(processor.save_user_report("999", {"content": "Invalid user report"}))

    print("\nProcessing all users:")
    database.process_all_users(lambda user: print(f"Processing user: {user['name']}"))


if __name__ == "__main__":
    main()
