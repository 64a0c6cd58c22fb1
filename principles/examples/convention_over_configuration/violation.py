"""
Convention over Configuration - violation

Nothing is inferred. Every field must be registered with every rule it
needs, the password rule comes with its own options, and a field nobody
remembered to configure is silently accepted.
"""

import re


class FormValidator:
    def __init__(self):
        self.validation_rules = {}

    def add_validation_rule(self, field_name, validation_type, **options):
        rules = self.validation_rules.setdefault(field_name, [])

        if validation_type == "required":
            rules.append({
                "type": "required",
                "validate": lambda value: value is not None and value.strip() != "",
                "message": options.get("message", "This field is required"),
            })
        elif validation_type == "email":
            rules.append({
                "type": "email",
                "validate": lambda value: re.match(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", value) is not None,
                "message": options.get("message", "Please enter a valid email address"),
            })
        elif validation_type == "phone":
            rules.append({
                "type": "phone",
                "validate": lambda value: re.match(r"^\d{10}$", value) is not None,
                "message": options.get("message", "Please enter a valid 10-digit phone number"),
            })
        elif validation_type == "password":
            min_length = options.get("min_length", 8)
            require_uppercase = options.get("require_uppercase", True)
            require_number = options.get("require_number", True)

            def validate(value):
                valid = len(value) >= min_length
                if require_uppercase:
                    valid = valid and re.search(r"[A-Z]", value) is not None
                if require_number:
                    valid = valid and re.search(r"\d", value) is not None
                return valid

            message = f"Password must be at least {min_length} characters long"
            if require_uppercase:
                message += ", contain an uppercase letter"
            if require_number:
                message += ", and contain a number"
            rules.append({"type": "password", "validate": validate, "message": options.get("message", message)})
        elif validation_type == "custom":
            validator = options.get("validator")
            if not callable(validator):
                raise ValueError("Custom validator requires a validator function")
            rules.append({"type": "custom", "validate": validator, "message": options.get("message", "Invalid value")})
        else:
            raise ValueError(f"Unknown validation type: {validation_type}")

    def validate_field(self, field_name, value):
        if field_name not in self.validation_rules:
            print(f"Warning: no validation rules configured for field: {field_name}")
            return {"valid": True, "errors": []}
        errors = [rule["message"] for rule in self.validation_rules[field_name] if not rule["validate"](value)]
        return {"valid": not errors, "errors": errors}

    def validate_form(self, form):
        results = {name: self.validate_field(name, value) for name, value in form.items()}
        return {"is_valid": all(r["valid"] for r in results.values()), "results": results}


def main():
    validator = FormValidator()

    # every common field spelled out by hand
    validator.add_validation_rule("name", "required")
    validator.add_validation_rule("email", "required")
    validator.add_validation_rule("email", "email")
    validator.add_validation_rule("phone", "required")
    validator.add_validation_rule("phone", "phone")
    validator.add_validation_rule("password", "required")
    validator.add_validation_rule("password", "password", min_length=8, require_uppercase=True, require_number=True)
    validator.add_validation_rule(
        "special_field", "custom",
        validator=lambda value: value.startswith("special_"),
        message='Special field must start with "special_"',
    )

    form = {
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "1234567890",
        "password": "Password123",
        "special_field": "special_value",
        "backup_email": "definitely not an email",
    }
    print("Form validation result:", validator.validate_form(form))
    print(f"\n{sum(len(r) for r in validator.validation_rules.values())} rule registrations for 5 fields;"
          " the sixth field was forgotten and passed unchecked")


if __name__ == "__main__":
    main()
