"""
Convention over Configuration - correct implementation

FormValidator infers a rule from each field name: anything mentioning email,
phone or password gets the matching check and names starting with
"required" must be non-blank. Only the odd field out needs a custom rule.
"""

import re
from typing import Callable, Dict

Rule = Callable[[str], bool]

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\d{10}$")
PASSWORD_RE = re.compile(r"^(?=.*[A-Z])(?=.*\d).{8,}$")

CONVENTIONS: Dict[str, Rule] = {
    "email": lambda value: bool(EMAIL_RE.match(value)),
    "phone": lambda value: bool(PHONE_RE.match(value)),
    "password": lambda value: bool(PASSWORD_RE.match(value)),
    "required": lambda value: value is not None and value.strip() != "",
}


class FormValidator:
    def __init__(self):
        self.custom_rules: Dict[str, Rule] = {}

    def add_custom_rule(self, field_name: str, rule: Rule) -> None:
        """Only needed where a field does not follow the naming convention."""
        self.custom_rules[field_name] = rule

    def rule_for(self, field_name: str):
        if field_name in self.custom_rules:
            return self.custom_rules[field_name]
        lowered = field_name.lower()
        for pattern, rule in CONVENTIONS.items():
            if pattern in lowered:
                return rule
        return None

    def validate_field(self, field_name: str, value: str) -> bool:
        rule = self.rule_for(field_name)
        # no matching convention means an optional free-form field
        return True if rule is None else rule(value)

    def validate_form(self, form: Dict[str, str]) -> dict:
        results = {name: self.validate_field(name, value) for name, value in form.items()}
        return {"is_valid": all(results.values()), "results": results}


def main():
    validator = FormValidator()
    validator.add_custom_rule("special_field", lambda value: value.startswith("special_"))

    form = {
        "required_name": "John Doe",
        "user_email": "john@example.com",
        "contact_phone": "1234567890",
        "user_password": "Password123",
        "special_field": "special_value",
        "nickname": "JD",
    }
    print("Form validation result:", validator.validate_form(form))

    bad_form = dict(form, user_email="not-an-email", contact_phone="555-1234", required_name="  ")
    print("Invalid form result:", validator.validate_form(bad_form))

    print("\nRules picked by convention:")
    for name in form:
        rule = validator.rule_for(name)
        source = "custom" if name in validator.custom_rules else "convention" if rule else "none (optional)"
        print(f"  {name}: {source}")


if __name__ == "__main__":
    main()
