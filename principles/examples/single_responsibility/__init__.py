"""Single responsibility: one reason to change per class."""

TITLE = "Single Responsibility"
SUMMARY = (
    "User data, validation, storage and reporting in separate classes, "
    "against a User that validates, persists and reports on itself."
)
TAGS = ("solid", "oop")
ALIASES = ("srp",)
