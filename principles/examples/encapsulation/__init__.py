"""Encapsulation: an object guards its own state."""

TITLE = "Encapsulation"
SUMMARY = (
    "A bank account exposes read-only views and validated operations; "
    "its balance and history cannot be changed from outside."
)
TAGS = ("oop",)
