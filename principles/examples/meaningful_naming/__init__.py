"""Meaningful naming: names that say what a thing is and does."""

TITLE = "Meaningful Naming"
SUMMARY = (
    "A task manager whose names read like the domain, next to the same "
    "code written with cryptic abbreviations."
)
TAGS = ("readability",)
ALIASES = ("naming",)
