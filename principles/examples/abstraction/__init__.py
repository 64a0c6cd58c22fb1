"""Abstraction: expose what an object does, hide how it does it."""

TITLE = "Abstraction"
SUMMARY = (
    "Hide implementation details behind a small interface so callers work "
    "with what an object does rather than how it does it."
)
TAGS = ("oop", "design")
