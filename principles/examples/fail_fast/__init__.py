"""Fail fast: reject bad input at the door."""

TITLE = "Fail Fast"
SUMMARY = (
    "Registration validates everything before doing any work and raises on "
    "the first problem, instead of enriching and then collecting errors."
)
TAGS = ("errors", "validation")
