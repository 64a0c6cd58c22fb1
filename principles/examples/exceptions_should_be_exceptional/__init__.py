"""Exceptions should be exceptional: expected outcomes are return values."""

TITLE = "Exceptions Should Be Exceptional"
SUMMARY = (
    "Missing users and bad input are ordinary outcomes reported through a "
    "result object; exceptions are kept for failures nobody planned for."
)
TAGS = ("errors",)
ALIASES = ("exceptional",)
