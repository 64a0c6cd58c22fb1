"""Occam's razor: do not multiply entities beyond necessity."""

TITLE = "Occam's Razor"
SUMMARY = (
    "Formatting names, addresses and phone numbers with three small "
    "functions instead of strategies, a factory and a history log."
)
TAGS = ("simplicity",)
ALIASES = ("occam",)
