"""Locality of behavior: what a piece of code does is visible where it is."""

TITLE = "Locality of Behavior"
SUMMARY = (
    "Placing an order reads top to bottom in one method instead of being "
    "spread across base classes, decorators and event listeners."
)
TAGS = ("readability", "design")
ALIASES = ("lob",)
