"""Liskov substitution: subtypes keep the promises of their base type."""

TITLE = "Liskov Substitution"
SUMMARY = (
    "Rectangle and Square are siblings under an immutable Shape, so code "
    "written for one never gets surprised by the other."
)
TAGS = ("solid", "oop")
ALIASES = ("lsp",)
