"""Feedback integrity: report what actually happened, and how sure you are."""

TITLE = "Feedback Integrity"
SUMMARY = (
    "Responses say accepted rather than done, health checks admit degraded "
    "dependencies, and errors carry a certainty instead of a guessed cause."
)
TAGS = ("operations", "errors")
ALIASES = ("fip",)
