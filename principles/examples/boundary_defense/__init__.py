"""Boundary defense: every boundary is a trust boundary."""

TITLE = "Boundary Defense"
SUMMARY = (
    "Validate, sanitise and normalise data from APIs, files, databases, "
    "queues and external services before it enters the trusted core."
)
TAGS = ("security", "validation")
