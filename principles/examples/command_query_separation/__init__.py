"""Command-query separation: a method either changes state or answers a question."""

TITLE = "Command-Query Separation"
SUMMARY = (
    "Commands change state and return nothing; queries return data and "
    "change nothing."
)
TAGS = ("api-design",)
ALIASES = ("cqs",)
