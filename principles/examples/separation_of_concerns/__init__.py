"""Separation of concerns: model, storage, rules and presentation apart."""

TITLE = "Separation of Concerns"
SUMMARY = (
    "User handling split into a model, a repository, a service holding the "
    "rules and a view, against one function that validates, stores and "
    "prints in a single pass."
)
TAGS = ("design", "structure")
ALIASES = ("soc",)
