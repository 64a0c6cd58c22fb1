"""Single level of abstraction: each function speaks at one level."""

TITLE = "Single Level of Abstraction"
SUMMARY = (
    "Document processing whose top-level method reads as a list of named "
    "steps, against one method mixing regexes, counting and reporting."
)
TAGS = ("readability", "functions")
ALIASES = ("slap", "sla")
