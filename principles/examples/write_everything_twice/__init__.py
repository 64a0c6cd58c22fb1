"""Write everything twice: duplicate once before abstracting."""

TITLE = "Write Everything Twice"
SUMMARY = (
    "Registration and profile-update validation kept as two deliberately "
    "separate validators, against a premature shared validator steered "
    "by context flags."
)
TAGS = ("design", "duplication")
ALIASES = ("wet",)
