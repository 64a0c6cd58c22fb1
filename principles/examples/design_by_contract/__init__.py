"""Design by contract: preconditions, postconditions and invariants."""

TITLE = "Design by Contract"
SUMMARY = (
    "State what a method requires, what it guarantees and what always "
    "holds, and check it on every call."
)
TAGS = ("correctness", "validation")
ALIASES = ("dbc",)
