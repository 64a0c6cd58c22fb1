"""Design for testability: make every collaborator replaceable."""

TITLE = "Design for Testability"
SUMMARY = (
    "Inject the repository, token generator, clock and logger so an "
    "authentication service can be exercised in isolation."
)
TAGS = ("testing", "design")
ALIASES = ("dft",)
