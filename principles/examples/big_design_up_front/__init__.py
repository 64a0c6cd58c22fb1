"""Big Design Up Front: plan the architecture before writing code."""

TITLE = "Big Design Up Front"
SUMMARY = (
    "Define the domain model and service interfaces before implementation "
    "so features slot into a coherent architecture instead of accreting."
)
TAGS = ("process", "architecture")
ALIASES = ("bduf",)
