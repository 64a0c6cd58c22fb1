"""Don't repeat yourself: one authoritative place for every rule."""

TITLE = "Don't Repeat Yourself"
SUMMARY = (
    "Keep each pricing, tax, discount and weight-tier rule in exactly one "
    "place so a change cannot leave stale copies behind."
)
TAGS = ("maintainability",)
ALIASES = ("dont-repeat-yourself",)
