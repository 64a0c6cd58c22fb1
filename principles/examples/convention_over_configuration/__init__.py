"""Convention over configuration: sensible defaults, configure the exceptions."""

TITLE = "Convention over Configuration"
SUMMARY = (
    "Infer validation rules from field names and only configure the "
    "fields that break the convention."
)
TAGS = ("api-design", "validation")
ALIASES = ("coc",)
