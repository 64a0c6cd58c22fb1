"""Open/closed: open for extension, closed for modification."""

TITLE = "Open/Closed"
SUMMARY = (
    "Discounts are strategies registered with the calculator, so adding a "
    "gold tier is new code rather than another elif."
)
TAGS = ("solid", "oop")
ALIASES = ("ocp",)
