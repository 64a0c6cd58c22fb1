"""Tell, don't ask: ask objects to act instead of pulling their state out."""

TITLE = "Tell, Don't Ask"
SUMMARY = (
    "The cart totals, discounts and checks itself out, instead of an order "
    "processor reading its items and discount rate and doing it for it."
)
TAGS = ("oop", "encapsulation")
ALIASES = ("tda",)
