"""Explicit dependencies: a constructor lists everything a class needs."""

TITLE = "Explicit Dependencies"
SUMMARY = (
    "OrderService receives repositories, gateways, config, clock and id "
    "generator through its constructor, so fakes make it deterministic."
)
TAGS = ("design", "testing")
ALIASES = ("edp",)
