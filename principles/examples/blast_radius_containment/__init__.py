"""Blast radius containment: keep failures inside the smallest scope."""

TITLE = "Blast Radius Containment"
SUMMARY = (
    "Isolate failures by tenant, feature and request class so one component "
    "breaking never takes the whole system down, and make the isolation visible."
)
TAGS = ("resilience", "architecture")
ALIASES = ("brcp",)
