"""Observability first: build diagnosability in from the start."""

TITLE = "Observability-First"
SUMMARY = (
    "Structured JSON logs, a correlation id carried through every call and "
    "counters and timings for each step, against print-and-hope debugging."
)
TAGS = ("operations", "reliability")
ALIASES = ("ofp", "observability")
