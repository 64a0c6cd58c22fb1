"""Temporal decoupling: correctness never depends on how long things take."""

TITLE = "Temporal Decoupling"
SUMMARY = (
    "Ready signals, awaited sequencing, versions and vector clocks, a "
    "dependency-ordered startup and optimistic locking, against sleeps "
    "that hope the other side has finished."
)
TAGS = ("concurrency", "async", "reliability")
ALIASES = ("tdp",)
