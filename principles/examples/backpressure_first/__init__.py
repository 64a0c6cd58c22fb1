"""Backpressure-first: apply flow control at every boundary."""

TITLE = "Backpressure-First"
SUMMARY = (
    "Prevent overload with bounded queues, explicit load shedding, rate "
    "limiting, capped concurrency and timeouts."
)
TAGS = ("resilience", "concurrency")
ALIASES = ("bfp",)
