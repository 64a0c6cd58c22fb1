"""Idempotency: repeating an operation leaves the same result."""

TITLE = "Idempotency"
SUMMARY = (
    "Profile creation, preference updates and activation can be retried "
    "safely, and charges carry idempotency keys so a retry never bills twice."
)
TAGS = ("distributed", "resilience")
