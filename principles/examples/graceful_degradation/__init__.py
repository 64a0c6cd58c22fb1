"""Graceful degradation: optional features fail without taking the core down."""

TITLE = "Graceful Degradation"
SUMMARY = (
    "Product lookups keep working when analytics, cache or recommendations "
    "are down; each optional dependency has a fallback."
)
TAGS = ("resilience",)
