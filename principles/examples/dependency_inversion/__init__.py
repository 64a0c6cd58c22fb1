"""Dependency inversion: depend on abstractions, not concrete senders."""

TITLE = "Dependency Inversion"
SUMMARY = (
    "High-level notification logic depends on a MessageSender abstraction; "
    "concrete channels plug in from outside."
)
TAGS = ("solid", "oop")
ALIASES = ("dip",)
