"""Least common mechanism: minimise machinery shared between users."""

TITLE = "Least Common Mechanism"
SUMMARY = (
    "Admins, regular users and guests each get their own authentication "
    "and session store instead of one shared mechanism keyed by type flags."
)
TAGS = ("security", "design")
ALIASES = ("lcm",)
