"""High cohesion, low coupling: small focused classes joined by narrow interfaces."""

TITLE = "High Cohesion, Low Coupling"
SUMMARY = (
    "Cart, order processing, payment and notification each own one concern "
    "and talk through small interfaces instead of one all-knowing system class."
)
TAGS = ("design", "oop")
ALIASES = ("hclc", "cohesion", "coupling")
