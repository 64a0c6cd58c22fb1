"""Modularity: independent modules behind small public interfaces."""

TITLE = "Modularity"
SUMMARY = (
    "Catalog, cart and orders live in separate modules that talk through "
    "their public methods, instead of one object that owns everything."
)
TAGS = ("design", "structure")
