"""Composition over inheritance: assemble behaviour from parts."""

TITLE = "Composition over Inheritance"
SUMMARY = (
    "Build game characters from small ability components instead of a "
    "class hierarchy that multiplies with every new combination."
)
TAGS = ("oop", "design")
