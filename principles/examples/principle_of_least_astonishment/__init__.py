"""Least astonishment: code behaves the way its name and shape suggest."""

TITLE = "Principle of Least Astonishment"
SUMMARY = (
    "String, list and date helpers whose names, argument order and return "
    "types match what a reader expects, against helpers that reverse, "
    "mutate and change shape behind innocent names."
)
TAGS = ("api", "readability")
ALIASES = ("pola", "least-astonishment", "least-surprise")
