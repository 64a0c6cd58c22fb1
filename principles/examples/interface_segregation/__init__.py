"""Interface segregation: clients depend only on the methods they use."""

TITLE = "Interface Segregation"
SUMMARY = (
    "Printing, scanning, faxing and copying are separate capabilities; a "
    "device implements only those it really has."
)
TAGS = ("solid", "oop")
ALIASES = ("isp",)
