"""YAGNI: you aren't gonna need it."""

TITLE = "YAGNI"
SUMMARY = (
    "Registration and login with exactly what is needed today, against a "
    "profile service full of speculative pictures, addresses, 2FA and "
    "social links nobody asked for."
)
TAGS = ("simplicity", "agile")
ALIASES = ("you-arent-gonna-need-it",)
