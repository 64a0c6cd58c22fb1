"""Law of Demeter: talk to your friends, not to their friends."""

TITLE = "Law of Demeter"
SUMMARY = (
    "The order processor asks a customer to pay and for a shipping label; "
    "it never reaches through the customer into the wallet or address."
)
TAGS = ("oop", "coupling")
ALIASES = ("lod", "demeter")
