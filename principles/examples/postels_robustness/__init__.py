"""Postel's robustness: liberal in what you accept, conservative in what you send."""

TITLE = "Postel's Robustness"
SUMMARY = (
    "A profile service that normalises untidy input and always answers in "
    "one shape, against one that rejects uppercase emails and changes its "
    "response format at whim."
)
TAGS = ("api", "robustness")
ALIASES = ("postel", "robustness")
