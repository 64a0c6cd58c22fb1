"""DSDM: MoSCoW priorities, timeboxes and phase gates."""

TITLE = "Dynamic Systems Development Method"
SUMMARY = (
    "Deliver in fixed timeboxes, prioritise with MoSCoW and refuse to move "
    "on until every Must-have is done."
)
TAGS = ("process",)
ALIASES = ("dsdm", "moscow")
