"""KISS: keep it simple."""

TITLE = "KISS"
SUMMARY = (
    "A calculator is four functions with one error check, not an operation "
    "hierarchy, factory, history log and memory register nobody asked for."
)
TAGS = ("simplicity",)
ALIASES = ("keep-it-simple",)
