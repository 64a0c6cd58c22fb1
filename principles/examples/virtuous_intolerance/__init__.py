"""Virtuous intolerance: treat warnings and small decay as failures."""

TITLE = "Virtuous Intolerance"
SUMMARY = (
    "A quality gate that promotes every warning to a blocking error and "
    "runs deprecated calls with warnings as errors, against a build that "
    "prints warnings and ships anyway."
)
TAGS = ("quality", "tooling")
ALIASES = ("vip", "zero-warnings")
