"""Recoverable change: every change ships with a way back."""

TITLE = "Recoverable Change"
SUMMARY = (
    "Expand/contract migrations, owned feature flags, compensating "
    "workflows, one-step rollback and tracked reversibility debt, against "
    "destructive migrations and side effects nobody can undo."
)
TAGS = ("operations", "reliability", "deployment")
ALIASES = ("rcp",)
