"""Incremental validity: long work is a series of small valid states."""

TITLE = "Incremental Validity"
SUMMARY = (
    "Batch jobs, uploads and form wizards checkpoint progress so a crash "
    "resumes instead of restarting; sagas compensate and failed syncs are "
    "reconciled later."
)
TAGS = ("resilience", "data")
ALIASES = ("ivp", "checkpoint")
