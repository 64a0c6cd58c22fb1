"""Shared CLI helpers: argument parsing, styling and common types."""
