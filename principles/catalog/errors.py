"""Exceptions raised while resolving and loading example pairs."""

from typing import Sequence


class CatalogError(Exception):
    """Base class for catalog lookup errors."""
    pass


class UnknownPrincipleError(CatalogError):
    """No example pair matches the requested name."""

    def __init__(self, name: str, suggestions: Sequence[str] = ()):
        self.name = name
        self.suggestions = list(suggestions)
        message = f"Unknown principle: '{name}'"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(message)


class AmbiguousPrincipleError(CatalogError):
    """A prefix matches more than one example pair."""

    def __init__(self, name: str, candidates: Sequence[str]):
        self.name = name
        self.candidates = list(candidates)
        super().__init__(
            f"Ambiguous principle '{name}': matches {', '.join(self.candidates)}"
        )


class InvalidVariantError(CatalogError):
    """Variant is neither 'correct' nor 'violation'."""

    def __init__(self, variant: str):
        self.variant = variant
        super().__init__(f"Invalid variant '{variant}' (expected 'correct' or 'violation')")
