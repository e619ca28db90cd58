"""Error hierarchy for the host-facing parts of css_optimizer.

The optimizer core never raises for stylesheet content; these errors cover
the glue around it (manifests, settings input).
"""
from __future__ import annotations


class CssOptimizerError(Exception):
    """Base error for all css_optimizer errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ManifestError(CssOptimizerError):
    """A registrations manifest could not be read or has the wrong shape."""
