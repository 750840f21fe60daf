"""Custom exception hierarchy for firmpack.

Domain operations in :mod:`firmpack.core` are total; errors only arise
at the edges (profile lookup, interactive selection, optional UI
packages).  Every such error inherits from :class:`FirmpackError` so the
CLI error boundary can render a clean message without a stack trace.

Hierarchy
---------
FirmpackError
├── UnknownProfileError
├── ProfileSelectionError
└── EnvironmentError
"""

from __future__ import annotations


class FirmpackError(Exception):
    """Base exception for all firmpack errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Profiles --------------------------------------------------------------

class UnknownProfileError(FirmpackError):
    """Raised when a build profile name is not registered."""


class ProfileSelectionError(FirmpackError):
    """Raised when the interactive profile prompt is cancelled."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(FirmpackError):
    """Raised when an optional runtime dependency is not available."""
