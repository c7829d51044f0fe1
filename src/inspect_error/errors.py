"""Exception hierarchy for inspect-error.

The inspection operation itself never raises; these cover the logging
helpers and their configuration.
"""

from __future__ import annotations


class InspectErrorError(Exception):
    """Base exception for all inspect-error errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(InspectErrorError):
    """Configuration validation or resolution failed."""
