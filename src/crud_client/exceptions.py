"""Custom exception hierarchy for crud-client.

Request outcomes (not found, unreachable server, bad status) are NOT
exceptions; they travel as :mod:`crud_client.core.outcome` values.  The
classes below cover the remaining conditions: a broken environment, a
body that cannot be decoded, and invalid start-up configuration.

Hierarchy
---------
CrudClientError
├── EnvironmentError
├── PayloadError
└── ConfigurationError
"""

from __future__ import annotations


class CrudClientError(Exception):
    """Base exception for all crud-client errors.

    The CLI error boundary renders ``str(exc)`` and, when present,
    :attr:`hint` without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class EnvironmentError(CrudClientError):
    """Raised when a required runtime dependency is not available."""


class PayloadError(CrudClientError):
    """Raised when a response body cannot be decoded into a record."""


class ConfigurationError(CrudClientError):
    """Raised when command-line settings are invalid."""
