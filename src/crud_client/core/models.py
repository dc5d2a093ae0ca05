"""Domain models for crud-client.

All models are **frozen** dataclasses; immutable value objects with no
behaviour beyond data access.  ``id`` and ``timestamp`` stay ``None``
until the API assigns them on first persist.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime


class Reason(enum.Enum):
    """Why a contact message was sent.  Wire values are the member names."""

    QUESTION = "QUESTION"
    INFORMATION = "INFORMATION"
    ALERT = "ALERT"

    @property
    def label(self) -> str:
        """Human-readable label (``"Question"``)."""
        return self.value.capitalize()


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class User:
    """A registered user as exposed by ``/api/users``."""

    name: str
    last_name: str

    phone_number: str
    """Nine digits, digits-only canonical form."""

    email: str

    password: str
    """SHA-256 hex digest; the plaintext never leaves the prompt."""

    id: int | None = None
    timestamp: datetime | None = None


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Contact:
    """A contact-form submission as exposed by ``/api/contacts``."""

    name: str
    email: str
    reason: Reason
    message: str
    id: int | None = None
    timestamp: datetime | None = None
