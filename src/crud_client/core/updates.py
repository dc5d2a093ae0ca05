"""Partial-update merge logic.

An update is collected as a set of optional answers: ``None`` means the
user supplied nothing and the fetched value is kept.  Merging never
touches ``id`` or ``timestamp``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar

from crud_client.core.models import Contact, Reason, User

R = TypeVar("R", User, Contact)


@dataclass(frozen=True, slots=True)
class UserUpdate:
    name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True, slots=True)
class ContactUpdate:
    name: str | None = None
    email: str | None = None
    reason: Reason | None = None
    message: str | None = None


def _supplied(update: UserUpdate | ContactUpdate) -> dict[str, Any]:
    return {
        f.name: getattr(update, f.name)
        for f in fields(update)
        if getattr(update, f.name) is not None
    }


def merge(record: R, update: UserUpdate | ContactUpdate) -> R:
    """Return *record* with every supplied field of *update* applied."""
    changes = _supplied(update)
    if not changes:
        return record
    return replace(record, **changes)
