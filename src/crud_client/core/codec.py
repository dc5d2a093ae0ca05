"""JSON codec between API payloads and domain models.

Outgoing payloads use the API's camelCase field names and format
``timestamp`` as ``yyyy-MM-dd'T'HH:mm:ss.SSSX`` (milliseconds plus a
numeric UTC offset, ``Z`` for UTC).  ``id`` and ``timestamp`` are omitted
while unset.

Incoming payloads accept an ISO-8601 string or epoch milliseconds for
``timestamp`` and ignore unknown fields.  Any malformed body raises
:class:`~crud_client.exceptions.PayloadError`.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, TypeVar

from crud_client.core.models import Contact, Reason, User
from crud_client.exceptions import PayloadError

R = TypeVar("R")


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

def _format_offset(offset: timedelta) -> str:
    """Render a UTC offset the way the ``X`` pattern letter does."""
    total_minutes = int(offset.total_seconds()) // 60
    if total_minutes == 0:
        return "Z"
    sign = "+" if total_minutes > 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"{sign}{hours:02d}{minutes:02d}"
    return f"{sign}{hours:02d}"


def format_timestamp(value: datetime) -> str:
    """Format *value* as ``2024-03-01T10:15:30.123Z``.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    millis = value.microsecond // 1000
    offset = value.utcoffset() or timedelta(0)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{millis:03d}{_format_offset(offset)}"


def parse_timestamp(raw: object) -> datetime | None:
    """Decode an incoming ``timestamp`` field."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise PayloadError(f"Invalid timestamp: {raw!r}")
    if isinstance(raw, (int, float)):
        try:
            return datetime.fromtimestamp(raw / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise PayloadError(f"Timestamp out of range: {raw!r}") from exc
    if isinstance(raw, str):
        try:
            return datetime.fromisoformat(raw)
        except ValueError as exc:
            raise PayloadError(f"Invalid timestamp: {raw!r}") from exc
    raise PayloadError(f"Invalid timestamp: {raw!r}")


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadError(f"Field '{key}' must be a string, got {value!r}")
    return value


def _optional_id(data: dict[str, Any]) -> int | None:
    value = data.get("id")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadError(f"Field 'id' must be an integer, got {value!r}")
    return value


def _with_identity(payload: dict[str, Any], record: User | Contact) -> dict[str, Any]:
    if record.id is not None:
        payload = {"id": record.id, **payload}
    if record.timestamp is not None:
        payload["timestamp"] = format_timestamp(record.timestamp)
    return payload


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

def user_to_dict(user: User) -> dict[str, Any]:
    return _with_identity(
        {
            "name": user.name,
            "lastName": user.last_name,
            "phoneNumber": user.phone_number,
            "email": user.email,
            "password": user.password,
        },
        user,
    )


def user_from_dict(data: dict[str, Any]) -> User:
    return User(
        id=_optional_id(data),
        name=_require_str(data, "name"),
        last_name=_require_str(data, "lastName"),
        phone_number=_require_str(data, "phoneNumber"),
        email=_require_str(data, "email"),
        password=_require_str(data, "password"),
        timestamp=parse_timestamp(data.get("timestamp")),
    )


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------

def contact_to_dict(contact: Contact) -> dict[str, Any]:
    return _with_identity(
        {
            "name": contact.name,
            "email": contact.email,
            "reason": contact.reason.value,
            "message": contact.message,
        },
        contact,
    )


def contact_from_dict(data: dict[str, Any]) -> Contact:
    raw_reason = data.get("reason")
    try:
        reason = Reason(raw_reason)
    except ValueError as exc:
        raise PayloadError(f"Unknown contact reason: {raw_reason!r}") from exc
    return Contact(
        id=_optional_id(data),
        name=_require_str(data, "name"),
        email=_require_str(data, "email"),
        reason=reason,
        message=_require_str(data, "message"),
        timestamp=parse_timestamp(data.get("timestamp")),
    )


# ---------------------------------------------------------------------------
# Codec bundle
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Codec(Generic[R]):
    """Pairs the dict converters of one resource with JSON (de)serialisation."""

    to_dict: Callable[[R], dict[str, Any]]
    from_dict: Callable[[dict[str, Any]], R]

    def dumps(self, record: R) -> str:
        return json.dumps(self.to_dict(record))

    def loads_one(self, body: str) -> R:
        data = _loads(body)
        if not isinstance(data, dict):
            raise PayloadError("Expected a JSON object in the response body.")
        return self.from_dict(data)

    def loads_many(self, body: str) -> list[R]:
        data = _loads(body)
        if not isinstance(data, list):
            raise PayloadError("Expected a JSON array in the response body.")
        records: list[R] = []
        for entry in data:
            if not isinstance(entry, dict):
                raise PayloadError(f"Expected a JSON object, got {entry!r}")
            records.append(self.from_dict(entry))
        return records


def _loads(body: str) -> Any:
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError is a ValueError; so is an oversized integer literal.
        raise PayloadError(f"Response body is not valid JSON: {exc}") from exc


USER_CODEC: Codec[User] = Codec(to_dict=user_to_dict, from_dict=user_from_dict)
CONTACT_CODEC: Codec[Contact] = Codec(to_dict=contact_to_dict, from_dict=contact_from_dict)
