"""Tests for the JSON codec (core/codec.py)."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from crud_client.core.codec import (
    CONTACT_CODEC,
    USER_CODEC,
    contact_to_dict,
    format_timestamp,
    parse_timestamp,
    user_from_dict,
    user_to_dict,
)
from crud_client.core.models import Contact, Reason, User
from crud_client.exceptions import PayloadError


def _user(**overrides: object) -> User:
    defaults: dict[str, object] = {
        "name": "Ana",
        "last_name": "Lopez",
        "phone_number": "600123456",
        "email": "ana@x.co",
        "password": "ab" * 32,
    }
    defaults.update(overrides)
    return User(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

class TestFormatTimestamp:
    def test_utc_uses_z(self) -> None:
        value = datetime(2024, 3, 1, 10, 15, 30, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-03-01T10:15:30.123Z"

    def test_whole_hour_offset(self) -> None:
        value = datetime(2024, 3, 1, 10, 15, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2024-03-01T10:15:30.000+02"

    def test_negative_offset_with_minutes(self) -> None:
        tz = timezone(-timedelta(hours=3, minutes=30))
        value = datetime(2024, 3, 1, 10, 15, 30, 5000, tzinfo=tz)
        assert format_timestamp(value) == "2024-03-01T10:15:30.005-0330"

    def test_naive_is_treated_as_utc(self) -> None:
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)).endswith(".000Z")


class TestParseTimestamp:
    def test_none(self) -> None:
        assert parse_timestamp(None) is None

    def test_iso_string_with_offset(self) -> None:
        parsed = parse_timestamp("2024-03-01T10:15:30.123+00:00")
        assert parsed == datetime(2024, 3, 1, 10, 15, 30, 123000, tzinfo=timezone.utc)

    def test_iso_string_with_z(self) -> None:
        parsed = parse_timestamp("2024-03-01T10:15:30.123Z")
        assert parsed is not None
        assert parsed.utcoffset() == timedelta(0)

    def test_epoch_millis(self) -> None:
        parsed = parse_timestamp(0)
        assert parsed == datetime(1970, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "raw", ["yesterday", True, [2024], 1e20, -1e20, float("nan"), float("inf"), 10**400]
    )
    def test_invalid(self, raw: object) -> None:
        with pytest.raises(PayloadError):
            parse_timestamp(raw)


# ---------------------------------------------------------------------------
# User payloads
# ---------------------------------------------------------------------------

class TestUserPayload:
    def test_new_user_has_no_id_or_timestamp(self) -> None:
        payload = user_to_dict(_user())
        assert payload == {
            "name": "Ana",
            "lastName": "Lopez",
            "phoneNumber": "600123456",
            "email": "ana@x.co",
            "password": "ab" * 32,
        }

    def test_persisted_user_carries_identity(self) -> None:
        ts = datetime(2024, 3, 1, 10, 15, 30, tzinfo=timezone.utc)
        payload = user_to_dict(_user(id=42, timestamp=ts))
        assert payload["id"] == 42
        assert payload["timestamp"] == "2024-03-01T10:15:30.000Z"

    def test_from_dict_ignores_unknown_fields(self) -> None:
        user = user_from_dict(
            {
                "id": 5,
                "name": "Ana",
                "lastName": "Lopez",
                "phoneNumber": "600123456",
                "email": "ana@x.co",
                "password": "digest",
                "timestamp": "2024-03-01T10:15:30.123+00:00",
                "extra": True,
            }
        )
        assert user.id == 5
        assert user.last_name == "Lopez"
        assert user.timestamp is not None

    def test_from_dict_rejects_non_integer_id(self) -> None:
        with pytest.raises(PayloadError, match="id"):
            user_from_dict({"id": "5", "name": "Ana"})


# ---------------------------------------------------------------------------
# Contact payloads
# ---------------------------------------------------------------------------

class TestContactPayload:
    def test_reason_serialised_by_name(self) -> None:
        contact = Contact(name="Ana", email="ana@x.co", reason=Reason.ALERT, message="Hi")
        assert contact_to_dict(contact)["reason"] == "ALERT"

    def test_unknown_reason_rejected(self) -> None:
        with pytest.raises(PayloadError, match="reason"):
            CONTACT_CODEC.loads_one(json.dumps({"name": "Ana", "reason": "SPAM"}))


# ---------------------------------------------------------------------------
# Codec bundle
# ---------------------------------------------------------------------------

class TestCodec:
    def test_dumps_is_json(self) -> None:
        assert json.loads(USER_CODEC.dumps(_user()))["name"] == "Ana"

    def test_loads_many_empty(self) -> None:
        assert USER_CODEC.loads_many("[]") == []

    def test_loads_one_requires_object(self) -> None:
        with pytest.raises(PayloadError, match="object"):
            USER_CODEC.loads_one("[]")

    def test_loads_many_requires_array(self) -> None:
        with pytest.raises(PayloadError, match="array"):
            USER_CODEC.loads_many("{}")

    def test_invalid_json(self) -> None:
        with pytest.raises(PayloadError, match="not valid JSON"):
            USER_CODEC.loads_one("<html>")

    @pytest.mark.parametrize("element", ["[1]", '["Ana"]', "[[{}]]", "[null]"])
    def test_loads_many_rejects_non_object_elements(self, element: str) -> None:
        with pytest.raises(PayloadError, match="object"):
            USER_CODEC.loads_many(element)

    def test_oversized_integer_literal(self) -> None:
        with pytest.raises(PayloadError, match="not valid JSON"):
            USER_CODEC.loads_one('{"id": ' + "9" * 5000 + "}")

    def test_out_of_range_timestamp_in_array(self) -> None:
        with pytest.raises(PayloadError, match="Timestamp out of range"):
            USER_CODEC.loads_many('[{"id": 1, "name": "A", "timestamp": 1e20}]')
