"""Per-resource API clients.

A :class:`ResourceClient` is composed from an :class:`ApiConfig` (base
URL plus the shared transport handle) and the resource's codec.  It
builds URLs, (de)serialises JSON and hands every outcome back to the
caller unchanged; nothing is raised, nothing is printed.

Guarantees
----------
* One transport call per operation, no caching.
* Decoding problems surface as :class:`OtherFailure`, never as exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from crud_client.core.codec import CONTACT_CODEC, USER_CODEC, Codec
from crud_client.core.models import Contact, User
from crud_client.core.outcome import Ok, Outcome, OtherFailure
from crud_client.core.protocols import Transport
from crud_client.exceptions import PayloadError

log = logging.getLogger(__name__)

R = TypeVar("R", User, Contact)
T = TypeVar("T")

USERS_PATH: str = "/users"
CONTACTS_PATH: str = "/contacts"


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Shared by every resource client of one session."""

    base_url: str
    """API root, e.g. ``http://localhost:8080/api`` (no trailing slash)."""

    transport: Transport


class ResourceClient(Generic[R]):
    """CRUD operations for one resource collection.

    Parameters
    ----------
    config:
        Base URL and shared transport.
    path:
        Collection path below the base URL (``"/users"``).
    codec:
        JSON converter for the resource type.
    """

    def __init__(self, config: ApiConfig, path: str, codec: Codec[R]) -> None:
        self._transport: Transport = config.transport
        self._codec: Codec[R] = codec
        self.url: str = config.base_url.rstrip("/") + path

    def _item_url(self, record_id: int) -> str:
        return f"{self.url}/{record_id}"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_by_id(self, record_id: int) -> Outcome[R]:
        return self._decode(self._transport.get(self._item_url(record_id)), self._codec.loads_one)

    def obtain_all(self) -> Outcome[list[R]]:
        return self._decode(self._transport.get(self.url), self._codec.loads_many)

    def create(self, record: R) -> Outcome[str]:
        """POST *record*; succeeds whenever the server answered at all."""
        return self._transport.post(self._codec.dumps(record), self.url)

    def update(self, record: R) -> Outcome[str]:
        if record.id is None:
            return OtherFailure("Cannot update a record that has no id.")
        return self._transport.put(self._codec.dumps(record), self._item_url(record.id))

    def delete(self, record_id: int) -> Outcome[str]:
        return self._transport.delete(self._item_url(record_id))

    # ------------------------------------------------------------------
    # Decoding (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(outcome: Outcome[str], parse: Callable[[str], T]) -> Outcome[T]:
        if not isinstance(outcome, Ok):
            return outcome
        try:
            return Ok(parse(outcome.value))
        except PayloadError as exc:
            log.debug("Undecodable response body: %r", outcome.value)
            return OtherFailure(str(exc))


def user_client(config: ApiConfig) -> ResourceClient[User]:
    return ResourceClient(config, USERS_PATH, USER_CODEC)


def contact_client(config: ApiConfig) -> ResourceClient[Contact]:
    return ResourceClient(config, CONTACTS_PATH, CONTACT_CODEC)
