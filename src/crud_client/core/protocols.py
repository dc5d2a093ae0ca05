"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols, never on the concrete
``requests``-backed transport, so resource clients can be exercised
with in-memory doubles.
"""

from __future__ import annotations

from typing import Protocol

from crud_client.core.outcome import Outcome


class Transport(Protocol):
    """Contract for the blocking HTTP transport.

    Each method issues exactly one request and returns an outcome instead
    of raising.  Implementations must report an unreachable server as
    :class:`~crud_client.core.outcome.ConnectivityFailure`, distinct from
    ``404`` (:class:`~crud_client.core.outcome.NotFound`) and from any
    other status (:class:`~crud_client.core.outcome.OtherFailure`).
    """

    def get(self, url: str) -> Outcome[str]:
        """``200`` → body, ``404`` → not found, else failure."""
        ...  # pragma: no cover

    def post(self, body: str, url: str) -> Outcome[str]:
        """Send JSON *body*; the response status is not interpreted."""
        ...  # pragma: no cover

    def put(self, body: str, url: str) -> Outcome[str]:
        """Same status mapping as :meth:`get`."""
        ...  # pragma: no cover

    def delete(self, url: str) -> Outcome[str]:
        """Same status mapping as :meth:`get`."""
        ...  # pragma: no cover
