"""Core layer: domain models, input grammar, JSON codec and API clients.

Rules
-----
* No ``print()`` calls.
* No direct network access: HTTP goes through the ``Transport`` protocol.
* No imports from ``cli`` or ``infra``.
"""

from crud_client.core.models import Contact, Reason, User
from crud_client.core.outcome import ConnectivityFailure, NotFound, Ok, OtherFailure, Outcome
from crud_client.core.protocols import Transport
from crud_client.core.resource_client import ApiConfig, ResourceClient, contact_client, user_client
from crud_client.core.updates import ContactUpdate, UserUpdate, merge

__all__: list[str] = [
    "ApiConfig",
    "ConnectivityFailure",
    "Contact",
    "ContactUpdate",
    "NotFound",
    "Ok",
    "OtherFailure",
    "Outcome",
    "Reason",
    "ResourceClient",
    "Transport",
    "User",
    "UserUpdate",
    "contact_client",
    "merge",
    "user_client",
]
