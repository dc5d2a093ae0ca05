"""Infrastructure layer: external system integration.

This layer wraps all interaction with the HTTP API.  Every raw
``requests`` exception must be caught here and turned into an outcome
value from :mod:`crud_client.core.outcome`.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from crud_client.infra.http_transport import RequestsTransport

__all__: list[str] = ["RequestsTransport"]
