"""crud-client: interactive console client for the Users/Contacts CRUD API.

Talks to the HTTP API over ``requests`` with a strict layered architecture.
"""

from crud_client.version import __version__

__all__: list[str] = ["__version__"]
