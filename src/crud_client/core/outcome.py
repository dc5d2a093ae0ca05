"""Tagged result type returned by the transport and resource clients.

Every network-calling operation yields exactly one of:

* :class:`Ok`: the request succeeded and carries a value.
* :class:`NotFound`: the API answered ``404``.
* :class:`ConnectivityFailure`: the API could not be reached at all.
* :class:`OtherFailure`: any other status, transport or decoding problem.

Callers branch with ``match`` or ``isinstance``; nothing is raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    url: str = ""


@dataclass(frozen=True, slots=True)
class ConnectivityFailure:
    detail: str = ""


@dataclass(frozen=True, slots=True)
class OtherFailure:
    detail: str

    status_code: int | None = None
    """HTTP status when the failure came from a response, else ``None``."""


Failure = Union[NotFound, ConnectivityFailure, OtherFailure]
Outcome = Union[Ok[T], NotFound, ConnectivityFailure, OtherFailure]
