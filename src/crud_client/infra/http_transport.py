"""``requests``-backed implementation of :class:`~crud_client.core.protocols.Transport`.

This module is the **only** place in the codebase that imports
``requests``.  Every ``requests`` exception is caught here and turned
into an outcome value; nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging

import requests

from crud_client.core.outcome import ConnectivityFailure, NotFound, Ok, Outcome, OtherFailure

log = logging.getLogger(__name__)

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


class RequestsTransport:
    """Concrete :class:`Transport` over a shared :class:`requests.Session`.

    Usage::

        transport = RequestsTransport()
        outcome = transport.get("http://localhost:8080/api/users/1")

    Parameters
    ----------
    session:
        Session reused for every request.  A fresh one is created when
        omitted.
    timeout:
        Per-request timeout in seconds; ``None`` waits indefinitely.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self._session: requests.Session = session or requests.Session()
        self._timeout: float | None = timeout

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def get(self, url: str) -> Outcome[str]:
        return self._send("GET", url, checked=True)

    def post(self, body: str, url: str) -> Outcome[str]:
        # Creation is fire-and-forget: the status is logged, never mapped.
        return self._send("POST", url, body=body, checked=False)

    def put(self, body: str, url: str) -> Outcome[str]:
        return self._send("PUT", url, body=body, checked=True)

    def delete(self, url: str) -> Outcome[str]:
        return self._send("DELETE", url, checked=True)

    def close(self) -> None:
        self._session.close()

    # ------------------------------------------------------------------
    # Request execution + status mapping
    # ------------------------------------------------------------------

    def _send(
        self,
        method: str,
        url: str,
        *,
        body: str | None = None,
        checked: bool,
    ) -> Outcome[str]:
        headers = JSON_HEADERS if body is not None else None
        try:
            response = self._session.request(
                method,
                url,
                data=body.encode("utf-8") if body is not None else None,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.ConnectionError as exc:
            log.debug("%s %s: connection failed: %s", method, url, exc)
            return ConnectivityFailure(str(exc))
        except requests.RequestException as exc:
            log.debug("%s %s: request failed: %s", method, url, exc)
            return OtherFailure(f"{type(exc).__name__}: {exc}")

        log.debug("%s %s -> %s", method, url, response.status_code)
        if not checked:
            log.debug("Response body: %s", response.text)
            return Ok(response.text)
        return self._map_status(url, response)

    @staticmethod
    def _map_status(url: str, response: requests.Response) -> Outcome[str]:
        status = response.status_code
        if status == 200:
            return Ok(response.text)
        if status == 404:
            return NotFound(url)
        return OtherFailure(f"Error: {status}", status_code=status)
