"""Runtime settings resolved from the command line.

The client keeps no state across runs and reads no environment
variables: everything comes from flags, with defaults that match a
locally running API.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from crud_client.exceptions import ConfigurationError

DEFAULT_BASE_URL: str = "http://localhost:8080/api"


@dataclass(frozen=True, slots=True)
class ClientSettings:
    base_url: str = DEFAULT_BASE_URL

    timeout: float | None = None
    """Per-request timeout in seconds; ``None`` waits indefinitely."""

    verbose: bool = False

    @classmethod
    def from_values(
        cls,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        verbose: bool = False,
    ) -> ClientSettings:
        """Validate raw flag values and build settings.

        Raises
        ------
        ConfigurationError
            If *base_url* is not an absolute http(s) URL or *timeout* is
            not positive.
        """
        url = (base_url or DEFAULT_BASE_URL).strip().rstrip("/")
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                f"Invalid base URL: {base_url}",
                hint=f"Use an absolute http(s) URL such as {DEFAULT_BASE_URL}",
            )
        if timeout is not None and timeout <= 0:
            raise ConfigurationError(
                f"Invalid timeout: {timeout}",
                hint="The timeout must be a positive number of seconds.",
            )
        return cls(base_url=url, timeout=timeout, verbose=verbose)
