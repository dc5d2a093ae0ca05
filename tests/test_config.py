"""Tests for command-line settings validation (config.py)."""

from __future__ import annotations

import pytest

from crud_client.config import DEFAULT_BASE_URL, ClientSettings
from crud_client.exceptions import ConfigurationError


class TestClientSettings:
    def test_defaults(self) -> None:
        settings = ClientSettings.from_values()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout is None
        assert settings.verbose is False

    def test_trailing_slash_and_whitespace_removed(self) -> None:
        settings = ClientSettings.from_values(base_url="  http://api.local:9000/api/  ")
        assert settings.base_url == "http://api.local:9000/api"

    @pytest.mark.parametrize(
        "url",
        ["localhost:8080/api", "ftp://host/api", "http://", "/api"],
    )
    def test_rejects_non_http_urls(self, url: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ClientSettings.from_values(base_url=url)
        assert exc_info.value.hint is not None

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(ConfigurationError, match="timeout"):
            ClientSettings.from_values(timeout=timeout)

    def test_keeps_positive_timeout(self) -> None:
        assert ClientSettings.from_values(timeout=0.5).timeout == 0.5
