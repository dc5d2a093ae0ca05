"""Shared pytest fixtures and configuration for the crud-client test suite.

Guidelines
----------
* No network access in any test; the transport or session is mocked.
* Interactive input comes from :class:`ScriptedInput`, never from stdin.
* Core tests must be pure; no side effects.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from unittest.mock import MagicMock

import pytest

from crud_client.cli.prompts import Prompter
from crud_client.core.outcome import Ok
from crud_client.core.resource_client import ApiConfig

BASE_URL = "http://localhost:8080/api"


class ScriptedInput:
    """Line reader that replays *lines* and records every prompt shown.

    Raises ``EOFError`` once the script is exhausted so a loop that keeps
    asking can never hang a test.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError("input script exhausted")
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


@pytest.fixture
def scripted() -> Callable[..., tuple[Prompter, ScriptedInput]]:
    """Build a :class:`Prompter` fed by the given lines."""

    def _make(*lines: str) -> tuple[Prompter, ScriptedInput]:
        reader = ScriptedInput(lines)
        return Prompter(reader), reader

    return _make


@pytest.fixture
def transport() -> MagicMock:
    """Transport double whose calls all succeed with an empty body."""
    mock = MagicMock()
    mock.get.return_value = Ok("[]")
    mock.post.return_value = Ok("")
    mock.put.return_value = Ok("")
    mock.delete.return_value = Ok("")
    return mock


@pytest.fixture
def api_config(transport: MagicMock) -> ApiConfig:
    return ApiConfig(base_url=BASE_URL, transport=transport)
