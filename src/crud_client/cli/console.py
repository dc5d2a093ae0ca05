"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) keep working when it is not installed.
Normal output goes to stdout, errors to stderr, mirroring the two
streams an interactive session expects.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

from crud_client.exceptions import EnvironmentError

_MARKUP_RE = re.compile(r"\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console instance targeting stdout or stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-text fallback."""

    def __init__(self, *, stderr: bool = False) -> None:
        self._stderr = stderr

    def _plain_file(self) -> Any:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object, end: str = "\n") -> None:
        """Render Rich markup when available, else strip it and print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            plain = [_MARKUP_RE.sub("", o) if isinstance(o, str) else o for o in objects]
            print(*plain, end=end, file=self._plain_file())
            return
        rich_console.print(*objects, end=end)

    def text(self, *objects: object) -> None:
        """Print user data verbatim; brackets are never read as markup."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(*objects, file=self._plain_file())
            return
        rich_console.print(*objects, markup=False, highlight=False, emoji=False)

    def input(self, prompt: str = "") -> str:
        """Read one line from stdin after showing *prompt*."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            return input(prompt)
        return str(rich_console.input(prompt, markup=False))


console = _ConsoleProxy()
error_console = _ConsoleProxy(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr, through Rich when it is installed."""
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(
            level=level,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=get_rich_console(stderr=True), show_path=False)],
    )
