"""Blocking input prompts built on the pure grammar in :mod:`crud_client.core.validation`.

Every prompt prints its message once, then reads lines until one is
accepted, printing an error to stderr after each rejected line.  There
is no retry limit.

The ``optional_*`` variants run in allow-blank mode: an empty line is
accepted and returned as ``None``, meaning "keep the existing value".
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar, cast

from crud_client.cli.console import console, error_console
from crud_client.core.models import Reason
from crud_client.core.validation import (
    REASON_CHOICES,
    parse_confirmation,
    parse_email,
    parse_identifier,
    parse_password,
    parse_phone,
    parse_reason,
    parse_text,
)

T = TypeVar("T")

LineReader = Callable[[str], str]
"""Shows a prompt and returns one raw line of input."""

PHONE_ERROR = "Format not valid, please enter the phone number again"
EMAIL_ERROR = "Format not valid, please enter the email again"
NUMBER_ERROR = "Format not valid, please enter the number again"
TEXT_ERROR = "Must introduce at least 1 character"
OPTION_ERROR = "The option typed is not valid"


class Prompter:
    """Reads and validates interactive input.

    Parameters
    ----------
    read_line:
        Source of raw lines.  Defaults to the console's ``input``; tests
        inject a scripted reader.
    """

    def __init__(self, read_line: LineReader | None = None) -> None:
        self._read_line: LineReader = read_line or console.input

    def line(self, prompt: str = "") -> str:
        """Read one line with surrounding whitespace removed."""
        return self._read_line(prompt).strip()

    def _ask(
        self,
        message: str,
        parse: Callable[[str], T | None],
        error: str,
        *,
        allow_blank: bool = False,
    ) -> T | None:
        console.print(message)
        while True:
            text = self.line()
            if allow_blank and not text:
                return None
            value = parse(text)
            if value is not None:
                return value
            error_console.print(error)

    # ------------------------------------------------------------------
    # Field prompts
    # ------------------------------------------------------------------

    def text(self, message: str) -> str:
        return cast(str, self._ask(message, parse_text, TEXT_ERROR))

    def optional_text(self, message: str) -> str | None:
        return self._ask(message, parse_text, TEXT_ERROR, allow_blank=True)

    def phone(self, message: str) -> str:
        return cast(str, self._ask(message, parse_phone, PHONE_ERROR))

    def optional_phone(self, message: str) -> str | None:
        return self._ask(message, parse_phone, PHONE_ERROR, allow_blank=True)

    def email(self, message: str) -> str:
        return cast(str, self._ask(message, parse_email, EMAIL_ERROR))

    def optional_email(self, message: str) -> str | None:
        return self._ask(message, parse_email, EMAIL_ERROR, allow_blank=True)

    def password(self, message: str) -> str:
        """Return the SHA-256 digest of a non-empty password."""
        return cast(str, self._ask(message, parse_password, TEXT_ERROR))

    def optional_password(self, message: str) -> str | None:
        """Blank input returns ``None`` and is never hashed."""
        return self._ask(message, parse_password, TEXT_ERROR, allow_blank=True)

    def identifier(self, message: str) -> int:
        """Blank input is never accepted for identifiers."""
        return cast(int, self._ask(message, parse_identifier, NUMBER_ERROR))

    # ------------------------------------------------------------------
    # Menu-style prompts
    # ------------------------------------------------------------------

    def reason(self, message: str) -> Reason:
        return cast(Reason, self._ask_reason(message, allow_blank=False))

    def optional_reason(self, message: str) -> Reason | None:
        return self._ask_reason(message, allow_blank=True)

    def _ask_reason(self, message: str, *, allow_blank: bool) -> Reason | None:
        while True:
            console.print(message)
            for key, reason in REASON_CHOICES.items():
                console.print(f"{key}. {reason.label}")
            text = self.line("Type the number of an option: ")

            selected = parse_reason(text)
            if selected is not None:
                console.print(f"Reason selected: {selected.label}\n")
                return selected
            if allow_blank and not text:
                console.print("Reason selected: Keep the old one\n")
                return None
            error_console.print(f"{OPTION_ERROR}\n")

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; only a ``Y``/``N`` prefix is accepted."""
        console.print(f"{message} (Y/N)")
        while True:
            answer = parse_confirmation(self.line())
            if answer is not None:
                return answer
            error_console.print(f"{OPTION_ERROR}\n")
