"""Pure input grammar for the interactive prompts.

Each ``parse_*`` function takes one already-stripped line of input and
returns the accepted value, or ``None`` when the line does not match the
grammar.  Blank handling (allow-blank mode) is the caller's concern; an
empty string never matches here.

Every function in this module is deterministic and free of I/O.
"""

from __future__ import annotations

import hashlib
import re

from crud_client.core.models import Reason

PHONE_DIGITS: int = 9

_PHONE_RE = re.compile(rf"(\s*[0-9]\s*){{{PHONE_DIGITS}}}")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_IDENTIFIER_RE = re.compile(r"[0-9]+")

MAX_IDENTIFIER: int = 2**63 - 1
"""Identifiers are signed 64-bit integers on the API side."""
_MAX_IDENTIFIER_DIGITS: int = len(str(MAX_IDENTIFIER))

REASON_CHOICES: dict[str, Reason] = {
    "1": Reason.QUESTION,
    "2": Reason.INFORMATION,
    "3": Reason.ALERT,
}


def parse_phone(text: str) -> str | None:
    """Return the digits-only form of a nine-digit phone number.

    Whitespace between digits is tolerated (``"600 123 456"``); any other
    character, or a digit count other than nine, is rejected.
    """
    if not _PHONE_RE.fullmatch(text):
        return None
    return re.sub(r"\D", "", text)


def parse_email(text: str) -> str | None:
    """Return *text* unchanged when it looks like ``local@domain.tld``."""
    if not _EMAIL_RE.fullmatch(text):
        return None
    return text


def parse_identifier(text: str) -> int | None:
    """Return a non-negative 64-bit identifier, or ``None``."""
    if not _IDENTIFIER_RE.fullmatch(text):
        return None
    # int() refuses very long digit strings; anything this long is out of range.
    if len(text.lstrip("0")) > _MAX_IDENTIFIER_DIGITS:
        return None
    value = int(text)
    if value > MAX_IDENTIFIER:
        return None
    return value


def parse_text(text: str) -> str | None:
    """Accept any non-empty string."""
    return text or None


def hash_password(plaintext: str) -> str:
    """Digest *plaintext* with SHA-256 and return 64 lowercase hex chars."""
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


def parse_password(text: str) -> str | None:
    """Digest a non-empty password; the plaintext is never returned."""
    if not text:
        return None
    return hash_password(text)


def parse_reason(text: str) -> Reason | None:
    """Map a numbered menu choice (``"1"``..``"3"``) to a :class:`Reason`."""
    return REASON_CHOICES.get(text)


def parse_confirmation(text: str) -> bool | None:
    """``Y``/``y`` prefix → ``True``, ``N``/``n`` prefix → ``False``."""
    if text[:1] in ("Y", "y"):
        return True
    if text[:1] in ("N", "n"):
        return False
    return None
