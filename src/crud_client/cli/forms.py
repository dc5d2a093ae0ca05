"""Per-resource prompt sequences and record rendering.

A form knows which fields a resource has, in which order they are asked
for, and how a record is shown on screen.  It never talks to the API.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from crud_client.cli.prompts import Prompter
from crud_client.core.models import Contact, User
from crud_client.core.updates import ContactUpdate, UserUpdate

KEEP = " (leave blank to keep the old one): "


def format_timestamp(value: datetime | None) -> str:
    """Render a creation time, or ``"-"`` before the API assigned one."""
    if value is None:
        return "-"
    return value.isoformat(sep=" ", timespec="milliseconds")


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UserForm:
    noun: str = "user"
    plural: str = "users"

    def collect_new(self, prompter: Prompter) -> User:
        return User(
            name=prompter.text("Enter user's name: "),
            last_name=prompter.text("Enter user's last name: "),
            phone_number=prompter.phone("Enter the phone number: "),
            email=prompter.email("Enter the email: "),
            password=prompter.password("Enter the password: "),
        )

    def collect_update(self, prompter: Prompter) -> UserUpdate:
        return UserUpdate(
            name=prompter.optional_text("Enter the new name" + KEEP),
            last_name=prompter.optional_text("Enter the new last name" + KEEP),
            phone_number=prompter.optional_phone("Enter the new phone number" + KEEP),
            email=prompter.optional_email("Enter the new email" + KEEP),
            password=prompter.optional_password("Enter the new password" + KEEP),
        )

    @staticmethod
    def render(user: User) -> str:
        # The password digest is never shown.
        return "\n".join(
            (
                f"User id: {user.id}",
                f"Name: {user.name}",
                f"Last name: {user.last_name}",
                f"Phone number: {user.phone_number}",
                f"Email: {user.email}",
                f"Time of creation: {format_timestamp(user.timestamp)}",
            )
        )


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ContactForm:
    noun: str = "contact"
    plural: str = "contacts"

    def collect_new(self, prompter: Prompter) -> Contact:
        return Contact(
            name=prompter.text("Enter your name: "),
            email=prompter.email("Enter your email: "),
            reason=prompter.reason("What is the reason of the contact?"),
            message=prompter.text("Write the message you want to send us: "),
        )

    def collect_update(self, prompter: Prompter) -> ContactUpdate:
        return ContactUpdate(
            name=prompter.optional_text("Enter the new name" + KEEP),
            email=prompter.optional_email("Enter the new email" + KEEP),
            reason=prompter.optional_reason("Select the new reason (leave blank to keep the old one): "),
            message=prompter.optional_text("Enter the new message" + KEEP),
        )

    @staticmethod
    def render(contact: Contact) -> str:
        return "\n".join(
            (
                f"Contact id: {contact.id}",
                f"Name: {contact.name}",
                f"Email: {contact.email}",
                f"Reason: {contact.reason.value}",
                f"Message: {contact.message}",
                f"Time of creation: {format_timestamp(contact.timestamp)}",
            )
        )
