"""Menu driver: the top-level read-evaluate loop.

Three levels: main, users, contacts.  Each level prints a fixed numbered
menu, reads one line and dispatches through a mapping from an enumerated
command to its handler.  Unrecognised input prints an error and shows
the same menu again.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any

from crud_client.cli.console import console, error_console
from crud_client.cli.flows import ResourceFlows
from crud_client.cli.prompts import OPTION_ERROR, Prompter

OPTION_PROMPT = "Type the number of an option: "


class MainCommand(str, enum.Enum):
    EXIT = "0"
    USERS = "1"
    CONTACTS = "2"


class ResourceCommand(str, enum.Enum):
    BACK = "0"
    FIND = "1"
    LIST = "2"
    CREATE = "3"
    UPDATE = "4"
    DELETE = "5"


MAIN_LABELS: dict[MainCommand, str] = {
    MainCommand.EXIT: "Exit",
    MainCommand.USERS: "Access Users CRUD",
    MainCommand.CONTACTS: "Access Contact CRUD",
}


def resource_labels(noun: str, plural: str) -> dict[ResourceCommand, str]:
    return {
        ResourceCommand.BACK: "Exit to main menu",
        ResourceCommand.FIND: f"Obtain {noun} by ID",
        ResourceCommand.LIST: f"Obtain all {plural}",
        ResourceCommand.CREATE: f"Create {noun}",
        ResourceCommand.UPDATE: f"Update {noun}",
        ResourceCommand.DELETE: f"Delete {noun}",
    }


def parse_command(command_type: type[enum.Enum], text: str) -> Any:
    """Return the command whose value equals *text* exactly, else ``None``."""
    try:
        return command_type(text)
    except ValueError:
        return None


class MenuDriver:
    """Runs the interactive session until the user exits the main menu.

    Parameters
    ----------
    prompter:
        Shared input source.
    users, contacts:
        Flows for the two resources.
    """

    def __init__(
        self,
        prompter: Prompter,
        users: ResourceFlows[Any],
        contacts: ResourceFlows[Any],
    ) -> None:
        self._prompter = prompter
        self._main_handlers: dict[MainCommand, Callable[[], None]] = {
            MainCommand.USERS: lambda: self._resource_menu("Users Menu", "users", users),
            MainCommand.CONTACTS: lambda: self._resource_menu("Contact Menu", "contact", contacts),
        }

    def _show(self, title: str, labels: dict[Any, str]) -> None:
        console.print(f"\n[bold]--- {title} ---[/bold]")
        for command, label in labels.items():
            console.print(f"{command.value}. {label}")

    def _read_command(self, command_type: type[enum.Enum]) -> Any:
        command = parse_command(command_type, self._prompter.line(OPTION_PROMPT))
        if command is None:
            error_console.print(OPTION_ERROR)
        return command

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------

    def run(self) -> None:
        while True:
            self._show("Main Menu", MAIN_LABELS)
            command = self._read_command(MainCommand)
            if command is MainCommand.EXIT:
                console.print("Ending client process")
                return
            if command is not None:
                self._main_handlers[command]()

    def _resource_menu(self, title: str, name: str, flows: ResourceFlows[Any]) -> None:
        labels = resource_labels(flows.noun, flows.plural)
        handlers: dict[ResourceCommand, Callable[[], object]] = {
            ResourceCommand.FIND: flows.find_by_id,
            ResourceCommand.LIST: flows.obtain_all,
            ResourceCommand.CREATE: flows.create,
            ResourceCommand.UPDATE: flows.update,
            ResourceCommand.DELETE: flows.delete,
        }
        while True:
            self._show(title, labels)
            command = self._read_command(ResourceCommand)
            if command is ResourceCommand.BACK:
                console.print(f"Exiting {name} menu")
                return
            if command is not None:
                handlers[command]()
