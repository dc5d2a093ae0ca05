"""Interactive CRUD flows for one resource.

Each public method is a complete menu action: it prompts through the
:class:`~crud_client.cli.prompts.Prompter`, calls the resource client,
and reports the outcome.  Failures are rendered here and never
propagate; the menu driver always regains control.
"""

from __future__ import annotations

import logging
from typing import Generic, Protocol, TypeVar

from crud_client.cli.console import console, error_console
from crud_client.cli.prompts import Prompter
from crud_client.core.models import Contact, User
from crud_client.core.outcome import ConnectivityFailure, Failure, NotFound, Ok
from crud_client.core.resource_client import ResourceClient
from crud_client.core.updates import ContactUpdate, UserUpdate, merge

log = logging.getLogger(__name__)

R = TypeVar("R", User, Contact)

DIVIDER = "-------------------------"
CONNECT_ERROR = "An error occurred while trying to connect to the server"


class Form(Protocol[R]):
    noun: str
    plural: str

    def collect_new(self, prompter: Prompter) -> R: ...

    def collect_update(self, prompter: Prompter) -> UserUpdate | ContactUpdate: ...

    def render(self, record: R) -> str: ...


class ResourceFlows(Generic[R]):
    """Find, list, create, update and delete records of one resource.

    Parameters
    ----------
    client:
        API client for the resource collection.
    form:
        Prompt sequence and rendering for the resource.
    prompter:
        Input source shared with the menu driver.
    """

    def __init__(self, client: ResourceClient[R], form: Form[R], prompter: Prompter) -> None:
        self._client = client
        self._form = form
        self._prompter = prompter

    @property
    def noun(self) -> str:
        return self._form.noun

    @property
    def plural(self) -> str:
        return self._form.plural

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def find_by_id(self) -> R | None:
        """Prompt for an id and show the record; return it for reuse."""
        console.print(f"\n[bold]-- Finding {self.noun.capitalize()} --[/bold]")
        record_id = self._prompter.identifier(f"Enter the {self.noun}'s id: ")

        outcome = self._client.find_by_id(record_id)
        if not isinstance(outcome, Ok):
            self._report(outcome, "find", record_id)
            return None

        console.print(f"- {self.noun.capitalize()} found -")
        console.text(self._form.render(outcome.value))
        return outcome.value

    def obtain_all(self) -> None:
        console.print(f"\n[bold]-- Printing all {self.plural} --[/bold]")
        outcome = self._client.obtain_all()
        if not isinstance(outcome, Ok):
            self._report(outcome, "obtain")
            return

        if not outcome.value:
            console.print(f"There aren't any {self.plural} in the database")
            return
        for record in outcome.value:
            console.text(self._form.render(record))
            console.print(DIVIDER)

    def create(self) -> None:
        console.print(f"\n[bold]-- Creating {self.noun} --[/bold]")
        record = self._form.collect_new(self._prompter)

        if not self._prompter.confirm(f"\nAre you sure you want to create this {self.noun}?"):
            console.print("Operation cancelled")
            return

        outcome = self._client.create(record)
        if not isinstance(outcome, Ok):
            self._report(outcome, "create")
            return
        console.print(f"[green]{self.noun.capitalize()} created successfully[/green]")

    def update(self) -> None:
        console.print(f"\n[bold]-- Updating {self.noun} --[/bold]")
        console.print(f"Selecting the {self.noun} to be updated")
        current = self.find_by_id()
        if current is None:
            return

        console.print(DIVIDER)
        updated = merge(current, self._form.collect_update(self._prompter))

        console.print(f"The updated {self.noun} will be: ")
        console.text(self._form.render(updated))
        if not self._prompter.confirm("Are you sure you want to apply the changes?"):
            console.print("Operation cancelled")
            return

        outcome = self._client.update(updated)
        if not isinstance(outcome, Ok):
            self._report(outcome, "update", updated.id)
            return
        console.print(f"[green]{self.noun.capitalize()} updated successfully[/green]")

    def delete(self) -> None:
        console.print(f"\n[bold]-- Deleting {self.noun} --[/bold]")
        console.print(f"Selecting the {self.noun} to be deleted")
        current = self.find_by_id()
        if current is None or current.id is None:
            return

        console.print(DIVIDER)
        if not self._prompter.confirm(f"Are you sure you want to delete this {self.noun}?"):
            console.print("Operation cancelled")
            return

        outcome = self._client.delete(current.id)
        if not isinstance(outcome, Ok):
            self._report(outcome, "delete", current.id)
            return
        console.print(f"[green]{self.noun.capitalize()} deleted successfully[/green]")

    # ------------------------------------------------------------------
    # Failure rendering
    # ------------------------------------------------------------------

    def _report(self, failure: Failure, action: str, record_id: int | None = None) -> None:
        if isinstance(failure, NotFound) and record_id is not None:
            console.print(f"Couldn't find the {self.noun} by id: {record_id}")
            return
        if isinstance(failure, ConnectivityFailure):
            log.debug("Server unreachable: %s", failure.detail)
            error_console.print(CONNECT_ERROR)
            return

        if isinstance(failure, NotFound):
            detail = f"Not found: {failure.url}"
        else:
            detail = failure.detail
        target = f"the {self.plural}" if action == "obtain" else f"the {self.noun}"
        log.debug("Failed to %s %s: %s", action, target, detail)
        error_console.print(f"An unexpected error occurred while trying to {action} {target}:")
        error_console.text(detail)
