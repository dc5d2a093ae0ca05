"""CLI application entry point and command routing for crud-client.

This module is the **process-level error boundary**.  Request failures
are already handled inside the interactive flows; what reaches
:func:`cli` is a :class:`~crud_client.exceptions.CrudClientError`, an
interrupt, or a genuine bug, each mapped to a well-defined exit code.

Architecture notes
------------------
* No business logic lives here; work is delegated to the menu driver,
  the flows, and the infrastructure layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from crud_client.cli import exit_codes
from crud_client.cli.console import configure_logging, error_console
from crud_client.config import DEFAULT_BASE_URL, ClientSettings
from crud_client.exceptions import CrudClientError
from crud_client.version import __version__

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``crud-client``           interactive users/contacts menu
    * ``crud-client doctor``    environment and API diagnostics
    * ``crud-client --version``
    """
    parser = argparse.ArgumentParser(
        prog="crud-client",
        description="Interactive console client for the Users/Contacts API.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=["doctor"],
        help="Run 'doctor' for diagnostics; omit to start the interactive menu.",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"API base URL (default: {DEFAULT_BASE_URL}).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: wait indefinitely).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every request at DEBUG level.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_interactive(settings: ClientSettings) -> int:
    """Wire transport → resource clients → flows → menu, then run the menu."""
    from crud_client.cli.flows import ResourceFlows
    from crud_client.cli.forms import ContactForm, UserForm
    from crud_client.cli.menu import MenuDriver
    from crud_client.cli.prompts import Prompter
    from crud_client.core.resource_client import ApiConfig, contact_client, user_client
    from crud_client.infra.http_transport import RequestsTransport

    transport = RequestsTransport(timeout=settings.timeout)
    config = ApiConfig(base_url=settings.base_url, transport=transport)
    prompter = Prompter()
    log.debug("Using API at %s", settings.base_url)

    try:
        MenuDriver(
            prompter,
            users=ResourceFlows(user_client(config), UserForm(), prompter),
            contacts=ResourceFlows(contact_client(config), ContactForm(), prompter),
        ).run()
    finally:
        transport.close()
    return exit_codes.SUCCESS


def _handle_doctor(settings: ClientSettings) -> int:
    from crud_client.cli.doctor import run_doctor

    return run_doctor(settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the crud-client CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = _build_parser().parse_args(argv)
    settings = ClientSettings.from_values(
        base_url=args.base_url,
        timeout=args.timeout,
        verbose=args.verbose,
    )
    configure_logging(settings.verbose)

    if args.command == "doctor":
        return _handle_doctor(settings)
    return _handle_interactive(settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CrudClientError as exc:
        error_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            error_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except (KeyboardInterrupt, EOFError):
        error_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        log.debug("Unhandled exception", exc_info=True)
        error_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
