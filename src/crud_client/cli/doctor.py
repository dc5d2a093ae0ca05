"""``crud-client doctor``: environment and connectivity diagnostics.

Collects the runtime versions the client depends on and probes the API
with a single ``GET {base}/users``, then renders a summary table.
"""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from crud_client.cli import exit_codes
from crud_client.cli.console import console
from crud_client.config import ClientSettings
from crud_client.core.outcome import ConnectivityFailure, Ok
from crud_client.core.resource_client import USERS_PATH
from crud_client.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _package_version_check() -> Check:
    return "crud-client", __version__, OK


def _python_version_check() -> Check:
    ok = sys.version_info[:2] >= (3, 11)
    return "Python", platform.python_version(), OK if ok else "[red]FAIL (>=3.11 required)[/red]"


def _distribution_check(name: str, *, required: bool) -> Check:
    try:
        return name, version(name), OK
    except PackageNotFoundError:
        # rich is optional: output falls back to plain text.
        return name, "NOT INSTALLED", FAIL if required else WARN


def _api_check(settings: ClientSettings) -> Check:
    """Probe the users collection once; only an unreachable server fails."""
    url = settings.base_url + USERS_PATH
    try:
        from crud_client.infra.http_transport import RequestsTransport
    except ModuleNotFoundError:
        return "API", "not checked (requests missing)", FAIL

    transport = RequestsTransport(timeout=settings.timeout or 5.0)
    try:
        outcome = transport.get(url)
    finally:
        transport.close()

    if isinstance(outcome, Ok):
        return "API", url, OK
    if isinstance(outcome, ConnectivityFailure):
        return "API", f"{url} (unreachable)", FAIL
    return "API", f"{url} ({type(outcome).__name__})", WARN


def _status_plain(status: str) -> str:
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[Check]) -> None:
    print("\ncrud-client doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<42} {_status_plain(status):<6}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: ClientSettings) -> int:
    """Run every check and render the summary.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check failed,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _package_version_check(),
        _python_version_check(),
        _distribution_check("requests", required=True),
        _distribution_check("rich", required=False),
        _api_check(settings),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
    else:
        table = Table(title="crud-client doctor", header_style="bold cyan", border_style="dim")
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=6)
        for label, value, status in checks:
            table.add_row(label, value, status)
        console.print(table)
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
