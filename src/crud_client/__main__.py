"""Allow ``python -m crud_client`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m crud_client`` behaves identically to the ``crud-client``
console script.
"""

from __future__ import annotations

from crud_client.cli.app import cli

if __name__ == "__main__":
    cli()
