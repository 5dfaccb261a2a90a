"""Allow ``python -m zenode_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m zenode_cli`` behaves identically to the ``zenode`` console
script.
"""

from __future__ import annotations

from zenode_cli.cli.app import cli

if __name__ == "__main__":
    cli()
