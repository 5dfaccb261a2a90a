"""Terminal rendering of previews and results.

The text comes from :meth:`zenode_cli.core.preview.Preview.lines`; this
module only picks a colour per line and the stream to write to.
"""

from __future__ import annotations

from zenode_cli.cli.console import console, output
from zenode_cli.core.preview import Preview

_ROW_STYLES: dict[str, str] = {
    "name": "magenta",
    "schema_id": "magenta",
    "description": "yellow",
    "view_id": "yellow",
    "fields": "bright_green",
}


def print_preview(preview: Preview) -> None:
    """Print *preview* to stderr, followed by a blank line."""
    console.print(f"[bold]{preview.heading}[/bold]")
    for label, value in preview.lines():
        console.print_row(label, value, _ROW_STYLES.get(label, "default"))
    console.print("")


def print_identifier(identifier: str) -> None:
    """Print the identifier returned by the Operator to stdout, unwrapped."""
    output.print_row("ID", identifier, "cyan")
