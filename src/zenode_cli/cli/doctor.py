"""``zenode doctor`` — environment diagnostics command.

Gathers configuration and connectivity information and renders a Rich
table summarising whether the runtime environment can reach a node.

This module lives in the CLI layer — it may import from ``infra``
and ``config``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from zenode_cli.cli import exit_codes
from zenode_cli.cli.console import console, escape_markup
from zenode_cli.config import DEFAULT_ENV_FILE, Settings, load_settings
from zenode_cli.exceptions import ConfigurationError
from zenode_cli.infra.node_probe import probe_node
from zenode_cli.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = major >= 3 and minor >= 10
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _zenode_version_check() -> Check:
    """Return (label, value, status) for the zenode-cli version row."""
    return "zenode-cli", __version__, "[green]OK[/green]"


def _env_file_check(env_file: str | Path | None) -> Check:
    """Return (label, value, status) for the dotenv file row."""
    path = Path(env_file) if env_file is not None else Path(DEFAULT_ENV_FILE)
    if path.is_file():
        return ".env", str(path), "[green]OK[/green]"
    return ".env", f"{path} (not found)", "[yellow]WARN[/yellow]"


def _key_pair_check(settings: Settings) -> Check:
    """Return (label, value, status) for the key pair row."""
    if settings.key_pair_path is None:
        return "Key pair", "not set", "[yellow]WARN[/yellow]"
    if settings.key_pair_path.is_file():
        return "Key pair", str(settings.key_pair_path), "[green]OK[/green]"
    return "Key pair", f"{settings.key_pair_path} (missing)", "[red]FAIL[/red]"


def _node_check(settings: Settings) -> Check:
    """Return (label, value, status) for the node connectivity row."""
    status_obj = probe_node(settings)
    value = f"{status_obj.endpoint} ({status_obj.detail})"
    if status_obj.reachable:
        return "Node", value, "[green]OK[/green]"
    return "Node", value, "[red]FAIL[/red]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nzenode doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<48} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<48} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def collect_checks(env_file: str | Path | None = None) -> list[Check]:
    """Run every diagnostic and return the rows in display order."""
    checks = [
        _zenode_version_check(),
        _python_version_check(),
        _env_file_check(env_file),
    ]
    try:
        settings = load_settings(env_file)
    except ConfigurationError as exc:
        checks.append(("Config", str(exc), "[red]FAIL[/red]"))
        return checks

    checks.append(("Config", "valid", "[green]OK[/green]"))
    checks.append(_key_pair_check(settings))
    checks.append(_node_check(settings))
    return checks


def run_doctor(env_file: str | Path | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = collect_checks(env_file)
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="zenode doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, escape_markup(value), status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
