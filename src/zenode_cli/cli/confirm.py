"""Interactive confirmation before a request is sent.

Used by ``--confirm``: after the preview is shown, the user must accept
before the Operator is called.  questionary is imported lazily so the
non-interactive paths never need it.
"""

from __future__ import annotations

from typing import Any

from zenode_cli.exceptions import AbortedError, EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for the confirmation prompt."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def confirm_dispatch(heading: str) -> None:
    """Ask whether to proceed with the operation described by *heading*.

    Raises
    ------
    AbortedError
        When the user answers no or cancels the prompt (Ctrl+C / Esc),
        in which case questionary returns ``None``.
    """
    questionary = _import_questionary()
    action = heading.rstrip(".").lower()
    answer = questionary.confirm(f"Proceed with {action}?", default=False).ask()
    if not answer:
        raise AbortedError("Operation cancelled; nothing was sent.")
