"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed, or no sub-command was given."""

GENERAL_ERROR: int = 1
"""A known ZenodeError was caught. User-facing message was displayed."""

USAGE_ERROR: int = 2
"""argparse rejected the command line (missing or unknown flag)."""

UNEXPECTED_ERROR: int = 3
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
