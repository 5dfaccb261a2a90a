"""Custom exception hierarchy for zenode-cli.

All exceptions that cross layer boundaries must inherit from
:class:`ZenodeError`.  Raw third-party exceptions (e.g. from httpx or
pydantic) must NEVER propagate beyond the layer that triggered them —
they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
ZenodeError
├── UsageError
├── FieldShapeError
├── OperatorError
├── ConfigurationError
├── AbortedError
└── EnvironmentError
"""

from __future__ import annotations


class ZenodeError(Exception):
    """Base exception for all zenode-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class UsageError(ZenodeError):
    """Raised when a required command-line value is missing or blank."""


class FieldShapeError(ZenodeError):
    """Raised when a raw field spec is not of the shape ``key:value``."""

    def __init__(self, message: str, *, spec: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.spec: str = spec
        """The offending raw field spec, exactly as supplied."""


# --- Downstream ------------------------------------------------------------

class OperatorError(ZenodeError):
    """Raised when the Operator call fails (network, validation, conflict)."""


# --- Environment / tooling -------------------------------------------------

class ConfigurationError(ZenodeError):
    """Raised when settings from the environment or dotenv file are invalid."""


class AbortedError(ZenodeError):
    """Raised when the user declines to send a previewed request."""


class EnvironmentError(ZenodeError):
    """Raised when an optional runtime dependency is not available."""
