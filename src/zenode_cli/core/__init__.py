"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from zenode_cli.core.dispatch_service import DispatchService
from zenode_cli.core.fields import normalize_fields, parse_field, split_field_string
from zenode_cli.core.models import (
    Command,
    CreateInstance,
    CreateSchema,
    DeleteInstance,
    FieldPair,
    UpdateInstance,
)
from zenode_cli.core.preview import Preview, build_preview, format_fields
from zenode_cli.core.protocols import Operator

__all__: list[str] = [
    "Command",
    "CreateInstance",
    "CreateSchema",
    "DeleteInstance",
    "DispatchService",
    "FieldPair",
    "Operator",
    "Preview",
    "UpdateInstance",
    "build_preview",
    "format_fields",
    "normalize_fields",
    "parse_field",
    "split_field_string",
]
