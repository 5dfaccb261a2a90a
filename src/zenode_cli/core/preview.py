"""Pure rendering of a pending request, shown before it is sent.

The preview is built from the **normalized** fields so the user sees
exactly what the Operator will receive.  Colour and terminal output are
the CLI layer's concern; this module only produces data and plain text.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from zenode_cli.core.models import (
    Command,
    CreateInstance,
    CreateSchema,
    DeleteInstance,
    FieldPair,
    UpdateInstance,
)


@dataclass(frozen=True, slots=True)
class Preview:
    """Heading, ordered ``(label, value)`` rows and the fields to send."""

    heading: str
    rows: tuple[tuple[str, str], ...]
    fields: tuple[FieldPair, ...] | None = None
    """``None`` for operations that carry no fields at all."""

    def lines(self) -> tuple[tuple[str, str], ...]:
        """Rows below the heading, with ``fields`` rendered last."""
        if self.fields is None:
            return self.rows
        return (*self.rows, ("fields", format_fields(self.fields)))

    def as_text(self) -> str:
        body = [f"{label}: {value}" for label, value in self.lines()]
        return "\n".join([self.heading, *body])


def format_fields(fields: Sequence[FieldPair]) -> str:
    """Render fields as ``"name: str, age: int"``."""
    return ", ".join(f"{field.key}: {field.value}" for field in fields)


def build_preview(command: Command, fields: Sequence[FieldPair]) -> Preview:
    """Describe *command* with its normalized *fields*."""
    if isinstance(command, CreateSchema):
        return Preview(
            heading="Creating schema...",
            rows=(("name", command.name), ("description", command.description)),
            fields=tuple(fields),
        )
    if isinstance(command, CreateInstance):
        return Preview(
            heading="Creating instance...",
            rows=(("schema_id", command.schema_id),),
            fields=tuple(fields),
        )
    if isinstance(command, UpdateInstance):
        return Preview(
            heading="Updating instance...",
            rows=(("schema_id", command.schema_id), ("view_id", command.view_id)),
            fields=tuple(fields),
        )
    if isinstance(command, DeleteInstance):
        return Preview(
            heading="Deleting instance...",
            rows=(("schema_id", command.schema_id), ("view_id", command.view_id)),
        )
    raise TypeError(f"Unsupported command: {type(command).__name__}")
