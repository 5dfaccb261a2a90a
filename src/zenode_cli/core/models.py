"""Domain models for zenode-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and live only for the duration of one invocation.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Normalized field
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FieldPair:
    """A single normalized ``(key, value)`` attribute.

    Unpacks like a 2-tuple so Operators can treat a field sequence as a
    list of string pairs.
    """

    key: str
    """Trimmed text before the first ``:``."""

    value: str
    """Trimmed text after the first ``:`` (may itself contain ``:``)."""

    def __iter__(self) -> Iterator[str]:
        yield self.key
        yield self.value

    def as_tuple(self) -> tuple[str, str]:
        return (self.key, self.value)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CreateSchema:
    """Define a new schema from a name, a description and field type hints."""

    name: str
    description: str
    fields: tuple[str, ...] = ()
    """Raw ``key:value`` specs, in command-line order."""
    log: bool = False


@dataclass(frozen=True, slots=True)
class CreateInstance:
    """Create a document conforming to ``schema_id``."""

    schema_id: str
    """Expected shape ``<name>_<hex-hash>``; opaque at this layer."""
    fields: tuple[str, ...] = ()
    log: bool = False


@dataclass(frozen=True, slots=True)
class UpdateInstance:
    """Supersede the view ``view_id`` with changed fields."""

    schema_id: str
    view_id: str
    """Hex-encoded hash of the view being superseded."""
    fields: tuple[str, ...] = ()
    log: bool = False


@dataclass(frozen=True, slots=True)
class DeleteInstance:
    """Delete the instance whose latest view is ``view_id``."""

    schema_id: str
    view_id: str
    log: bool = False


Command = Union[CreateSchema, CreateInstance, UpdateInstance, DeleteInstance]
"""Closed union of the four operations the CLI can dispatch."""
