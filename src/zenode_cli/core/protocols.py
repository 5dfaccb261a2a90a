"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from zenode_cli.core.models import FieldPair


class Operator(Protocol):
    """Contract for document store backends.

    Any object that implements the four coroutines below satisfies this
    protocol structurally (no explicit inheritance required).  Every
    method returns the identifier the store assigned to the new schema
    or view.  Implementations must map backend-specific exceptions to
    :class:`~zenode_cli.exceptions.OperatorError`.
    """

    async def create_schema(
        self,
        name: str,
        description: str,
        fields: Sequence[FieldPair],
    ) -> str:
        """Create a schema; *fields* pair attribute names with type hints."""
        ...  # pragma: no cover

    async def create_instance(
        self,
        schema_id: str,
        fields: Sequence[FieldPair],
    ) -> str:
        """Create an instance of *schema_id* with the given field values."""
        ...  # pragma: no cover

    async def update_instance(
        self,
        schema_id: str,
        view_id: str,
        fields: Sequence[FieldPair],
    ) -> str:
        """Supersede *view_id* with the changed *fields*."""
        ...  # pragma: no cover

    async def delete_instance(self, schema_id: str, view_id: str) -> str:
        """Delete the instance whose latest view is *view_id*."""
        ...  # pragma: no cover
