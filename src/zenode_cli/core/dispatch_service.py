"""Core dispatch service — routes a parsed command to the Operator.

This service delegates the actual storage work to an
:class:`~zenode_cli.core.protocols.Operator` injected at construction
time.  It is responsible for:

* Normalizing the command's raw field specs.
* Calling exactly one Operator method for the command.
* Ensuring only :class:`~zenode_cli.exceptions.ZenodeError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct network access.
* Normalization happens before any Operator call; a malformed field
  never produces a partial request.
"""

from __future__ import annotations

from collections.abc import Sequence

from zenode_cli.core.fields import normalize_fields
from zenode_cli.core.models import (
    Command,
    CreateInstance,
    CreateSchema,
    DeleteInstance,
    FieldPair,
    UpdateInstance,
)
from zenode_cli.core.protocols import Operator
from zenode_cli.exceptions import OperatorError, ZenodeError


class DispatchService:
    """Stateless service that turns one :data:`Command` into one Operator call.

    Parameters
    ----------
    operator:
        Any object satisfying the :class:`Operator` protocol.
    """

    def __init__(self, operator: Operator) -> None:
        self._operator: Operator = operator

    # ------------------------------------------------------------------
    # Field preparation (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def prepare(command: Command) -> tuple[FieldPair, ...]:
        """Return the normalized fields that *command* will send.

        ``DeleteInstance`` carries no fields and yields an empty tuple.

        Raises
        ------
        FieldShapeError
            When any raw spec is malformed.
        """
        if isinstance(command, DeleteInstance):
            return ()
        return normalize_fields(command.fields)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def execute(self, command: Command, fields: Sequence[FieldPair]) -> str:
        """Invoke the Operator method matching *command*.

        Parameters
        ----------
        command:
            The parsed command.
        fields:
            Normalized fields, normally the result of :meth:`prepare`.

        Returns
        -------
        str
            The identifier returned by the Operator.

        Raises
        ------
        OperatorError
            When the Operator fails or returns no identifier.
        """
        try:
            identifier = await self._route(command, fields)
        except ZenodeError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise OperatorError(str(exc) or type(exc).__name__) from exc

        if not isinstance(identifier, str) or not identifier.strip():
            raise OperatorError(
                f"Operator returned no identifier (got {identifier!r}).",
            )
        return identifier

    async def run(self, command: Command) -> str:
        """Normalize and execute *command* in one step."""
        return await self.execute(command, self.prepare(command))

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    async def _route(self, command: Command, fields: Sequence[FieldPair]) -> str:
        op = self._operator
        if isinstance(command, CreateSchema):
            return await op.create_schema(command.name, command.description, fields)
        if isinstance(command, CreateInstance):
            return await op.create_instance(command.schema_id, fields)
        if isinstance(command, UpdateInstance):
            return await op.update_instance(command.schema_id, command.view_id, fields)
        if isinstance(command, DeleteInstance):
            return await op.delete_instance(command.schema_id, command.view_id)
        raise TypeError(f"Unsupported command: {type(command).__name__}")
