"""httpx backed implementation of :class:`~zenode_cli.core.protocols.Operator`.

This module is the **only** place in the codebase that sends operations
to the node.  Every request is a JSON ``POST`` to the configured node
endpoint::

    {"action": "update_instance", "schema_id": "...", "view_id": "...",
     "fields": [["name", "bob"]]}

and the node answers ``{"id": "<identifier>"}`` or ``{"error": "..."}``.
All transport and protocol failures are re-raised as
:class:`~zenode_cli.exceptions.OperatorError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from zenode_cli.config import Settings
from zenode_cli.core.models import FieldPair
from zenode_cli.exceptions import OperatorError
from zenode_cli.version import __version__

logger = logging.getLogger(__name__)


class HttpOperator:
    """Concrete :class:`Operator` talking JSON over HTTP to a node.

    Usage::

        operator = HttpOperator(load_settings())
        view_id = await operator.create_instance("person_0020ab...", fields)

    Parameters
    ----------
    settings:
        Endpoint and timeout.
    transport:
        Optional ``httpx`` transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings: Settings = settings
        self._transport: httpx.AsyncBaseTransport | None = transport

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    async def create_schema(
        self,
        name: str,
        description: str,
        fields: Sequence[FieldPair],
    ) -> str:
        return await self._send(
            "create_schema",
            name=name,
            description=description,
            fields=_encode_fields(fields),
        )

    async def create_instance(self, schema_id: str, fields: Sequence[FieldPair]) -> str:
        return await self._send(
            "create_instance",
            schema_id=schema_id,
            fields=_encode_fields(fields),
        )

    async def update_instance(
        self,
        schema_id: str,
        view_id: str,
        fields: Sequence[FieldPair],
    ) -> str:
        return await self._send(
            "update_instance",
            schema_id=schema_id,
            view_id=view_id,
            fields=_encode_fields(fields),
        )

    async def delete_instance(self, schema_id: str, view_id: str) -> str:
        return await self._send(
            "delete_instance",
            schema_id=schema_id,
            view_id=view_id,
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.timeout_seconds),
            headers={
                "User-Agent": f"zenode-cli/{__version__}",
                "Accept": "application/json",
            },
            transport=self._transport,
        )

    async def _send(self, action: str, **params: Any) -> str:
        """POST one *action* and return the identifier from the reply."""
        payload: dict[str, Any] = {"action": action, **params}
        endpoint = self._settings.endpoint
        logger.debug("POST %s action=%s", endpoint, action)

        try:
            async with self._build_client() as client:
                response = await client.post(endpoint, json=payload)
        except httpx.TimeoutException as exc:
            raise OperatorError(
                f"Request to {endpoint} timed out.",
                hint="Increase ZENODE_TIMEOUT_SECONDS or check the node.",
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise OperatorError(
                f"Could not reach node at {endpoint}: {exc}",
                hint="Is the node running? Check ZENODE_ENDPOINT.",
            ) from exc

        logger.debug("Response %s from %s", response.status_code, endpoint)
        return self._read_identifier(response)

    # ------------------------------------------------------------------
    # Response mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _read_identifier(response: httpx.Response) -> str:
        """Extract ``id`` from *response* or raise with the node's message."""
        try:
            body: Any = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("error"):
            raise OperatorError(str(body["error"]))

        if response.is_error:
            detail = response.text.strip() or response.reason_phrase
            raise OperatorError(f"Node responded {response.status_code}: {detail}")

        if not isinstance(body, dict):
            raise OperatorError("Node returned a malformed response (expected a JSON object).")

        identifier = body.get("id")
        if not isinstance(identifier, str) or not identifier:
            raise OperatorError("Node response did not include an identifier.")
        return identifier


def _encode_fields(fields: Sequence[FieldPair]) -> list[list[str]]:
    """Encode fields as ordered ``[key, value]`` pairs."""
    return [[field.key, field.value] for field in fields]
