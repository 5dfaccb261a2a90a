"""Shared pytest fixtures and configuration for the zenode-cli test suite.

Guidelines
----------
* No network access in any test — the Operator is faked or served by
  ``httpx.MockTransport``.
* Core tests must be pure — no side effects.
* Tests must not depend on the caller's environment or ``.env`` file.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from zenode_cli.core.models import FieldPair


class FakeOperator:
    """In-memory Operator recording every call it receives."""

    def __init__(self, identifier: str = "0020c3accb0b0c8822ecc0309190e23de5f7f6c9f3bd1c0b62d5d3f4b6e0d3c1a2f0") -> None:
        self.identifier = identifier
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.error: Exception | None = None

    async def _record(self, name: str, *args: Any) -> str:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error
        return self.identifier

    async def create_schema(
        self, name: str, description: str, fields: Sequence[FieldPair],
    ) -> str:
        return await self._record("create_schema", name, description, tuple(fields))

    async def create_instance(self, schema_id: str, fields: Sequence[FieldPair]) -> str:
        return await self._record("create_instance", schema_id, tuple(fields))

    async def update_instance(
        self, schema_id: str, view_id: str, fields: Sequence[FieldPair],
    ) -> str:
        return await self._record("update_instance", schema_id, view_id, tuple(fields))

    async def delete_instance(self, schema_id: str, view_id: str) -> str:
        return await self._record("delete_instance", schema_id, view_id)


@pytest.fixture(autouse=True)
def _isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Run every test in an empty directory without ZENODE_* variables."""
    for key in list(os.environ):
        if key.upper().startswith("ZENODE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def fake_operator() -> FakeOperator:
    return FakeOperator()
