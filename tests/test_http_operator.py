"""Tests for the httpx Operator adapter (infra/http_operator.py).

Requests are served by ``httpx.MockTransport`` — no network access.

Coverage:
* Request payload per operation (action, ids, ordered fields).
* Identifier extraction.
* Mapping of node errors, HTTP errors, malformed bodies and transport
  failures to OperatorError.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from zenode_cli.config import Settings
from zenode_cli.core.models import FieldPair
from zenode_cli.exceptions import OperatorError
from zenode_cli.infra.http_operator import HttpOperator

ENDPOINT = "http://node.test:2020/graphql"


def _operator(
    handler: Callable[[httpx.Request], httpx.Response],
) -> HttpOperator:
    settings = Settings(endpoint=ENDPOINT, timeout_seconds=2.0)
    return HttpOperator(settings, transport=httpx.MockTransport(handler))


class _Recorder:
    """Handler that records request bodies and answers with a fixed id."""

    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.response = response or httpx.Response(200, json={"id": "0020aa"})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    def body(self, index: int = 0) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

class TestPayloads:
    def test_create_schema(self) -> None:
        recorder = _Recorder()
        fields = (FieldPair(key="name", value="str"), FieldPair(key="age", value="int"))

        result = asyncio.run(_operator(recorder).create_schema("Person", "a person", fields))

        assert result == "0020aa"
        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == ENDPOINT
        assert recorder.body() == {
            "action": "create_schema",
            "name": "Person",
            "description": "a person",
            "fields": [["name", "str"], ["age", "int"]],
        }

    def test_create_instance(self) -> None:
        recorder = _Recorder()
        asyncio.run(
            _operator(recorder).create_instance(
                "person_0020ab", [FieldPair(key="url", value="http://x")],
            )
        )
        assert recorder.body() == {
            "action": "create_instance",
            "schema_id": "person_0020ab",
            "fields": [["url", "http://x"]],
        }

    def test_update_instance(self) -> None:
        recorder = _Recorder()
        asyncio.run(
            _operator(recorder).update_instance(
                "person_0020ab", "0020cd", [FieldPair(key="age", value="43")],
            )
        )
        assert recorder.body() == {
            "action": "update_instance",
            "schema_id": "person_0020ab",
            "view_id": "0020cd",
            "fields": [["age", "43"]],
        }

    def test_delete_instance_has_no_fields(self) -> None:
        recorder = _Recorder()
        asyncio.run(_operator(recorder).delete_instance("Person_abc123", "00def456"))
        assert recorder.body() == {
            "action": "delete_instance",
            "schema_id": "Person_abc123",
            "view_id": "00def456",
        }

    def test_duplicate_keys_keep_order(self) -> None:
        recorder = _Recorder()
        fields = [FieldPair(key="tag", value="a"), FieldPair(key="tag", value="b")]
        asyncio.run(_operator(recorder).create_instance("s", fields))
        assert recorder.body()["fields"] == [["tag", "a"], ["tag", "b"]]

    def test_sends_json_headers(self) -> None:
        recorder = _Recorder()
        asyncio.run(_operator(recorder).delete_instance("s", "v"))
        headers = recorder.requests[0].headers
        assert headers["accept"] == "application/json"
        assert headers["user-agent"].startswith("zenode-cli/")


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

class TestErrorMapping:
    def test_node_error_message_verbatim(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={"error": "Schema Person_abc123 not found"}))
        with pytest.raises(OperatorError) as exc_info:
            asyncio.run(_operator(recorder).delete_instance("Person_abc123", "00def456"))
        assert str(exc_info.value) == "Schema Person_abc123 not found"

    def test_error_body_on_http_error(self) -> None:
        recorder = _Recorder(httpx.Response(409, json={"error": "view 00def456 is outdated"}))
        with pytest.raises(OperatorError, match="view 00def456 is outdated"):
            asyncio.run(_operator(recorder).delete_instance("s", "00def456"))

    def test_http_error_without_json(self) -> None:
        recorder = _Recorder(httpx.Response(500, text="internal failure"))
        with pytest.raises(OperatorError, match="500: internal failure"):
            asyncio.run(_operator(recorder).delete_instance("s", "v"))

    def test_malformed_json(self) -> None:
        recorder = _Recorder(httpx.Response(200, text="<html>"))
        with pytest.raises(OperatorError, match="malformed"):
            asyncio.run(_operator(recorder).delete_instance("s", "v"))

    def test_json_not_an_object(self) -> None:
        recorder = _Recorder(httpx.Response(200, json=["0020aa"]))
        with pytest.raises(OperatorError, match="malformed"):
            asyncio.run(_operator(recorder).delete_instance("s", "v"))

    @pytest.mark.parametrize("body", [{}, {"id": ""}, {"id": 42}])
    def test_missing_identifier(self, body: dict[str, Any]) -> None:
        recorder = _Recorder(httpx.Response(200, json=body))
        with pytest.raises(OperatorError, match="identifier"):
            asyncio.run(_operator(recorder).delete_instance("s", "v"))

    def test_connection_failure(self) -> None:
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(OperatorError, match="Could not reach node") as exc_info:
            asyncio.run(_operator(_refuse).delete_instance("s", "v"))
        assert exc_info.value.hint is not None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout(self) -> None:
        def _slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(OperatorError, match="timed out"):
            asyncio.run(_operator(_slow).delete_instance("s", "v"))
