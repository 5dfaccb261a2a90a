"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and the tuple behaviour of :class:`FieldPair`.
"""

from __future__ import annotations

import pytest

from zenode_cli.core.models import (
    CreateInstance,
    CreateSchema,
    DeleteInstance,
    FieldPair,
    UpdateInstance,
)


class TestFieldPair:
    def test_fields_accessible(self) -> None:
        pair = FieldPair(key="name", value="str")
        assert pair.key == "name"
        assert pair.value == "str"

    def test_unpacks_like_tuple(self) -> None:
        key, value = FieldPair(key="age", value="int")
        assert (key, value) == ("age", "int")

    def test_as_tuple(self) -> None:
        assert FieldPair(key="a", value="b").as_tuple() == ("a", "b")

    def test_frozen(self) -> None:
        pair = FieldPair(key="a", value="b")
        with pytest.raises(AttributeError):
            pair.key = "c"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert FieldPair(key="a", value="b") == FieldPair(key="a", value="b")
        assert FieldPair(key="a", value="b") != FieldPair(key="a", value="c")


class TestCommands:
    def test_create_schema_defaults(self) -> None:
        cmd = CreateSchema(name="Person", description="a person")
        assert cmd.fields == ()
        assert cmd.log is False

    def test_create_instance_keeps_raw_fields(self) -> None:
        cmd = CreateInstance(schema_id="person_0020ab", fields=("name : bob",))
        assert cmd.fields == ("name : bob",)

    def test_update_instance_frozen(self) -> None:
        cmd = UpdateInstance(schema_id="person_0020ab", view_id="0020cd")
        with pytest.raises(AttributeError):
            cmd.view_id = "other"  # type: ignore[misc]

    def test_delete_instance_has_no_fields(self) -> None:
        cmd = DeleteInstance(schema_id="person_0020ab", view_id="0020cd", log=True)
        assert not hasattr(cmd, "fields")
        assert cmd.log is True

    def test_equality(self) -> None:
        a = DeleteInstance(schema_id="s", view_id="v")
        b = DeleteInstance(schema_id="s", view_id="v")
        assert a == b
