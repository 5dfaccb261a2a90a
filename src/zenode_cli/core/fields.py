"""Field normalizer — raw ``key:value`` specs to :class:`FieldPair` tuples.

Two raw input shapes are accepted by the CLI layer:

* one spec per repeated ``--field`` flag, passed straight to
  :func:`normalize_fields`;
* a single comma-separated string, split first by
  :func:`split_field_string`.

Splitting always happens on the **first** ``:`` only, so values such as
``url:http://host:2020`` survive intact.  Normalization is all-or-nothing:
the first malformed spec aborts the whole sequence.
"""

from __future__ import annotations

from collections.abc import Iterable

from zenode_cli.core.models import FieldPair
from zenode_cli.exceptions import FieldShapeError

DELIMITER: str = ":"
"""Separator between key and value inside a single spec."""

SEPARATOR: str = ","
"""Separator between specs in the single-string input mode."""

_EXPECTED_SHAPE_HINT = "Expected field shape `a:b`, e.g. `-f name:str -f age:int`."


def parse_field(spec: str) -> FieldPair:
    """Split one raw *spec* on its first ``:`` and trim both halves.

    Raises
    ------
    FieldShapeError
        When the delimiter is missing, or the key or value is empty after
        trimming.
    """
    key, delimiter, value = spec.partition(DELIMITER)
    if not delimiter:
        raise FieldShapeError(
            f"Missing delimiter ':' in field {spec!r}.",
            spec=spec,
            hint=_EXPECTED_SHAPE_HINT,
        )

    key = key.strip()
    value = value.strip()
    if not key:
        raise FieldShapeError(
            f"Empty key in field {spec!r}.",
            spec=spec,
            hint=_EXPECTED_SHAPE_HINT,
        )
    if not value:
        raise FieldShapeError(
            f"Empty value in field {spec!r}.",
            spec=spec,
            hint=_EXPECTED_SHAPE_HINT,
        )
    return FieldPair(key=key, value=value)


def normalize_fields(specs: Iterable[str]) -> tuple[FieldPair, ...]:
    """Normalize *specs* in order; duplicate keys are kept as given."""
    return tuple(parse_field(spec) for spec in specs)


def split_field_string(raw: str) -> tuple[str, ...]:
    """Split a ``"k:v, k:v"`` string into raw specs.

    All whitespace is removed before splitting, so ``"name : bob"`` and
    ``"name:bob"`` are equivalent.  A blank *raw* yields no specs.

    Raises
    ------
    FieldShapeError
        When a segment between two commas is empty (``"a:b,,c:d"``).
    """
    compact = "".join(raw.split())
    if not compact:
        return ()

    specs = tuple(compact.split(SEPARATOR))
    for spec in specs:
        if not spec:
            raise FieldShapeError(
                f"Empty field in {raw!r}.",
                spec=raw,
                hint="Separate fields with single commas: `name:str,age:int`.",
            )
    return specs
