"""Primitive registry tests."""

from __future__ import annotations

from decimal import Decimal

import pytest
from schema_algebra.algebra import PrimitiveKind
from schema_algebra.decoding import TypeMismatch
from schema_algebra.primitives import scalar_rule


@pytest.mark.parametrize(
    ("kind", "raw", "expected"),
    [
        (PrimitiveKind.STRING, "Ann", "Ann"),
        (PrimitiveKind.INT, 30, 30),
        (PrimitiveKind.INT, 30.0, 30),
        (PrimitiveKind.INT, Decimal("-7"), -7),
        (PrimitiveKind.LONG, 2**40, 2**40),
        (PrimitiveKind.BIG_DECIMAL, 3, Decimal(3)),
        (PrimitiveKind.BIG_DECIMAL, 0.1, Decimal("0.1")),
        (PrimitiveKind.BIG_DECIMAL, Decimal("12.3400"), Decimal("12.3400")),
        (PrimitiveKind.DOUBLE, 2, 2.0),
        (PrimitiveKind.DOUBLE, Decimal("1.5"), 1.5),
        (PrimitiveKind.BOOLEAN, False, False),
    ],
)
def test_scalar_rules_decode_native_json_values(
    kind: PrimitiveKind, raw: object, expected: object
) -> None:
    decoded = scalar_rule(kind).decode(raw)

    assert decoded == expected
    assert type(decoded) is type(expected)


@pytest.mark.parametrize(
    ("kind", "raw"),
    [
        (PrimitiveKind.STRING, 1),
        (PrimitiveKind.STRING, None),
        (PrimitiveKind.INT, "30"),
        (PrimitiveKind.INT, True),
        (PrimitiveKind.INT, 1.5),
        (PrimitiveKind.INT, 2**31),
        (PrimitiveKind.LONG, 2**63),
        (PrimitiveKind.BIG_DECIMAL, "1.0"),
        (PrimitiveKind.BIG_DECIMAL, float("nan")),
        (PrimitiveKind.BIG_DECIMAL, False),
        (PrimitiveKind.DOUBLE, "1.0"),
        (PrimitiveKind.DOUBLE, True),
        (PrimitiveKind.BOOLEAN, 0),
        (PrimitiveKind.BOOLEAN, "true"),
    ],
)
def test_scalar_rules_reject_mismatched_values(kind: PrimitiveKind, raw: object) -> None:
    with pytest.raises(TypeMismatch) as excinfo:
        scalar_rule(kind).decode(raw)

    assert excinfo.value.actual_value is raw
    assert excinfo.value.name is None


def test_int_and_long_bounds_are_inclusive() -> None:
    assert scalar_rule(PrimitiveKind.INT).decode(2**31 - 1) == 2**31 - 1
    assert scalar_rule(PrimitiveKind.INT).decode(-(2**31)) == -(2**31)
    assert scalar_rule(PrimitiveKind.LONG).decode(-(2**63)) == -(2**63)


def test_every_kind_has_a_descriptor() -> None:
    descriptors = {kind: dict(scalar_rule(kind).descriptor) for kind in PrimitiveKind}

    assert descriptors == {
        PrimitiveKind.STRING: {"type": "string"},
        PrimitiveKind.INT: {"type": "integer", "format": "int32"},
        PrimitiveKind.LONG: {"type": "integer", "format": "int64"},
        PrimitiveKind.BIG_DECIMAL: {"type": "number"},
        PrimitiveKind.DOUBLE: {"type": "number", "format": "double"},
        PrimitiveKind.BOOLEAN: {"type": "boolean"},
    }


@pytest.mark.parametrize(
    ("kind", "value", "expected"),
    [
        (PrimitiveKind.STRING, "Ann", "Ann"),
        (PrimitiveKind.INT, -(2**31), -(2**31)),
        (PrimitiveKind.LONG, 2**40, 2**40),
        (PrimitiveKind.BIG_DECIMAL, Decimal("1.50"), Decimal("1.50")),
        (PrimitiveKind.BIG_DECIMAL, 3, Decimal(3)),
        (PrimitiveKind.DOUBLE, 2, 2.0),
        (PrimitiveKind.DOUBLE, 0.25, 0.25),
        (PrimitiveKind.BOOLEAN, False, False),
    ],
)
def test_scalar_rules_encode_well_typed_values(
    kind: PrimitiveKind, value: object, expected: object
) -> None:
    encoded = scalar_rule(kind).encode(value)

    assert encoded == expected
    assert type(encoded) is type(expected)


@pytest.mark.parametrize(
    ("kind", "value"),
    [
        (PrimitiveKind.INT, 1.5),
        (PrimitiveKind.INT, True),
        (PrimitiveKind.INT, "1"),
        (PrimitiveKind.INT, 2**31),
        (PrimitiveKind.LONG, 2**63),
        (PrimitiveKind.BOOLEAN, "false"),
        (PrimitiveKind.BOOLEAN, 1),
        (PrimitiveKind.STRING, None),
        (PrimitiveKind.STRING, 42),
        (PrimitiveKind.BIG_DECIMAL, "abc"),
        (PrimitiveKind.BIG_DECIMAL, Decimal("Infinity")),
        (PrimitiveKind.BIG_DECIMAL, True),
        (PrimitiveKind.DOUBLE, "1.0"),
        (PrimitiveKind.DOUBLE, True),
        (PrimitiveKind.DOUBLE, float("nan")),
        (PrimitiveKind.DOUBLE, float("inf")),
    ],
)
def test_scalar_rules_reject_mismatched_values_on_encode(
    kind: PrimitiveKind, value: object
) -> None:
    with pytest.raises(TypeError):
        scalar_rule(kind).encode(value)
