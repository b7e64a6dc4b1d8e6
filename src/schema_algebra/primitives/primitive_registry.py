"""Leaf schemas for scalar kinds and sequences, with their JSON rules."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from schema_algebra.algebra.schema_models import (
    ArraySchema,
    JsonSchema,
    PrimitiveKind,
    PrimitiveSchema,
)
from schema_algebra.decoding.codec_models import JSONValue
from schema_algebra.decoding.decode_errors import TypeMismatch

_INT32_RANGE = (-(2**31), 2**31 - 1)
_INT64_RANGE = (-(2**63), 2**63 - 1)

STRING: JsonSchema[str] = PrimitiveSchema(PrimitiveKind.STRING)
INT: JsonSchema[int] = PrimitiveSchema(PrimitiveKind.INT)
LONG: JsonSchema[int] = PrimitiveSchema(PrimitiveKind.LONG)
BIG_DECIMAL: JsonSchema[Decimal] = PrimitiveSchema(PrimitiveKind.BIG_DECIMAL)
DOUBLE: JsonSchema[float] = PrimitiveSchema(PrimitiveKind.DOUBLE)
BOOLEAN: JsonSchema[bool] = PrimitiveSchema(PrimitiveKind.BOOLEAN)


def array_of(element: JsonSchema[Any]) -> JsonSchema[list[Any]]:
    """Return the schema of a homogeneous sequence of ``element``."""
    return ArraySchema(element)


@dataclass(frozen=True)
class ScalarRule:
    """JSON conversion and description rules for one primitive kind."""

    kind: PrimitiveKind
    decode: Callable[[JSONValue], Any]
    encode: Callable[[Any], JSONValue]
    descriptor: Mapping[str, str]


def scalar_rule(kind: PrimitiveKind) -> ScalarRule:
    """Return the registered rule for ``kind``."""
    return _SCALAR_RULES[kind]


def _decode_string(value: JSONValue) -> str:
    if isinstance(value, str):
        return value
    raise TypeMismatch(None, "string", value)


def _integer_decoder(expected_kind: str, bounds: tuple[int, int]) -> Callable[[JSONValue], int]:
    lower, upper = bounds

    def decode(value: JSONValue) -> int:
        candidate = _as_integral(value)
        if candidate is None or not lower <= candidate <= upper:
            raise TypeMismatch(None, expected_kind, value)
        return candidate

    return decode


def _as_integral(value: JSONValue) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    return None


def _decode_decimal(value: JSONValue) -> Decimal:
    if isinstance(value, bool):
        raise TypeMismatch(None, "decimal", value)
    if isinstance(value, Decimal) and value.is_finite():
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float) and math.isfinite(value):
        return Decimal(repr(value))
    raise TypeMismatch(None, "decimal", value)


def _decode_double(value: JSONValue) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeMismatch(None, "double", value)
    return float(value)


def _decode_boolean(value: JSONValue) -> bool:
    if isinstance(value, bool):
        return value
    raise TypeMismatch(None, "boolean", value)


def _encode_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise TypeError(f"Expected str, got {type(value).__name__}.")


def _integer_encoder(expected_kind: str, bounds: tuple[int, int]) -> Callable[[Any], int]:
    lower, upper = bounds

    def encode(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected {expected_kind}, got {type(value).__name__}.")
        if not lower <= value <= upper:
            raise TypeError(f"Expected {expected_kind}, got out-of-range {value}.")
        return value

    return encode


def _encode_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal) and value.is_finite():
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    raise TypeError(f"Expected a finite Decimal, got {value!r}.")


def _encode_double(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected float, got {type(value).__name__}.")
    if not math.isfinite(value):
        raise TypeError(f"Expected a finite float, got {value!r}.")
    return float(value)


def _encode_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise TypeError(f"Expected bool, got {type(value).__name__}.")


_SCALAR_RULES: Mapping[PrimitiveKind, ScalarRule] = MappingProxyType(
    {
        PrimitiveKind.STRING: ScalarRule(
            kind=PrimitiveKind.STRING,
            decode=_decode_string,
            encode=_encode_string,
            descriptor={"type": "string"},
        ),
        PrimitiveKind.INT: ScalarRule(
            kind=PrimitiveKind.INT,
            decode=_integer_decoder("int32 integer", _INT32_RANGE),
            encode=_integer_encoder("int32 integer", _INT32_RANGE),
            descriptor={"type": "integer", "format": "int32"},
        ),
        PrimitiveKind.LONG: ScalarRule(
            kind=PrimitiveKind.LONG,
            decode=_integer_decoder("int64 integer", _INT64_RANGE),
            encode=_integer_encoder("int64 integer", _INT64_RANGE),
            descriptor={"type": "integer", "format": "int64"},
        ),
        PrimitiveKind.BIG_DECIMAL: ScalarRule(
            kind=PrimitiveKind.BIG_DECIMAL,
            decode=_decode_decimal,
            encode=_encode_decimal,
            descriptor={"type": "number"},
        ),
        PrimitiveKind.DOUBLE: ScalarRule(
            kind=PrimitiveKind.DOUBLE,
            decode=_decode_double,
            encode=_encode_double,
            descriptor={"type": "number", "format": "double"},
        ),
        PrimitiveKind.BOOLEAN: ScalarRule(
            kind=PrimitiveKind.BOOLEAN,
            decode=_decode_boolean,
            encode=_encode_boolean,
            descriptor={"type": "boolean"},
        ),
    }
)
