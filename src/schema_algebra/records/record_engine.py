"""Record codec engine.

A record codec is its ordered field descriptors plus two closures: one that
decodes a JSON object's fields into the payload and one that encodes the
payload into the fields of a JSON object. Composition only ever builds new
closures around existing ones.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from schema_algebra.algebra.schema_models import Field, ensure_distinct_names
from schema_algebra.decoding.codec_models import JsonCodec, JSONObject, JSONValue, apply_invmap
from schema_algebra.decoding.decode_errors import DecodeError, MissingField, TypeMismatch

A = TypeVar("A")
B = TypeVar("B")

FieldsDecoder = Callable[[Mapping[str, JSONValue]], A]
FieldsEncoder = Callable[[A], JSONObject]


@dataclass(frozen=True)
class RecordCodec(JsonCodec[A]):
    """Codec for a JSON object with a fixed, ordered set of fields."""

    fields: tuple[Field, ...]
    decode_fields: FieldsDecoder[A]
    encode_fields: FieldsEncoder[A]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(field.name for field in self.fields)

    def decode_value(self, value: JSONValue) -> A:
        if not isinstance(value, Mapping):
            raise TypeMismatch(None, "object", value)
        return self.decode_fields(value)

    def encode(self, value: A) -> JSONObject:
        return self.encode_fields(value)


def _decode_nothing(_: Mapping[str, JSONValue]) -> None:
    return None


def _encode_nothing(_: None) -> JSONObject:
    return {}


EMPTY_RECORD_CODEC: RecordCodec[None] = RecordCodec(
    fields=(), decode_fields=_decode_nothing, encode_fields=_encode_nothing
)


def required_field_codec(
    name: str, codec: JsonCodec[A], documentation: str | None = None
) -> RecordCodec[A]:
    """Record codec with one field that must be present."""

    def decode_fields(obj: Mapping[str, JSONValue]) -> A:
        if name not in obj:
            raise MissingField(name)
        try:
            return codec.decode_value(obj[name])
        except DecodeError as exc:
            raise exc.at(name) from exc

    def encode_fields(value: A) -> JSONObject:
        return {name: codec.encode(value)}

    return RecordCodec(
        fields=(Field(name=name, documentation=documentation, optional=False),),
        decode_fields=decode_fields,
        encode_fields=encode_fields,
    )


def optional_field_codec(
    name: str, codec: JsonCodec[A], documentation: str | None = None
) -> RecordCodec[A | None]:
    """Record codec with one field that may be absent or ``null``."""

    def decode_fields(obj: Mapping[str, JSONValue]) -> A | None:
        raw = obj.get(name)
        if raw is None:
            return None
        try:
            return codec.decode_value(raw)
        except DecodeError as exc:
            raise exc.at(name) from exc

    def encode_fields(value: A | None) -> JSONObject:
        if value is None:
            return {}
        return {name: codec.encode(value)}

    return RecordCodec(
        fields=(Field(name=name, documentation=documentation, optional=True),),
        decode_fields=decode_fields,
        encode_fields=encode_fields,
    )


def zip_record_codecs(left: RecordCodec[A], right: RecordCodec[B]) -> RecordCodec[tuple[A, B]]:
    """Record codec merging both field sets; the payload is a ``(left, right)`` pair."""
    fields = left.fields + right.fields
    ensure_distinct_names((field.name for field in fields), kind="field")

    def decode_fields(obj: Mapping[str, JSONValue]) -> tuple[A, B]:
        return left.decode_fields(obj), right.decode_fields(obj)

    def encode_fields(value: tuple[A, B]) -> JSONObject:
        first, second = value
        return {**left.encode_fields(first), **right.encode_fields(second)}

    return RecordCodec(fields=fields, decode_fields=decode_fields, encode_fields=encode_fields)


def invmap_record_codec(
    record: RecordCodec[A],
    f: Callable[[A], B],
    g: Callable[[B], A],
    *,
    verify: bool = False,
) -> RecordCodec[B]:
    """Record codec with the same fields and a transformed payload."""

    def decode_fields(obj: Mapping[str, JSONValue]) -> B:
        return apply_invmap(record.decode_fields(obj), f, g, verify=verify)

    def encode_fields(value: B) -> JSONObject:
        return record.encode_fields(g(value))

    return RecordCodec(fields=record.fields, decode_fields=decode_fields, encode_fields=encode_fields)


def as_record_codec(codec: JsonCodec[Any]) -> RecordCodec[Any]:
    """Return ``codec`` when it is a record codec, failing loudly otherwise."""
    if not isinstance(codec, RecordCodec):
        raise TypeError(f"Expected a record codec, got {type(codec).__name__}.")
    return codec
