"""JSON codec interpreter."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from decimal import Decimal
from functools import lru_cache
from typing import Any, TypeVar

from schema_algebra.algebra.json_schemas import JsonSchemas, interpret
from schema_algebra.algebra.schema_models import JsonSchema, PrimitiveKind
from schema_algebra.configuration.runtime_settings import InterpreterSettings
from schema_algebra.decoding.codec_models import ArrayCodec, JsonCodec, MappedCodec, ScalarCodec
from schema_algebra.decoding.decode_errors import DecodeResult
from schema_algebra.primitives.primitive_registry import scalar_rule
from schema_algebra.records.record_engine import (
    EMPTY_RECORD_CODEC,
    RecordCodec,
    as_record_codec,
    invmap_record_codec,
    optional_field_codec,
    required_field_codec,
    zip_record_codecs,
)
from schema_algebra.tagged.tagged_engine import (
    TaggedCodec,
    choice_codec,
    invmap_tagged_codec,
    tagged_record_codec,
)

A = TypeVar("A")

_LOGGER = logging.getLogger(__name__)

_DEFAULT_SETTINGS = InterpreterSettings()


class JsonCodecs(JsonSchemas[JsonCodec[Any], RecordCodec[Any], TaggedCodec[Any]]):
    """Interpret descriptions as bidirectional JSON codecs."""

    def __init__(self, settings: InterpreterSettings | None = None) -> None:
        self._settings = settings or _DEFAULT_SETTINGS

    @property
    def settings(self) -> InterpreterSettings:
        return self._settings

    def empty_record(self) -> RecordCodec[None]:
        return EMPTY_RECORD_CODEC

    def field(
        self, name: str, schema: JsonCodec[Any], documentation: str | None = None
    ) -> RecordCodec[Any]:
        return required_field_codec(name, schema, documentation)

    def opt_field(
        self, name: str, schema: JsonCodec[Any], documentation: str | None = None
    ) -> RecordCodec[Any]:
        return optional_field_codec(name, schema, documentation)

    def tagged_record(self, record: RecordCodec[Any], tag: str) -> TaggedCodec[Any]:
        return tagged_record_codec(
            as_record_codec(record), tag, discriminator=self._settings.discriminator
        )

    def choice_tagged(
        self, tagged_a: TaggedCodec[Any], tagged_b: TaggedCodec[Any]
    ) -> TaggedCodec[Any]:
        return choice_codec(tagged_a, tagged_b)

    def zip_records(
        self, record_a: RecordCodec[Any], record_b: RecordCodec[Any]
    ) -> RecordCodec[Any]:
        return zip_record_codecs(as_record_codec(record_a), as_record_codec(record_b))

    def invmap_record(
        self, record: RecordCodec[Any], f: Callable[[Any], Any], g: Callable[[Any], Any]
    ) -> RecordCodec[Any]:
        return invmap_record_codec(record, f, g, verify=self._settings.verify_invmap)

    def invmap_tagged(
        self, tagged: TaggedCodec[Any], f: Callable[[Any], Any], g: Callable[[Any], Any]
    ) -> TaggedCodec[Any]:
        return invmap_tagged_codec(tagged, f, g, verify=self._settings.verify_invmap)

    def invmap_json_schema(
        self, schema: JsonCodec[Any], f: Callable[[Any], Any], g: Callable[[Any], Any]
    ) -> JsonCodec[Any]:
        return MappedCodec(codec=schema, f=f, g=g, verify=self._settings.verify_invmap)

    def string_json_schema(self) -> JsonCodec[str]:
        return _scalar_codec(PrimitiveKind.STRING)

    def int_json_schema(self) -> JsonCodec[int]:
        return _scalar_codec(PrimitiveKind.INT)

    def long_json_schema(self) -> JsonCodec[int]:
        return _scalar_codec(PrimitiveKind.LONG)

    def bigdecimal_json_schema(self) -> JsonCodec[Decimal]:
        return _scalar_codec(PrimitiveKind.BIG_DECIMAL)

    def double_json_schema(self) -> JsonCodec[float]:
        return _scalar_codec(PrimitiveKind.DOUBLE)

    def boolean_json_schema(self) -> JsonCodec[bool]:
        return _scalar_codec(PrimitiveKind.BOOLEAN)

    def array_json_schema(self, element: JsonCodec[Any]) -> JsonCodec[list[Any]]:
        return ArrayCodec(element=element)


def _scalar_codec(kind: PrimitiveKind) -> ScalarCodec[Any]:
    rule = scalar_rule(kind)
    return ScalarCodec(kind=kind.value, decoder=rule.decode, encoder=rule.encode)


def json_codec(
    schema: JsonSchema[A], settings: InterpreterSettings | None = None
) -> JsonCodec[A]:
    """Return the compiled codec of ``schema``, built once per description and settings."""
    return _compile_codec(schema, settings or _DEFAULT_SETTINGS)


@lru_cache(maxsize=256)
def _compile_codec(schema: JsonSchema[Any], settings: InterpreterSettings) -> JsonCodec[Any]:
    codec = interpret(schema, JsonCodecs(settings))
    if isinstance(codec, TaggedCodec):
        _LOGGER.debug("Compiled tagged codec with tags %s", ", ".join(codec.tags))
    elif isinstance(codec, RecordCodec):
        _LOGGER.debug("Compiled record codec with fields %s", ", ".join(codec.field_names))
    else:
        _LOGGER.debug("Compiled %s", type(codec).__name__)
    return codec


def encode_json_text(codec: JsonCodec[A], value: A, *, indent: int | None = None) -> str:
    """Encode ``value`` and render it as JSON text."""
    return json.dumps(
        codec.encode(value), indent=indent, default=_render_decimal, allow_nan=False
    )


def decode_json_text(codec: JsonCodec[A], text: str) -> DecodeResult[A]:
    """Parse JSON text, keeping non-integral numbers as ``Decimal``, and decode it.

    Raises:
      ValueError: If ``text`` is not valid JSON.
    """
    return codec.decode(json.loads(text, parse_float=Decimal))


def _render_decimal(value: object) -> int | float:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
