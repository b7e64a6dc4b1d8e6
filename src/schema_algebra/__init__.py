"""Composable descriptions of records and tagged unions.

One description, built from the combinators below, is interpreted both as a
bidirectional JSON codec (``json_codec``) and as a JSON schema document
(``describe``).
"""

import logging

from schema_algebra.algebra import (
    CompositionError,
    Either,
    Field,
    InvariantMapError,
    JsonSchema,
    JsonSchemas,
    Left,
    PrimitiveKind,
    Record,
    Right,
    Tagged,
    choice_tagged,
    empty_record,
    field,
    interpret,
    invmap_json_schema,
    invmap_record,
    invmap_tagged,
    opt_field,
    tagged_record,
    zip_records,
)
from schema_algebra.configuration import DescriptorSettings, InterpreterSettings
from schema_algebra.decoding import (
    DecodeError,
    DecodeResult,
    ElementError,
    JsonCodec,
    MissingField,
    TypeMismatch,
    UnknownTag,
)
from schema_algebra.json_codec import decode_json_text, encode_json_text, json_codec
from schema_algebra.json_descriptor import describe
from schema_algebra.primitives import BIG_DECIMAL, BOOLEAN, DOUBLE, INT, LONG, STRING, array_of

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BIG_DECIMAL",
    "BOOLEAN",
    "DOUBLE",
    "INT",
    "LONG",
    "STRING",
    "CompositionError",
    "DecodeError",
    "DecodeResult",
    "DescriptorSettings",
    "Either",
    "ElementError",
    "Field",
    "InterpreterSettings",
    "InvariantMapError",
    "JsonCodec",
    "JsonSchema",
    "JsonSchemas",
    "Left",
    "MissingField",
    "PrimitiveKind",
    "Record",
    "Right",
    "Tagged",
    "TypeMismatch",
    "UnknownTag",
    "array_of",
    "choice_tagged",
    "decode_json_text",
    "describe",
    "empty_record",
    "encode_json_text",
    "field",
    "interpret",
    "invmap_json_schema",
    "invmap_record",
    "invmap_tagged",
    "json_codec",
    "opt_field",
    "tagged_record",
    "zip_records",
]
