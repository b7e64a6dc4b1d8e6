"""Decoding primitives shared by the codec engines."""

from .codec_models import (
    ArrayCodec,
    JsonCodec,
    JSONObject,
    JSONValue,
    MappedCodec,
    ScalarCodec,
    apply_invmap,
)
from .decode_errors import (
    DecodeError,
    DecodeResult,
    ElementError,
    MissingField,
    TypeMismatch,
    UnknownTag,
)

__all__ = [
    "ArrayCodec",
    "DecodeError",
    "DecodeResult",
    "ElementError",
    "JSONObject",
    "JSONValue",
    "JsonCodec",
    "MappedCodec",
    "MissingField",
    "ScalarCodec",
    "TypeMismatch",
    "UnknownTag",
    "apply_invmap",
]
