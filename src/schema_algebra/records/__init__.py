"""Record codec engine exports."""

from .record_engine import (
    EMPTY_RECORD_CODEC,
    RecordCodec,
    as_record_codec,
    invmap_record_codec,
    optional_field_codec,
    required_field_codec,
    zip_record_codecs,
)

__all__ = [
    "EMPTY_RECORD_CODEC",
    "RecordCodec",
    "as_record_codec",
    "invmap_record_codec",
    "optional_field_codec",
    "required_field_codec",
    "zip_record_codecs",
]
