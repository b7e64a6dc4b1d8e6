"""JSON codec interpreter exports."""

from .codec_interpreter import JsonCodecs, decode_json_text, encode_json_text, json_codec

__all__ = [
    "JsonCodecs",
    "decode_json_text",
    "encode_json_text",
    "json_codec",
]
