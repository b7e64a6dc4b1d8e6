"""Record codec engine tests."""

from __future__ import annotations

import pytest
from schema_algebra.algebra import CompositionError, InvariantMapError
from schema_algebra.algebra.schema_models import PrimitiveKind
from schema_algebra.decoding import MissingField, ScalarCodec, TypeMismatch
from schema_algebra.primitives import scalar_rule
from schema_algebra.records import (
    EMPTY_RECORD_CODEC,
    invmap_record_codec,
    optional_field_codec,
    required_field_codec,
    zip_record_codecs,
)


def _scalar(kind: PrimitiveKind) -> ScalarCodec[object]:
    rule = scalar_rule(kind)
    return ScalarCodec(kind=kind.value, decoder=rule.decode, encoder=rule.encode)


STRING_CODEC = _scalar(PrimitiveKind.STRING)
INT_CODEC = _scalar(PrimitiveKind.INT)


def test_empty_record_encodes_to_empty_object_and_decodes_to_none() -> None:
    assert EMPTY_RECORD_CODEC.encode(None) == {}
    assert EMPTY_RECORD_CODEC.decode_or_raise({"anything": 1}) is None


def test_required_field_reports_missing_and_mismatched_values() -> None:
    codec = required_field_codec("age", INT_CODEC)

    assert codec.decode({}).error == MissingField("age")
    mismatch = codec.decode({"age": "thirty"}).error

    assert mismatch == TypeMismatch("age", "int32 integer", "thirty")
    assert mismatch is not None and mismatch.path == ("age",)


def test_optional_field_treats_absence_and_null_as_none() -> None:
    codec = optional_field_codec("nickname", STRING_CODEC)

    assert codec.decode_or_raise({}) is None
    assert codec.decode_or_raise({"nickname": None}) is None
    assert codec.decode_or_raise({"nickname": "Annie"}) == "Annie"
    assert codec.encode(None) == {}
    assert codec.encode("Annie") == {"nickname": "Annie"}


def test_optional_field_propagates_mismatch_of_present_value() -> None:
    codec = optional_field_codec("nickname", STRING_CODEC)

    assert codec.decode({"nickname": 3}).error == TypeMismatch("nickname", "string", 3)


def test_zip_pairs_payloads_and_merges_objects() -> None:
    codec = zip_record_codecs(
        required_field_codec("name", STRING_CODEC), required_field_codec("age", INT_CODEC)
    )

    assert codec.field_names == ("name", "age")
    assert codec.decode_or_raise({"name": "Ann", "age": 30}) == ("Ann", 30)
    assert codec.encode(("Ann", 30)) == {"name": "Ann", "age": 30}
    assert list(codec.encode(("Ann", 30))) == ["name", "age"]


def test_zip_short_circuits_on_first_failure() -> None:
    codec = zip_record_codecs(
        required_field_codec("name", STRING_CODEC), required_field_codec("age", INT_CODEC)
    )

    assert codec.decode({}).error == MissingField("name")


def test_zip_rejects_overlapping_fields() -> None:
    with pytest.raises(CompositionError):
        zip_record_codecs(
            required_field_codec("name", STRING_CODEC),
            optional_field_codec("name", STRING_CODEC),
        )


def test_records_decode_only_from_objects() -> None:
    codec = required_field_codec("name", STRING_CODEC)

    assert codec.decode(["Ann"]).error == TypeMismatch(None, "object", ["Ann"])


def test_invmap_keeps_fields_and_transforms_payload() -> None:
    codec = invmap_record_codec(required_field_codec("name", STRING_CODEC), str.upper, str.lower)

    assert codec.fields == required_field_codec("name", STRING_CODEC).fields
    assert codec.decode_or_raise({"name": "ann"}) == "ANN"
    assert codec.encode("ANN") == {"name": "ann"}


def test_invmap_verification_detects_non_inverse_functions() -> None:
    codec = invmap_record_codec(
        required_field_codec("name", STRING_CODEC), str.upper, str.upper, verify=True
    )

    with pytest.raises(InvariantMapError):
        codec.decode({"name": "ann"})
