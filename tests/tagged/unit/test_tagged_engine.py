"""Tagged union codec engine tests."""

from __future__ import annotations

import pytest
from schema_algebra.algebra import CompositionError, Left, PrimitiveKind, Right
from schema_algebra.decoding import MissingField, ScalarCodec, TypeMismatch, UnknownTag
from schema_algebra.primitives import scalar_rule
from schema_algebra.records import EMPTY_RECORD_CODEC, RecordCodec, required_field_codec
from schema_algebra.tagged import (
    choice_codec,
    invmap_tagged_codec,
    tagged_record_codec,
)


def _scalar(kind: PrimitiveKind) -> ScalarCodec[object]:
    rule = scalar_rule(kind)
    return ScalarCodec(kind=kind.value, decoder=rule.decode, encoder=rule.encode)


DOUBLE_CODEC = _scalar(PrimitiveKind.DOUBLE)


def _circle():
    return tagged_record_codec(required_field_codec("radius", DOUBLE_CODEC), "Circle")


def _square():
    return tagged_record_codec(required_field_codec("side", DOUBLE_CODEC), "Square")


def _point():
    return tagged_record_codec(EMPTY_RECORD_CODEC, "Point")


def test_tagged_record_writes_discriminator_before_fields() -> None:
    encoded = _circle().encode(2.0)

    assert encoded == {"type": "Circle", "radius": 2.0}
    assert list(encoded) == ["type", "radius"]


def test_choice_decodes_left_and_right_by_tag() -> None:
    codec = choice_codec(_circle(), _square())

    assert codec.decode_or_raise({"type": "Circle", "radius": 1}) == Left(1.0)
    assert codec.decode_or_raise({"type": "Square", "side": 3}) == Right(3.0)


def test_choice_reports_unknown_tag_with_tags_in_order() -> None:
    codec = choice_codec(_circle(), _square())

    assert codec.decode({"type": "Triangle"}).error == UnknownTag("Triangle", ("Circle", "Square"))


def test_missing_or_non_string_discriminator_is_reported() -> None:
    codec = choice_codec(_circle(), _square())

    assert codec.decode({"radius": 1}).error == MissingField("type")
    assert codec.decode({"type": 1}).error == TypeMismatch("type", "string", 1)
    assert str(codec.decode({"type": 1}).error) == "$.type: expected string, got 1"
    assert str(codec.decode({"radius": 1}).error) == "$: missing field 'type'"
    assert codec.decode("Circle").error == TypeMismatch(None, "object", "Circle")


def test_nested_choices_inject_through_every_level() -> None:
    codec = choice_codec(choice_codec(_circle(), _square()), _point())

    assert codec.tags == ("Circle", "Square", "Point")
    assert codec.decode_or_raise({"type": "Square", "side": 1}) == Left(Right(1.0))
    assert codec.decode_or_raise({"type": "Point"}) == Right(None)
    assert codec.encode(Left(Left(2.0))) == {"type": "Circle", "radius": 2.0}
    assert codec.encode(Right(None)) == {"type": "Point"}


def test_record_decoder_does_not_see_the_discriminator() -> None:
    seen: list[dict[str, object]] = []
    record = required_field_codec("radius", DOUBLE_CODEC)

    def spy(obj):
        seen.append(dict(obj))
        return record.decode_fields(obj)

    codec = tagged_record_codec(
        RecordCodec(fields=record.fields, decode_fields=spy, encode_fields=record.encode_fields),
        "Circle",
    )
    codec.decode_or_raise({"type": "Circle", "radius": 1.0})

    assert seen == [{"radius": 1.0}]


def _to_pair(either):
    return ("circle", either.value) if isinstance(either, Left) else ("square", either.value)


def _from_pair(shape):
    return Left(shape[1]) if shape[0] == "circle" else Right(shape[1])


def test_invmap_tagged_wraps_every_alternative() -> None:
    codec = invmap_tagged_codec(choice_codec(_circle(), _square()), _to_pair, _from_pair)

    assert codec.decode_or_raise({"type": "Square", "side": 2}) == ("square", 2.0)
    assert codec.encode(("circle", 1.5)) == {"type": "Circle", "radius": 1.5}


def test_choice_rejects_shared_tags_and_mixed_discriminators() -> None:
    with pytest.raises(CompositionError):
        choice_codec(_circle(), _circle())

    kind_square = tagged_record_codec(
        required_field_codec("side", DOUBLE_CODEC), "Square", discriminator="kind"
    )
    with pytest.raises(CompositionError):
        choice_codec(_circle(), kind_square)


def test_discriminator_collision_is_rejected() -> None:
    with pytest.raises(CompositionError, match="discriminator"):
        tagged_record_codec(required_field_codec("type", DOUBLE_CODEC), "Circle")


def test_encoding_a_non_either_value_is_a_type_error() -> None:
    codec = choice_codec(_circle(), _square())

    with pytest.raises(TypeError):
        codec.encode(2.0)
