"""Tagged union codec engine.

Choices compose as a binary tree, but a compiled tagged codec keeps its
alternatives flattened in pre-order: each alternative knows its tag, its
record codec and how to inject a decoded record payload back into the
tree-shaped ``Left``/``Right`` value. Decoding is one lookup by tag; the tag
priority of the tree is preserved because tags are distinct.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Any, TypeVar

from schema_algebra.algebra.schema_models import (
    CompositionError,
    Either,
    Left,
    Right,
    ensure_distinct_names,
    ensure_no_discriminator_collision,
)
from schema_algebra.configuration.runtime_settings import DEFAULT_DISCRIMINATOR
from schema_algebra.decoding.codec_models import JsonCodec, JSONObject, JSONValue, apply_invmap
from schema_algebra.decoding.decode_errors import MissingField, TypeMismatch, UnknownTag
from schema_algebra.records.record_engine import RecordCodec

A = TypeVar("A")
B = TypeVar("B")


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class TaggedAlternative:
    """One leaf of a choice tree."""

    tag: str
    record: RecordCodec[Any]
    inject: Callable[[Any], Any]


Selector = Callable[[Any], tuple[TaggedAlternative, Any]]


@dataclass(frozen=True)
class TaggedCodec(JsonCodec[A]):
    """Codec for a JSON object whose discriminator selects the record to use."""

    discriminator: str
    alternatives: tuple[TaggedAlternative, ...]
    select: Selector

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(alternative.tag for alternative in self.alternatives)

    @cached_property
    def _alternatives_by_tag(self) -> Mapping[str, TaggedAlternative]:
        return {alternative.tag: alternative for alternative in self.alternatives}

    def decode_value(self, value: JSONValue) -> A:
        if not isinstance(value, Mapping):
            raise TypeMismatch(None, "object", value)
        if self.discriminator not in value:
            raise MissingField(self.discriminator)
        tag = value[self.discriminator]
        if not isinstance(tag, str):
            raise TypeMismatch(None, "string", tag).at(self.discriminator)
        alternative = self._alternatives_by_tag.get(tag)
        if alternative is None:
            raise UnknownTag(tag, self.tags)
        remaining = {key: item for key, item in value.items() if key != self.discriminator}
        return alternative.inject(alternative.record.decode_fields(remaining))

    def encode(self, value: A) -> JSONObject:
        alternative, payload = self.select(value)
        return {self.discriminator: alternative.tag, **alternative.record.encode_fields(payload)}


def tagged_record_codec(
    record: RecordCodec[A], tag: str, *, discriminator: str = DEFAULT_DISCRIMINATOR
) -> TaggedCodec[A]:
    """Tagged codec with a single alternative.

    Raises:
      CompositionError: If the record declares a field named like the discriminator.
    """
    ensure_no_discriminator_collision(record.fields, tag=tag, discriminator=discriminator)
    alternative = TaggedAlternative(tag=tag, record=record, inject=_identity)

    def select(value: A) -> tuple[TaggedAlternative, Any]:
        return alternative, value

    return TaggedCodec(discriminator=discriminator, alternatives=(alternative,), select=select)


def choice_codec(left: TaggedCodec[A], right: TaggedCodec[B]) -> TaggedCodec[Either[A, B]]:
    """Tagged codec for ``Left`` values of ``left`` and ``Right`` values of ``right``.

    Raises:
      CompositionError: If the sides disagree on the discriminator or share a tag.
    """
    if left.discriminator != right.discriminator:
        raise CompositionError(
            f"Cannot combine discriminators '{left.discriminator}' and '{right.discriminator}'."
        )
    ensure_distinct_names(left.tags + right.tags, kind="tag")
    alternatives = tuple(_injected(alternative, Left) for alternative in left.alternatives) + tuple(
        _injected(alternative, Right) for alternative in right.alternatives
    )

    def select(value: Either[A, B]) -> tuple[TaggedAlternative, Any]:
        if isinstance(value, Left):
            return left.select(value.value)
        if isinstance(value, Right):
            return right.select(value.value)
        raise TypeError(f"Expected Left or Right, got {type(value).__name__}.")

    return TaggedCodec(discriminator=left.discriminator, alternatives=alternatives, select=select)


def invmap_tagged_codec(
    tagged: TaggedCodec[A],
    f: Callable[[A], B],
    g: Callable[[B], A],
    *,
    verify: bool = False,
) -> TaggedCodec[B]:
    """Tagged codec with the same alternatives and a transformed payload."""

    def outer(decoded: A) -> B:
        return apply_invmap(decoded, f, g, verify=verify)

    def select(value: B) -> tuple[TaggedAlternative, Any]:
        return tagged.select(g(value))

    return TaggedCodec(
        discriminator=tagged.discriminator,
        alternatives=tuple(_injected(alternative, outer) for alternative in tagged.alternatives),
        select=select,
    )


def _injected(alternative: TaggedAlternative, outer: Callable[[Any], Any]) -> TaggedAlternative:
    inner = alternative.inject

    def inject(payload: Any) -> Any:
        return outer(inner(payload))

    return replace(alternative, inject=inject)
