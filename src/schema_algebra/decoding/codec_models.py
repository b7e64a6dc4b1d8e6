"""Compiled JSON codec entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Generic, TypeAlias, TypeVar

from schema_algebra.algebra.schema_models import InvariantMapError

from .decode_errors import DecodeError, DecodeResult, ElementError, TypeMismatch

A = TypeVar("A")

JSONScalar: TypeAlias = str | int | float | Decimal | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]


class JsonCodec(ABC, Generic[A]):
    """Bidirectional mapping between values of ``A`` and JSON-like trees."""

    @abstractmethod
    def decode_value(self, value: JSONValue) -> A:
        """Decode ``value``, raising ``DecodeError`` on the first failure."""

    @abstractmethod
    def encode(self, value: A) -> JSONValue:
        """Encode a well-typed ``value``."""

    def decode(self, value: JSONValue) -> DecodeResult[A]:
        """Decode ``value`` into a result holding either the value or the error."""
        try:
            return DecodeResult.success(self.decode_value(value))
        except DecodeError as exc:
            return DecodeResult.failure(exc)

    def decode_or_raise(self, value: JSONValue) -> A:
        return self.decode_value(value)


@dataclass(frozen=True)
class ScalarCodec(JsonCodec[A]):
    """Codec for one primitive kind."""

    kind: str
    decoder: Callable[[JSONValue], A]
    encoder: Callable[[A], JSONValue]

    def decode_value(self, value: JSONValue) -> A:
        return self.decoder(value)

    def encode(self, value: A) -> JSONValue:
        return self.encoder(value)


@dataclass(frozen=True)
class ArrayCodec(JsonCodec[list[A]]):
    """Codec for a homogeneous JSON array."""

    element: JsonCodec[A]

    def decode_value(self, value: JSONValue) -> list[A]:
        if not isinstance(value, list):
            raise TypeMismatch(None, "array", value)
        decoded: list[A] = []
        for index, item in enumerate(value):
            try:
                decoded.append(self.element.decode_value(item))
            except DecodeError as exc:
                raise ElementError(index, exc) from exc
        return decoded

    def encode(self, value: list[A]) -> JSONValue:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise TypeError(f"Expected a sequence, got {type(value).__name__}.")
        return [self.element.encode(item) for item in value]


@dataclass(frozen=True)
class MappedCodec(JsonCodec[A]):
    """Codec sharing the wire shape of ``codec`` with a different payload type."""

    codec: JsonCodec[Any]
    f: Callable[[Any], A]
    g: Callable[[A], Any]
    verify: bool = False

    def decode_value(self, value: JSONValue) -> A:
        return apply_invmap(self.codec.decode_value(value), self.f, self.g, verify=self.verify)

    def encode(self, value: A) -> JSONValue:
        return self.codec.encode(self.g(value))


def apply_invmap(
    decoded: Any, f: Callable[[Any], A], g: Callable[[A], Any], *, verify: bool
) -> A:
    """Apply ``f`` to a decoded value, optionally checking ``g`` undoes it."""
    mapped = f(decoded)
    if verify and g(mapped) != decoded:
        raise InvariantMapError(
            f"invmap functions do not round-trip: {decoded!r} -> {mapped!r} -> {g(mapped)!r}"
        )
    return mapped
