"""Decode failures and results."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")

PathSegment = str | int


@dataclass(eq=True)
class DecodeError(Exception):
    """Base class for failures while decoding a JSON value.

    ``path`` locates the failure from the decoded root: field names and
    sequence indexes. It is not part of equality.
    """

    path: tuple[PathSegment, ...] = dataclasses.field(default=(), compare=False, kw_only=True)

    def at(self, segment: PathSegment) -> DecodeError:
        """Return this error relocated under ``segment``."""
        return dataclasses.replace(self, path=(segment, *self.path))

    @property
    def location(self) -> str:
        rendered = "$"
        for segment in self.path:
            rendered += f"[{segment}]" if isinstance(segment, int) else f".{segment}"
        return rendered

    def describe(self) -> str:
        return "decode failed"

    def __str__(self) -> str:
        return f"{self.location}: {self.describe()}"


@dataclass(eq=True)
class MissingField(DecodeError):
    """Required field absent from a JSON object."""

    name: str

    def describe(self) -> str:
        return f"missing field '{self.name}'"


@dataclass(eq=True)
class TypeMismatch(DecodeError):
    """Value present but not decodable as the expected kind."""

    name: str | None
    expected_kind: str
    actual_value: Any

    def at(self, segment: PathSegment) -> DecodeError:
        relocated = dataclasses.replace(self, path=(segment, *self.path))
        if self.name is None and isinstance(segment, str):
            relocated.name = segment
        return relocated

    def describe(self) -> str:
        return f"expected {self.expected_kind}, got {self.actual_value!r}"


@dataclass(eq=True)
class UnknownTag(DecodeError):
    """Discriminator value matching none of the known tags."""

    actual: str
    expected_one_of: tuple[str, ...]

    def describe(self) -> str:
        expected = ", ".join(repr(tag) for tag in self.expected_one_of)
        return f"unknown tag {self.actual!r}, expected one of {expected}"


@dataclass(eq=True)
class ElementError(DecodeError):
    """Failure decoding one element of a sequence."""

    index: int
    cause: DecodeError

    @property
    def location(self) -> str:
        nested = dataclasses.replace(self.cause, path=(*self.path, self.index, *self.cause.path))
        return nested.location

    def describe(self) -> str:
        return self.cause.describe()


@dataclass(frozen=True)
class DecodeResult(Generic[A]):
    """Outcome of decoding one JSON value."""

    value: A | None
    error: DecodeError | None

    @property
    def ok(self) -> bool:
        """Return True when decoding succeeded."""
        return self.error is None

    def unwrap(self) -> A:
        """Return the decoded value or raise the decode error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @staticmethod
    def success(value: A) -> DecodeResult[A]:
        return DecodeResult(value=value, error=None)

    @staticmethod
    def failure(error: DecodeError) -> DecodeResult[Any]:
        return DecodeResult(value=None, error=error)
