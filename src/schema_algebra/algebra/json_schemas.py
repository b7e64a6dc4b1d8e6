"""Interpreter contract for schema descriptions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .schema_models import JsonSchema

S = TypeVar("S")
R = TypeVar("R")
T = TypeVar("T")


class JsonSchemas(ABC, Generic[S, R, T]):
    """Operations every interpreter provides.

    ``S`` is the interpreter's artifact for any schema, ``R`` its artifact for
    records and ``T`` for tagged records. ``R`` and ``T`` must be accepted
    wherever an ``S`` is expected, since records and tagged records are schemas
    too.
    """

    @abstractmethod
    def empty_record(self) -> R:
        """Record with no fields, decoding to ``None``."""

    @abstractmethod
    def field(self, name: str, schema: S, documentation: str | None = None) -> R:
        """Record with one required field."""

    @abstractmethod
    def opt_field(self, name: str, schema: S, documentation: str | None = None) -> R:
        """Record with one optional field."""

    @abstractmethod
    def tagged_record(self, record: R, tag: str) -> T:
        """Attach a discriminator value to a record."""

    @abstractmethod
    def choice_tagged(self, tagged_a: T, tagged_b: T) -> T:
        """Disjoint union of two tagged records."""

    @abstractmethod
    def zip_records(self, record_a: R, record_b: R) -> R:
        """Record merging the fields of both records."""

    @abstractmethod
    def invmap_record(self, record: R, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> R:
        """Change the payload type of a record."""

    @abstractmethod
    def invmap_tagged(self, tagged: T, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> T:
        """Change the payload type of a tagged record."""

    @abstractmethod
    def invmap_json_schema(self, schema: S, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> S:
        """Change the payload type of a schema."""

    @abstractmethod
    def string_json_schema(self) -> S: ...

    @abstractmethod
    def int_json_schema(self) -> S: ...

    @abstractmethod
    def long_json_schema(self) -> S: ...

    @abstractmethod
    def bigdecimal_json_schema(self) -> S: ...

    @abstractmethod
    def double_json_schema(self) -> S: ...

    @abstractmethod
    def boolean_json_schema(self) -> S: ...

    @abstractmethod
    def array_json_schema(self, element: S) -> S:
        """Homogeneous sequence of ``element``."""


def interpret(schema: JsonSchema[Any], algebra: JsonSchemas[S, R, T]) -> S | R | T:
    """Fold a description through one interpreter."""
    return schema.fold(algebra)
