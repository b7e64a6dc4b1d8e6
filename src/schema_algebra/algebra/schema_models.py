"""Schema description entities.

A description is an immutable tree of the nodes below. It says nothing about
JSON, documents or codecs: interpreters fold it through the ``JsonSchemas``
contract to obtain whatever artifact they produce. Nodes compare and hash by
identity so one description can be shared and cached freely.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from .json_schemas import JsonSchemas

A = TypeVar("A")
B = TypeVar("B")


class CompositionError(Exception):
    """Raised when combinators are composed into an invalid description."""


class InvariantMapError(CompositionError):
    """Raised when an invmap pair is observed not to round-trip a decoded value."""


class PrimitiveKind(str, Enum):
    """Scalar kinds with a fixed schema."""

    STRING = "string"
    INT = "int"
    LONG = "long"
    BIG_DECIMAL = "bigdecimal"
    DOUBLE = "double"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Left(Generic[A]):
    """First alternative of a tagged choice."""

    value: A


@dataclass(frozen=True)
class Right(Generic[B]):
    """Second alternative of a tagged choice."""

    value: B


Either = Left[A] | Right[B]


@dataclass(frozen=True)
class Field:
    """One named slot of a record."""

    name: str
    documentation: str | None
    optional: bool


def ensure_distinct_names(names: Iterable[str], *, kind: str) -> None:
    """Reject duplicated field names or tags."""
    duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
    if duplicates:
        raise CompositionError(f"Duplicate {kind} names: {', '.join(duplicates)}")


def ensure_no_discriminator_collision(
    fields: Iterable[Field], *, tag: str, discriminator: str
) -> None:
    """Reject a tagged record that declares a field named like the discriminator."""
    if any(field.name == discriminator for field in fields):
        raise CompositionError(
            f"Tagged record '{tag}' declares a field named like the discriminator "
            f"'{discriminator}'."
        )


class JsonSchema(Generic[A]):
    """Description of how values of type ``A`` map to and from a representation."""

    def invmap(self, f: Callable[[A], B], g: Callable[[B], A]) -> JsonSchema[B]:
        return MappedSchema(self, f, g)

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        """Interpret this description with ``algebra``."""
        raise NotImplementedError(type(self))


class Record(JsonSchema[A]):
    """Description of a JSON object with a fixed, ordered set of named fields."""

    @property
    def fields(self) -> tuple[Field, ...]:
        raise NotImplementedError(type(self))

    def zip(self, other: Record[B]) -> Record[tuple[A, B]]:
        return ZippedRecord(self, other)

    def invmap(self, f: Callable[[A], B], g: Callable[[B], A]) -> Record[B]:
        return MappedRecord(self, f, g)

    def tagged(self, tag: str) -> Tagged[A]:
        return TaggedRecord(self, tag)


class Tagged(JsonSchema[A]):
    """Record description carrying a discriminator value."""

    @property
    def tags(self) -> tuple[str, ...]:
        """Tags of every alternative, in pre-order."""
        raise NotImplementedError(type(self))

    def or_else(self, other: Tagged[B]) -> Tagged[Either[A, B]]:
        return TaggedChoice(self, other)

    def invmap(self, f: Callable[[A], B], g: Callable[[B], A]) -> Tagged[B]:
        return MappedTagged(self, f, g)


_PRIMITIVE_METHODS = {
    PrimitiveKind.STRING: "string_json_schema",
    PrimitiveKind.INT: "int_json_schema",
    PrimitiveKind.LONG: "long_json_schema",
    PrimitiveKind.BIG_DECIMAL: "bigdecimal_json_schema",
    PrimitiveKind.DOUBLE: "double_json_schema",
    PrimitiveKind.BOOLEAN: "boolean_json_schema",
}


@dataclass(frozen=True, eq=False)
class PrimitiveSchema(JsonSchema[Any]):
    kind: PrimitiveKind

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return getattr(algebra, _PRIMITIVE_METHODS[self.kind])()


@dataclass(frozen=True, eq=False)
class ArraySchema(JsonSchema[list[A]]):
    element: JsonSchema[A]

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return algebra.array_json_schema(self.element.fold(algebra))


@dataclass(frozen=True, eq=False)
class MappedSchema(JsonSchema[B]):
    schema: JsonSchema[Any]
    f: Callable[[Any], B]
    g: Callable[[B], Any]

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return algebra.invmap_json_schema(self.schema.fold(algebra), self.f, self.g)


@dataclass(frozen=True, eq=False)
class EmptyRecord(Record[None]):
    @property
    def fields(self) -> tuple[Field, ...]:
        return ()

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return algebra.empty_record()


@dataclass(frozen=True, eq=False)
class FieldRecord(Record[A]):
    name: str
    schema: JsonSchema[Any]
    documentation: str | None = None
    optional: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise CompositionError("Field names must not be empty.")

    @property
    def fields(self) -> tuple[Field, ...]:
        return (Field(name=self.name, documentation=self.documentation, optional=self.optional),)

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        schema = self.schema.fold(algebra)
        if self.optional:
            return algebra.opt_field(self.name, schema, self.documentation)
        return algebra.field(self.name, schema, self.documentation)


@dataclass(frozen=True, eq=False)
class ZippedRecord(Record[tuple[A, B]]):
    left: Record[A]
    right: Record[B]

    def __post_init__(self) -> None:
        ensure_distinct_names((field.name for field in self.fields), kind="field")

    @cached_property
    def fields(self) -> tuple[Field, ...]:  # type: ignore[override]
        return self.left.fields + self.right.fields

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return algebra.zip_records(self.left.fold(algebra), self.right.fold(algebra))


@dataclass(frozen=True, eq=False)
class MappedRecord(Record[B]):
    record: Record[Any]
    f: Callable[[Any], B]
    g: Callable[[B], Any]

    @property
    def fields(self) -> tuple[Field, ...]:
        return self.record.fields

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return algebra.invmap_record(self.record.fold(algebra), self.f, self.g)


@dataclass(frozen=True, eq=False)
class TaggedRecord(Tagged[A]):
    record: Record[A]
    tag: str

    def __post_init__(self) -> None:
        if not self.tag:
            raise CompositionError("Tags must not be empty.")

    @property
    def tags(self) -> tuple[str, ...]:
        return (self.tag,)

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return algebra.tagged_record(self.record.fold(algebra), self.tag)


@dataclass(frozen=True, eq=False)
class TaggedChoice(Tagged[Either[A, B]]):
    left: Tagged[A]
    right: Tagged[B]

    def __post_init__(self) -> None:
        ensure_distinct_names(self.tags, kind="tag")

    @cached_property
    def tags(self) -> tuple[str, ...]:  # type: ignore[override]
        return self.left.tags + self.right.tags

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return algebra.choice_tagged(self.left.fold(algebra), self.right.fold(algebra))


@dataclass(frozen=True, eq=False)
class MappedTagged(Tagged[B]):
    tagged: Tagged[Any]
    f: Callable[[Any], B]
    g: Callable[[B], Any]

    @property
    def tags(self) -> tuple[str, ...]:
        return self.tagged.tags

    def fold(self, algebra: JsonSchemas[Any, Any, Any]) -> Any:
        return algebra.invmap_tagged(self.tagged.fold(algebra), self.f, self.g)
