"""Author-facing combinators.

Every combinator takes the schemas it composes as explicit arguments::

    user = (
        field("name", STRING).zip(field("age", INT))
    ).invmap(lambda pair: User(*pair), lambda user: (user.name, user.age))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .schema_models import (
    EmptyRecord,
    Either,
    FieldRecord,
    JsonSchema,
    MappedRecord,
    MappedSchema,
    MappedTagged,
    Record,
    Tagged,
    TaggedChoice,
    TaggedRecord,
    ZippedRecord,
)

A = TypeVar("A")
B = TypeVar("B")

_EMPTY_RECORD = EmptyRecord()


def empty_record() -> Record[None]:
    """Return the record with no fields."""
    return _EMPTY_RECORD


def field(name: str, schema: JsonSchema[A], documentation: str | None = None) -> Record[A]:
    """Return a record with one required field ``name``."""
    return FieldRecord(name=name, schema=schema, documentation=documentation)


def opt_field(
    name: str, schema: JsonSchema[A], documentation: str | None = None
) -> Record[A | None]:
    """Return a record with one optional field ``name``; absence decodes to ``None``."""
    return FieldRecord(name=name, schema=schema, documentation=documentation, optional=True)


def tagged_record(record: Record[A], tag: str) -> Tagged[A]:
    return TaggedRecord(record=record, tag=tag)


def choice_tagged(tagged_a: Tagged[A], tagged_b: Tagged[B]) -> Tagged[Either[A, B]]:
    """Return the disjoint union of two tagged records.

    Raises:
      CompositionError: If both sides share a tag.
    """
    return TaggedChoice(left=tagged_a, right=tagged_b)


def zip_records(record_a: Record[A], record_b: Record[B]) -> Record[tuple[A, B]]:
    """Return a record holding the fields of both records, in order.

    Raises:
      CompositionError: If both records declare a field with the same name.
    """
    return ZippedRecord(left=record_a, right=record_b)


def invmap_record(record: Record[A], f: Callable[[A], B], g: Callable[[B], A]) -> Record[B]:
    return MappedRecord(record=record, f=f, g=g)


def invmap_tagged(tagged: Tagged[A], f: Callable[[A], B], g: Callable[[B], A]) -> Tagged[B]:
    return MappedTagged(tagged=tagged, f=f, g=g)


def invmap_json_schema(
    schema: JsonSchema[A], f: Callable[[A], B], g: Callable[[B], A]
) -> JsonSchema[B]:
    return MappedSchema(schema=schema, f=f, g=g)

