"""JSON schema descriptor interpreter.

Folding a description through ``JsonSchemaDescriptors`` yields a
``Description``; ``describe`` renders it as a JSON Schema-like document.
Records keep their properties as a list until rendered so that zipping and
tagging can merge them.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from schema_algebra.algebra.json_schemas import JsonSchemas, interpret
from schema_algebra.algebra.schema_models import (
    CompositionError,
    Field,
    JsonSchema,
    PrimitiveKind,
    ensure_distinct_names,
    ensure_no_discriminator_collision,
)
from schema_algebra.configuration.runtime_settings import DescriptorSettings, InterpreterSettings
from schema_algebra.primitives.primitive_registry import scalar_rule


class Description(ABC):
    """Interpreter artifact for any schema."""

    @abstractmethod
    def to_document(self) -> dict[str, Any]:
        """Render a fresh JSON Schema-like document."""


@dataclass(frozen=True)
class SchemaDescription(Description):
    document: Mapping[str, Any]

    def to_document(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self.document))


@dataclass(frozen=True)
class PropertyDescription:
    """One record property with its nested document."""

    field: Field
    document: Mapping[str, Any]

    def to_document(self) -> dict[str, Any]:
        document = copy.deepcopy(dict(self.document))
        if self.field.documentation:
            document["description"] = self.field.documentation
        return document


@dataclass(frozen=True)
class RecordDescription(Description):
    properties: tuple[PropertyDescription, ...]

    @property
    def fields(self) -> tuple[Field, ...]:
        return tuple(prop.field for prop in self.properties)

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {
            "type": "object",
            "properties": {prop.field.name: prop.to_document() for prop in self.properties},
        }
        required = [prop.field.name for prop in self.properties if not prop.field.optional]
        if required:
            document["required"] = required
        return document


@dataclass(frozen=True)
class TaggedDescription(Description):
    discriminator: str
    alternatives: tuple[tuple[str, RecordDescription], ...]

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(tag for tag, _ in self.alternatives)

    def to_document(self) -> dict[str, Any]:
        documents = [self._alternative_document(tag, record) for tag, record in self.alternatives]
        if len(documents) == 1:
            return documents[0]
        return {"oneOf": documents, "discriminator": {"propertyName": self.discriminator}}

    def _alternative_document(self, tag: str, record: RecordDescription) -> dict[str, Any]:
        discriminator = PropertyDescription(
            field=Field(name=self.discriminator, documentation=None, optional=False),
            document={"type": "string", "enum": [tag]},
        )
        return RecordDescription((discriminator, *record.properties)).to_document()


class JsonSchemaDescriptors(JsonSchemas[Description, RecordDescription, TaggedDescription]):
    """Interpret descriptions as JSON Schema-like documents."""

    def __init__(self, settings: InterpreterSettings | None = None) -> None:
        self._settings = settings or InterpreterSettings()

    def empty_record(self) -> RecordDescription:
        return RecordDescription(())

    def field(
        self, name: str, schema: Description, documentation: str | None = None
    ) -> RecordDescription:
        return _single_property(name, schema, documentation, optional=False)

    def opt_field(
        self, name: str, schema: Description, documentation: str | None = None
    ) -> RecordDescription:
        return _single_property(name, schema, documentation, optional=True)

    def tagged_record(self, record: RecordDescription, tag: str) -> TaggedDescription:
        discriminator = self._settings.discriminator
        ensure_no_discriminator_collision(record.fields, tag=tag, discriminator=discriminator)
        return TaggedDescription(discriminator=discriminator, alternatives=((tag, record),))

    def choice_tagged(
        self, tagged_a: TaggedDescription, tagged_b: TaggedDescription
    ) -> TaggedDescription:
        if tagged_a.discriminator != tagged_b.discriminator:
            raise CompositionError("Tagged alternatives must share one discriminator.")
        ensure_distinct_names(tagged_a.tags + tagged_b.tags, kind="tag")
        return TaggedDescription(
            discriminator=tagged_a.discriminator,
            alternatives=tagged_a.alternatives + tagged_b.alternatives,
        )

    def zip_records(
        self, record_a: RecordDescription, record_b: RecordDescription
    ) -> RecordDescription:
        properties = record_a.properties + record_b.properties
        ensure_distinct_names((prop.field.name for prop in properties), kind="field")
        return RecordDescription(properties)

    def invmap_record(
        self, record: RecordDescription, f: Callable[[Any], Any], g: Callable[[Any], Any]
    ) -> RecordDescription:
        return record

    def invmap_tagged(
        self, tagged: TaggedDescription, f: Callable[[Any], Any], g: Callable[[Any], Any]
    ) -> TaggedDescription:
        return tagged

    def invmap_json_schema(
        self, schema: Description, f: Callable[[Any], Any], g: Callable[[Any], Any]
    ) -> Description:
        return schema

    def string_json_schema(self) -> Description:
        return _scalar_description(PrimitiveKind.STRING)

    def int_json_schema(self) -> Description:
        return _scalar_description(PrimitiveKind.INT)

    def long_json_schema(self) -> Description:
        return _scalar_description(PrimitiveKind.LONG)

    def bigdecimal_json_schema(self) -> Description:
        return _scalar_description(PrimitiveKind.BIG_DECIMAL)

    def double_json_schema(self) -> Description:
        return _scalar_description(PrimitiveKind.DOUBLE)

    def boolean_json_schema(self) -> Description:
        return _scalar_description(PrimitiveKind.BOOLEAN)

    def array_json_schema(self, element: Description) -> Description:
        return SchemaDescription({"type": "array", "items": element.to_document()})


def _single_property(
    name: str, schema: Description, documentation: str | None, *, optional: bool
) -> RecordDescription:
    prop = PropertyDescription(
        field=Field(name=name, documentation=documentation, optional=optional),
        document=schema.to_document(),
    )
    return RecordDescription((prop,))


def _scalar_description(kind: PrimitiveKind) -> SchemaDescription:
    return SchemaDescription(scalar_rule(kind).descriptor)


def describe(
    schema: JsonSchema[Any],
    settings: InterpreterSettings | None = None,
    document_settings: DescriptorSettings | None = None,
) -> dict[str, Any]:
    """Render the JSON Schema-like document of ``schema``."""
    description = interpret(schema, JsonSchemaDescriptors(settings))
    document = description.to_document()
    decorations: dict[str, Any] = {}
    if document_settings is not None and document_settings.dialect:
        decorations["$schema"] = document_settings.dialect
    if document_settings is not None and document_settings.title:
        decorations["title"] = document_settings.title
    return {**decorations, **document}
