"""Schema algebra exports."""

from .combinators import (
    choice_tagged,
    empty_record,
    field,
    invmap_json_schema,
    invmap_record,
    invmap_tagged,
    opt_field,
    tagged_record,
    zip_records,
)
from .json_schemas import JsonSchemas, interpret
from .schema_models import (
    CompositionError,
    Either,
    Field,
    InvariantMapError,
    JsonSchema,
    Left,
    PrimitiveKind,
    Record,
    Right,
    Tagged,
)

__all__ = [
    "CompositionError",
    "Either",
    "Field",
    "InvariantMapError",
    "JsonSchema",
    "JsonSchemas",
    "Left",
    "PrimitiveKind",
    "Record",
    "Right",
    "Tagged",
    "choice_tagged",
    "empty_record",
    "field",
    "interpret",
    "invmap_json_schema",
    "invmap_record",
    "invmap_tagged",
    "opt_field",
    "tagged_record",
    "zip_records",
]
