"""Schema descriptor interpreter exports."""

from .descriptor_interpreter import (
    Description,
    JsonSchemaDescriptors,
    RecordDescription,
    SchemaDescription,
    TaggedDescription,
    describe,
)
from .descriptor_projection import DescribedField, DescriptorError, flatten_descriptor

__all__ = [
    "DescribedField",
    "Description",
    "DescriptorError",
    "JsonSchemaDescriptors",
    "RecordDescription",
    "SchemaDescription",
    "TaggedDescription",
    "describe",
    "flatten_descriptor",
]
