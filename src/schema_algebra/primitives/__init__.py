"""Primitive schema exports."""

from .primitive_registry import (
    BIG_DECIMAL,
    BOOLEAN,
    DOUBLE,
    INT,
    LONG,
    STRING,
    ScalarRule,
    array_of,
    scalar_rule,
)

__all__ = [
    "BIG_DECIMAL",
    "BOOLEAN",
    "DOUBLE",
    "INT",
    "LONG",
    "STRING",
    "ScalarRule",
    "array_of",
    "scalar_rule",
]
