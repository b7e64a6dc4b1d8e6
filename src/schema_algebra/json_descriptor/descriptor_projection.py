"""Flattening of descriptor documents into dotted property paths."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


class DescriptorError(Exception):
    """Raised when a descriptor document cannot be flattened."""


@dataclass(frozen=True)
class DescribedField:
    """Flattened property of a descriptor document."""

    path: str
    definition: Any
    required: bool


def flatten_descriptor(document: Mapping[str, Any]) -> list[DescribedField]:
    """Return the leaf properties of a descriptor, nested objects expanded.

    Alternatives of a tagged union are merged in order; a path already seen in
    an earlier alternative is kept once.
    """
    if not _has_structure(document):
        raise DescriptorError("Descriptor root must define object properties or alternatives.")
    fields: list[DescribedField] = []
    _flatten_node(document, prefix="", required=True, fields=fields, seen_paths=set())
    return fields


def _has_structure(node: Any) -> bool:
    return isinstance(node, Mapping) and ("properties" in node or "oneOf" in node)


def _flatten_node(
    node: Any,
    *,
    prefix: str,
    required: bool,
    fields: list[DescribedField],
    seen_paths: set[str],
) -> None:
    if not isinstance(node, Mapping):
        raise DescriptorError(f"Descriptor nodes must be objects (at '{prefix or '$'}').")

    alternatives = node.get("oneOf")
    if isinstance(alternatives, Sequence):
        for alternative in alternatives:
            _flatten_node(
                alternative, prefix=prefix, required=required, fields=fields, seen_paths=seen_paths
            )
        return

    properties = node.get("properties")
    if isinstance(properties, Mapping):
        required_names = set(node.get("required", ()))
        for key, child in properties.items():
            child_path = key if not prefix else f"{prefix}.{key}"
            _flatten_node(
                child,
                prefix=child_path,
                required=required and key in required_names,
                fields=fields,
                seen_paths=seen_paths,
            )
        return

    if prefix and prefix not in seen_paths:
        seen_paths.add(prefix)
        fields.append(DescribedField(path=prefix, definition=node, required=required))
