"""Resolution of ``module:attribute`` references to schema descriptions."""

from __future__ import annotations

import importlib
from collections.abc import Mapping

from schema_algebra.algebra.schema_models import JsonSchema


class SchemaReferenceError(Exception):
    """Raised when a schema reference cannot be resolved."""


def resolve_schema_reference(
    reference: str, named_schemas: Mapping[str, str] | None = None
) -> JsonSchema[object]:
    """Import the description a reference points to.

    ``reference`` is either a key of ``named_schemas`` or a ``module:attribute``
    string. The attribute may be dotted, and may be a zero-argument callable
    returning the description.
    """
    target = (named_schemas or {}).get(reference, reference)
    module_name, separator, attribute_path = target.partition(":")
    if not separator or not module_name or not attribute_path:
        raise SchemaReferenceError(
            f"Schema reference '{reference}' is neither a configured name nor 'module:attribute'."
        )

    try:
        resolved: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise SchemaReferenceError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in attribute_path.split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise SchemaReferenceError(
                f"'{target}' does not resolve: missing attribute '{attribute}'."
            ) from exc

    if not isinstance(resolved, JsonSchema) and callable(resolved):
        resolved = resolved()
    if not isinstance(resolved, JsonSchema):
        raise SchemaReferenceError(
            f"'{target}' resolves to {type(resolved).__name__}, not a schema description."
        )
    return resolved
