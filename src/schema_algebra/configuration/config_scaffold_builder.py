"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-algebra.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-algebra.
# Every section is optional. Uncomment the settings you need.

interpreter:
  # Key holding the tag of tagged records in encoded JSON objects.
  discriminator: "type"
  # Check g(f(a)) == a for every decoded value passing through an invmap.
  verify_invmap: false

descriptor:
  # Added as "$schema" to emitted schema documents.
  # dialect: "http://json-schema.org/draft-04/schema#"
  # Added as "title" to emitted schema documents.
  # title: "My API"

schemas:
  # Name -> "module:attribute" reference to a schema description.
  # The attribute may also be a zero-argument callable returning the description.
  # example: "my_package.shapes:SHAPE_SCHEMA"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
