"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_DISCRIMINATOR,
    Configuration,
    DescriptorSettings,
    InterpreterSettings,
)

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    configuration = Configuration(
        path=path,
        interpreter=_parse_interpreter_section(parsed.get("interpreter")),
        descriptor=_parse_descriptor_section(parsed.get("descriptor")),
        schemas=_parse_schemas_section(parsed.get("schemas")),
    )
    _LOGGER.debug(
        "Loaded configuration %s (discriminator=%r, %d named schemas)",
        path.resolve(),
        configuration.interpreter.discriminator,
        len(configuration.schemas),
    )
    return configuration


def _parse_interpreter_section(value: Any) -> InterpreterSettings:
    section = _optional_mapping(value, "interpreter")
    discriminator = _require_non_empty_string(
        section.get("discriminator", DEFAULT_DISCRIMINATOR), "interpreter.discriminator"
    )
    verify_invmap = _require_bool(section.get("verify_invmap", False), "interpreter.verify_invmap")
    return InterpreterSettings(discriminator=discriminator, verify_invmap=verify_invmap)


def _parse_descriptor_section(value: Any) -> DescriptorSettings:
    section = _optional_mapping(value, "descriptor")
    dialect = _optional_string(section.get("dialect"), "descriptor.dialect")
    title = _optional_string(section.get("title"), "descriptor.title")
    return DescriptorSettings(dialect=dialect, title=title)


def _parse_schemas_section(value: Any) -> dict[str, str]:
    section = _optional_mapping(value, "schemas")
    schemas: dict[str, str] = {}
    for name, reference in section.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("schemas entries must be keyed by non-empty names.")
        label = f"schemas.{name}"
        reference_text = _require_non_empty_string(reference, label)
        if ":" not in reference_text:
            raise ConfigurationError(f"{label} must look like 'module:attribute'.")
        schemas[name.strip()] = reference_text
    return schemas


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
