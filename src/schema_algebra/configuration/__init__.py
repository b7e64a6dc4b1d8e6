"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    DEFAULT_DISCRIMINATOR,
    Configuration,
    DescriptorSettings,
    InterpreterSettings,
)
from .schema_reference import SchemaReferenceError, resolve_schema_reference

__all__ = [
    "Configuration",
    "DescriptorSettings",
    "InterpreterSettings",
    "ConfigurationError",
    "SchemaReferenceError",
    "load_configuration",
    "resolve_schema_reference",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_DISCRIMINATOR",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
