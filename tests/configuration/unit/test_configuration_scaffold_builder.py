"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_algebra.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from schema_algebra.configuration.loader import load_configuration
from schema_algebra.configuration.runtime_settings import DescriptorSettings, InterpreterSettings


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Configuration template for schema-algebra" in scaffold
    assert "interpreter:" in scaffold
    assert "discriminator:" in scaffold
    assert "verify_invmap:" in scaffold
    assert "descriptor:" in scaffold
    assert "# dialect:" in scaffold
    assert "# title:" in scaffold
    assert "schemas:" in scaffold


def test_written_scaffold_loads_with_default_settings(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.interpreter == InterpreterSettings()
    assert configuration.descriptor == DescriptorSettings()
    assert configuration.schemas == {}


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
