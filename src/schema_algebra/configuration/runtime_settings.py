"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DISCRIMINATOR = "type"


@dataclass(frozen=True)
class InterpreterSettings:
    """Settings shared by every interpreter built over a description."""

    discriminator: str = DEFAULT_DISCRIMINATOR
    verify_invmap: bool = False


@dataclass(frozen=True)
class DescriptorSettings:
    """Top-level decorations of emitted schema descriptors."""

    dialect: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    interpreter: InterpreterSettings = field(default_factory=InterpreterSettings)
    descriptor: DescriptorSettings = field(default_factory=DescriptorSettings)
    schemas: Mapping[str, str] = field(default_factory=dict)
