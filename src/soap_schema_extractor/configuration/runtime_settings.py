"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_SCHEMA_NAME = "Connector"
DEFAULT_SCHEMA_VERSION = "1.0.0"
DEFAULT_MAX_DEPTH = 64


class Scope(str, Enum):
    """Which global elements are promoted to entities."""

    ROOTS_ONLY = "roots-only"
    ALL = "all"
    UNION = "union"


class OutputFormat(str, Enum):
    """Supported conversion output formats."""

    JSON = "json"
    XLSX = "xlsx"


@dataclass(frozen=True)
class ConversionOptions:
    """Options applied to one schema conversion."""

    name: str = DEFAULT_SCHEMA_NAME
    version: str = DEFAULT_SCHEMA_VERSION
    scope: Scope = Scope.ROOTS_ONLY
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class OutputSettings:
    """Where and how the converted schema is written."""

    format: OutputFormat
    path: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    documents: tuple[Path, ...]
    conversion: ConversionOptions
    output: OutputSettings
