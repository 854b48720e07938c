"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_SCHEMA_NAME,
    DEFAULT_SCHEMA_VERSION,
    Configuration,
    ConversionOptions,
    OutputFormat,
    OutputSettings,
    Scope,
)


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

    base_path = path.resolve().parent
    documents = _parse_documents_section(parsed.get("documents"), base_path)
    conversion = parse_conversion_section(parsed.get("conversion"))
    output = _parse_output_section(parsed.get("output"), base_path)

    return Configuration(path=path, documents=documents, conversion=conversion, output=output)


def parse_conversion_section(value: Any) -> ConversionOptions:
    """Validate the optional ``conversion`` section, applying defaults."""
    if value is None:
        return ConversionOptions()
    section = _require_mapping(value, "conversion")
    name = _optional_string(section.get("name"), "conversion.name") or DEFAULT_SCHEMA_NAME
    version = _optional_version(section.get("version")) or DEFAULT_SCHEMA_VERSION
    scope = _parse_choice(section.get("scope", Scope.ROOTS_ONLY.value), Scope, "conversion.scope")
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "conversion.max_depth"
    )
    return ConversionOptions(name=name, version=version, scope=scope, max_depth=max_depth)


def _parse_documents_section(value: Any, base_path: Path) -> tuple[Path, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence) or not value:
        raise ConfigurationError("documents must list at least one document path.")
    documents: list[Path] = []
    for item in value:
        raw_path = _require_non_empty_string(item, "documents entry")
        document_path = _resolve_path(base_path, raw_path)
        if not document_path.exists():
            raise ConfigurationError(f"Document file not found: {document_path}")
        documents.append(document_path)
    return tuple(documents)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    if value is None:
        return OutputSettings(format=OutputFormat.JSON, path=None)
    section = _require_mapping(value, "output")
    output_format = _parse_choice(
        section.get("format", OutputFormat.JSON.value), OutputFormat, "output.format"
    )
    raw_path = _optional_string(section.get("path"), "output.path")
    output_path = _resolve_path(base_path, raw_path) if raw_path else None
    if output_format is OutputFormat.XLSX and output_path is None:
        raise ConfigurationError("output.path is required for xlsx output.")
    return OutputSettings(format=output_format, path=output_path)


def _parse_choice(value: Any, choices: type[Scope] | type[OutputFormat], field_name: str) -> Any:
    raw = _require_non_empty_string(value, field_name).lower()
    try:
        return choices(raw)
    except ValueError as exc:
        allowed = ", ".join(choice.value for choice in choices)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _optional_version(value: Any) -> str | None:
    # YAML reads unquoted versions such as 2.0 as floats.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return _optional_string(value, "conversion.version")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
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


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
