"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_conversion_section
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

__all__ = [
    "Configuration",
    "ConversionOptions",
    "OutputFormat",
    "OutputSettings",
    "Scope",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_SCHEMA_NAME",
    "DEFAULT_SCHEMA_VERSION",
    "ConfigurationError",
    "load_configuration",
    "parse_conversion_section",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
