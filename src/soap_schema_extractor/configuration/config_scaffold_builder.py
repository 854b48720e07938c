"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Conversion configuration template for soap-schema-extractor.
# Replace every <REQUIRED> placeholder before running convert.
# Replace <OPTIONAL> placeholders only when your setup needs them.

# XSD and WSDL files to convert, relative to this file.
documents:
  - "<REQUIRED>"

conversion:
  # name: "Connector"
  # version: "1.0.0"
  # Choose one of: roots-only (WSDL message elements, default), all, union.
  scope: "roots-only"
  # Maximum reference/type nesting before the conversion is aborted.
  max_depth: 64

output:
  # Choose one of: json (default) or xlsx (review workbook, requires path).
  format: "json"
  # Omit path to print JSON to stdout.
  # path: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML conversion configuration template with placeholders."""
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
