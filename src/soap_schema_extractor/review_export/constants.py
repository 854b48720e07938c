"""Shared review workbook constants."""

from __future__ import annotations

ENTITIES_SHEET_NAME = "Entities"
RUN_INFO_SHEET_NAME = "RunInfo"

ATTRIBUTE_COLUMNS: tuple[str, ...] = ("Entity", "Attribute", "Type", "MultiValue", "IsKey")
