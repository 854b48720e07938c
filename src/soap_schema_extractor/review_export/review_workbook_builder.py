"""Excel review workbook generation service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from soap_schema_extractor.schema_flattening.schema_models import Schema

from .constants import ATTRIBUTE_COLUMNS, ENTITIES_SHEET_NAME, RUN_INFO_SHEET_NAME


def write_review_workbook(schema: Schema, output_path: Path | str) -> Path:
    """Write one row per entity attribute for review before code generation."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = ENTITIES_SHEET_NAME

    _write_headline(sheet, f"{schema.name} {schema.version}")
    for column_index, name in enumerate(ATTRIBUTE_COLUMNS, start=1):
        sheet.cell(row=2, column=column_index, value=name)

    row_index = 3
    for entity in schema.entities:
        for attribute in entity.attributes:
            values = (
                entity.name,
                attribute.name,
                attribute.type.value,
                attribute.multi_value,
                attribute.is_key,
            )
            for column_index, value in enumerate(values, start=1):
                sheet.cell(row=row_index, column=column_index, value=value)
            row_index += 1
    _fit_columns(sheet)

    _write_run_info_sheet(workbook, schema)

    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(destination)
    return destination.resolve()


def _write_headline(sheet: Worksheet, label: str) -> None:
    end_letter = get_column_letter(len(ATTRIBUTE_COLUMNS))
    sheet.merge_cells(f"A1:{end_letter}1")
    sheet["A1"].value = label
    sheet["A1"].style = "Headline 1"


def _fit_columns(sheet: Worksheet) -> None:
    for column_index in range(1, len(ATTRIBUTE_COLUMNS) + 1):
        longest = max(
            (
                len(str(cell.value))
                for (cell,) in sheet.iter_rows(
                    min_row=2, min_col=column_index, max_col=column_index
                )
                if cell.value is not None
            ),
            default=0,
        )
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(longest + 6, 40)
        )


def _write_run_info_sheet(workbook: Workbook, schema: Schema) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = [
        ("schema_name", schema.name),
        ("schema_version", schema.version),
        ("entity_count", len(schema.entities)),
        ("attribute_count", sum(len(entity.attributes) for entity in schema.entities)),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
