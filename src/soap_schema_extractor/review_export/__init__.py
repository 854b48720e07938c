"""Review workbook exports."""

from .constants import ATTRIBUTE_COLUMNS, ENTITIES_SHEET_NAME, RUN_INFO_SHEET_NAME
from .review_workbook_builder import write_review_workbook

__all__ = [
    "ENTITIES_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "ATTRIBUTE_COLUMNS",
    "write_review_workbook",
]
