"""Spreadsheet import of BOM line items.

Reads an XLSX workbook whose header row names the BOM columns and turns
each data row into a BomDraft ready to be created in the catalog.  Missing
text cells become empty strings and missing numbers become 0.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Any

import openpyxl
from pydantic import BaseModel

from roomcost.exceptions import BomImportError

logger = logging.getLogger(__name__)

_TEXT_COLUMNS = ("room_type", "description", "make", "model")
_NUMERIC_COLUMNS = ("qty", "unit_cost")
REQUIRED_COLUMNS = frozenset({"room_type"})

# Sheet names preferred over the active sheet when present.
_PREFERRED_SHEETS = ("bom", "bill of materials")


class BomDraft(BaseModel):
    """A BOM line item not yet stored in the catalog."""

    room_type: str
    description: str = ""
    make: str = ""
    model: str = ""
    qty: float | str = 0
    unit_cost: float | str = 0


@dataclass
class BomImportResult:
    """Rows parsed from a BOM workbook."""

    drafts: list[BomDraft] = field(default_factory=list)
    skipped_rows: list[int] = field(default_factory=list)
    sheet_name: str = ""


def _normalise_header(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().lower().replace(" ", "_")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _number(value: Any) -> float | str:
    # Kept raw; the aggregator applies the zero-on-failure coercion.
    if value is None or value == "":
        return 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return str(value).strip()


def parse_bom_workbook(content: bytes) -> BomImportResult:
    """Parse an XLSX BOM workbook.

    Args:
        content: Raw XLSX bytes.

    Returns:
        BomImportResult with one draft per data row that names a room type.

    Raises:
        BomImportError: If the workbook cannot be opened, is empty, or its
            header row lacks a ``room_type`` column.
    """
    try:
        wb = openpyxl.load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except Exception as exc:
        msg = f"Failed to open workbook: {exc}"
        raise BomImportError(msg) from exc

    try:
        sheet = None
        for name in wb.sheetnames:
            if name.strip().lower() in _PREFERRED_SHEETS:
                sheet = wb[name]
                break
        if sheet is None:
            sheet = wb.active or wb[wb.sheetnames[0]]

        rows = sheet.iter_rows(values_only=True)
        try:
            header_row = next(rows)
        except StopIteration:
            msg = f"Sheet '{sheet.title}' is empty"
            raise BomImportError(msg) from None

        headers = [_normalise_header(h) for h in header_row]
        missing = REQUIRED_COLUMNS - set(headers)
        if missing:
            msg = f"Missing required column(s): {', '.join(sorted(missing))}"
            raise BomImportError(msg)

        result = BomImportResult(sheet_name=sheet.title)
        for row_number, row in enumerate(rows, start=2):
            values = dict(zip(headers, row, strict=False))
            if all(v is None for v in values.values()):
                continue
            room_type = _text(values.get("room_type"))
            if not room_type:
                result.skipped_rows.append(row_number)
                continue
            fields: dict[str, Any] = {c: _text(values.get(c)) for c in _TEXT_COLUMNS}
            fields.update({c: _number(values.get(c)) for c in _NUMERIC_COLUMNS})
            result.drafts.append(BomDraft(**fields))
    finally:
        wb.close()

    if result.skipped_rows:
        logger.warning(
            "Skipped %d BOM rows without a room type: %s",
            len(result.skipped_rows), result.skipped_rows,
        )
    return result
