from __future__ import annotations

import io
import logging

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..core.exceptions import ExportError
from .model import CellStyle, ExportMatrix

logger = logging.getLogger(__name__)

_THIN = Side(style="thin")
_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)


def _apply_style(cell, style: CellStyle) -> None:
    if style.fill_argb:
        cell.fill = PatternFill(fill_type="solid", start_color=style.fill_argb, end_color=style.fill_argb)
    if style.bold or style.italic or style.font_size or style.font_argb:
        cell.font = Font(bold=style.bold, italic=style.italic, size=style.font_size, color=style.font_argb)
    if style.horizontal or style.vertical or style.wrap_text:
        cell.alignment = Alignment(horizontal=style.horizontal, vertical=style.vertical, wrap_text=style.wrap_text)
    if style.border:
        cell.border = _BORDER


def write_workbook(matrix: ExportMatrix) -> bytes:
    """Render an export matrix to .xlsx bytes (kept in memory, not on disk)."""
    width = matrix.column_count
    rows = [[None if v == "" else v for v in r] + [None] * (width - len(r)) for r in matrix.rows]
    df = pd.DataFrame(rows, columns=range(width), dtype=object)

    output = io.BytesIO()
    try:
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, header=False, sheet_name=matrix.sheet_name)
            sheet = writer.sheets[matrix.sheet_name]

            for (row, col), style in matrix.cell_styles.items():
                _apply_style(sheet.cell(row=row + 1, column=col + 1), style)

            for merge in matrix.merges:
                sheet.merge_cells(
                    start_row=merge.row + 1,
                    start_column=merge.first_col + 1,
                    end_row=merge.row + 1,
                    end_column=merge.last_col + 1,
                )

            for col, col_width in enumerate(matrix.column_widths, start=1):
                sheet.column_dimensions[get_column_letter(col)].width = col_width
    except (ValueError, KeyError) as e:
        raise ExportError(f"Cannot write workbook {matrix.file_name}: {e}") from e

    logger.info("Exported %s (%s rows)", matrix.file_name, len(rows))
    return output.getvalue()
