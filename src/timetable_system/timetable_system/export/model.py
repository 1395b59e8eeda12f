from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..colors.resolver import to_argb
from ..core.constants import EXPORT_SHEET_NAME


@dataclass(frozen=True)
class CellStyle:
    fill: Optional[str] = None
    font_color: Optional[str] = None
    bold: bool = False
    italic: bool = False
    font_size: Optional[int] = None
    horizontal: Optional[str] = None
    vertical: Optional[str] = None
    wrap_text: bool = False
    border: bool = False

    @property
    def fill_argb(self) -> Optional[str]:
        return to_argb(self.fill) if self.fill else None

    @property
    def font_argb(self) -> Optional[str]:
        return to_argb(self.font_color) if self.font_color else None


@dataclass(frozen=True)
class MergeRange:
    row: int
    first_col: int
    last_col: int


@dataclass(frozen=True)
class ExportMatrix:
    """Spreadsheet-ready rows; row/column indexes are 0-based over `rows`."""

    header_rows: List[List[Any]]
    data_rows: List[List[Any]]
    cell_styles: Dict[Tuple[int, int], CellStyle] = field(default_factory=dict)
    merges: List[MergeRange] = field(default_factory=list)
    column_widths: List[int] = field(default_factory=list)
    file_name: str = ""
    sheet_name: str = EXPORT_SHEET_NAME

    @property
    def rows(self) -> List[List[Any]]:
        return self.header_rows + self.data_rows

    @property
    def column_count(self) -> int:
        return max([len(self.column_widths)] + [len(r) for r in self.rows])


@dataclass(frozen=True)
class ExportStatistics:
    total_weeks: int
    total_staff: int
    total_records: int
    date_range: str
