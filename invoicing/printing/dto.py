"""
Data Transfer Objects for the Printing Framework

Backend-neutral description of tables, cell styles and render results.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional, Sequence, Union

from invoicing.exceptions import TableSpecError


BOLD = 'bold'
NORMAL = 'normal'
ITALIC = 'italic'

ALL_BORDERS = ('top', 'bottom', 'left', 'right')
NO_BORDERS = ()


@dataclass(frozen=True)
class CellStyle:
    """
    Style applied to table cells.
    
    Every field is optional; ``None`` means "inherit". Styles are layered
    with ``merged``: base defaults, then the table's cell style, then each
    matching StyleRule in order.
    """
    
    padding: Optional[float] = None
    border_width: Optional[float] = None
    size: Optional[float] = None
    font_style: Optional[str] = None
    align: Optional[str] = None
    valign: Optional[str] = None
    borders: Optional[tuple[str, ...]] = None
    
    def merged(self, other: 'CellStyle') -> 'CellStyle':
        """Return a copy with every non-None field of ``other`` applied"""
        overrides = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **overrides)


DEFAULT_CELL_STYLE = CellStyle(
    padding=5,
    border_width=0.5,
    size=9,
    font_style=NORMAL,
    align='left',
    valign='top',
    borders=ALL_BORDERS,
)


@dataclass(frozen=True)
class StyleRule:
    """
    Style override for an inclusive block of cells.
    
    ``rows`` and ``columns`` are (first, last) index pairs; None selects
    every row or column.
    """
    
    style: CellStyle
    rows: Optional[tuple[int, int]] = None
    columns: Optional[tuple[int, int]] = None
    
    def matches(self, row: int, column: int) -> bool:
        return _in_span(row, self.rows) and _in_span(column, self.columns)


def _in_span(index: int, span: Optional[tuple[int, int]]) -> bool:
    if span is None:
        return True
    first, last = span
    return first <= index <= last


@dataclass(frozen=True)
class TableSpec:
    """Layout options for one table"""
    
    width: Optional[float] = None
    column_widths: Optional[tuple[float, ...]] = None
    header: bool = False
    cell_style: CellStyle = CellStyle()
    rules: tuple[StyleRule, ...] = ()
    
    def style_for(self, row: int, column: int) -> CellStyle:
        """Resolve the effective style of one cell"""
        style = DEFAULT_CELL_STYLE.merged(self.cell_style)
        for rule in self.rules:
            if rule.matches(row, column):
                style = style.merged(rule.style)
        return style


@dataclass(frozen=True)
class TableHandle:
    """
    A built table.
    
    Handles can be used as cells of another table. ``native`` holds the
    backend object (e.g. a ReportLab Table) and is ignored for equality.
    """
    
    rows: tuple[tuple[Any, ...], ...]
    spec: TableSpec
    width: Optional[float] = None
    native: Any = field(default=None, compare=False, repr=False)


Cell = Union[str, int, TableHandle]


def freeze_rows(rows: Sequence[Sequence[Cell]]) -> tuple[tuple[Cell, ...], ...]:
    """Copy rows into nested tuples"""
    return tuple(tuple(row) for row in rows)


def check_table(rows: Sequence[Sequence[Cell]], spec: TableSpec) -> int:
    """
    Validate table rows against their spec.
    
    Args:
        rows: Table rows
        spec: Table layout options
    
    Returns:
        The number of columns
    
    Raises:
        TableSpecError: If there are no rows, rows differ in length, or the
            column widths do not match the column count
    """
    if not rows:
        raise TableSpecError("Table has no rows")
    
    column_count = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != column_count:
            raise TableSpecError(
                f"Row {index} has {len(row)} cells, expected {column_count}"
            )
    
    if spec.column_widths is not None and len(spec.column_widths) != column_count:
        raise TableSpecError(
            f"{len(spec.column_widths)} column widths given for "
            f"{column_count} columns"
        )
    
    return column_count


def table_width(spec: TableSpec) -> Optional[float]:
    """Width a table will occupy, when it is fixed by its spec"""
    if spec.column_widths is not None:
        return float(sum(spec.column_widths))
    return spec.width


@dataclass(frozen=True)
class DrawCall:
    """One recorded canvas call"""
    
    name: str
    args: tuple = ()


@dataclass
class PdfResult:
    """
    Result of PDF rendering operation.
    
    Contains the PDF bytes and metadata for HTTP responses.
    """
    
    pdf_bytes: bytes
    filename: str
    content_type: str = "application/pdf"
    
    def __len__(self) -> int:
        """Return the size of PDF in bytes"""
        return len(self.pdf_bytes)
