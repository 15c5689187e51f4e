"""
ReportLab Canvas Implementation

Adapter that lays documents out with ReportLab Platypus flowables.
"""

from contextlib import contextmanager
from typing import Any, Optional, Sequence
from xml.sax.saxutils import escape
import logging

from reportlab.lib import colors
from reportlab.platypus import BaseDocTemplate, Frame, PageTemplate, Paragraph, Spacer, Table
from reportlab.platypus.flowables import HRFlowable

from invoicing.config import PdfSettings, get_pdf_settings
from invoicing.exceptions import CanvasAlreadyOpen, CanvasNotOpen

from .dto import Cell, TableHandle, TableSpec, check_table, freeze_rows, table_width
from .interfaces import Canvas
from .styles import build_table_style, get_cell_text_style, get_text_style


logger = logging.getLogger(__name__)

RULE_THICKNESS = 1


class ReportLabCanvas(Canvas):
    """
    Canvas backed by ReportLab Platypus.
    
    Draw calls append flowables to a story; the story is built into a
    single-frame document when ``generate`` exits without an error. The
    frame has no padding, so flowables get the full width between the
    margins. Page breaks are left to Platypus, with table header rows
    repeated on new pages.
    """
    
    def __init__(self, pdf_settings: Optional[PdfSettings] = None):
        """
        Initialize the canvas.
        
        Args:
            pdf_settings: Page options. If None, reads them from Django settings.
        """
        self.pdf_settings = pdf_settings or get_pdf_settings()
        self._story: Optional[list] = None
    
    @contextmanager
    def generate(self, destination: Any):
        """
        Generate a PDF into ``destination``.
        
        Args:
            destination: Filesystem path or binary file-like object
        """
        if self._story is not None:
            raise CanvasAlreadyOpen("A document is already being generated on this canvas")
        
        self._story = []
        try:
            yield self
            self._build(destination)
        finally:
            self._story = None
    
    def _build(self, destination: Any) -> None:
        margin = self.pdf_settings.margin
        page_width, page_height = self.pdf_settings.pagesize
        frame = Frame(
            margin,
            margin,
            page_width - 2 * margin,
            page_height - 2 * margin,
            leftPadding=0,
            rightPadding=0,
            topPadding=0,
            bottomPadding=0,
            id='invoice',
        )
        doc = BaseDocTemplate(
            destination,
            pagesize=self.pdf_settings.pagesize,
            leftMargin=margin,
            rightMargin=margin,
            topMargin=margin,
            bottomMargin=margin,
            title=self.pdf_settings.title,
            author=self.pdf_settings.author,
        )
        doc.addPageTemplates([PageTemplate(id='invoice', frames=[frame])])
        logger.debug(f"Building PDF with {len(self._story)} flowables")
        doc.build(self._story)
    
    def _append(self, flowable) -> None:
        if self._story is None:
            raise CanvasNotOpen("Draw calls must be made inside Canvas.generate()")
        self._story.append(flowable)
    
    def make_table(self, rows: Sequence[Sequence[Cell]], spec: TableSpec) -> TableHandle:
        column_count = check_table(rows, spec)
        frozen = freeze_rows(rows)
        
        col_widths = _column_widths(frozen, column_count, spec)
        # Text only wraps when its column has a known width
        wrap = col_widths is not None
        
        table = Table(
            [
                [_native_cell(cell, spec, r, c, wrap) for c, cell in enumerate(row)]
                for r, row in enumerate(frozen)
            ],
            colWidths=col_widths,
            repeatRows=1 if spec.header else 0,
            hAlign='LEFT',
        )
        table.setStyle(build_table_style(len(frozen), column_count, spec))
        
        return TableHandle(rows=frozen, spec=spec, width=table_width(spec), native=table)
    
    def draw_table(self, rows: Sequence[Sequence[Cell]], spec: TableSpec) -> TableHandle:
        if self._story is None:
            raise CanvasNotOpen("Draw calls must be made inside Canvas.generate()")
        handle = self.make_table(rows, spec)
        self._append(handle.native)
        return handle
    
    def draw_text(self, content: str, *, size: float, style: str) -> None:
        self._append(Paragraph(escape(content), get_text_style(size, style)))
    
    def draw_horizontal_rule(self) -> None:
        self._append(HRFlowable(
            width='100%',
            thickness=RULE_THICKNESS,
            color=colors.black,
            spaceBefore=0,
            spaceAfter=0,
        ))
    
    def advance_vertical(self, amount: float) -> None:
        self._append(Spacer(1, amount))


def _native_cell(cell: Cell, spec: TableSpec, row: int, column: int, wrap: bool):
    if isinstance(cell, TableHandle):
        return cell.native
    text = str(cell)
    # Empty cells stay plain strings so they keep one line of height
    if not wrap or not text:
        return text
    return Paragraph(escape(text), get_cell_text_style(spec.style_for(row, column)))


def _column_widths(rows, column_count: int, spec: TableSpec) -> Optional[list]:
    """
    Pick column widths for a table.
    
    Explicit widths win, then an even split of the table width. Otherwise a
    column takes the width of the nested tables it holds; if any column has
    none, ReportLab sizes the table itself.
    """
    if spec.column_widths is not None:
        return list(spec.column_widths)
    if spec.width is not None:
        return [spec.width / column_count] * column_count
    
    widths = []
    for column in range(column_count):
        nested = [
            row[column].width for row in rows
            if isinstance(row[column], TableHandle) and row[column].width is not None
        ]
        if not nested:
            return None
        widths.append(max(nested))
    return widths
