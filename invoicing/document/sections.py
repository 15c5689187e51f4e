"""
Invoice document sections

Each section is stateless: it reads the invoice view and issues draw calls
on the canvas. Widths are in points and add up to a 540pt text column.
"""

import logging

from invoicing.printing.dto import (
    BOLD,
    NO_BORDERS,
    CellStyle,
    StyleRule,
    TableSpec,
)

from .formatting import format_invoice_date, format_invoice_number, line_item_rows


logger = logging.getLogger(__name__)

DOCUMENT_WIDTH = 540
BILLING_WIDTH = 355
METADATA_WIDTH = 185

TITLE = 'Invoice Receipt'
SUMMARY_TITLE = 'Invoice Summary'
LINE_ITEM_HEADER = ('Sl. no.', 'Description', 'Total Price')
LINE_ITEM_COLUMN_WIDTHS = (40, 440, 60)
TOTALS_COLUMN_WIDTHS = (480, 60)

TOP_AND_BOTTOM = ('top', 'bottom')


class HeaderSection:
    """Full-width title banner"""
    
    spec = TableSpec(
        width=DOCUMENT_WIDTH,
        cell_style=CellStyle(
            padding=0,
            borders=NO_BORDERS,
            size=20,
            font_style=BOLD,
            valign='center',
        ),
    )
    
    def render(self, canvas) -> None:
        canvas.draw_table([[TITLE]], self.spec)


class DetailsSection:
    """
    Billing and invoice metadata, side by side.
    
    The billing block (recipient) takes the wider left column; the metadata
    block (date and number) sits in a bordered table on the right.
    """
    
    billing_spec = TableSpec(
        width=BILLING_WIDTH,
        cell_style=CellStyle(padding=0, size=9, borders=NO_BORDERS),
        rules=(
            StyleRule(CellStyle(font_style=BOLD), rows=(0, 0)),
        ),
    )
    
    metadata_spec = TableSpec(
        width=METADATA_WIDTH,
        cell_style=CellStyle(padding=5, border_width=0.5, size=9),
        rules=(
            StyleRule(CellStyle(font_style=BOLD), columns=(0, 0)),
        ),
    )
    
    layout_spec = TableSpec(cell_style=CellStyle(padding=0, borders=NO_BORDERS))
    
    def render(self, invoice, canvas) -> None:
        canvas.advance_vertical(10)
        canvas.draw_horizontal_rule()
        canvas.advance_vertical(15)
        
        billing = canvas.make_table(self.billing_rows(invoice), self.billing_spec)
        metadata = canvas.make_table(self.metadata_rows(invoice), self.metadata_spec)
        
        canvas.draw_table([[billing, metadata]], self.layout_spec)
    
    def billing_rows(self, invoice) -> list[list[str]]:
        return [
            ['Billed to:'],
            [invoice.recipient.display_name],
        ]
    
    def metadata_rows(self, invoice) -> list[list[str]]:
        return [
            ['Invoice Date:', format_invoice_date(invoice.created_at)],
            ['Invoice No:', format_invoice_number(invoice.id)],
        ]


class SummarySection:
    """
    Line items followed by the subtotal, tax and total block.
    
    Each table derives its styled row range from its own row count.
    """
    
    def render(self, invoice, canvas) -> None:
        canvas.advance_vertical(25)
        canvas.draw_text(SUMMARY_TITLE, size=12, style=BOLD)
        canvas.draw_horizontal_rule()
        
        self.render_line_items(invoice, canvas)
        self.render_totals(invoice, canvas)
        
        canvas.advance_vertical(25)
        canvas.draw_horizontal_rule()
    
    def render_line_items(self, invoice, canvas):
        rows = [LINE_ITEM_HEADER] + line_item_rows(invoice.line_items)
        last_row = len(rows) - 1
        logger.debug(f"Invoice {invoice.id}: {last_row} line item rows")
        
        spec = TableSpec(
            column_widths=LINE_ITEM_COLUMN_WIDTHS,
            header=True,
            cell_style=CellStyle(padding=5, border_width=0.5),
            rules=(
                StyleRule(CellStyle(size=10, font_style=BOLD), rows=(0, 0)),
                StyleRule(CellStyle(size=9), rows=(1, last_row)),
                StyleRule(CellStyle(align='right'), columns=(0, 0)),
                StyleRule(CellStyle(align='right'), columns=(2, 2)),
                StyleRule(CellStyle(borders=TOP_AND_BOTTOM), rows=(0, last_row)),
            ),
        )
        return canvas.draw_table(rows, spec)
    
    def render_totals(self, invoice, canvas):
        rows = [
            ('Subtotal', invoice.net_amount_formatted),
            ('Tax', invoice.tax_amount_formatted),
            ('Total', invoice.total_amount_formatted),
        ]
        
        spec = TableSpec(
            column_widths=TOTALS_COLUMN_WIDTHS,
            cell_style=CellStyle(padding=5, border_width=0.5),
            rules=(
                StyleRule(
                    CellStyle(size=9, font_style=BOLD, borders=NO_BORDERS, align='right'),
                    rows=(0, len(rows) - 1),
                ),
            ),
        )
        return canvas.draw_table(rows, spec)
