"""
PDF Styling

Translates backend-neutral cell and text styles into ReportLab styles.
"""

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import TableStyle

from .dto import BOLD, ITALIC, NORMAL, CellStyle, TableSpec


FONT_NAMES = {
    NORMAL: 'Helvetica',
    BOLD: 'Helvetica-Bold',
    ITALIC: 'Helvetica-Oblique',
}

ALIGNMENTS = {
    'left': 'LEFT',
    'center': 'CENTER',
    'right': 'RIGHT',
}

VALIGNMENTS = {
    'top': 'TOP',
    'center': 'MIDDLE',
    'bottom': 'BOTTOM',
}

PARAGRAPH_ALIGNMENTS = {
    'left': TA_LEFT,
    'center': TA_CENTER,
    'right': TA_RIGHT,
}

# Border side -> ReportLab line command
BORDER_COMMANDS = {
    'top': 'LINEABOVE',
    'bottom': 'LINEBELOW',
    'left': 'LINEBEFORE',
    'right': 'LINEAFTER',
}

LEADING_FACTOR = 1.2
BORDER_COLOR = colors.black


def font_name(font_style: str) -> str:
    """Map a font style ('normal', 'bold', 'italic') to a Helvetica variant"""
    try:
        return FONT_NAMES[font_style]
    except KeyError:
        raise ValueError(f"Unknown font style '{font_style}'")


def get_text_style(size: float, font_style: str) -> ParagraphStyle:
    """
    Get a paragraph style for free-standing text.
    
    Args:
        size: Font size in points
        font_style: 'normal', 'bold' or 'italic'
    
    Returns:
        ParagraphStyle
    """
    return ParagraphStyle(
        f'InvoiceText-{font_style}-{size}',
        fontName=font_name(font_style),
        fontSize=size,
        leading=size * LEADING_FACTOR,
        textColor=colors.HexColor('#000000'),
        alignment=TA_LEFT,
        spaceBefore=0,
        spaceAfter=0,
    )


def get_cell_text_style(style: CellStyle) -> ParagraphStyle:
    """
    Get the paragraph style for text inside a table cell.
    
    Cell text is set as a Paragraph so it wraps within its column; the
    font, size and horizontal alignment come from the resolved CellStyle.
    
    Args:
        style: Fully resolved cell style
    
    Returns:
        ParagraphStyle
    """
    return ParagraphStyle(
        f'InvoiceCell-{style.font_style}-{style.size}-{style.align}',
        fontName=font_name(style.font_style),
        fontSize=style.size,
        leading=style.size * LEADING_FACTOR,
        textColor=colors.HexColor('#000000'),
        alignment=PARAGRAPH_ALIGNMENTS[style.align],
        spaceBefore=0,
        spaceAfter=0,
    )


def _cell_commands(style: CellStyle, cell: tuple[int, int]) -> list[tuple]:
    commands = [
        ('FONTNAME', cell, cell, font_name(style.font_style)),
        ('FONTSIZE', cell, cell, style.size),
        ('LEADING', cell, cell, style.size * LEADING_FACTOR),
        ('ALIGN', cell, cell, ALIGNMENTS[style.align]),
        ('VALIGN', cell, cell, VALIGNMENTS[style.valign]),
        ('LEFTPADDING', cell, cell, style.padding),
        ('RIGHTPADDING', cell, cell, style.padding),
        ('TOPPADDING', cell, cell, style.padding),
        ('BOTTOMPADDING', cell, cell, style.padding),
    ]
    if style.border_width:
        for side in style.borders:
            commands.append(
                (BORDER_COMMANDS[side], cell, cell, style.border_width, BORDER_COLOR)
            )
    return commands


def build_table_style(row_count: int, column_count: int, spec: TableSpec) -> TableStyle:
    """
    Get the ReportLab table style for a table spec.
    
    Each cell is resolved on its own so that StyleRules layer exactly as
    they do in every other backend.
    
    Args:
        row_count: Number of rows in the table
        column_count: Number of columns in the table
        spec: Table layout options
    
    Returns:
        TableStyle with one command group per cell
    """
    commands = []
    for row in range(row_count):
        for column in range(column_count):
            # ReportLab addresses cells as (column, row)
            commands.extend(_cell_commands(spec.style_for(row, column), (column, row)))
    return TableStyle(commands)
