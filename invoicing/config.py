"""
Invoice PDF configuration.

Reads document options from Django settings, falling back to defaults that
reproduce a US Letter page with half-inch margins (540pt of usable width,
which is what the invoice layout is measured against).

Settings:
    INVOICE_PDF_PAGE_SIZE: Page size name ('LETTER', 'A4' or 'LEGAL')
    INVOICE_PDF_MARGIN: Margin on every side, in points
    INVOICE_PDF_TITLE: PDF metadata title
    INVOICE_PDF_AUTHOR: PDF metadata author
"""

from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from reportlab.lib.pagesizes import A4, LEGAL, LETTER


PAGE_SIZES = {
    'LETTER': LETTER,
    'A4': A4,
    'LEGAL': LEGAL,
}

DEFAULT_PAGE_SIZE = 'LETTER'
DEFAULT_MARGIN = 36  # half an inch, in points
DEFAULT_TITLE = 'Invoice Receipt'
DEFAULT_AUTHOR = ''


@dataclass(frozen=True)
class PdfSettings:
    """Resolved document options for the ReportLab canvas"""
    
    pagesize: tuple[float, float] = LETTER
    margin: float = DEFAULT_MARGIN
    title: str = DEFAULT_TITLE
    author: str = DEFAULT_AUTHOR
    
    @property
    def frame_width(self) -> float:
        """Usable width between the left and right margins"""
        return self.pagesize[0] - 2 * self.margin


def _setting(name: str, default):
    # Allow use as a plain library, outside a configured Django project
    if not settings.configured:
        return default
    return getattr(settings, name, default)


def get_page_size(name: str) -> tuple[float, float]:
    """
    Look up a page size by name.
    
    Args:
        name: Case-insensitive page size name (e.g. 'A4')
    
    Returns:
        (width, height) in points
    
    Raises:
        ImproperlyConfigured: If the name is not a supported page size
    """
    try:
        return PAGE_SIZES[str(name).upper()]
    except KeyError:
        raise ImproperlyConfigured(
            f"INVOICE_PDF_PAGE_SIZE '{name}' is not supported. "
            f"Choose one of: {', '.join(sorted(PAGE_SIZES))}"
        )


def get_pdf_settings() -> PdfSettings:
    """
    Build PdfSettings from Django settings.
    
    Returns:
        PdfSettings with defaults for anything not configured
    """
    return PdfSettings(
        pagesize=get_page_size(_setting('INVOICE_PDF_PAGE_SIZE', DEFAULT_PAGE_SIZE)),
        margin=float(_setting('INVOICE_PDF_MARGIN', DEFAULT_MARGIN)),
        title=_setting('INVOICE_PDF_TITLE', DEFAULT_TITLE),
        author=_setting('INVOICE_PDF_AUTHOR', DEFAULT_AUTHOR),
    )
