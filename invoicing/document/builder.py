"""
Invoice document builder

Composes the header, details and summary sections into one document.
"""

from typing import Any, Optional
import logging

from invoicing.dto import Invoice
from invoicing.printing.interfaces import Canvas
from invoicing.printing.reportlab_canvas import ReportLabCanvas

from .sections import DetailsSection, HeaderSection, SummarySection


logger = logging.getLogger(__name__)


class InvoiceDocumentBuilder:
    """
    Renders an invoice as header, details and summary, in that order.
    
    Errors raised by a section propagate unchanged; nothing already drawn
    is rolled back here. Discarding the incomplete document is the job of
    ``Canvas.generate``.
    """
    
    def __init__(self, header=None, details=None, summary=None):
        self.header = header or HeaderSection()
        self.details = details or DetailsSection()
        self.summary = summary or SummarySection()
    
    def render(self, invoice: Invoice, canvas: Canvas) -> None:
        logger.debug(f"Rendering invoice {invoice.id}")
        self.header.render(canvas)
        self.details.render(invoice, canvas)
        self.summary.render(invoice, canvas)


def as_invoice(invoice: Any) -> Invoice:
    """Return ``invoice`` as an Invoice view, adapting billing model objects"""
    if isinstance(invoice, Invoice):
        return invoice
    return Invoice.from_object(invoice)


def render_invoice_document(
    invoice: Any,
    destination: Any,
    canvas: Optional[Canvas] = None,
) -> None:
    """
    Render an invoice document into ``destination``.
    
    Args:
        invoice: Invoice view, or a billing model object exposing the same
            attributes
        destination: Filesystem path or binary file-like object
        canvas: Drawing backend. Defaults to a ReportLabCanvas configured
            from Django settings.
    
    Raises:
        Exception: Whatever the canvas or a section raises, unchanged
    """
    invoice = as_invoice(invoice)
    canvas = canvas or ReportLabCanvas()
    
    with canvas.generate(destination):
        InvoiceDocumentBuilder().render(invoice, canvas)
