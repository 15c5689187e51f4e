"""
Invoice PDF Render Service

Central service for rendering invoices to PDF bytes or files.
"""

from io import BytesIO
from pathlib import Path
from typing import Any, Callable, Optional, Union
import logging
import re

from .document import as_invoice, render_invoice_document
from .printing.dto import PdfResult
from .printing.interfaces import Canvas
from .printing.reportlab_canvas import ReportLabCanvas


logger = logging.getLogger(__name__)

MAX_FILENAME_LENGTH = 100


def build_invoice_filename(invoice_id: Any) -> str:
    """
    Build a download filename for an invoice.
    
    Args:
        invoice_id: Invoice identifier
    
    Returns:
        Filename like 'invoice_42.pdf', safe for filesystems and headers
    """
    name = re.sub(r'[^a-zA-Z0-9\-_]', '_', str(invoice_id))
    name = re.sub(r'_+', '_', name).strip('_')[:MAX_FILENAME_LENGTH]
    return f"invoice_{name}.pdf" if name else "invoice.pdf"


class InvoicePdfService:
    """
    Core service for the invoice PDF pipeline.
    
    Responsibilities:
    1. Adapt billing model objects to Invoice views
    2. Run the document builder inside a canvas lifecycle
    3. Return structured PdfResult
    
    Usage:
        service = InvoicePdfService()
        result = service.render(invoice)
        response = HttpResponse(result.pdf_bytes, content_type=result.content_type)
    """
    
    def __init__(self, canvas_factory: Optional[Callable[[], Canvas]] = None):
        """
        Initialize the service.
        
        Args:
            canvas_factory: Callable returning a fresh Canvas per render.
                If None, uses ReportLabCanvas configured from settings.
        """
        self.canvas_factory = canvas_factory or ReportLabCanvas
    
    def render(self, invoice: Any, *, filename: Optional[str] = None) -> PdfResult:
        """
        Render an invoice to PDF bytes.
        
        Args:
            invoice: Invoice view or billing model object
            filename: Optional filename (defaults to 'invoice_<id>.pdf')
        
        Returns:
            PdfResult with PDF bytes and metadata
        
        Raises:
            Exception: If layout or PDF generation fails
        """
        invoice = as_invoice(invoice)
        buffer = BytesIO()
        try:
            render_invoice_document(invoice, buffer, canvas=self.canvas_factory())
            result = PdfResult(
                pdf_bytes=buffer.getvalue(),
                filename=filename or build_invoice_filename(invoice.id),
                content_type='application/pdf'
            )
        except Exception as e:
            logger.error(f"Failed to render PDF for invoice {invoice.id}: {e}", exc_info=True)
            raise
        finally:
            buffer.close()
        
        logger.info(
            f"Successfully generated PDF: {result.filename} "
            f"({len(result.pdf_bytes)} bytes)"
        )
        return result
    
    def render_to_file(self, invoice: Any, path: Union[str, Path]) -> Path:
        """
        Render an invoice straight to a file.
        
        Args:
            invoice: Invoice view or billing model object
            path: Output file path
        
        Returns:
            The output path
        """
        invoice = as_invoice(invoice)
        path = Path(path)
        try:
            render_invoice_document(invoice, str(path), canvas=self.canvas_factory())
        except Exception as e:
            logger.error(f"Failed to write PDF for invoice {invoice.id} to {path}: {e}", exc_info=True)
            raise
        
        logger.info(f"Successfully wrote PDF for invoice {invoice.id}: {path}")
        return path
