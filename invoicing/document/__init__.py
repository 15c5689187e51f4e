"""
Invoice document layout

Section renderers and the builder that composes them.
"""

from .builder import InvoiceDocumentBuilder, as_invoice, render_invoice_document
from .sections import DetailsSection, HeaderSection, SummarySection

__all__ = [
    'InvoiceDocumentBuilder',
    'render_invoice_document',
    'as_invoice',
    'HeaderSection',
    'DetailsSection',
    'SummarySection',
]
