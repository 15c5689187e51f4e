"""
Invoicing app

Composes printable invoice documents from pre-computed invoice data.
"""

from .document import render_invoice_document, InvoiceDocumentBuilder
from .dto import Invoice, LineItem, NamedRecipient, AnonymousRecipient

__all__ = [
    'render_invoice_document',
    'InvoiceDocumentBuilder',
    'Invoice',
    'LineItem',
    'NamedRecipient',
    'AnonymousRecipient',
]
