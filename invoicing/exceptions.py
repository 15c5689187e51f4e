"""
Invoicing exceptions

Only canvas misuse and malformed table specs are raised by this package.
Drawing engine failures are propagated unchanged.
"""


class InvoicingError(Exception):
    """Base exception for all invoicing errors"""
    pass


class CanvasError(InvoicingError):
    """Base exception for canvas lifecycle errors"""
    pass


class CanvasNotOpen(CanvasError):
    """
    Raised when a draw call is issued outside of ``Canvas.generate``.
    """
    pass


class CanvasAlreadyOpen(CanvasError):
    """
    Raised when ``Canvas.generate`` is entered while a document is in progress.
    """
    pass


class TableSpecError(InvoicingError):
    """
    Raised when table rows do not match their spec.
    
    Example:
        Three column widths given for a table whose rows have two cells.
    """
    pass
