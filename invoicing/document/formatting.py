"""
Formatting helpers for invoice documents
"""

from typing import Any, Iterable

from invoicing.dto import LineItem


def format_invoice_date(value) -> str:
    """
    Format an invoice date as day, abbreviated month and year.
    
    The day is not zero- or space-padded: 2024-01-05 becomes '5 Jan 2024'.
    
    Args:
        value: date or datetime
    
    Returns:
        Display string
    
    Raises:
        AttributeError: If value is not a date (e.g. None)
    """
    return f"{value.day} {value.strftime('%b %Y')}"


def format_invoice_number(value: Any) -> str:
    return str(value)


def line_item_rows(line_items: Iterable[LineItem]) -> list[tuple[int, str, str]]:
    """
    Turn line items into table rows numbered by display position.
    
    Args:
        line_items: Line items in display order
    
    Returns:
        (1-based index, description, net amount) per item
    """
    return [
        (index, item.description, item.net_amount_formatted)
        for index, item in enumerate(line_items, start=1)
    ]
