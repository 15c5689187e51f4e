"""
Interfaces for the Printing Framework

Defines the drawing surface that document layouts are written against, so
any rendering engine can be substituted without touching layout code.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Sequence

from .dto import Cell, TableHandle, TableSpec


class Canvas(ABC):
    """
    Interface for drawing engines.
    
    All draw calls must happen inside ``generate``. Canvases are not
    thread-safe; render one document at a time.
    """
    
    @abstractmethod
    def make_table(self, rows: Sequence[Sequence[Cell]], spec: TableSpec) -> TableHandle:
        """
        Build a table without placing it on the page.
        
        The returned handle can be used as a cell of another table.
        
        Args:
            rows: Table rows; cells are strings, ints or TableHandles
            spec: Layout options
        
        Returns:
            TableHandle for the built table
        
        Raises:
            TableSpecError: If rows and spec do not agree
        """
        pass
    
    @abstractmethod
    def draw_table(self, rows: Sequence[Sequence[Cell]], spec: TableSpec) -> TableHandle:
        """Build a table and place it at the current position"""
        pass
    
    @abstractmethod
    def draw_text(self, content: str, *, size: float, style: str) -> None:
        """Draw a line of text with the given font size and style"""
        pass
    
    @abstractmethod
    def draw_horizontal_rule(self) -> None:
        """Draw a full-width horizontal rule"""
        pass
    
    @abstractmethod
    def advance_vertical(self, amount: float) -> None:
        """Move the current position down by ``amount`` points"""
        pass
    
    @abstractmethod
    def generate(self, destination: Any) -> AbstractContextManager:
        """
        Scoped document lifecycle.
        
        Opens ``destination`` on entry and finalizes it on successful exit.
        If the body raises, the document is discarded and the exception
        propagates.
        
        Usage:
            with canvas.generate('invoice.pdf'):
                canvas.draw_text('Hello', size=12, style='normal')
        
        Raises:
            CanvasAlreadyOpen: If a document is already being generated
        """
        pass
