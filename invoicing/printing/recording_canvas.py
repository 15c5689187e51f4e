"""
Recording Canvas

Canvas that draws nothing and keeps an ordered log of draw calls. Useful
for layout assertions and for comparing two renders of the same invoice.
"""

from contextlib import contextmanager
from typing import Any, Optional, Sequence

from invoicing.exceptions import CanvasAlreadyOpen, CanvasNotOpen

from .dto import Cell, DrawCall, TableHandle, TableSpec, check_table, freeze_rows, table_width
from .interfaces import Canvas


class RecordingCanvas(Canvas):
    """Canvas that records draw calls instead of rendering them"""
    
    def __init__(self):
        self.calls: list[DrawCall] = []
        self.destination: Any = None
        self.finished = False
        self._open = False
    
    @contextmanager
    def generate(self, destination: Any):
        if self._open:
            raise CanvasAlreadyOpen("A document is already being generated on this canvas")
        
        self.calls = []
        self.destination = destination
        self.finished = False
        self._open = True
        try:
            yield self
            self.finished = True
        finally:
            self._open = False
    
    def _record(self, name: str, *args) -> None:
        if not self._open:
            raise CanvasNotOpen("Draw calls must be made inside Canvas.generate()")
        self.calls.append(DrawCall(name, args))
    
    def make_table(self, rows: Sequence[Sequence[Cell]], spec: TableSpec) -> TableHandle:
        check_table(rows, spec)
        return TableHandle(rows=freeze_rows(rows), spec=spec, width=table_width(spec))
    
    def draw_table(self, rows: Sequence[Sequence[Cell]], spec: TableSpec) -> TableHandle:
        handle = self.make_table(rows, spec)
        self._record('draw_table', handle)
        return handle
    
    def draw_text(self, content: str, *, size: float, style: str) -> None:
        self._record('draw_text', content, size, style)
    
    def draw_horizontal_rule(self) -> None:
        self._record('draw_horizontal_rule')
    
    def advance_vertical(self, amount: float) -> None:
        self._record('advance_vertical', amount)
    
    def tables(self) -> list[TableHandle]:
        """Placed tables, in drawing order"""
        return [call.args[0] for call in self.calls if call.name == 'draw_table']
    
    def texts(self) -> list[str]:
        """Text drawn with draw_text, in drawing order"""
        return [call.args[0] for call in self.calls if call.name == 'draw_text']
    
    def call_names(self) -> list[str]:
        return [call.name for call in self.calls]

