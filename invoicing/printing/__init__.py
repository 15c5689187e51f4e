"""
Printing Framework

Backend-neutral drawing interface with ReportLab and recording backends.
"""

from .dto import CellStyle, DrawCall, PdfResult, StyleRule, TableHandle, TableSpec
from .interfaces import Canvas
from .recording_canvas import RecordingCanvas
from .reportlab_canvas import ReportLabCanvas

__all__ = [
    'Canvas',
    'ReportLabCanvas',
    'RecordingCanvas',
    'CellStyle',
    'StyleRule',
    'TableSpec',
    'TableHandle',
    'DrawCall',
    'PdfResult',
]
