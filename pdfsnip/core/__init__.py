"""
Core selection-to-content logic for PDFSnip.
"""
from .errors import (
    CropError,
    ExportError,
    ExportInProgressError,
    InvalidDocumentError,
    PDFSnipError,
    TextExtractionError,
    TextServiceError,
    TransformError,
)

__all__ = [
    'PDFSnipError',
    'InvalidDocumentError',
    'TransformError',
    'TextExtractionError',
    'CropError',
    'ExportError',
    'TextServiceError',
    'ExportInProgressError',
]
