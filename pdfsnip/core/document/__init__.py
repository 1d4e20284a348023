"""PDF document source."""

from .models import TextRecord
from .pdf_reader import PDFDocumentReader, is_pdf_path

__all__ = ["PDFDocumentReader", "TextRecord", "is_pdf_path"]
