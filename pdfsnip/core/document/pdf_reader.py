"""
PDF document loading, text-layer access and rendering.
"""

import logging
import mimetypes
import os
from typing import List, Optional

import fitz  # PyMuPDF
from PIL import Image

from pdfsnip.core.errors import InvalidDocumentError
from pdfsnip.core.geometry import Point, Size, TextOrigin

from .models import TextRecord

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
PDF_MAGIC = b"%PDF-"


def is_pdf_path(file_path: str) -> bool:
    """Check a file name looks like a PDF before trying to open it."""
    mime_type, _ = mimetypes.guess_type(file_path)
    return mime_type == PDF_MIME_TYPE


class PDFDocumentReader:
    """Handles PDF document loading, text extraction and rendering."""

    # PyMuPDF reports text positions with y growing downwards
    text_origin = TextOrigin.TOP_LEFT

    def __init__(self):
        self.doc: Optional[fitz.Document] = None
        self.total_pages: int = 0
        self.current_file_path: Optional[str] = None

    def load_pdf(self, file_path: str) -> int:
        """
        Load a PDF document from disk.

        Args:
            file_path: Path to the PDF file

        Returns:
            Number of pages

        Raises:
            InvalidDocumentError: If the file is not a readable PDF
        """
        if not is_pdf_path(file_path):
            raise InvalidDocumentError(f"Not a PDF file: {file_path}")

        try:
            with open(file_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise InvalidDocumentError(
                f"Failed to read {file_path}: {e}",
                user_message="Failed to read file. Please try again.",
            ) from e

        page_count = self.load_bytes(data, os.path.basename(file_path))
        self.current_file_path = file_path
        return page_count

    def load_bytes(self, data: bytes, name: str = "document.pdf") -> int:
        """
        Load a PDF document from an in-memory buffer.

        Args:
            data: Raw PDF bytes
            name: Display name used in log messages

        Returns:
            Number of pages
        """
        # The header may be preceded by junk within the first kilobyte
        if PDF_MAGIC not in data[:1024]:
            raise InvalidDocumentError(f"{name} does not start with a PDF header")

        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise InvalidDocumentError(f"Failed to parse {name}: {e}") from e

        if not doc.is_pdf or doc.page_count == 0:
            doc.close()
            raise InvalidDocumentError(f"{name} has no PDF pages")

        # Close existing document if any
        if self.doc:
            self.close_document()

        self.doc = doc
        self.total_pages = doc.page_count
        logger.info("Loaded %s (%d pages)", name, self.total_pages)
        return self.total_pages

    def close_document(self) -> None:
        """Close the current PDF document and clear all state."""
        if self.doc:
            self.doc.close()
            self.doc = None

        self.total_pages = 0
        self.current_file_path = None

    def get_page(self, page_index: int) -> fitz.Page:
        """
        Get a page object for direct operations.

        Raises:
            IndexError: If no document is loaded or the index is out of range
        """
        if not self.doc or not 0 <= page_index < self.total_pages:
            raise IndexError(f"Page {page_index} out of range")
        return self.doc.load_page(page_index)

    def get_page_size(self, page_index: int) -> Size:
        """Size of a page in points (its viewport at scale 1)."""
        rect = self.get_page(page_index).rect
        return Size(rect.width, rect.height)

    def get_text_records(self, page_index: int) -> List[TextRecord]:
        """
        Text spans of a page in reading order.

        Each record is anchored at the span's baseline origin.
        Whitespace-only spans are skipped.
        """
        page = self.get_page(page_index)
        text_dict = page.get_text("dict", sort=True)

        records = []
        for block in text_dict.get("blocks", []):
            # Skip image blocks
            if block.get("type") != 0:
                continue
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    text = span.get("text", "")
                    if not text.strip():
                        continue
                    x, y = span.get("origin", (0.0, 0.0))
                    records.append(TextRecord(text=text, anchor=Point(x, y)))

        return records

    def render_page(self, page_index: int, scale: float) -> Image.Image:
        """
        Render a page to an RGB bitmap.

        Args:
            page_index: 0-based index of the page to render
            scale: Pixels per point

        Returns:
            Pillow image of the whole page
        """
        page = self.get_page(page_index)
        mat = fitz.Matrix(scale, scale)
        pix = page.get_pixmap(matrix=mat, alpha=False)
        return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)

    def is_loaded(self) -> bool:
        """Check if a document is currently loaded."""
        return self.doc is not None

    def get_file_path(self) -> Optional[str]:
        """Get the path of the currently loaded file."""
        return self.current_file_path

    def get_page_count(self) -> int:
        """Get the total number of pages."""
        return self.total_pages

    def get_document_bytes(self) -> bytes:
        """Serialized copy of the loaded document, for worker threads."""
        if not self.doc:
            raise IndexError("No document loaded")
        return self.doc.tobytes()
