"""
Glue between the selection tracker, the extraction pipeline and the
background export and text-service workers.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from pdfsnip.core.document import PDFDocumentReader
from pdfsnip.core.errors import (
    CropError,
    ExportInProgressError,
    PDFSnipError,
    TextServiceError,
)
from pdfsnip.core.export.export_worker import EXPORT_PDF, CropExportWorker
from pdfsnip.core.extraction import TextResult
from pdfsnip.core.geometry import Rect, ScaleContext, Size
from pdfsnip.core.pipeline import export_text, extract_text_from_selection
from pdfsnip.core.selection import SelectionTracker
from pdfsnip.core.service import TextServiceClient, TextServiceWorker
from pdfsnip.utils.settings import TEXT_SERVICE_IMAGE, AppSettings, load_settings

logger = logging.getLogger(__name__)

NO_TEXT_SELECTED = "No text selected"


class SelectionMode(Enum):
    """What a committed selection is used for."""

    TEXT = "text"  # Extract the enclosed text immediately
    CROP = "crop"  # Keep the rectangle for a later export


class RegionController(QObject):
    """
    Owns the current document, page, selection and in-flight work.

    Every failure is reduced to a ``status_changed`` message; nothing
    raised by the pipeline escapes to the event loop.
    """

    # Signals
    status_changed = pyqtSignal(str)
    document_loaded = pyqtSignal(int)  # page count
    page_changed = pyqtSignal(int)  # 0-based page index
    text_extracted = pyqtSignal(str)
    export_started = pyqtSignal()
    export_finished = pyqtSignal(bool, str)  # success, message
    service_text_received = pyqtSignal(str)

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        reader: Optional[PDFDocumentReader] = None,
        parent=None,
    ):
        super().__init__(parent)

        self.settings = settings or load_settings()
        self.reader = reader or PDFDocumentReader()
        self.tracker = SelectionTracker(self.settings.min_selection_size, self)
        self.tracker.selection_committed.connect(self._on_selection_committed)

        self.mode = SelectionMode.TEXT
        self.page_index = 0
        self.container_size: Optional[Size] = None
        self.last_text: Optional[TextResult] = None
        self.status = NO_TEXT_SELECTED

        self.export_worker: Optional[CropExportWorker] = None
        self.service_worker: Optional[TextServiceWorker] = None

    @property
    def scales(self) -> ScaleContext:
        return ScaleContext(self.settings.display_scale, self.settings.raster_scale)

    @property
    def is_exporting(self) -> bool:
        return self.export_worker is not None

    def _set_status(self, message: str):
        self.status = message
        self.status_changed.emit(message)

    # ------------------------------------------------------------------
    # Document and page
    # ------------------------------------------------------------------

    def open_pdf(self, file_path: str) -> bool:
        """Load a PDF from disk, replacing the current one."""
        try:
            page_count = self.reader.load_pdf(file_path)
        except PDFSnipError as e:
            logger.warning("Rejected %s: %s", file_path, e)
            self._set_status(e.user_message)
            return False
        self._on_document_loaded(page_count)
        return True

    def open_bytes(self, data: bytes, name: str = "document.pdf") -> bool:
        """Load a PDF from an in-memory buffer."""
        try:
            page_count = self.reader.load_bytes(data, name)
        except PDFSnipError as e:
            logger.warning("Rejected %s: %s", name, e)
            self._set_status(e.user_message)
            return False
        self._on_document_loaded(page_count)
        return True

    def _on_document_loaded(self, page_count: int):
        self.tracker.reset()
        self.page_index = 0
        self.last_text = None
        self._set_status(NO_TEXT_SELECTED)
        self.document_loaded.emit(page_count)
        self.page_changed.emit(self.page_index)

    def close_pdf(self):
        self.tracker.reset()
        self.reader.close_document()
        self.page_index = 0
        self.last_text = None

    def set_page(self, page_index: int):
        """Switch to another page; any selection is dropped."""
        if not self.reader.is_loaded():
            return
        page_index = max(0, min(page_index, self.reader.get_page_count() - 1))
        if page_index == self.page_index:
            return
        self.page_index = page_index
        self.tracker.reset()
        self.page_changed.emit(page_index)

    def next_page(self):
        self.set_page(self.page_index + 1)

    def previous_page(self):
        self.set_page(self.page_index - 1)

    def set_mode(self, mode: SelectionMode):
        if mode != self.mode:
            self.mode = mode
            self.tracker.reset()

    def set_container_size(self, size: Size):
        """Record the on-screen size of the widget showing the page."""
        self.container_size = size

    def _current_container_size(self) -> Size:
        if self.container_size is not None:
            return self.container_size
        viewport = self.reader.get_page_size(self.page_index)
        scale = self.settings.display_scale
        return Size(viewport.width * scale, viewport.height * scale)

    # ------------------------------------------------------------------
    # Text mode
    # ------------------------------------------------------------------

    def _on_selection_committed(self, rect: Rect):
        if self.mode == SelectionMode.TEXT:
            self.extract_text(rect)
        else:
            self._set_status("Selection ready to export")

    def extract_text(self, rect: Rect) -> Optional[TextResult]:
        """Extract the text under a display-space selection on the current page."""
        if not self.reader.is_loaded():
            return None

        try:
            result = extract_text_from_selection(
                self.reader, self.page_index, rect, self._current_container_size()
            )
        except PDFSnipError as e:
            logger.error("Text extraction failed: %s", e)
            self._set_status(e.user_message)
            return None

        self.last_text = result
        if result.found:
            self._set_status(f"Extracted {result.record_count} text item(s)")
        else:
            self._set_status(result.text)
        self.text_extracted.emit(result.text)
        return result

    def save_text(self) -> Optional[Path]:
        """Save the last extracted text as a word-processor document."""
        if self.last_text is None or not self.last_text.found:
            self._set_status(NO_TEXT_SELECTED)
            return None

        try:
            path = export_text(self.last_text.text, self.settings.output_dir)
        except PDFSnipError as e:
            logger.error("Text export failed: %s", e)
            self._set_status(e.user_message)
            return None

        self._set_status(f"Saved {path.name}")
        return path

    # ------------------------------------------------------------------
    # Crop mode
    # ------------------------------------------------------------------

    def export_selection(self, export_format: str = EXPORT_PDF) -> bool:
        """
        Start exporting the committed selection in the background.

        Returns:
            True if an export was started
        """
        if self.is_exporting:
            self._set_status(ExportInProgressError.user_message)
            return False

        rect = self.tracker.committed_rect
        if rect is None or rect.is_empty or not self.reader.is_loaded():
            self._set_status("Select an area to export first.")
            return False

        try:
            source = self.reader.get_document_bytes()
            scales = self.scales
        except Exception as e:
            logger.error("Failed to prepare export: %s", e)
            self._set_status(CropError.user_message)
            return False

        self.export_worker = CropExportWorker(
            source,
            self.page_index,
            rect,
            scales,
            self.settings.output_dir,
            export_format=export_format,
            quality=self.settings.jpeg_quality,
        )
        self.export_worker.progress.connect(self._set_status)
        self.export_worker.saved.connect(self._on_export_saved)
        self.export_worker.finished.connect(self._on_export_finished)

        self.export_started.emit()
        self.export_worker.start()
        return True

    def _on_export_finished(self, success: bool, message: str):
        if self.export_worker is not None:
            self.export_worker.deleteLater()
            self.export_worker = None
        self._set_status(message)
        self.export_finished.emit(success, message)

    def _on_export_saved(self, path: str):
        """The saved file is complete; hand it to the text service if enabled."""
        if not self.settings.text_service_enabled:
            return
        if self.service_worker is not None:
            logger.warning("Text service call already running, skipping %s", path)
            return

        client = TextServiceClient(
            self.settings.text_service_url, self.settings.text_service_timeout
        )

        if self.settings.text_service_mode == TEXT_SERVICE_IMAGE:
            if not path.lower().endswith(".png"):
                logger.info("Image text service needs a PNG export, skipping %s", path)
                client.close()
                return
            try:
                image_data = Path(path).read_bytes()
            except OSError as e:
                logger.error("Failed to read %s: %s", path, e)
                client.close()
                self._set_status(TextServiceError.user_message)
                return
            self.service_worker = TextServiceWorker(client, image_data=image_data)
        else:
            self.service_worker = TextServiceWorker(client, pdf_path=path)

        self.service_worker.finished.connect(self._on_service_finished)
        self.service_worker.start()

    def _on_service_finished(self, success: bool, text: str):
        if self.service_worker is not None:
            self.service_worker.deleteLater()
            self.service_worker = None

        if success:
            self.service_text_received.emit(text)
        else:
            self._set_status(text)
