# pdfsnip/core/export/export_worker.py

import logging

from PyQt5.QtCore import QThread, pyqtSignal

from pdfsnip.core.document import PDFDocumentReader
from pdfsnip.core.errors import PDFSnipError
from pdfsnip.core.geometry import Rect, ScaleContext
from pdfsnip.core.pipeline import export_selection_to_image, export_selection_to_pdf

logger = logging.getLogger(__name__)

EXPORT_PDF = "pdf"
EXPORT_IMAGE = "png"


class CropExportWorker(QThread):
    """Worker thread that crops a selection and saves it off the UI thread."""

    # Signals
    finished = pyqtSignal(bool, str)  # success, message
    progress = pyqtSignal(str)  # status message
    saved = pyqtSignal(str)  # path of the written file

    def __init__(
        self,
        source_pdf: bytes,
        page_index: int,
        selection: Rect,
        scales: ScaleContext,
        output_dir: str,
        export_format: str = EXPORT_PDF,
        quality: int = 100,
    ):
        super().__init__()
        self.source_pdf = source_pdf
        self.page_index = page_index
        self.selection = selection
        self.scales = scales
        self.output_dir = output_dir
        self.export_format = export_format
        self.quality = quality

    def run(self):
        """Execute the export in a background thread."""
        # Each export works on its own copy of the document
        reader = PDFDocumentReader()
        try:
            self.progress.emit("Rendering page...")
            reader.load_bytes(self.source_pdf)

            self.progress.emit("Cropping selection...")
            if self.export_format == EXPORT_IMAGE:
                path = export_selection_to_image(
                    reader,
                    self.page_index,
                    self.selection,
                    self.scales,
                    self.output_dir,
                )
            else:
                path = export_selection_to_pdf(
                    reader,
                    self.page_index,
                    self.selection,
                    self.scales,
                    self.output_dir,
                    self.quality,
                )
        except PDFSnipError as e:
            logger.error("Export failed: %s", e)
            self.finished.emit(False, e.user_message)
            return
        finally:
            reader.close_document()

        self.saved.emit(str(path))
        self.finished.emit(True, f"Saved {path.name}")
