from PyQt5.QtCore import QThread, pyqtSignal

from pdfsnip.core.errors import TextServiceError

from .text_service import TextServiceClient


class TextServiceWorker(QThread):
    """Runs one text-service request off the UI thread."""

    # Signals
    finished = pyqtSignal(bool, str)  # success, text or error message

    def __init__(self, client: TextServiceClient, pdf_path=None, image_data=None):
        super().__init__()
        if (pdf_path is None) == (image_data is None):
            raise ValueError("Pass exactly one of pdf_path or image_data")
        self.client = client
        self.pdf_path = pdf_path
        self.image_data = image_data

    def run(self):
        try:
            if self.pdf_path is not None:
                text = self.client.extract_from_path(self.pdf_path)
            else:
                text = self.client.extract_from_image(self.image_data)
            self.finished.emit(True, text)
        except TextServiceError as e:
            self.finished.emit(False, e.user_message)
        finally:
            self.client.close()
