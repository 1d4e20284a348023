import fitz
import pytest
from PyQt5.QtCore import QCoreApplication

from pdfsnip.core.document import PDFDocumentReader
from pdfsnip.utils.settings import AppSettings

HELLO_ANCHOR = (100, 100)
WORLD_ANCHOR = (400, 500)


def make_pdf(width=1200, height=1600, texts=(), pages=1) -> bytes:
    """Build a PDF in memory; ``texts`` are (x, y, text) placed on page 1."""
    doc = fitz.open()
    for page_index in range(pages):
        page = doc.new_page(width=width, height=height)
        if page_index == 0:
            for x, y, text in texts:
                page.insert_text((x, y), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Signals and threads need a Qt application object."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return make_pdf(
        texts=[(*HELLO_ANCHOR, "Hello"), (*WORLD_ANCHOR, "World")], pages=2
    )


@pytest.fixture
def sample_pdf_path(tmp_path, sample_pdf_bytes):
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture
def reader(sample_pdf_bytes):
    reader = PDFDocumentReader()
    reader.load_bytes(sample_pdf_bytes, "sample.pdf")
    yield reader
    reader.close_document()


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(output_dir=str(tmp_path / "exports"))
