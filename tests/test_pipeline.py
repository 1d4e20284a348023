import fitz
import pytest

from pdfsnip.core import pipeline
from pdfsnip.core.document import PDFDocumentReader
from pdfsnip.core.errors import CropError, TextExtractionError
from pdfsnip.core.extraction import NO_TEXT_FOUND
from pdfsnip.core.geometry import Rect, ScaleContext, Size

from .conftest import make_pdf

CONTAINER = Size(600, 800)  # page of 1200x1600 shown at half size


def test_text_from_display_selection(reader):
    # Display (25, 25, 50, 50) is document (50, 50, 100, 100)
    result = pipeline.extract_text_from_selection(
        reader, 0, Rect(25, 25, 50, 50), CONTAINER
    )

    assert result.found
    assert result.text == "Hello"


def test_text_from_large_selection_joins_records(reader):
    result = pipeline.extract_text_from_selection(
        reader, 0, Rect(0, 0, 600, 800), CONTAINER
    )

    assert result.text == "Hello World"
    assert result.record_count == 2


def test_text_from_empty_area_is_sentinel(reader):
    result = pipeline.extract_text_from_selection(
        reader, 0, Rect(100, 100, 5, 5), CONTAINER
    )

    assert not result.found
    assert result.text == NO_TEXT_FOUND


def test_text_on_selected_page(reader):
    result = pipeline.extract_text_from_selection(
        reader, 1, Rect(25, 25, 50, 50), CONTAINER
    )

    assert not result.found


def test_text_empty_selection_is_rejected(reader):
    with pytest.raises(TextExtractionError):
        pipeline.extract_text_from_selection(reader, 0, Rect(25, 25, 0, 50), CONTAINER)


def test_text_bad_page_is_extraction_error(reader):
    with pytest.raises(TextExtractionError) as excinfo:
        pipeline.extract_text_from_selection(reader, 7, Rect(0, 0, 50, 50), CONTAINER)
    assert excinfo.value.user_message == "Error extracting text from the selected area."


@pytest.fixture
def small_page_reader():
    reader = PDFDocumentReader()
    reader.load_bytes(make_pdf(width=200, height=200))
    yield reader
    reader.close_document()


SCALES = ScaleContext(display_scale=1.5, raster_scale=4)


def test_crop_uses_raster_scale_and_rounds_half_up(small_page_reader):
    image = pipeline.crop_selection(small_page_reader, 0, Rect(40, 40, 20, 20), SCALES)

    assert (image.width, image.height) == (53, 53)
    assert image.image_format == "JPEG"


def test_crop_is_clipped_to_page(small_page_reader):
    # Page is 800x800 at raster scale; selection reaches 900
    image = pipeline.crop_selection(
        small_page_reader, 0, Rect(262.5, 0, 75, 30), SCALES
    )

    assert (image.width, image.height) == (100, 80)


def test_export_selection_to_pdf(small_page_reader, tmp_path):
    path = pipeline.export_selection_to_pdf(
        small_page_reader, 0, Rect(40, 40, 20, 20), SCALES, str(tmp_path)
    )

    assert path.name == "cropped_hd.pdf"
    doc = fitz.open(str(path))
    try:
        assert doc.page_count == 1
        assert doc[0].rect.width == pytest.approx(53)
        assert doc[0].rect.height == pytest.approx(53)
    finally:
        doc.close()


def test_export_selection_to_image(small_page_reader, tmp_path):
    path = pipeline.export_selection_to_image(
        small_page_reader, 0, Rect(40, 40, 20, 20), SCALES, str(tmp_path)
    )

    assert path.name == "cropped-image.png"
    assert path.read_bytes()[:4] == b"\x89PNG"


def test_zero_area_selection_never_reaches_assembler(
    small_page_reader, tmp_path, monkeypatch
):
    def fail(*args, **kwargs):
        raise AssertionError("assembler must not be called")

    monkeypatch.setattr(pipeline, "assemble_pdf", fail)

    with pytest.raises(CropError):
        pipeline.export_selection_to_pdf(
            small_page_reader, 0, Rect(40, 40, 0, 20), SCALES, str(tmp_path)
        )
    assert list(tmp_path.iterdir()) == []


def test_selection_outside_page_fails(small_page_reader):
    with pytest.raises(CropError):
        pipeline.crop_selection(small_page_reader, 0, Rect(500, 500, 50, 50), SCALES)


def test_render_failure_is_crop_error():
    class BrokenReader(PDFDocumentReader):
        def render_page(self, page_index, scale):
            raise RuntimeError("renderer crashed")

    with pytest.raises(CropError) as excinfo:
        pipeline.crop_selection(BrokenReader(), 0, Rect(0, 0, 50, 50), SCALES)
    assert excinfo.value.user_message == "Error cropping PDF."


def test_export_text(tmp_path):
    path = pipeline.export_text("Hello World", str(tmp_path))

    assert path.name == "extracted_text.doc"
    assert path.read_text(encoding="utf-8") == "Hello World"
