"""
Selection-to-content pipeline.

Each function runs its stages in strict order and turns any failure into
the stage's typed error, so callers only ever handle ``PDFSnipError``.
"""

import logging
from pathlib import Path

from pdfsnip.core.document import PDFDocumentReader
from pdfsnip.core.errors import CropError, PDFSnipError, TextExtractionError
from pdfsnip.core.export import (
    assemble_image,
    assemble_pdf,
    assemble_text,
    save_artifact,
)
from pdfsnip.core.extraction import (
    ImageResult,
    TextResult,
    crop_bitmap,
    encode_image,
    extract_text,
)
from pdfsnip.core.geometry import (
    Rect,
    ScaleContext,
    Size,
    to_document_space,
    to_raster_space,
)

logger = logging.getLogger(__name__)


def extract_text_from_selection(
    reader: PDFDocumentReader,
    page_index: int,
    selection: Rect,
    container_size: Size,
) -> TextResult:
    """
    Text of the records anchored inside a display-space selection.

    Args:
        reader: Loaded document source
        page_index: 0-based page the selection was drawn on
        selection: Committed rectangle in display space
        container_size: On-screen size of the page container

    Returns:
        Joined text, or the "no text found" sentinel

    Raises:
        TextExtractionError: If the page could not be read
    """
    if selection.is_empty:
        raise TextExtractionError("Empty selection")

    try:
        viewport = reader.get_page_size(page_index)
        query = to_document_space(
            selection, container_size, viewport, reader.text_origin
        )
        records = reader.get_text_records(page_index)
    except PDFSnipError:
        raise
    except Exception as e:
        raise TextExtractionError(
            f"Failed to read text of page {page_index + 1}: {e}"
        ) from e

    result = extract_text(records, query)
    logger.debug(
        "Matched %d of %d records in %s", result.record_count, len(records), query
    )
    return result


def crop_selection(
    reader: PDFDocumentReader,
    page_index: int,
    selection: Rect,
    scales: ScaleContext,
    image_format: str = "JPEG",
    quality: int = 100,
) -> ImageResult:
    """
    Render a page at raster scale and cut out a display-space selection.

    Raises:
        CropError: For an empty selection, a render failure or a crop
            that falls entirely outside the page
    """
    if selection.is_empty:
        raise CropError("Empty selection")

    raster_rect = to_raster_space(selection, scales.ratio)

    try:
        bitmap = reader.render_page(page_index, scales.raster_scale)
    except Exception as e:
        raise CropError(f"Failed to render page {page_index + 1}: {e}") from e

    cropped = crop_bitmap(bitmap, raster_rect)
    try:
        return encode_image(cropped, image_format, quality)
    except (OSError, ValueError) as e:
        raise CropError(f"Failed to encode crop as {image_format}: {e}") from e


def export_selection_to_pdf(
    reader: PDFDocumentReader,
    page_index: int,
    selection: Rect,
    scales: ScaleContext,
    output_dir: str,
    quality: int = 100,
) -> Path:
    """Crop a selection and save it as a single-page PDF."""
    image = crop_selection(reader, page_index, selection, scales, "JPEG", quality)
    return save_artifact(assemble_pdf(image), output_dir)


def export_selection_to_image(
    reader: PDFDocumentReader,
    page_index: int,
    selection: Rect,
    scales: ScaleContext,
    output_dir: str,
) -> Path:
    """Crop a selection and save it as a PNG."""
    image = crop_selection(reader, page_index, selection, scales, "PNG")
    return save_artifact(assemble_image(image), output_dir)


def export_text(text: str, output_dir: str) -> Path:
    """Save extracted text as a word-processor document."""
    return save_artifact(assemble_text(text), output_dir)
