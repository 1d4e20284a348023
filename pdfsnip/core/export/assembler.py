"""
Packaging of extracted content as downloadable artifacts.
"""

import logging

import fitz  # PyMuPDF

from pdfsnip.core.errors import ExportError
from pdfsnip.core.extraction import ImageResult

from .models import ExportArtifact

logger = logging.getLogger(__name__)

TEXT_FILENAME = "extracted_text.doc"
TEXT_MIME_TYPE = "application/msword"
PDF_FILENAME = "cropped_hd.pdf"
PDF_MIME_TYPE = "application/pdf"
IMAGE_FILENAME = "cropped-image.png"
IMAGE_MIME_TYPE = "image/png"


def assemble_text(text: str) -> ExportArtifact:
    """Wrap extracted text as a word-processor document."""
    return ExportArtifact(
        data=text.encode("utf-8"), mime_type=TEXT_MIME_TYPE, filename=TEXT_FILENAME
    )


def assemble_pdf(image: ImageResult) -> ExportArtifact:
    """
    Build a single-page PDF that shows the cropped bitmap edge to edge.

    The page is exactly ``image.width x image.height`` points and the image
    is placed at (0, 0) without rescaling.

    Args:
        image: Encoded crop

    Returns:
        Artifact holding the serialized PDF
    """
    if image.width <= 0 or image.height <= 0:
        raise ExportError(
            f"Cannot build a page for a {image.width}x{image.height} crop"
        )

    doc = fitz.open()
    try:
        page = doc.new_page(width=image.width, height=image.height)
        page.insert_image(
            fitz.Rect(0, 0, image.width, image.height),
            stream=image.data,
            keep_proportion=False,
        )
        data = doc.tobytes(garbage=4, deflate=True)
    except Exception as e:
        raise ExportError(f"Failed to build cropped PDF: {e}") from e
    finally:
        doc.close()

    logger.debug(
        "Assembled %dx%d page PDF: %d bytes", image.width, image.height, len(data)
    )
    return ExportArtifact(data=data, mime_type=PDF_MIME_TYPE, filename=PDF_FILENAME)


def assemble_image(image: ImageResult) -> ExportArtifact:
    """Offer a PNG crop for direct download."""
    if image.image_format != "PNG":
        raise ExportError(f"Expected a PNG crop, got {image.image_format}")
    return ExportArtifact(
        data=image.data, mime_type=IMAGE_MIME_TYPE, filename=IMAGE_FILENAME
    )
