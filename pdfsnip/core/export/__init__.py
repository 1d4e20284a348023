"""Export artifacts built from extracted content."""

from .artifact_writer import save_artifact
from .assembler import (
    IMAGE_FILENAME,
    PDF_FILENAME,
    TEXT_FILENAME,
    TEXT_MIME_TYPE,
    assemble_image,
    assemble_pdf,
    assemble_text,
)
from .models import ExportArtifact

__all__ = [
    "ExportArtifact",
    "assemble_text",
    "assemble_pdf",
    "assemble_image",
    "save_artifact",
    "TEXT_FILENAME",
    "TEXT_MIME_TYPE",
    "PDF_FILENAME",
    "IMAGE_FILENAME",
]
