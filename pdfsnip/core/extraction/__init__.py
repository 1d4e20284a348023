"""Text filtering and bitmap cropping for a selected region."""

from .image_cropper import crop_bitmap, encode_image
from .models import NO_TEXT_FOUND, ImageResult, TextResult
from .text_extractor import extract_text, filter_records

__all__ = [
    "TextResult",
    "ImageResult",
    "NO_TEXT_FOUND",
    "extract_text",
    "filter_records",
    "crop_bitmap",
    "encode_image",
]
