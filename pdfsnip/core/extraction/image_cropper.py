"""
Cropping and encoding of rendered page bitmaps.
"""

import io
import logging

from PIL import Image

from pdfsnip.core.errors import CropError
from pdfsnip.core.geometry import Rect, to_pixel_box

from .models import ImageResult

logger = logging.getLogger(__name__)


def crop_bitmap(bitmap: Image.Image, rect: Rect) -> Image.Image:
    """
    Copy the region of ``bitmap`` covered by a raster-space rectangle.

    The rectangle is rounded half-up to whole pixels and clipped to the
    bitmap, and the result is exactly the clipped size.

    Raises:
        CropError: If nothing is left after clipping
    """
    x0, y0, x1, y1 = to_pixel_box(rect)
    x0, y0 = max(x0, 0), max(y0, 0)
    x1, y1 = min(x1, bitmap.width), min(y1, bitmap.height)

    if x1 <= x0 or y1 <= y0:
        raise CropError(
            f"Selection {rect.as_tuple()} is outside the "
            f"{bitmap.width}x{bitmap.height} bitmap"
        )

    return bitmap.crop((x0, y0, x1, y1))


def encode_image(
    image: Image.Image, image_format: str = "JPEG", quality: int = 100
) -> ImageResult:
    """
    Encode a bitmap for embedding or download.

    Lossy formats are written at ``quality`` (maximum by default).
    """
    buffer = io.BytesIO()
    if image_format.upper() in ("JPEG", "JPG"):
        image.convert("RGB").save(
            buffer, format="JPEG", quality=quality, subsampling=0
        )
        image_format = "JPEG"
    else:
        image.save(buffer, format=image_format)

    data = buffer.getvalue()
    logger.debug(
        "Encoded %dx%d crop as %s: %d bytes",
        image.width,
        image.height,
        image_format,
        len(data),
    )
    return ImageResult(
        data=data, width=image.width, height=image.height, image_format=image_format
    )
