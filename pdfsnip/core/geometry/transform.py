"""
Coordinate transforms between display, document and raster space.

All functions are pure. Output coordinates are never clamped to the page;
consumers clip.
"""

import math
from typing import Tuple

from pdfsnip.core.errors import TransformError

from .models import CoordinateSpace, Rect, Size, TextOrigin


def to_document_space(
    rect: Rect,
    container_size: Size,
    viewport_size: Size,
    text_origin: TextOrigin = TextOrigin.TOP_LEFT,
) -> Rect:
    """
    Map a display rectangle into page units.

    The rectangle is scaled by ``viewport / container`` on each axis. With
    ``TextOrigin.TOP_LEFT`` (PyMuPDF) the y axis is left untouched. With
    ``TextOrigin.BOTTOM_LEFT`` the display rectangle's bottom edge
    (``y + height``) becomes the query's y, measured up from the bottom of
    the page.

    Args:
        rect: Rectangle in display space
        container_size: On-screen size of the container showing the page
        viewport_size: Page size in document units
        text_origin: Origin convention of the target text layer

    Returns:
        Rectangle in document space
    """
    if container_size.width <= 0 or container_size.height <= 0:
        raise TransformError(
            f"Container size must be positive, got "
            f"{container_size.width}x{container_size.height}"
        )

    sx = viewport_size.width / container_size.width
    sy = viewport_size.height / container_size.height
    scaled = rect.scaled(sx, sy, CoordinateSpace.DOCUMENT)

    if text_origin == TextOrigin.BOTTOM_LEFT:
        flipped_y = viewport_size.height - (rect.y + rect.height) * sy
        return Rect(
            scaled.x, flipped_y, scaled.width, scaled.height, CoordinateSpace.DOCUMENT
        )

    return scaled


def to_raster_space(rect: Rect, scale_ratio: float) -> Rect:
    """
    Map a display rectangle onto a raster rendered at a different scale.

    Display and raster share a top-left origin, so this is a plain scale by
    ``raster_scale / display_scale``.
    """
    if scale_ratio <= 0:
        raise TransformError(f"Scale ratio must be positive, got {scale_ratio}")
    return rect.scaled(scale_ratio, scale_ratio, CoordinateSpace.RASTER)


def from_raster_space(rect: Rect, scale_ratio: float) -> Rect:
    """Inverse of :func:`to_raster_space`."""
    if scale_ratio <= 0:
        raise TransformError(f"Scale ratio must be positive, got {scale_ratio}")
    inverse = 1.0 / scale_ratio
    return rect.scaled(inverse, inverse, CoordinateSpace.DISPLAY)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_pixel_box(rect: Rect) -> Tuple[int, int, int, int]:
    """
    Integer pixel box ``(x0, y0, x1, y1)`` for a raster rectangle.

    Origin and size are rounded half-up independently, so the box is
    always exactly ``round(width) x round(height)`` before clipping.
    """
    x0 = round_half_up(rect.x)
    y0 = round_half_up(rect.y)
    return (
        x0,
        y0,
        x0 + round_half_up(rect.width),
        y0 + round_half_up(rect.height),
    )
