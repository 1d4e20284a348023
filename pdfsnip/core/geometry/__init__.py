"""Rectangles, scale factors and coordinate-space transforms."""

from .models import CoordinateSpace, Point, Rect, ScaleContext, Size, TextOrigin
from .transform import (
    from_raster_space,
    round_half_up,
    to_document_space,
    to_pixel_box,
    to_raster_space,
)

__all__ = [
    "CoordinateSpace",
    "TextOrigin",
    "Point",
    "Size",
    "Rect",
    "ScaleContext",
    "to_document_space",
    "to_raster_space",
    "from_raster_space",
    "round_half_up",
    "to_pixel_box",
]
