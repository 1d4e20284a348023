import io

import pytest
from PIL import Image

from pdfsnip.core.errors import CropError
from pdfsnip.core.extraction import crop_bitmap, encode_image
from pdfsnip.core.geometry import CoordinateSpace, Rect, to_raster_space


def raster_rect(x, y, w, h):
    return Rect(x, y, w, h, CoordinateSpace.RASTER)


@pytest.fixture
def bitmap():
    image = Image.new("RGB", (100, 80), (255, 255, 255))
    image.putpixel((10, 20), (255, 0, 0))
    image.putpixel((39, 59), (0, 0, 255))
    return image


def test_crop_has_exact_rect_size_and_pixels(bitmap):
    cropped = crop_bitmap(bitmap, raster_rect(10, 20, 30, 40))

    assert cropped.size == (30, 40)
    assert cropped.getpixel((0, 0)) == (255, 0, 0)
    assert cropped.getpixel((29, 39)) == (0, 0, 255)


def test_crop_is_clipped_to_bitmap(bitmap):
    cropped = crop_bitmap(bitmap, raster_rect(90, 70, 30, 30))

    assert cropped.size == (10, 10)


def test_crop_with_negative_origin_is_clipped(bitmap):
    cropped = crop_bitmap(bitmap, raster_rect(-10, -5, 20, 20))

    assert cropped.size == (10, 15)


@pytest.mark.parametrize(
    "rect",
    [(200, 200, 10, 10), (-50, 0, 20, 20), (0, 80, 10, 10), (10, 10, 0.2, 30)],
)
def test_crop_outside_bitmap_fails(bitmap, rect):
    with pytest.raises(CropError):
        crop_bitmap(bitmap, raster_rect(*rect))


def test_crop_does_not_modify_source(bitmap):
    cropped = crop_bitmap(bitmap, raster_rect(0, 0, 50, 50))
    cropped.putpixel((0, 0), (0, 255, 0))

    assert bitmap.getpixel((0, 0)) == (255, 255, 255)


def test_fractional_raster_rect_rounds_half_up():
    bitmap = Image.new("RGB", (800, 800))
    rect = to_raster_space(Rect(40, 40, 20, 20), 4 / 1.5)

    cropped = crop_bitmap(bitmap, rect)

    assert cropped.size == (53, 53)


def test_encode_jpeg(bitmap):
    result = encode_image(bitmap, "JPEG", quality=100)

    assert result.image_format == "JPEG"
    assert (result.width, result.height) == (100, 80)
    assert result.data[:2] == b"\xff\xd8"
    assert Image.open(io.BytesIO(result.data)).size == (100, 80)


def test_encode_png_is_lossless(bitmap):
    result = encode_image(bitmap, "PNG")

    assert result.data[:4] == b"\x89PNG"
    decoded = Image.open(io.BytesIO(result.data)).convert("RGB")
    assert decoded.getpixel((10, 20)) == (255, 0, 0)
