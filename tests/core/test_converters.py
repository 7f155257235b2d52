"""
Tests for image format converters and thumbnails
"""

import base64
import io

import numpy as np
import pytest
from PIL import Image

from core.exceptions import InvalidDimensions, ParameterOutOfRange
from core.image import (
    array_to_raster,
    create_thumbnail,
    from_base64,
    pil_to_raster,
    raster_to_array,
    raster_to_pil,
    to_base64,
)


class TestArrayConversion:
    """Test NumPy array conversion"""

    def test_rgb_gets_opaque_alpha(self):
        image = np.zeros((2, 3, 3), dtype=np.uint8)
        image[..., 0] = 200

        raster = array_to_raster(image)

        assert raster.shape == (3, 2)
        assert raster.pixel(2, 1) == (200, 0, 0, 255)

    def test_bgr_order(self):
        """Test that OpenCV BGR input is reordered to RGBA"""
        image = np.zeros((1, 1, 3), dtype=np.uint8)
        image[0, 0] = (10, 20, 30)

        assert array_to_raster(image, bgr=True).pixel(0, 0) == (30, 20, 10, 255)

    def test_grayscale(self):
        image = np.full((2, 2), 77, dtype=np.uint8)
        assert array_to_raster(image).pixel(1, 1) == (77, 77, 77, 255)

    def test_rgba_and_bgra(self):
        image = np.array([[[1, 2, 3, 4]]], dtype=np.uint8)

        assert array_to_raster(image).pixel(0, 0) == (1, 2, 3, 4)
        assert array_to_raster(image, bgr=True).pixel(0, 0) == (3, 2, 1, 4)

    def test_invalid_input(self):
        with pytest.raises(ParameterOutOfRange):
            array_to_raster(np.zeros((2, 2, 3), dtype=np.float32))
        with pytest.raises(InvalidDimensions):
            array_to_raster(np.zeros((2, 2, 5), dtype=np.uint8))

    def test_raster_to_array(self, quadrant_raster):
        """Test exporting RGBA and BGRA arrays"""
        rgba = raster_to_array(quadrant_raster)
        bgra = raster_to_array(quadrant_raster, bgr=True)

        assert rgba.shape == (4, 4, 4)
        assert tuple(rgba[0, 0]) == (255, 0, 0, 255)
        assert tuple(bgra[0, 0]) == (0, 0, 255, 255)

        rgba[0, 0, 0] = 1
        assert quadrant_raster.pixel(0, 0) == (255, 0, 0, 255)


class TestPILConversion:
    """Test PIL Image conversion"""

    def test_pil_round_trip(self, quadrant_raster):
        image = raster_to_pil(quadrant_raster)

        assert image.mode == "RGBA"
        assert image.size == (4, 4)
        assert pil_to_raster(image).equals(quadrant_raster)

    def test_grayscale_image(self):
        """Test that non-RGBA modes are converted"""
        image = Image.new("L", (3, 2), color=9)
        assert pil_to_raster(image).pixel(2, 1) == (9, 9, 9, 255)


class TestBase64:
    """Test base64 encoding and decoding"""

    def test_png_keeps_pixels(self, quadrant_raster):
        """Test that PNG export is lossless including alpha"""
        assert from_base64(to_base64(quadrant_raster)).equals(quadrant_raster)

    def test_data_url(self, quadrant_raster):
        data_url = "data:image/png;base64," + to_base64(quadrant_raster)
        assert from_base64(data_url).equals(quadrant_raster)

    def test_jpeg_export(self, quadrant_raster):
        encoded = to_base64(quadrant_raster, format="JPEG")
        image = Image.open(io.BytesIO(base64.b64decode(encoded)))

        assert image.format == "JPEG"
        assert image.size == (4, 4)

    @pytest.mark.parametrize(
        "payload", ["not base64!!", base64.b64encode(b"not an image").decode("utf-8")]
    )
    def test_invalid_payload(self, payload):
        with pytest.raises(ParameterOutOfRange):
            from_base64(payload)


class TestThumbnail:
    """Test thumbnail creation"""

    def test_thumbnail_size(self, random_raster):
        """Test that thumbnails shrink while keeping aspect ratio"""
        thumb, encoded = create_thumbnail(random_raster, width=16)

        assert thumb.width == 16
        assert thumb.height == 12
        assert isinstance(encoded, str)
        assert random_raster.shape == (32, 24)

    def test_thumbnail_never_enlarges(self, white_raster):
        thumb, _ = create_thumbnail(white_raster, width=64)
        assert thumb.shape == (2, 2)
