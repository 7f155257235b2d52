"""
Pytest configuration and fixtures for Raster Tone tests
"""

import base64
import io

import numpy as np
import pytest
from PIL import Image

from core.raster import RasterBuffer
from core.raster_store import RasterStore
from services.edit_service import EditService


@pytest.fixture
def white_raster():
    """2x2 opaque white raster"""
    return RasterBuffer.filled(2, 2, (255, 255, 255, 255))


@pytest.fixture
def random_raster():
    """Deterministic noisy raster with varying alpha"""
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(24, 32, 4), dtype=np.uint8)
    return RasterBuffer.from_array(pixels)


@pytest.fixture
def quadrant_raster():
    """
    4x4 raster with four solid 2x2 quadrants:
    red (top-left), green (top-right), blue (bottom-left), gray (bottom-right)
    """
    pixels = np.zeros((4, 4, 4), dtype=np.uint8)
    pixels[:2, :2] = (255, 0, 0, 255)
    pixels[:2, 2:] = (0, 255, 0, 255)
    pixels[2:, :2] = (0, 0, 255, 255)
    pixels[2:, 2:] = (128, 128, 128, 128)
    return RasterBuffer.from_array(pixels)


@pytest.fixture
def quadrant_png_base64(quadrant_raster):
    """quadrant_raster encoded as a base64 PNG"""
    buffer = io.BytesIO()
    Image.fromarray(quadrant_raster.view().copy()).save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


@pytest.fixture
def raster_store():
    """Create RasterStore instance for testing"""
    store = RasterStore(max_rasters=10)
    yield store
    # Cleanup
    store.clear()


@pytest.fixture
def edit_service(raster_store):
    """Create EditService instance for testing"""
    return EditService(raster_store=raster_store)
