"""
Tests for ROIHandler
"""

import numpy as np
import pytest

from core.exceptions import InvalidRegion
from core.roi_handler import ROIHandler


class TestROIHandler:
    """Test region validation and extraction"""

    def test_validate_region(self, quadrant_raster):
        """Test valid and invalid rectangles"""
        assert ROIHandler.validate_region(quadrant_raster, 0, 0, 4, 4) == (True, None)
        assert ROIHandler.validate_region(quadrant_raster, 3, 3, 1, 1) == (True, None)

        is_valid, message = ROIHandler.validate_region(quadrant_raster, 0, 0, 0, 1)
        assert not is_valid
        assert "non-positive" in message

        is_valid, message = ROIHandler.validate_region(quadrant_raster, -1, 0, 1, 1)
        assert not is_valid
        assert "negative" in message

        is_valid, message = ROIHandler.validate_region(quadrant_raster, 2, 2, 3, 1)
        assert not is_valid
        assert "exceeds" in message

    def test_require_region(self, quadrant_raster):
        ROIHandler.require_region(quadrant_raster, 1, 1, 2, 2)

        with pytest.raises(InvalidRegion) as exc_info:
            ROIHandler.require_region(quadrant_raster, 1, 1, 4, 2)

        assert exc_info.value.details == {"x": 1, "y": 1, "width": 4, "height": 2}

    def test_clip_region(self, quadrant_raster):
        """Test clipping to raster bounds"""
        assert ROIHandler.clip_region(quadrant_raster, -2, -2, 4, 4) == (0, 0, 2, 2)
        assert ROIHandler.clip_region(quadrant_raster, 3, 1, 10, 10) == (3, 1, 1, 3)
        assert ROIHandler.clip_region(quadrant_raster, 5, 5, 2, 2) == (4, 4, 0, 0)

    def test_extract_region_order(self, quadrant_raster):
        """Test that pixels come out row by row"""
        samples = ROIHandler.extract_region(quadrant_raster, 1, 1, 2, 2)

        assert samples.dtype == np.uint8
        assert samples.reshape(-1, 4).tolist() == [
            [255, 0, 0, 255],
            [0, 255, 0, 255],
            [0, 0, 255, 255],
            [128, 128, 128, 128],
        ]

    def test_extract_region_is_copy(self, white_raster):
        """Test that the extracted samples do not alias the raster"""
        samples = ROIHandler.extract_region(white_raster, 0, 0, 1, 1)
        samples[:] = 0

        assert white_raster.pixel(0, 0) == (255, 255, 255, 255)

    def test_extract_region_strict(self, quadrant_raster):
        with pytest.raises(InvalidRegion):
            ROIHandler.extract_region(quadrant_raster, 3, 3, 2, 2)

    def test_extract_region_safe_mode(self, quadrant_raster):
        """Test that safe mode clips instead of failing"""
        samples = ROIHandler.extract_region(quadrant_raster, 3, 3, 2, 2, safe_mode=True)
        assert samples.tolist() == [128, 128, 128, 128]

        with pytest.raises(InvalidRegion):
            ROIHandler.extract_region(quadrant_raster, 6, 6, 2, 2, safe_mode=True)
